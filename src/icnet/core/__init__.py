"""
Core engine primitives.

This layer knows NOTHING about connectivity, signatures or plots.
It only knows:
- Agents of three kinds with fixed arities
- Ports and the symmetric wiring between them
- Active pairs and the fixed priority among their buckets
- The six rewrite rules
- How to drive a net towards normal form, one rewrite per step
"""

from icnet.core.agents import Agent, AgentKind, Construct, Duplicate, Erase, Port, PRINCIPAL
from icnet.core.errors import NetConsistencyError, UnwiredPortError, MissingAgentError
from icnet.core.net import Net, NetConfig, create_seed_net
from icnet.core.scheduler import (
    PairKind,
    PRIORITY,
    find_active_pairs,
    select_pair,
    Reducer,
    ReducerConfig,
    reduce_to_normal_form,
)
from icnet.core.trace import ReductionTrace, KIND_ORDER

__all__ = [
    "Agent",
    "AgentKind",
    "Construct",
    "Duplicate",
    "Erase",
    "Port",
    "PRINCIPAL",
    "NetConsistencyError",
    "UnwiredPortError",
    "MissingAgentError",
    "Net",
    "NetConfig",
    "create_seed_net",
    "PairKind",
    "PRIORITY",
    "find_active_pairs",
    "select_pair",
    "Reducer",
    "ReducerConfig",
    "reduce_to_normal_form",
    "ReductionTrace",
    "KIND_ORDER",
]
