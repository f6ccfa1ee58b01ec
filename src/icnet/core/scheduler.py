"""
Scheduler: active-pair detection, priority dispatch and the reduction driver.

Each step:
1. Scan every live agent once, in ascending identifier order
2. Record each active pair once, from its smaller-identifier side
3. Sort pairs into six kind buckets, normalising the role order
4. Pick one pair from the highest-priority non-empty bucket

Shrinking and annihilating rules are preferred over the one rule that
grows the net (Construct-Duplicate), so the net stays small whenever
there is a choice.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, TYPE_CHECKING
import logging

from icnet.core.agents import AgentKind, PRINCIPAL
from icnet.core.trace import ReductionTrace

if TYPE_CHECKING:
    from icnet.core.net import Net

logger = logging.getLogger(__name__)


class PairKind(Enum):
    """The six kind combinations an active pair can have."""

    CONSTRUCT_CONSTRUCT = "construct-construct"
    CONSTRUCT_DUPLICATE = "construct-duplicate"
    CONSTRUCT_ERASE = "construct-erase"
    DUPLICATE_DUPLICATE = "duplicate-duplicate"
    DUPLICATE_ERASE = "duplicate-erase"
    ERASE_ERASE = "erase-erase"


# Descending priority: first non-empty bucket wins
PRIORITY: tuple[PairKind, ...] = (
    PairKind.ERASE_ERASE,
    PairKind.DUPLICATE_ERASE,
    PairKind.CONSTRUCT_ERASE,
    PairKind.DUPLICATE_DUPLICATE,
    PairKind.CONSTRUCT_CONSTRUCT,
    PairKind.CONSTRUCT_DUPLICATE,
)

# Accepted within-bucket tie-break policies
TIE_BREAKS = ("lowest", "highest")

_C, _D, _E = AgentKind.CONSTRUCT, AgentKind.DUPLICATE, AgentKind.ERASE

# (scanned kind, partner kind) -> (bucket, swap roles?)
_CLASSIFY: dict[tuple[AgentKind, AgentKind], tuple[PairKind, bool]] = {
    (_C, _C): (PairKind.CONSTRUCT_CONSTRUCT, False),
    (_C, _D): (PairKind.CONSTRUCT_DUPLICATE, False),
    (_C, _E): (PairKind.CONSTRUCT_ERASE, False),
    (_D, _C): (PairKind.CONSTRUCT_DUPLICATE, True),
    (_D, _D): (PairKind.DUPLICATE_DUPLICATE, False),
    (_D, _E): (PairKind.DUPLICATE_ERASE, False),
    (_E, _C): (PairKind.CONSTRUCT_ERASE, True),
    (_E, _D): (PairKind.DUPLICATE_ERASE, True),
    (_E, _E): (PairKind.ERASE_ERASE, False),
}


def find_active_pairs(net: "Net") -> dict[PairKind, list[tuple[int, int]]]:
    """
    Collect every active pair, bucketed by kind combination.

    Each bucket lists pairs in scan order (ascending smaller identifier),
    with roles normalised for the rule that consumes them.
    """
    buckets: dict[PairKind, list[tuple[int, int]]] = {kind: [] for kind in PairKind}

    for agent in net.iter_agents():
        partner = agent.get_port(PRINCIPAL)
        if not partner.is_principal or partner.agent <= agent.id:
            continue

        other = net.agent(partner.agent)
        pair_kind, swap = _CLASSIFY[(agent.kind, other.kind)]
        pair = (other.id, agent.id) if swap else (agent.id, other.id)
        buckets[pair_kind].append(pair)

    return buckets


def select_pair(
    buckets: dict[PairKind, list[tuple[int, int]]],
    tie_break: Literal["lowest", "highest"] = "lowest",
) -> tuple[PairKind, tuple[int, int]] | None:
    """
    Choose the one pair to rewrite this step.

    Args:
        buckets: Output of find_active_pairs
        tie_break: "lowest" takes the first pair scanned in the winning
                   bucket, "highest" the last

    Returns:
        (bucket, pair), or None at normal form
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"Unknown tie_break: {tie_break!r}")

    for pair_kind in PRIORITY:
        bucket = buckets.get(pair_kind)
        if bucket:
            pair = bucket[0] if tie_break == "lowest" else bucket[-1]
            return pair_kind, pair
    return None


@dataclass
class ReducerConfig:
    """Configuration for the reduction driver."""

    max_steps: int = 10_000  # Step budget when run() is not given one
    record_trace: bool = True  # Record live counts after every step


@dataclass
class Reducer:
    """
    Drives a net towards normal form, one step() at a time.

    The net itself decides which pair to rewrite; the reducer only
    bounds the number of steps and records what happened.
    """

    net: "Net"
    config: ReducerConfig = field(default_factory=ReducerConfig)

    current_step: int = field(default=0, init=False)
    trace: ReductionTrace = field(default_factory=ReductionTrace, init=False)

    def __post_init__(self):
        if self.config.record_trace:
            self.trace.record(self.current_step, None, self.net)

    def run(self, n_steps: int | None = None) -> dict:
        """
        Step until normal form or until the step budget is spent.

        Args:
            n_steps: Maximum steps for this call (config.max_steps if None)

        Returns:
            Statistics dictionary
        """
        budget = self.config.max_steps if n_steps is None else n_steps
        if budget < 0:
            raise ValueError("n_steps must be non-negative")

        taken = 0
        normal_form = False
        rule_counts = {kind.value: 0 for kind in PairKind}

        while taken < budget:
            if not self.net.step():
                normal_form = True
                break
            taken += 1
            self.current_step += 1
            rule_counts[self.net.last_rule.value] += 1
            if self.config.record_trace:
                self.trace.record(self.current_step, self.net.last_rule, self.net)
        else:
            normal_form = self.net.is_normal_form()

        logger.info(
            "reduced %d steps (normal form: %s), %d live agents",
            taken, normal_form, len(self.net),
        )

        return {
            "n_steps": taken,
            "current_step": self.current_step,
            "normal_form": normal_form,
            "live_agents": len(self.net),
            "next_id": self.net.next_id,
            "rule_counts": rule_counts,
        }


def reduce_to_normal_form(net: "Net", max_steps: int = 10_000) -> dict:
    """
    Convenience wrapper: run a net until normal form or max_steps.

    Returns:
        Statistics dictionary from Reducer.run
    """
    reducer = Reducer(net, ReducerConfig(max_steps=max_steps, record_trace=False))
    return reducer.run()
