"""
Net: the agent arena, its wiring primitives and the one-rewrite step.

The net stores ONLY engine primitives:
- Live agents keyed by identifier
- The next-identifier counter (monotonic, identifiers are never reused)

Counts, connectivity and structural signatures are derived in the
analysis layer; the net never consults them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Literal
import logging

from icnet.core.agents import AGENT_CLASSES, Agent, AgentKind, Port
from icnet.core.errors import MissingAgentError
from icnet.core.rules import RULES
from icnet.core.scheduler import PairKind, TIE_BREAKS, find_active_pairs, select_pair

logger = logging.getLogger(__name__)


@dataclass
class NetConfig:
    """Configuration for a net."""

    # Which pair wins when several share the highest-priority bucket:
    # "lowest" picks the pair scanned from the smallest identifier.
    tie_break: Literal["lowest", "highest"] = "lowest"

    def __post_init__(self):
        if self.tie_break not in TIE_BREAKS:
            raise ValueError(f"Unknown tie_break: {self.tie_break!r}")


class Net:
    """
    A mutable interaction net.

    Agents are created unwired; callers must wire every port before the
    next step(). delete() trusts the caller to have rewired all of the
    agent's neighbours.
    """

    def __init__(self, config: NetConfig | None = None):
        self.config = config if config is not None else NetConfig()
        self.agents: dict[int, Agent] = {}
        self.next_id = 0
        self.steps_taken = 0
        self.last_rule: PairKind | None = None  # Rule applied by the latest successful step

    @classmethod
    def seed(cls, config: NetConfig | None = None) -> Net:
        """Build the canonical four-agent starting net."""
        net = cls(config)
        net.wire_seed()
        return net

    # ═══════════════════════════════════════════════════════════════
    # ALLOCATION AND WIRING PRIMITIVES
    # ═══════════════════════════════════════════════════════════════

    def create(self, kind: AgentKind) -> int:
        """Allocate a fresh identifier and insert an unwired agent."""
        if not isinstance(kind, AgentKind):
            raise ValueError(f"Unknown agent kind: {kind!r}")
        agent_id = self.next_id
        self.agents[agent_id] = AGENT_CLASSES[kind](agent_id)
        self.next_id += 1
        return agent_id

    def create_construct(self) -> int:
        return self.create(AgentKind.CONSTRUCT)

    def create_duplicate(self) -> int:
        return self.create(AgentKind.DUPLICATE)

    def create_erase(self) -> int:
        return self.create(AgentKind.ERASE)

    def delete(self, agent_id: int):
        """Remove an agent from the arena. No rewiring is performed."""
        if self.agents.pop(agent_id, None) is None:
            raise MissingAgentError(agent_id)

    def agent(self, agent_id: int) -> Agent:
        """Return the live agent with this identifier."""
        try:
            return self.agents[agent_id]
        except KeyError:
            raise MissingAgentError(agent_id) from None

    def kind(self, agent_id: int) -> AgentKind:
        return self.agent(agent_id).kind

    def follow(self, port: Port) -> Port:
        """Return the port currently wired to `port`."""
        return self.agent(port.agent).get_port(port.index)

    def connect(self, x: Port, y: Port):
        """Wire x to y and y to x, overwriting whatever was there."""
        self.agent(x.agent).set_port(x.index, y)
        self.agent(y.agent).set_port(y.index, x)

    def wire_seed(self) -> tuple[int, int, int, int]:
        """
        Add one copy of the seed configuration to this net.

        Creates Erase A, Erase B, Construct C, Duplicate D and wires
        A.0-C.1, C.2-D.1, D.2-B.0, C.0-D.0.

        Returns:
            (a, b, c, d) identifiers
        """
        a = self.create_erase()
        b = self.create_erase()
        c = self.create_construct()
        d = self.create_duplicate()
        self.connect(Port(a, 0), Port(c, 1))
        self.connect(Port(c, 2), Port(d, 1))
        self.connect(Port(d, 2), Port(b, 0))
        self.connect(Port(c, 0), Port(d, 0))
        return a, b, c, d

    # ═══════════════════════════════════════════════════════════════
    # REDUCTION
    # ═══════════════════════════════════════════════════════════════

    def step(self) -> bool:
        """
        Apply at most one rewrite.

        Scans every live agent for active pairs, picks one by the fixed
        priority order, and applies its rule.

        Returns:
            True if a rewrite happened, False at normal form (no mutation)
        """
        buckets = find_active_pairs(self)
        selected = select_pair(buckets, self.config.tie_break)
        if selected is None:
            return False

        pair_kind, (a, b) = selected
        logger.debug("step %d: %s on agents %d, %d", self.steps_taken, pair_kind.value, a, b)
        RULES[pair_kind](self, a, b)
        self.last_rule = pair_kind
        self.steps_taken += 1
        return True

    def is_normal_form(self) -> bool:
        """True when no active pair exists anywhere in the net."""
        return not any(find_active_pairs(self).values())

    # ═══════════════════════════════════════════════════════════════
    # INSPECTION
    # ═══════════════════════════════════════════════════════════════

    def ids(self) -> list[int]:
        """Live identifiers in ascending order."""
        return sorted(self.agents)

    def iter_agents(self) -> Iterator[Agent]:
        """Iterate over live agents in ascending identifier order."""
        for agent_id in self.ids():
            yield self.agents[agent_id]

    def dump(self) -> str:
        """
        Textual listing of the net, for diagnostics only.

        One `<id>: <agent>` line per live agent, then `<next_id>: -`.
        """
        lines = [f"{agent.id}: {agent}" for agent in self.iter_agents()]
        lines.append(f"{self.next_id}: -")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.dump()

    def __len__(self) -> int:
        return len(self.agents)

    def __contains__(self, agent_id: int) -> bool:
        return agent_id in self.agents


def create_seed_net(tie_break: Literal["lowest", "highest"] = "lowest") -> Net:
    """
    Factory for the canonical seed net.

    Args:
        tie_break: Within-bucket pair choice, see NetConfig.
    """
    return Net.seed(NetConfig(tie_break=tie_break))
