"""
Agents and ports: the nodes and endpoints of an interaction net.

There are exactly three agent kinds, each with a fixed arity:
- Construct: 3 ports (principal + 2 auxiliary)
- Duplicate: 3 ports (principal + 2 auxiliary)
- Erase: 1 port (principal only)

A port slot holds the Port it is wired to, or None until the agent
has been fully wired into the net.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from icnet.core.errors import UnwiredPortError


PRINCIPAL = 0  # Index of the principal port on every agent


class AgentKind(Enum):
    """The three interaction-combinator agent kinds."""

    CONSTRUCT = "c"
    DUPLICATE = "d"
    ERASE = "e"

    @property
    def arity(self) -> int:
        """Number of ports carried by agents of this kind."""
        return AGENT_CLASSES[self].ARITY


@dataclass(frozen=True, order=True)
class Port:
    """One endpoint of a wire: (agent identifier, port index)."""

    agent: int
    index: int

    @property
    def is_principal(self) -> bool:
        return self.index == PRINCIPAL

    def __str__(self) -> str:
        return f"({self.agent},{self.index})"


class Agent:
    """
    Base class for a net agent.

    Subclasses fix KIND and ARITY; the port list is sized once at
    construction and never grows or shrinks.
    """

    KIND: AgentKind
    ARITY: int

    def __init__(self, agent_id: int):
        self.id = agent_id
        self.ports: list[Port | None] = [None] * self.ARITY

    @property
    def kind(self) -> AgentKind:
        return self.KIND

    def get_port(self, index: int) -> Port:
        """Return the port wired to slot `index`; fatal if unwired."""
        target = self.ports[index]
        if target is None:
            raise UnwiredPortError(self.id, index)
        return target

    def set_port(self, index: int, target: Port):
        self.ports[index] = target

    def __str__(self) -> str:
        # (n,p)c(n,p)(n,p) / (n,p)d(n,p)(n,p) / (n,p)e
        slots = ["(-)" if p is None else str(p) for p in self.ports]
        return slots[0] + self.KIND.value + "".join(slots[1:])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, ports={self.ports})"


class Construct(Agent):
    KIND = AgentKind.CONSTRUCT
    ARITY = 3


class Duplicate(Agent):
    KIND = AgentKind.DUPLICATE
    ARITY = 3


class Erase(Agent):
    KIND = AgentKind.ERASE
    ARITY = 1


AGENT_CLASSES: dict[AgentKind, type[Agent]] = {
    AgentKind.CONSTRUCT: Construct,
    AgentKind.DUPLICATE: Duplicate,
    AgentKind.ERASE: Erase,
}
