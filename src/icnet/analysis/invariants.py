"""
Structural invariant checks for a net.

Between completed steps a net must satisfy:
1. Wiring is an involution: following any live port twice returns it
2. Every live agent's ports are all connected
3. Every live identifier is below the next-identifier counter

These checks read the arena directly and never raise from the
primitives; they collect every violation they find.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from icnet.core.agents import Port
from icnet.core.errors import NetConsistencyError

if TYPE_CHECKING:
    from icnet.core.net import Net


class InvariantViolation(NetConsistencyError):
    """Raised by check_invariants when a net is malformed."""

    def __init__(self, violations: list[str]):
        super().__init__("; ".join(violations))
        self.violations = violations


def find_violations(net: "Net") -> list[str]:
    """
    List every invariant violation in the net.

    Returns:
        Human-readable descriptions, empty for a well-formed net
    """
    violations: list[str] = []

    for agent_id, agent in net.agents.items():
        if agent_id >= net.next_id:
            violations.append(f"agent {agent_id} not below next id {net.next_id}")

        for index, target in enumerate(agent.ports):
            here = Port(agent_id, index)
            if target is None:
                violations.append(f"port {here} is unwired")
                continue

            other = net.agents.get(target.agent)
            if other is None:
                violations.append(f"port {here} points at deleted agent {target.agent}")
                continue
            if not 0 <= target.index < len(other.ports):
                violations.append(f"port {here} points at invalid port {target}")
                continue

            back = other.ports[target.index]
            if back != here:
                violations.append(f"port {here} -> {target} -> {back} is not an involution")

    return violations


def is_well_formed(net: "Net") -> bool:
    """True when the net satisfies every structural invariant."""
    return not find_violations(net)


def check_invariants(net: "Net"):
    """Raise InvariantViolation if the net is malformed."""
    violations = find_violations(net)
    if violations:
        raise InvariantViolation(violations)
