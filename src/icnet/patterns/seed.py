"""
SeedPattern: the canonical starting net.

Two erasers, one Construct and one Duplicate:

    A.0 - C.1    C.2 - D.1    D.2 - B.0    C.0 - D.0

C and D form the only active pair, and one of D's auxiliary ports loops
back to C. Reducing it never terminates: after four steps (commutation,
two erasures, one annihilation of erasers) the net is the seed again,
with fresh identifiers in place of B.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from icnet.core.net import Net

from icnet.patterns.base import NetPattern, PatternConfig


# Steps after which the seed's structure repeats
SEED_PERIOD = 4


@dataclass
class SeedConfig(PatternConfig):
    """Configuration for a seed copy."""

    pass  # Inherits pattern_id


class SeedPattern(NetPattern):
    """One copy of the seed configuration, wired into an existing net."""

    def build(self) -> dict[str, int]:
        a, b, c, d = self.net.wire_seed()
        return {"a": a, "b": b, "c": c, "d": d}


def create_seed(net: "Net", pattern_id: str = "seed") -> SeedPattern:
    """
    Convenience factory for adding a seed copy to a net.

    Several copies can live in the same net; they stay disconnected.
    """
    return SeedPattern(SeedConfig(pattern_id=pattern_id), net)
