"""
Base classes for patterns.

Patterns are small named sub-nets wired into a Net:
- The canonical seed (a perpetually rewriting Construct-Duplicate loop)
- Minimal scenarios that exercise one rule each

IMPORTANT: Patterns only build wiring through the net's own primitives.
After build() returns, every port they created is connected.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from icnet.core.net import Net


@dataclass
class PatternConfig:
    """Base configuration for patterns."""

    pattern_id: str  # Unique identifier


class NetPattern(ABC):
    """
    Base class for patterns built into a net.

    Building happens on construction; the identifiers of the agents the
    pattern created are kept in `ids` under role names.
    """

    def __init__(self, config: PatternConfig, net: "Net"):
        self.config = config
        self.net = net
        self.ids: dict[str, int] = self.build()

    @abstractmethod
    def build(self) -> dict[str, int]:
        """
        Create and fully wire the pattern's agents.

        Returns:
            Role name -> agent identifier
        """
        ...

    def live_ids(self) -> dict[str, int]:
        """Roles whose agents are still live in the net."""
        return {role: agent_id for role, agent_id in self.ids.items() if agent_id in self.net}

    def __getitem__(self, role: str) -> int:
        return self.ids[role]
