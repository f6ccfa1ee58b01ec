"""
Scenario patterns: minimal nets that exercise one rule each.

Every scenario here reaches normal form with zero live agents:
- ErasePair: two erasers facing each other (1 step)
- ErasedAgent: a Construct or Duplicate whose principal port meets an
  eraser and whose auxiliary ports end in erasers (3 steps)
- AnnihilationPair: two agents of the same 3-port kind facing each other,
  auxiliary ports ending in erasers (3 steps)
- ErasedCommutation: a Construct-Duplicate pair whose auxiliary ports end
  in erasers (9 steps: one commutation, four erasures, four eraser pairs)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from icnet.core.net import Net

from icnet.core.agents import AgentKind, Port
from icnet.patterns.base import NetPattern, PatternConfig


BINARY_KINDS = (AgentKind.CONSTRUCT, AgentKind.DUPLICATE)


def _require_binary(kind: AgentKind):
    if kind not in BINARY_KINDS:
        raise ValueError(f"Expected a 3-port agent kind, got {kind!r}")


class ErasePair(NetPattern):
    """Two erasers wired port 0 to port 0."""

    def build(self) -> dict[str, int]:
        a = self.net.create_erase()
        b = self.net.create_erase()
        self.net.connect(Port(a, 0), Port(b, 0))
        return {"a": a, "b": b}


@dataclass
class KindConfig(PatternConfig):
    """Configuration for scenarios parameterised by a 3-port kind."""

    kind: AgentKind = AgentKind.CONSTRUCT


class ErasedAgent(NetPattern):
    """
    A 3-port agent being erased.

    Its auxiliary ports go to erasers `left` and `right`, and its
    principal port meets the eraser `eraser`.
    """

    config: KindConfig

    def build(self) -> dict[str, int]:
        _require_binary(self.config.kind)
        net = self.net
        agent = net.create(self.config.kind)
        left = net.create_erase()
        right = net.create_erase()
        eraser = net.create_erase()
        net.connect(Port(agent, 1), Port(left, 0))
        net.connect(Port(agent, 2), Port(right, 0))
        net.connect(Port(agent, 0), Port(eraser, 0))
        return {"agent": agent, "left": left, "right": right, "eraser": eraser}


class AnnihilationPair(NetPattern):
    """Two same-kind 3-port agents facing each other, aux ports erased."""

    config: KindConfig

    def build(self) -> dict[str, int]:
        _require_binary(self.config.kind)
        net = self.net
        a = net.create(self.config.kind)
        b = net.create(self.config.kind)
        net.connect(Port(a, 0), Port(b, 0))

        ids = {"a": a, "b": b}
        for owner, name in ((a, "a"), (b, "b")):
            for index in (1, 2):
                eraser = net.create_erase()
                net.connect(Port(owner, index), Port(eraser, 0))
                ids[f"{name}{index}"] = eraser
        return ids


class ErasedCommutation(NetPattern):
    """A Construct facing a Duplicate, all four aux ports erased."""

    def build(self) -> dict[str, int]:
        net = self.net
        c = net.create_construct()
        d = net.create_duplicate()
        net.connect(Port(c, 0), Port(d, 0))

        ids = {"c": c, "d": d}
        for owner, name in ((c, "c"), (d, "d")):
            for index in (1, 2):
                eraser = net.create_erase()
                net.connect(Port(owner, index), Port(eraser, 0))
                ids[f"{name}{index}"] = eraser
        return ids


def create_erase_pair(net: "Net", pattern_id: str = "erase_pair") -> ErasePair:
    """Add two facing erasers to the net."""
    return ErasePair(PatternConfig(pattern_id=pattern_id), net)


def create_erased_agent(
    net: "Net",
    kind: AgentKind = AgentKind.CONSTRUCT,
    pattern_id: str = "erased_agent",
) -> ErasedAgent:
    """
    Add a 3-port agent meeting an eraser at its principal port.

    Args:
        net: Net to build into
        kind: Construct or Duplicate
        pattern_id: Unique identifier for this pattern
    """
    return ErasedAgent(KindConfig(pattern_id=pattern_id, kind=kind), net)


def create_annihilation_pair(
    net: "Net",
    kind: AgentKind = AgentKind.CONSTRUCT,
    pattern_id: str = "annihilation",
) -> AnnihilationPair:
    """Add two facing agents of the same 3-port kind."""
    return AnnihilationPair(KindConfig(pattern_id=pattern_id, kind=kind), net)


def create_erased_commutation(net: "Net", pattern_id: str = "commutation") -> ErasedCommutation:
    """Add a Construct-Duplicate pair whose auxiliary ports are erased."""
    return ErasedCommutation(PatternConfig(pattern_id=pattern_id), net)
