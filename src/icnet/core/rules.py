"""
The six interaction rules.

Each rule receives two agent identifiers already placed in the role
order the scheduler guarantees (Construct before Duplicate, the 3-port
agent before Erase). Every neighbour lookup happens immediately before
its connect(), so a slot rewired earlier in the same rule is read in its
new state. This keeps the wiring an involution when auxiliary ports loop
back into the pair itself.
"""

from __future__ import annotations
from typing import Callable, TYPE_CHECKING

from icnet.core.agents import Port
from icnet.core.scheduler import PairKind

if TYPE_CHECKING:
    from icnet.core.net import Net


def erase_erase(net: "Net", a: int, b: int):
    """Two erasers annihilate; their only ports faced each other."""
    net.delete(a)
    net.delete(b)


def duplicate_duplicate(net: "Net", a: int, b: int):
    """Annihilation: auxiliary ports are joined straight through."""
    net.connect(net.follow(Port(a, 1)), net.follow(Port(b, 1)))
    net.connect(net.follow(Port(a, 2)), net.follow(Port(b, 2)))
    net.delete(a)
    net.delete(b)


def construct_construct(net: "Net", a: int, b: int):
    """Annihilation: auxiliary ports are joined crossed."""
    net.connect(net.follow(Port(a, 1)), net.follow(Port(b, 2)))
    net.connect(net.follow(Port(a, 2)), net.follow(Port(b, 1)))
    net.delete(a)
    net.delete(b)


def erase_binary(net: "Net", a: int, b: int):
    """
    Erasure through a 3-port agent.

    The eraser b is reused on a's first auxiliary subtree and a fresh
    eraser c is created for the second; a is deleted. Live count is
    unchanged.
    """
    c = net.create_erase()
    net.connect(Port(b, 0), net.follow(Port(a, 1)))
    net.connect(Port(c, 0), net.follow(Port(a, 2)))
    net.delete(a)


# Construct-Erase and Duplicate-Erase share one body
construct_erase = erase_binary
duplicate_erase = erase_binary


def construct_duplicate(net: "Net", a: int, b: int):
    """
    Commutation: a Construct meets a Duplicate.

    a (Construct) and b (Duplicate) survive and two fresh agents c
    (Construct) and d (Duplicate) are added, so the live count grows by 2.
    """
    c = net.create_construct()
    d = net.create_duplicate()
    # External edges, each lookup taken right before its connect
    net.connect(net.follow(Port(a, 1)), Port(d, 0))
    net.connect(net.follow(Port(a, 2)), Port(b, 0))
    net.connect(net.follow(Port(b, 1)), Port(a, 0))
    net.connect(net.follow(Port(b, 2)), Port(c, 0))
    # Internal edges
    net.connect(Port(b, 1), Port(a, 2))
    net.connect(Port(b, 2), Port(c, 2))
    net.connect(Port(d, 1), Port(a, 1))
    net.connect(Port(d, 2), Port(c, 1))


RULES: dict[PairKind, Callable[["Net", int, int], None]] = {
    PairKind.ERASE_ERASE: erase_erase,
    PairKind.DUPLICATE_ERASE: duplicate_erase,
    PairKind.CONSTRUCT_ERASE: construct_erase,
    PairKind.DUPLICATE_DUPLICATE: duplicate_duplicate,
    PairKind.CONSTRUCT_CONSTRUCT: construct_construct,
    PairKind.CONSTRUCT_DUPLICATE: construct_duplicate,
}
