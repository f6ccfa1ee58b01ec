"""
icnet: an interaction-combinator reduction engine

Lafont's interaction combinators are a minimal model of universal
computation by local graph rewriting:

- Three agent kinds: Construct, Duplicate, Erase
- Agents meet through their principal ports, forming active pairs
- Each active pair is rewritten by one of six fixed rules
- Reduction stops at normal form, when no active pair is left

The engine serialises reduction to one rewrite per step, chosen by a
fixed priority that favours shrinking rules over the growing one.
"""

__version__ = "0.1.0"
