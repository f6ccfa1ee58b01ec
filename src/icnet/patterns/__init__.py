"""
Patterns: named sub-nets wired into a Net.

- SeedPattern: the canonical four-agent starting net (never terminates)
- ErasePair, ErasedAgent, AnnihilationPair, ErasedCommutation:
  minimal scenarios that each exercise one rule and reduce to nothing
"""

from icnet.patterns.base import NetPattern, PatternConfig
from icnet.patterns.seed import SeedPattern, SeedConfig, SEED_PERIOD, create_seed
from icnet.patterns.scenarios import (
    ErasePair,
    ErasedAgent,
    AnnihilationPair,
    ErasedCommutation,
    KindConfig,
    create_erase_pair,
    create_erased_agent,
    create_annihilation_pair,
    create_erased_commutation,
)

__all__ = [
    "NetPattern",
    "PatternConfig",
    "SeedPattern",
    "SeedConfig",
    "SEED_PERIOD",
    "create_seed",
    "ErasePair",
    "ErasedAgent",
    "AnnihilationPair",
    "ErasedCommutation",
    "KindConfig",
    "create_erase_pair",
    "create_erased_agent",
    "create_annihilation_pair",
    "create_erased_commutation",
]
