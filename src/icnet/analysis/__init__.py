"""
Analysis layer: derived quantities for diagnostics and comparison.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- find_violations / check_invariants: structural invariant checks
- kind_counts, wire_count, active_pair_count: simple tallies
- adjacency_matrix, connected_components: wiring graph via scipy
- canonical_signature / same_shape: comparison up to relabeling
"""

from icnet.analysis.invariants import (
    InvariantViolation,
    find_violations,
    is_well_formed,
    check_invariants,
)
from icnet.analysis.structure import (
    kind_counts,
    wire_count,
    active_pair_count,
    adjacency_matrix,
    connected_components,
    canonical_signature,
    same_shape,
)

__all__ = [
    "InvariantViolation",
    "find_violations",
    "is_well_formed",
    "check_invariants",
    "kind_counts",
    "wire_count",
    "active_pair_count",
    "adjacency_matrix",
    "connected_components",
    "canonical_signature",
    "same_shape",
]
