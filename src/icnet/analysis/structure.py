"""
Structural diagnostics derived from a net's wiring.

- Kind counts and wire counts
- Agent adjacency as a scipy sparse matrix
- Connected components of the wiring graph
- Canonical signatures: relabeling-invariant encodings used to tell
  whether two nets have the same shape regardless of identifiers

IMPORTANT: This is NOT seen by the engine. One-way derivation only.
"""

from __future__ import annotations
from collections import deque
from typing import TYPE_CHECKING

import numpy as np
from scipy import sparse
from scipy.sparse import csgraph

from icnet.core.agents import AgentKind
from icnet.core.scheduler import find_active_pairs

if TYPE_CHECKING:
    from icnet.core.net import Net


def kind_counts(net: "Net") -> dict[AgentKind, int]:
    """Number of live agents of each kind."""
    counts = {kind: 0 for kind in AgentKind}
    for agent in net.agents.values():
        counts[agent.kind] += 1
    return counts


def wire_count(net: "Net") -> int:
    """Number of wires (each connected port pair counted once)."""
    return sum(len(agent.ports) for agent in net.agents.values()) // 2


def active_pair_count(net: "Net") -> int:
    """Total number of active pairs across all buckets."""
    return sum(len(bucket) for bucket in find_active_pairs(net).values())


def adjacency_matrix(net: "Net") -> tuple[sparse.csr_matrix, list[int]]:
    """
    Agent-level adjacency of the wiring graph.

    Entry [i, j] counts the ports of agent ids[i] wired to agent ids[j].
    The matrix is symmetric; a wire between two ports of the same agent
    contributes 2 on the diagonal.

    Returns:
        (matrix, ids) where ids maps row index to agent identifier
    """
    ids = net.ids()
    index_of = {agent_id: i for i, agent_id in enumerate(ids)}

    rows: list[int] = []
    cols: list[int] = []
    for agent_id in ids:
        for target in net.agents[agent_id].ports:
            rows.append(index_of[agent_id])
            cols.append(index_of[target.agent])

    n = len(ids)
    data = np.ones(len(rows), dtype=np.int64)
    matrix = sparse.coo_matrix((data, (rows, cols)), shape=(n, n)).tocsr()
    return matrix, ids


def connected_components(net: "Net") -> list[list[int]]:
    """
    Group live agents into connected components of the wiring graph.

    Components are sorted by their smallest identifier.
    """
    matrix, ids = adjacency_matrix(net)
    if not ids:
        return []

    n_components, labels = csgraph.connected_components(matrix, directed=False)
    groups: list[list[int]] = [[] for _ in range(n_components)]
    for agent_id, label in zip(ids, labels):
        groups[label].append(agent_id)
    return sorted(groups, key=lambda group: group[0])


def _rooted_signature(net: "Net", root: int) -> tuple:
    """Encode a component by breadth-first traversal from `root` in port order."""
    labels = {root: 0}
    order = [root]
    queue = deque([root])
    while queue:
        agent = net.agents[queue.popleft()]
        for target in agent.ports:
            if target.agent not in labels:
                labels[target.agent] = len(labels)
                order.append(target.agent)
                queue.append(target.agent)

    return tuple(
        (
            net.agents[agent_id].kind.value,
            tuple((labels[target.agent], target.index) for target in net.agents[agent_id].ports),
        )
        for agent_id in order
    )


def canonical_signature(net: "Net") -> tuple:
    """
    Relabeling-invariant encoding of the whole net.

    Two nets get equal signatures exactly when one can be turned into the
    other by renaming agent identifiers. Each component is encoded from
    every possible root and the smallest encoding is kept.
    """
    component_signatures = [
        min(_rooted_signature(net, root) for root in component)
        for component in connected_components(net)
    ]
    return tuple(sorted(component_signatures))


def same_shape(first: "Net", second: "Net") -> bool:
    """True when two nets are equal up to renaming of identifiers."""
    return canonical_signature(first) == canonical_signature(second)
