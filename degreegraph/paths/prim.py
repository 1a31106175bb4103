"""Array-based Prim minimum spanning tree.

Dense O(n^2) form: each round takes the out-of-tree vertex with the
smallest finite key (ties -> lowest id), adds it to the tree, and lowers
the key and parent of every out-of-tree neighbour it reaches more cheaply.
Vertices in components other than the root's never get a finite key and
keep NO_PARENT.
"""

import logging

import numpy as np

from degreegraph.graph.types import AdjacencyAccessor
from degreegraph.paths.types import NO_PARENT, UNREACHED, SpanningTree

log = logging.getLogger(__name__)


def prim_mst(graph: AdjacencyAccessor, root: int = 0) -> SpanningTree:
    """Minimum spanning tree of root's component as a parent array.

    Args:
        graph: Weighted graph.
        root: Tree root (vertex 0 by convention).

    Returns:
        SpanningTree; check .spanning / .unreached for disconnected input.
    """
    n = graph.n
    if n == 0:
        empty = np.zeros(0, dtype=np.int64)
        return SpanningTree(root=root, parents=empty, keys=empty.copy())
    if not 0 <= root < n:
        raise ValueError(f"root ({root}) must be in [0, {n - 1}]")

    key = np.full(n, np.inf)
    parent = np.full(n, NO_PARENT, dtype=np.int64)
    in_tree = np.zeros(n, dtype=bool)
    key[root] = 0

    for _ in range(n - 1):
        candidates = np.flatnonzero(~in_tree & np.isfinite(key))
        if candidates.size == 0:
            break
        u = int(candidates[np.argmin(key[candidates])])
        in_tree[u] = True

        for v in graph.neighbors(u):
            w = graph.weight(u, v)
            if not in_tree[v] and w < key[v]:
                key[v] = w
                parent[v] = u

    keys = np.where(np.isfinite(key), key, UNREACHED).astype(np.int64)
    tree = SpanningTree(root=root, parents=parent, keys=keys)

    if tree.spanning:
        log.debug("Spanning tree from %d: weight %d", root, tree.total_weight)
    else:
        log.warning(
            "Graph is disconnected: %d vertices unreachable from %d",
            len(tree.unreached), root,
        )
    return tree
