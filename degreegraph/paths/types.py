"""Result containers for shortest-path and spanning-tree queries."""

from dataclasses import dataclass

import numpy as np

UNREACHED = -1  # distance sentinel: no path from the source
NO_PARENT = -1  # parent sentinel: root, source, or unreached vertex


@dataclass(frozen=True)
class ShortestPaths:
    """Single-source Dijkstra output.

    Uses frozen=True but omits slots=True since numpy arrays don't interact
    well with __slots__.
    """

    source: int
    distances: np.ndarray  # int64 (n,), UNREACHED where no path exists
    predecessors: np.ndarray  # int64 (n,), NO_PARENT for source/unreached

    def reachable(self, v: int) -> bool:
        return bool(self.distances[v] != UNREACHED)

    def path_to(self, v: int) -> list[int]:
        """Vertices on a shortest path from source to v (empty if unreached)."""
        if not self.reachable(v):
            return []
        path = [v]
        while path[-1] != self.source:
            path.append(int(self.predecessors[path[-1]]))
        return path[::-1]


@dataclass(frozen=True)
class SpanningTree:
    """Prim output: parent pointers rooted at root.

    keys[v] is the weight of the edge joining v to its parent (0 for the
    root, UNREACHED for vertices the tree never reached).
    """

    root: int
    parents: np.ndarray  # int64 (n,)
    keys: np.ndarray  # int64 (n,)

    @property
    def n(self) -> int:
        return int(self.parents.shape[0])

    @property
    def unreached(self) -> list[int]:
        """Vertices with no parent that are not the root."""
        return [
            v for v in range(self.n)
            if v != self.root and self.parents[v] == NO_PARENT
        ]

    @property
    def spanning(self) -> bool:
        return not self.unreached

    def edges(self) -> list[tuple[int, int]]:
        """(parent, child) pairs in child order, unreached vertices skipped."""
        return [
            (int(self.parents[v]), v)
            for v in range(self.n)
            if self.parents[v] != NO_PARENT
        ]

    def weighted_edges(self) -> list[tuple[int, int, int]]:
        return [(p, c, int(self.keys[c])) for p, c in self.edges()]

    @property
    def total_weight(self) -> int:
        return sum(w for _, _, w in self.weighted_edges())
