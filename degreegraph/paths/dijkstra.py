"""Array-based single-source Dijkstra over non-negative integer weights.

Dense O(n^2) form: each round scans every unvisited vertex for the smallest
finite tentative distance (ties -> lowest id), marks it visited, and relaxes
its unvisited neighbours. Runs n-1 rounds or stops early once no unvisited
vertex has a finite distance; those vertices stay UNREACHED.
"""

import logging

import numpy as np

from degreegraph.graph.types import AdjacencyAccessor
from degreegraph.paths.types import NO_PARENT, UNREACHED, ShortestPaths

log = logging.getLogger(__name__)


def _check_non_negative(graph: AdjacencyAccessor) -> None:
    negative = [(u, v, w) for u, v, w in graph.edges() if w < 0]
    if negative:
        u, v, w = negative[0]
        raise ValueError(
            f"Dijkstra needs non-negative weights, edge ({u}, {v}) has {w}"
        )


def dijkstra(graph: AdjacencyAccessor, src: int) -> ShortestPaths:
    """Shortest distances and predecessors from src.

    Args:
        graph: Weighted graph; any non-zero entry is an edge of that weight.
        src: Source vertex.

    Returns:
        ShortestPaths with distances[src] == 0 and UNREACHED for vertices in
        other components.

    Raises:
        ValueError: If src is out of range or an edge weight is negative.
    """
    n = graph.n
    if not 0 <= src < n:
        raise ValueError(f"src ({src}) must be in [0, {n - 1}]")
    _check_non_negative(graph)

    dist = np.full(n, UNREACHED, dtype=np.int64)
    pred = np.full(n, NO_PARENT, dtype=np.int64)
    visited = np.zeros(n, dtype=bool)
    dist[src] = 0

    for _ in range(n - 1):
        candidates = np.flatnonzero(~visited & (dist != UNREACHED))
        if candidates.size == 0:
            break
        # argmin returns the first minimum, candidates are ascending ids
        u = int(candidates[np.argmin(dist[candidates])])
        visited[u] = True

        for v in graph.neighbors(u):
            if visited[v]:
                continue
            alt = dist[u] + graph.weight(u, v)
            if dist[v] == UNREACHED or alt < dist[v]:
                dist[v] = alt
                pred[v] = u

    log.debug(
        "Dijkstra from %d: %d of %d vertices reached",
        src, int(np.count_nonzero(dist != UNREACHED)), n,
    )
    return ShortestPaths(source=src, distances=dist, predecessors=pred)


def shortest_path_distances(graph: AdjacencyAccessor, src: int) -> np.ndarray:
    """Distance array from src (UNREACHED for vertices with no path)."""
    return dijkstra(graph, src).distances
