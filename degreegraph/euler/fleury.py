"""Destructive Eulerian trail extraction (simplified Fleury traversal).

From the current vertex, neighbours are scanned in increasing id order;
each still-present edge is deleted in both directions and walked
immediately. A vertex is emitted only once all of its edges are used up,
so the trail comes out in post-order, i.e. visitation order reversed.

The traversal does not look for bridges. On a connected graph with 0 or 2
odd-degree vertices (starting at an odd one in the latter case) it uses
every edge exactly once; on other inputs the trail can come out short.
That is detected by validate_trail, never raised.

The walk keeps its own stack instead of recursing, so trail length is not
bounded by the interpreter's recursion limit.
"""

import logging

from degreegraph.euler.analysis import suggest_start
from degreegraph.euler.types import EulerianTrail
from degreegraph.graph.types import AdjacencyAccessor
from degreegraph.graph.validation import validate_trail

log = logging.getLogger(__name__)


def extract_eulerian_trail(graph: AdjacencyAccessor, start: int) -> list[int]:
    """Walk and delete every edge reachable from start.

    Args:
        graph: Graph to consume. Every edge reachable from start is removed.
        start: Vertex the traversal begins at.

    Returns:
        Vertex ids in post-order. For a valid Eulerian input the length is
        edge_count + 1 and the last entry is start.
    """
    if not 0 <= start < graph.n:
        raise ValueError(f"start ({start}) must be in [0, {graph.n - 1}]")

    trail: list[int] = []
    # Each frame holds a vertex and the not-yet-scanned part of its neighbour
    # list. Edges are only ever deleted, so a snapshot plus a has_edge check
    # sees exactly what a live scan would.
    stack = [(start, iter(graph.neighbors(start)))]

    while stack:
        u, pending = stack[-1]
        for v in pending:
            if graph.has_edge(u, v):
                graph.remove_edge(u, v)
                stack.append((v, iter(graph.neighbors(v))))
                break
        else:
            stack.pop()
            trail.append(u)

    return trail


def find_eulerian_trail(
    graph: AdjacencyAccessor, start: int | None = None
) -> EulerianTrail:
    """Extract a trail from a private copy of graph and validate it.

    Args:
        graph: Graph to read; left untouched.
        start: Start vertex. Defaults to the lowest odd-degree vertex, or the
            lowest vertex with an edge when all degrees are even.

    Returns:
        EulerianTrail whose errors list is empty iff every edge was used
        exactly once.
    """
    if start is None:
        start = suggest_start(graph)

    work = graph.copy()
    vertices = extract_eulerian_trail(work, start)
    errors = validate_trail(vertices, graph)

    if errors:
        log.warning(
            "Trail from vertex %d is malformed (%d problems): %s",
            start, len(errors), "; ".join(errors),
        )
    else:
        log.info(
            "Trail from vertex %d covers all %d edges",
            start, graph.edge_count(),
        )

    return EulerianTrail(
        vertices=vertices,
        start=start,
        edge_count=graph.edge_count(),
        errors=errors,
    )
