"""Structural checks for adjacency tables, realizations and Eulerian trails.

All checks return a list of error strings (empty = valid) so callers decide
whether a problem is fatal. Checks run cheapest first.
"""

import logging
from collections import Counter
from collections.abc import Sequence

import numpy as np
from scipy.sparse.csgraph import connected_components

log = logging.getLogger(__name__)


def validate_adjacency(matrix: np.ndarray) -> list[str]:
    """Check that a raw table describes an undirected simple weighted graph.

    Checks:
    1. Square 2-D shape
    2. Integer values
    3. Zero diagonal (no self-loops)
    4. Non-negative entries
    5. Symmetry
    """
    errors: list[str] = []

    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        return [f"Adjacency must be square, got shape {matrix.shape}"]

    if matrix.size and not np.issubdtype(matrix.dtype, np.integer):
        if not np.all(np.equal(np.mod(matrix, 1), 0)):
            errors.append("Adjacency entries must be integers")

    diag_sum = np.abs(np.diagonal(matrix)).sum()
    if diag_sum != 0:
        errors.append(f"Self-loops detected: diagonal sum = {diag_sum}")

    if matrix.size and matrix.min() < 0:
        errors.append(f"Negative weight detected: min = {matrix.min()}")

    if not np.array_equal(matrix, matrix.T):
        asym = int(np.count_nonzero(matrix != matrix.T)) // 2
        errors.append(f"Adjacency not symmetric: {asym} mismatched pairs")

    return errors


def validate_realization(graph, degrees: Sequence[int]) -> list[str]:
    """Compare a realized graph's vertex degrees against the requested ones.

    Args:
        graph: Realized graph (AdjacencyAccessor).
        degrees: Requested degree per vertex id.

    Returns:
        One error per vertex whose degree differs, plus structural errors.
    """
    errors = validate_adjacency(graph.to_dense())
    if len(degrees) != graph.n:
        errors.append(
            f"Sequence length {len(degrees)} != vertex count {graph.n}"
        )
        return errors

    actual = graph.degrees()
    for v, (want, got) in enumerate(zip(degrees, actual)):
        if int(want) != int(got):
            errors.append(f"Vertex {v}: degree {int(got)} != requested {int(want)}")
    return errors


def edges_connected(graph) -> bool:
    """True if every vertex with at least one edge lies in one component.

    Isolated vertices are ignored; an edgeless graph counts as connected.
    """
    active = np.flatnonzero(graph.degrees())
    if active.size <= 1:
        return True
    _, labels = connected_components(graph.to_csr(), directed=False)
    return bool(np.unique(labels[active]).size == 1)


def validate_trail(trail: Sequence[int], graph) -> list[str]:
    """Check that trail uses every edge of graph exactly once.

    graph must be the edge set before extraction (the extractor empties the
    graph it walks). Direction does not matter: a post-order trail is the
    visitation order reversed.

    Returns:
        Errors for wrong length, steps along non-edges, and edges used
        more than once or not at all.
    """
    errors: list[str] = []
    expected_edges = graph.edge_count()

    if expected_edges == 0:
        if len(trail) > 1:
            errors.append(f"Edgeless graph but trail has {len(trail)} vertices")
        return errors

    if len(trail) != expected_edges + 1:
        errors.append(
            f"Trail length {len(trail)} != edge count + 1 ({expected_edges + 1})"
        )

    used: Counter[tuple[int, int]] = Counter()
    for a, b in zip(trail[:-1], trail[1:]):
        a, b = int(a), int(b)
        if a == b or not graph.has_edge(a, b):
            errors.append(f"Step {a} -> {b} is not an edge")
            continue
        used[(min(a, b), max(a, b))] += 1

    for edge, count in sorted(used.items()):
        if count > 1:
            errors.append(f"Edge {edge} traversed {count} times")

    missing = [
        (u, v) for u, v, _ in graph.edges() if (u, v) not in used
    ]
    if missing:
        errors.append(f"{len(missing)} edges never traversed, e.g. {missing[0]}")

    log.debug("Trail of %d vertices checked: %d errors", len(trail), len(errors))
    return errors
