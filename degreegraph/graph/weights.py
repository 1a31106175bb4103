"""Random positive integer weights over an existing edge set."""

import logging

import numpy as np

from degreegraph.graph.types import AdjacencyAccessor

log = logging.getLogger(__name__)


def assign_random_weights(
    graph: AdjacencyAccessor,
    rng: np.random.Generator,
    low: int = 1,
    high: int = 10,
) -> AdjacencyAccessor:
    """Overwrite every edge weight with a uniform integer in [low, high].

    Edges are visited in (u, v) order with u < v and one draw per edge, so
    the result is a pure function of the edge set and the rng state.
    Non-edges stay 0. The graph is modified in place and returned.

    Args:
        graph: Graph whose edges receive weights.
        rng: numpy random Generator for reproducibility.
        low: Smallest weight (must be >= 1 so edges stay present).
        high: Largest weight (inclusive).
    """
    if low < 1:
        raise ValueError(f"low ({low}) must be >= 1")
    if high < low:
        raise ValueError(f"high ({high}) must be >= low ({low})")

    edges = graph.edges()
    draws = rng.integers(low, high + 1, size=len(edges))
    for (u, v, _), w in zip(edges, draws):
        graph.set_weight(u, v, int(w))

    log.debug("Assigned weights in [%d, %d] to %d edges", low, high, len(edges))
    return graph


def total_weight(graph: AdjacencyAccessor) -> int:
    """Sum of all edge weights, each undirected edge counted once."""
    return sum(w for _, _, w in graph.edges())
