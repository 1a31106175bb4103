"""Havel–Hakimi realization of degree sequences as simple undirected graphs.

Repeatedly takes the vertex with the largest remaining degree d, connects
it to the d vertices with the next-largest remaining degrees and lowers
each of those by one. The sequence is graphical iff this never asks for
d >= n or drives a degree below zero.

Two bookkeeping modes are offered:

TRACKED: remaining degrees stay paired with their vertex ids and the pairs
    are re-sorted together (ties -> lower id first), so vertex i ends up
    with exactly degrees[i] edges.
POSITIONAL: the legacy, permutation-blind variant. Degrees are re-sorted on
    their own and edges are written against post-sort positions, so the top
    vertex is always vertex 0 and its partners are vertices 1..d. Success
    and failure agree with TRACKED, but the resulting graph generally does
    not realize the sequence. Kept for parity with older reports.
"""

import logging
from collections.abc import Sequence
from enum import StrEnum

import numpy as np

from degreegraph.graph.types import AdjacencyAccessor, make_graph

log = logging.getLogger(__name__)


class RealizationMode(StrEnum):
    """How Havel–Hakimi maps sorted positions back onto vertices."""

    TRACKED = "tracked"
    POSITIONAL = "positional"


class NonGraphicalSequenceError(ValueError):
    """Raised when a degree sequence cannot be realized by a simple graph."""

    def __init__(self, degrees: Sequence[int], reason: str) -> None:
        self.degrees = tuple(int(d) for d in degrees)
        self.reason = reason
        super().__init__(
            f"Degree sequence {list(self.degrees)} is not graphical: {reason}"
        )


def _as_int_list(degrees: Sequence[int]) -> list[int]:
    return [int(d) for d in np.asarray(degrees, dtype=np.int64).ravel()]


def _realize_tracked(degrees: list[int], graph: AdjacencyAccessor) -> None:
    n = len(degrees)
    remaining = list(enumerate(degrees))  # (vertex id, remaining degree)

    while True:
        remaining.sort(key=lambda pair: (-pair[1], pair[0]))
        top, d = remaining[0]
        if d == 0:
            return
        if d >= n:
            raise NonGraphicalSequenceError(
                degrees, f"vertex {top} needs degree {d} >= n ({n})"
            )

        remaining[0] = (top, 0)
        for i in range(1, d + 1):
            v, dv = remaining[i]
            if dv - 1 < 0:
                raise NonGraphicalSequenceError(
                    degrees,
                    f"vertex {top} needs {d} partners but only "
                    f"{i - 1} have spare degree",
                )
            remaining[i] = (v, dv - 1)
            graph.add_edge(top, v)


def _realize_positional(degrees: list[int], graph: AdjacencyAccessor) -> None:
    n = len(degrees)
    seq = list(degrees)

    while True:
        seq.sort(reverse=True)
        d = seq[0]
        if d == 0:
            return
        if d >= n:
            raise NonGraphicalSequenceError(
                degrees, f"largest remaining degree {d} >= n ({n})"
            )

        seq[0] = 0
        for i in range(1, d + 1):
            seq[i] -= 1
            if seq[i] < 0:
                raise NonGraphicalSequenceError(
                    degrees, f"reduction drove position {i} negative"
                )
            graph.add_edge(0, i)


def realize_degree_sequence(
    degrees: Sequence[int],
    graph: AdjacencyAccessor | None = None,
    mode: RealizationMode | str = RealizationMode.TRACKED,
    representation: str = "dense",
) -> AdjacencyAccessor:
    """Build a simple undirected graph with the given degree sequence.

    The caller's sequence is copied, never modified.

    Args:
        degrees: Requested degree per vertex (any order).
        graph: Edge-free n-vertex graph to populate; a new one with the
            given representation is created when omitted.
        mode: TRACKED (exact realization) or POSITIONAL (legacy).
        representation: Backend for a newly created graph.

    Returns:
        The populated graph (every edge weight 1).

    Raises:
        NonGraphicalSequenceError: If a degree is negative, a degree >= n is
            requested, or a reduction drives a degree below zero. The graph
            may be partially populated at that point.
        ValueError: If the supplied graph has the wrong size or already
            holds edges, or mode is unknown.
    """
    mode = RealizationMode(mode)
    seq = _as_int_list(degrees)
    n = len(seq)

    if graph is None:
        graph = make_graph(n, representation)
    elif graph.n != n:
        raise ValueError(f"graph has {graph.n} vertices, sequence has {n}")
    elif graph.edge_count() != 0:
        raise ValueError("graph must start without edges")

    negative = [v for v, d in enumerate(seq) if d < 0]
    if negative:
        raise NonGraphicalSequenceError(
            seq, f"negative degree at vertex {negative[0]}"
        )
    if n == 0:
        return graph

    if mode is RealizationMode.TRACKED:
        _realize_tracked(seq, graph)
    else:
        _realize_positional(seq, graph)

    log.debug(
        "Realized %s sequence %s with %d edges",
        mode.value, seq, graph.edge_count(),
    )
    return graph


def is_graphical(degrees: Sequence[int]) -> bool:
    """Havel–Hakimi graphicality test on the sequence alone (no graph built)."""
    seq = _as_int_list(degrees)
    n = len(seq)
    if any(d < 0 for d in seq):
        return False

    while True:
        seq.sort(reverse=True)
        if not seq or seq[0] == 0:
            return True
        d = seq.pop(0)
        if d >= n or d > len(seq):
            return False
        for i in range(d):
            seq[i] -= 1
            if seq[i] < 0:
                return False


def check_erdos_gallai(degrees: Sequence[int]) -> bool:
    """Erdős–Gallai graphicality test.

    A non-increasing sequence d_1..d_n is graphical iff its sum is even and
    for every k: sum(d_1..d_k) <= k(k-1) + sum(min(d_i, k) for i > k).
    """
    d = np.sort(np.asarray(degrees, dtype=np.int64))[::-1]
    if d.size == 0:
        return True
    if d[-1] < 0 or d.sum() % 2 != 0:
        return False

    prefix = np.cumsum(d)
    for k in range(1, d.size + 1):
        tail = np.minimum(d[k:], k).sum()
        if prefix[k - 1] > k * (k - 1) + tail:
            return False
    return True
