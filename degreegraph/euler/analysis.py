"""Eulerian classification by odd-degree vertex count."""

import logging

import numpy as np

from degreegraph.euler.types import EulerianAnalysis, EulerianKind
from degreegraph.graph.types import AdjacencyAccessor
from degreegraph.graph.validation import edges_connected

log = logging.getLogger(__name__)


def odd_degree_vertices(graph: AdjacencyAccessor) -> list[int]:
    """Vertices whose count of non-zero adjacency entries is odd."""
    return np.flatnonzero(graph.degrees() % 2).tolist()


def _kind_for_odd_count(odd: int) -> EulerianKind:
    if odd == 0:
        return EulerianKind.CIRCUIT
    if odd == 2:
        return EulerianKind.PATH
    return EulerianKind.NONE


def classify_eulerian(graph: AdjacencyAccessor) -> EulerianKind:
    """CIRCUIT for 0 odd vertices, PATH for exactly 2, NONE otherwise."""
    return _kind_for_odd_count(len(odd_degree_vertices(graph)))


def is_eulerian(graph: AdjacencyAccessor) -> bool:
    """True iff the graph has 0 or 2 odd-degree vertices."""
    return classify_eulerian(graph) is not EulerianKind.NONE


def suggest_start(graph: AdjacencyAccessor) -> int:
    """Lowest odd-degree vertex if any, else lowest vertex with an edge, else 0.

    A trail through every edge of a PATH graph must begin at an odd vertex.
    """
    odd = odd_degree_vertices(graph)
    if odd:
        return odd[0]
    active = np.flatnonzero(graph.degrees())
    return int(active[0]) if active.size else 0


def analyze_eulerian(graph: AdjacencyAccessor) -> EulerianAnalysis:
    """Full read-only Eulerian inspection of graph."""
    odd = odd_degree_vertices(graph)
    kind = _kind_for_odd_count(len(odd))

    analysis = EulerianAnalysis(
        kind=kind,
        odd_vertices=tuple(odd),
        edge_count=graph.edge_count(),
        edges_connected=edges_connected(graph),
        start_vertex=suggest_start(graph),
    )
    log.debug(
        "Eulerian analysis: kind=%s, odd=%s, edges=%d, connected=%s",
        analysis.kind.value,
        list(analysis.odd_vertices),
        analysis.edge_count,
        analysis.edges_connected,
    )
    return analysis
