"""Graph construction: adjacency structures, degree sequences, Havel–Hakimi, weights."""

from degreegraph.graph.degree_sequence import generate_degree_sequence, is_non_increasing
from degreegraph.graph.havel_hakimi import (
    NonGraphicalSequenceError,
    RealizationMode,
    check_erdos_gallai,
    is_graphical,
    realize_degree_sequence,
)
from degreegraph.graph.types import (
    AdjacencyAccessor,
    DenseGraph,
    SparseGraph,
    graph_from_edges,
    make_graph,
)
from degreegraph.graph.validation import (
    edges_connected,
    validate_adjacency,
    validate_realization,
    validate_trail,
)
from degreegraph.graph.weights import assign_random_weights, total_weight

__all__ = [
    "AdjacencyAccessor",
    "DenseGraph",
    "NonGraphicalSequenceError",
    "RealizationMode",
    "SparseGraph",
    "assign_random_weights",
    "check_erdos_gallai",
    "edges_connected",
    "generate_degree_sequence",
    "graph_from_edges",
    "is_graphical",
    "is_non_increasing",
    "make_graph",
    "realize_degree_sequence",
    "total_weight",
    "validate_adjacency",
    "validate_realization",
    "validate_trail",
]
