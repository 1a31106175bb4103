"""Tests for the dense and sparse adjacency representations."""

import numpy as np
import pytest
import scipy.sparse

from degreegraph.graph import (
    AdjacencyAccessor,
    DenseGraph,
    SparseGraph,
    graph_from_edges,
    make_graph,
    validate_adjacency,
)

REPRESENTATIONS = ["dense", "sparse"]


@pytest.fixture(params=REPRESENTATIONS)
def representation(request) -> str:
    return request.param


class TestAccessorBasics:
    """Both backends expose the same edge semantics."""

    def test_empty_graph(self, representation: str) -> None:
        g = make_graph(4, representation)
        assert g.n == 4
        assert g.edge_count() == 0
        assert g.edges() == []
        assert g.degrees().tolist() == [0, 0, 0, 0]

    def test_satisfies_protocol(self, representation: str) -> None:
        assert isinstance(make_graph(3, representation), AdjacencyAccessor)

    def test_add_edge_symmetric(self, representation: str) -> None:
        g = make_graph(3, representation)
        g.add_edge(0, 2)
        assert g.has_edge(0, 2)
        assert g.has_edge(2, 0)
        assert g.weight(2, 0) == 1
        assert not g.has_edge(0, 1)

    def test_has_edge_returns_builtin_bool(self, representation: str) -> None:
        g = graph_from_edges(2, [(0, 1)], representation)
        assert type(g.has_edge(0, 1)) is bool

    def test_remove_edge_both_directions(self, representation: str) -> None:
        g = graph_from_edges(3, [(0, 1), (1, 2)], representation)
        g.remove_edge(1, 0)
        assert not g.has_edge(0, 1)
        assert not g.has_edge(1, 0)
        assert g.edge_count() == 1
        assert g.neighbors(1) == [2]

    def test_neighbors_ascending(self, representation: str) -> None:
        g = graph_from_edges(5, [(2, 4), (2, 0), (2, 3)], representation)
        assert g.neighbors(2) == [0, 3, 4]

    def test_degrees(self, representation: str) -> None:
        g = graph_from_edges(4, [(0, 1), (0, 2), (0, 3), (1, 2)], representation)
        assert g.degrees().tolist() == [3, 2, 2, 1]
        assert g.degree(0) == 3
        assert g.degrees().dtype == np.int64

    def test_edges_upper_triangle_order(self, representation: str) -> None:
        g = graph_from_edges(4, [(3, 1, 5), (0, 2, 7), (1, 0, 2)], representation)
        assert g.edges() == [(0, 1, 2), (0, 2, 7), (1, 3, 5)]

    def test_set_weight_overwrites(self, representation: str) -> None:
        g = graph_from_edges(3, [(0, 1)], representation)
        g.set_weight(0, 1, 9)
        assert g.weight(1, 0) == 9
        assert g.edge_count() == 1

    def test_copy_is_independent(self, representation: str) -> None:
        g = graph_from_edges(3, [(0, 1), (1, 2)], representation)
        c = g.copy()
        c.remove_edge(0, 1)
        assert g.has_edge(0, 1)
        assert not c.has_edge(0, 1)

    def test_to_dense_and_csr_agree(self, representation: str) -> None:
        g = graph_from_edges(4, [(0, 1, 3), (2, 3, 4)], representation)
        dense = g.to_dense()
        csr = g.to_csr()
        assert scipy.sparse.issparse(csr)
        assert np.array_equal(csr.toarray(), dense)
        assert validate_adjacency(dense) == []

    def test_csr_drops_removed_edges(self, representation: str) -> None:
        g = graph_from_edges(3, [(0, 1), (1, 2)], representation)
        g.remove_edge(0, 1)
        assert g.to_csr().nnz == 2


class TestAccessorErrors:
    """Invalid edits are rejected."""

    def test_self_loop_rejected(self, representation: str) -> None:
        g = make_graph(3, representation)
        with pytest.raises(ValueError, match="self-loop"):
            g.add_edge(1, 1)

    def test_out_of_range_rejected(self, representation: str) -> None:
        g = make_graph(3, representation)
        with pytest.raises(IndexError):
            g.add_edge(0, 3)

    def test_zero_weight_edge_rejected(self, representation: str) -> None:
        g = make_graph(3, representation)
        with pytest.raises(ValueError, match="weight"):
            g.add_edge(0, 1, weight=0)

    def test_negative_weight_rejected(self, representation: str) -> None:
        g = graph_from_edges(3, [(0, 1)], representation)
        with pytest.raises(ValueError, match="negative"):
            g.set_weight(0, 1, -2)

    def test_negative_n_rejected(self, representation: str) -> None:
        with pytest.raises(ValueError, match="n must be"):
            make_graph(-1, representation)

    def test_unknown_representation(self) -> None:
        with pytest.raises(ValueError, match="unknown representation"):
            make_graph(3, "adjlist")


class TestFromMatrix:
    """Building graphs from raw tables validates them."""

    def test_dense_from_matrix(self) -> None:
        m = np.array([[0, 2, 0], [2, 0, 1], [0, 1, 0]])
        g = DenseGraph.from_matrix(m)
        assert g.edges() == [(0, 1, 2), (1, 2, 1)]

    def test_from_matrix_copies(self) -> None:
        m = np.array([[0, 1], [1, 0]])
        g = DenseGraph.from_matrix(m)
        m[0, 1] = m[1, 0] = 0
        assert g.has_edge(0, 1)

    def test_sparse_from_scipy_matrix(self) -> None:
        m = scipy.sparse.csr_matrix(np.array([[0, 3], [3, 0]]))
        g = SparseGraph.from_matrix(m)
        assert g.edges() == [(0, 1, 3)]

    def test_asymmetric_rejected(self) -> None:
        m = np.array([[0, 1], [0, 0]])
        with pytest.raises(ValueError, match="not symmetric"):
            DenseGraph.from_matrix(m)

    def test_self_loop_matrix_rejected(self) -> None:
        m = np.array([[1, 0], [0, 0]])
        with pytest.raises(ValueError, match="Self-loops"):
            SparseGraph.from_matrix(m)


class TestValidateAdjacency:
    """validate_adjacency reports every structural problem."""

    def test_valid_matrix(self) -> None:
        assert validate_adjacency(np.zeros((3, 3), dtype=np.int64)) == []

    def test_non_square(self) -> None:
        errors = validate_adjacency(np.zeros((2, 3)))
        assert len(errors) == 1
        assert "square" in errors[0]

    def test_fractional_entries(self) -> None:
        m = np.array([[0.0, 0.5], [0.5, 0.0]])
        assert any("integers" in e for e in validate_adjacency(m))

    def test_negative_entries(self) -> None:
        m = np.array([[0, -1], [-1, 0]])
        assert any("Negative" in e for e in validate_adjacency(m))
