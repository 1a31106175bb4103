"""Tests for random edge weight assignment."""

import numpy as np
import pytest

from degreegraph.graph import assign_random_weights, graph_from_edges, total_weight


def _cycle(n: int, representation: str = "dense"):
    return graph_from_edges(
        n, [(i, (i + 1) % n) for i in range(n)], representation
    )


class TestAssignRandomWeights:
    """Weights land on existing edges only, inside the requested range."""

    def test_weights_in_range(self) -> None:
        g = assign_random_weights(_cycle(10), np.random.default_rng(3), low=2, high=5)
        weights = [w for _, _, w in g.edges()]
        assert len(weights) == 10
        assert min(weights) >= 2
        assert max(weights) <= 5

    def test_default_range(self) -> None:
        g = assign_random_weights(_cycle(30), np.random.default_rng(0))
        weights = [w for _, _, w in g.edges()]
        assert min(weights) >= 1
        assert max(weights) <= 10

    def test_edge_set_unchanged(self) -> None:
        g = _cycle(6)
        before = [(u, v) for u, v, _ in g.edges()]
        assign_random_weights(g, np.random.default_rng(1))
        assert [(u, v) for u, v, _ in g.edges()] == before

    def test_non_edges_stay_zero(self) -> None:
        g = _cycle(5)
        assign_random_weights(g, np.random.default_rng(1))
        dense = g.to_dense()
        assert dense[0, 2] == 0
        assert np.array_equal(dense, dense.T)

    def test_in_place_and_returned(self) -> None:
        g = _cycle(4)
        assert assign_random_weights(g, np.random.default_rng(1)) is g

    def test_reproducible_across_backends(self) -> None:
        dense = assign_random_weights(_cycle(7), np.random.default_rng(9))
        sparse = assign_random_weights(_cycle(7, "sparse"), np.random.default_rng(9))
        assert dense.edges() == sparse.edges()

    def test_one_draw_per_edge(self) -> None:
        """Weights follow the (u, v) edge order of a single batched draw."""
        g = _cycle(5)
        assign_random_weights(g, np.random.default_rng(11), low=1, high=10)
        expected = np.random.default_rng(11).integers(1, 11, size=5).tolist()
        assert [w for _, _, w in g.edges()] == expected

    def test_edgeless_graph(self) -> None:
        g = graph_from_edges(3, [])
        assign_random_weights(g, np.random.default_rng(1))
        assert g.edge_count() == 0

    def test_fixed_weight_range(self) -> None:
        g = assign_random_weights(_cycle(4), np.random.default_rng(1), low=7, high=7)
        assert total_weight(g) == 28

    def test_low_below_one(self) -> None:
        with pytest.raises(ValueError, match="low"):
            assign_random_weights(_cycle(3), np.random.default_rng(1), low=0)

    def test_high_below_low(self) -> None:
        with pytest.raises(ValueError, match="high"):
            assign_random_weights(_cycle(3), np.random.default_rng(1), low=5, high=4)


class TestTotalWeight:
    """Each undirected edge counted once."""

    def test_total_weight(self) -> None:
        g = graph_from_edges(3, [(0, 1, 4), (1, 2, 6)])
        assert total_weight(g) == 10

    def test_unweighted(self) -> None:
        assert total_weight(_cycle(6)) == 6
