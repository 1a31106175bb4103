"""Adjacency structures for undirected simple graphs.

Every algorithm in the toolkit talks to a graph through the
AdjacencyAccessor protocol, so the dense numpy table used by default can be
swapped for the scipy.sparse-backed SparseGraph without touching algorithm
code. Entry (u, v) holds 0 for "no edge" or a positive integer weight;
unweighted edges carry weight 1.
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

import numpy as np
import scipy.sparse

from degreegraph.graph.validation import validate_adjacency


@runtime_checkable
class AdjacencyAccessor(Protocol):
    """Capability shared by all graph representations."""

    @property
    def n(self) -> int: ...

    def has_edge(self, u: int, v: int) -> bool: ...

    def weight(self, u: int, v: int) -> int: ...

    def set_weight(self, u: int, v: int, weight: int) -> None: ...

    def add_edge(self, u: int, v: int, weight: int = 1) -> None: ...

    def remove_edge(self, u: int, v: int) -> None: ...

    def neighbors(self, u: int) -> list[int]: ...

    def degree(self, u: int) -> int: ...

    def degrees(self) -> np.ndarray: ...

    def edges(self) -> list[tuple[int, int, int]]: ...

    def edge_count(self) -> int: ...

    def copy(self) -> "AdjacencyAccessor": ...

    def to_dense(self) -> np.ndarray: ...

    def to_csr(self) -> scipy.sparse.csr_matrix: ...


def _check_pair(n: int, u: int, v: int) -> None:
    if not (0 <= u < n and 0 <= v < n):
        raise IndexError(f"vertex pair ({u}, {v}) out of range for n={n}")
    if u == v:
        raise ValueError(f"self-loop on vertex {u} is not allowed")


class DenseGraph:
    """n x n int64 adjacency table, kept symmetric with a zero diagonal."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        self._adj = np.zeros((n, n), dtype=np.int64)

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "DenseGraph":
        """Wrap a copy of an existing adjacency table after validating it."""
        matrix = np.asarray(matrix)
        errors = validate_adjacency(matrix)
        if errors:
            raise ValueError("; ".join(errors))
        graph = cls(matrix.shape[0])
        graph._adj[:] = matrix
        return graph

    @property
    def n(self) -> int:
        return self._adj.shape[0]

    def has_edge(self, u: int, v: int) -> bool:
        return bool(self._adj[u, v] != 0)

    def weight(self, u: int, v: int) -> int:
        return int(self._adj[u, v])

    def set_weight(self, u: int, v: int, weight: int) -> None:
        _check_pair(self.n, u, v)
        if weight < 0:
            raise ValueError(f"negative weight {weight} on edge ({u}, {v})")
        self._adj[u, v] = self._adj[v, u] = weight

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        if weight < 1:
            raise ValueError(f"edge weight must be >= 1, got {weight}")
        self.set_weight(u, v, weight)

    def remove_edge(self, u: int, v: int) -> None:
        self._adj[u, v] = self._adj[v, u] = 0

    def neighbors(self, u: int) -> list[int]:
        return np.flatnonzero(self._adj[u]).tolist()

    def degree(self, u: int) -> int:
        return int(np.count_nonzero(self._adj[u]))

    def degrees(self) -> np.ndarray:
        return np.count_nonzero(self._adj, axis=1).astype(np.int64)

    def edges(self) -> list[tuple[int, int, int]]:
        rows, cols = np.nonzero(np.triu(self._adj, k=1))
        return [
            (int(u), int(v), int(self._adj[u, v]))
            for u, v in zip(rows, cols)
        ]

    def edge_count(self) -> int:
        return int(np.count_nonzero(self._adj)) // 2

    def copy(self) -> "DenseGraph":
        return DenseGraph.from_matrix(self._adj)

    def to_dense(self) -> np.ndarray:
        return self._adj.copy()

    def to_csr(self) -> scipy.sparse.csr_matrix:
        return scipy.sparse.csr_matrix(self._adj)

    def __repr__(self) -> str:
        return f"DenseGraph(n={self.n}, edges={self.edge_count()})"


class SparseGraph:
    """Row-list (scipy.sparse.lil_matrix) adjacency for sparse graphs.

    Assigning 0 to a lil_matrix cell drops the stored entry, so removed
    edges do not linger as explicit zeros.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        self._adj = scipy.sparse.lil_matrix((n, n), dtype=np.int64)

    @classmethod
    def from_matrix(cls, matrix) -> "SparseGraph":
        """Build from any dense array or scipy sparse matrix."""
        dense = matrix.toarray() if scipy.sparse.issparse(matrix) else np.asarray(matrix)
        errors = validate_adjacency(dense)
        if errors:
            raise ValueError("; ".join(errors))
        graph = cls(dense.shape[0])
        graph._adj = scipy.sparse.lil_matrix(dense.astype(np.int64))
        return graph

    @property
    def n(self) -> int:
        return self._adj.shape[0]

    def has_edge(self, u: int, v: int) -> bool:
        return bool(self._adj[u, v] != 0)

    def weight(self, u: int, v: int) -> int:
        return int(self._adj[u, v])

    def set_weight(self, u: int, v: int, weight: int) -> None:
        _check_pair(self.n, u, v)
        if weight < 0:
            raise ValueError(f"negative weight {weight} on edge ({u}, {v})")
        self._adj[u, v] = weight
        self._adj[v, u] = weight

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        if weight < 1:
            raise ValueError(f"edge weight must be >= 1, got {weight}")
        self.set_weight(u, v, weight)

    def remove_edge(self, u: int, v: int) -> None:
        self._adj[u, v] = 0
        self._adj[v, u] = 0

    def neighbors(self, u: int) -> list[int]:
        # lil rows are kept sorted by column index
        return [
            int(v)
            for v, w in zip(self._adj.rows[u], self._adj.data[u])
            if w != 0
        ]

    def degree(self, u: int) -> int:
        return len(self.neighbors(u))

    def degrees(self) -> np.ndarray:
        return np.array([self.degree(u) for u in range(self.n)], dtype=np.int64)

    def edges(self) -> list[tuple[int, int, int]]:
        return [
            (u, v, self.weight(u, v))
            for u in range(self.n)
            for v in self.neighbors(u)
            if v > u
        ]

    def edge_count(self) -> int:
        return int(self.degrees().sum()) // 2

    def copy(self) -> "SparseGraph":
        graph = SparseGraph(self.n)
        graph._adj = self._adj.copy()
        return graph

    def to_dense(self) -> np.ndarray:
        return self._adj.toarray()

    def to_csr(self) -> scipy.sparse.csr_matrix:
        csr = self._adj.tocsr()
        csr.eliminate_zeros()
        return csr

    def __repr__(self) -> str:
        return f"SparseGraph(n={self.n}, edges={self.edge_count()})"


_REPRESENTATIONS = {
    "dense": DenseGraph,
    "sparse": SparseGraph,
}


def make_graph(n: int, representation: str = "dense") -> AdjacencyAccessor:
    """Create an empty n-vertex graph with the named representation."""
    try:
        cls = _REPRESENTATIONS[representation]
    except KeyError:
        raise ValueError(
            f"unknown representation {representation!r}, "
            f"expected one of {sorted(_REPRESENTATIONS)}"
        ) from None
    return cls(n)


def graph_from_edges(
    n: int,
    edges: Iterable[tuple[int, ...]],
    representation: str = "dense",
) -> AdjacencyAccessor:
    """Build a graph from (u, v) or (u, v, weight) tuples."""
    graph = make_graph(n, representation)
    for edge in edges:
        u, v = edge[0], edge[1]
        weight = edge[2] if len(edge) > 2 else 1
        graph.add_edge(u, v, weight)
    return graph
