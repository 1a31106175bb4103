"""Result types for Eulerian analysis and trail extraction."""

from dataclasses import dataclass, field
from enum import StrEnum


class EulerianKind(StrEnum):
    """Parity classification of a graph.

    CIRCUIT: every vertex has even degree.
    PATH: exactly two vertices have odd degree.
    NONE: any other count of odd-degree vertices.
    """

    CIRCUIT = "circuit"
    PATH = "path"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class EulerianAnalysis:
    """Read-only inspection of a graph's degree parity and edge connectivity.

    kind is decided by parity alone. edges_connected says whether every
    non-isolated vertex sits in one component, which a trail additionally
    needs to cover all edges.
    """

    kind: EulerianKind
    odd_vertices: tuple[int, ...]
    edge_count: int
    edges_connected: bool
    start_vertex: int  # suggested trail start

    @property
    def is_eulerian(self) -> bool:
        return self.kind is not EulerianKind.NONE

    @property
    def has_trail(self) -> bool:
        """True when a trail through every edge is guaranteed to exist."""
        return self.is_eulerian and self.edges_connected


@dataclass(frozen=True)
class EulerianTrail:
    """Vertex sequence emitted by the extractor, in post-order.

    Post-order is visitation order reversed; consecutive vertices are
    adjacent either way. errors holds validation findings against the
    pre-extraction edge set (empty = every edge used exactly once).
    """

    vertices: list[int]
    start: int
    edge_count: int
    errors: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.errors

    @property
    def is_circuit(self) -> bool:
        return (
            self.edge_count > 0
            and len(self.vertices) > 1
            and self.vertices[0] == self.vertices[-1]
        )
