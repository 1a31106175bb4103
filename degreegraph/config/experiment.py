"""Toolkit configuration dataclasses, all frozen and slotted."""

from dataclasses import dataclass, field

REALIZATION_MODES = ("tracked", "positional")
REPRESENTATIONS = ("dense", "sparse")


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Degree sequence and realization parameters."""

    n: int = 8  # number of vertices
    realization: str = "tracked"  # "tracked" or "positional" Havel-Hakimi
    representation: str = "dense"  # adjacency backend


@dataclass(frozen=True, slots=True)
class WeightConfig:
    """Random edge weight range (inclusive on both ends)."""

    low: int = 1
    high: int = 10


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Per-run queries against the realized graph."""

    src: int = 0  # Dijkstra source vertex
    mst_root: int = 0  # Prim root, vertex 0 by convention
    euler_start: int | None = None  # None picks the start from the degrees


@dataclass(frozen=True, slots=True)
class ToolkitConfig:
    """Top-level configuration composing all sub-configs.

    A seed of None means "derive one from the wall clock"; the resolved
    value is logged and stored in the run report so the run can be replayed.
    Cross-parameter validation runs in __post_init__.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    weights: WeightConfig = field(default_factory=WeightConfig)
    query: QueryConfig = field(default_factory=QueryConfig)
    seed: int | None = None
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        n = self.graph.n
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        if self.graph.realization not in REALIZATION_MODES:
            raise ValueError(
                f"realization must be one of {REALIZATION_MODES}, "
                f"got {self.graph.realization!r}"
            )
        if self.graph.representation not in REPRESENTATIONS:
            raise ValueError(
                f"representation must be one of {REPRESENTATIONS}, "
                f"got {self.graph.representation!r}"
            )
        if self.weights.low < 1:
            raise ValueError(
                f"weights.low ({self.weights.low}) must be >= 1"
            )
        if self.weights.high < self.weights.low:
            raise ValueError(
                f"weights.high ({self.weights.high}) must be "
                f">= weights.low ({self.weights.low})"
            )
        if n > 0:
            if not 0 <= self.query.src < n:
                raise ValueError(
                    f"src ({self.query.src}) must be in [0, {n - 1}]"
                )
            if not 0 <= self.query.mst_root < n:
                raise ValueError(
                    f"mst_root ({self.query.mst_root}) must be in [0, {n - 1}]"
                )
            start = self.query.euler_start
            if start is not None and not 0 <= start < n:
                raise ValueError(
                    f"euler_start ({start}) must be in [0, {n - 1}]"
                )
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")
