"""End-to-end toolkit run.

Chains the stages in the order they consume the graph:
degree sequence -> Havel–Hakimi realization -> Eulerian analysis and trail
(on a private copy) -> random weights -> Dijkstra -> Prim.

A non-graphical sequence ends the run early with realized=False; it is a
reported outcome, not an exception.
"""

import logging
import time
from collections.abc import Generator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass

import numpy as np

from degreegraph.config.experiment import ToolkitConfig
from degreegraph.euler import EulerianAnalysis, EulerianTrail, analyze_eulerian, find_eulerian_trail
from degreegraph.graph import (
    AdjacencyAccessor,
    NonGraphicalSequenceError,
    assign_random_weights,
    generate_degree_sequence,
    realize_degree_sequence,
)
from degreegraph.paths import ShortestPaths, SpanningTree, dijkstra, prim_mst
from degreegraph.reproducibility import make_rng, resolve_seed

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Log the start and elapsed time of a pipeline stage."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    log.info("Completed: %s in %.3fs", name, time.monotonic() - t0)


@dataclass(frozen=True)
class ToolkitReport:
    """Everything one run produced.

    Stage fields are None when the stage did not run: everything after
    realization when the sequence is not graphical, the trail when the
    graph is not Eulerian, and the weighted queries when n == 0.
    """

    config: ToolkitConfig
    seed: int
    degree_sequence: list[int]
    realized: bool
    sequence_source: str = "random"  # "random" or "explicit"
    failure_reason: str | None = None
    graph: AdjacencyAccessor | None = None  # weighted graph
    eulerian: EulerianAnalysis | None = None
    trail: EulerianTrail | None = None
    shortest_paths: ShortestPaths | None = None
    spanning_tree: SpanningTree | None = None

    @property
    def n(self) -> int:
        return len(self.degree_sequence)


def run_pipeline(
    config: ToolkitConfig, degrees: Sequence[int] | None = None
) -> ToolkitReport:
    """Execute the full toolkit run.

    Args:
        config: Run configuration. config.seed=None draws a wall-clock seed.
        degrees: Explicit degree sequence to realize instead of a random one.
            Its length must equal config.graph.n.

    Returns:
        ToolkitReport with the resolved seed and every stage's output.
    """
    n = config.graph.n
    if degrees is not None and len(degrees) != n:
        raise ValueError(
            f"degree sequence has {len(degrees)} entries, config.graph.n is {n}"
        )

    seed = resolve_seed(config.seed)
    rng = make_rng(seed)
    log.info("Seed: %d", seed)

    with stage_timer("Degree Sequence"):
        if degrees is None:
            sequence = generate_degree_sequence(n, rng)
        else:
            sequence = np.asarray(degrees, dtype=np.int64)
        sequence_list = [int(d) for d in sequence]
        source = "random" if degrees is None else "explicit"
        log.info("Degree sequence: %s", sequence_list)

    with stage_timer("Havel-Hakimi Realization"):
        try:
            graph = realize_degree_sequence(
                sequence,
                mode=config.graph.realization,
                representation=config.graph.representation,
            )
        except NonGraphicalSequenceError as exc:
            log.warning("Realization failed: %s", exc.reason)
            return ToolkitReport(
                config=config,
                seed=seed,
                degree_sequence=sequence_list,
                sequence_source=source,
                realized=False,
                failure_reason=exc.reason,
            )
        log.info("Realized graph: n=%d, edges=%d", graph.n, graph.edge_count())

    with stage_timer("Eulerian Analysis"):
        eulerian = analyze_eulerian(graph)
        trail = None
        if eulerian.is_eulerian and n > 0:
            trail = find_eulerian_trail(graph, start=config.query.euler_start)
        log.info("Eulerian: %s", eulerian.kind.value)

    if n == 0:
        return ToolkitReport(
            config=config,
            seed=seed,
            degree_sequence=sequence_list,
            sequence_source=source,
            realized=True,
            graph=graph,
            eulerian=eulerian,
            trail=trail,
        )

    with stage_timer("Weight Assignment"):
        assign_random_weights(
            graph, rng, low=config.weights.low, high=config.weights.high
        )

    with stage_timer("Dijkstra"):
        shortest_paths = dijkstra(graph, config.query.src)

    with stage_timer("Prim"):
        spanning_tree = prim_mst(graph, root=config.query.mst_root)
        log.info(
            "Spanning tree: %d edges, weight %d",
            len(spanning_tree.edges()), spanning_tree.total_weight,
        )

    return ToolkitReport(
        config=config,
        seed=seed,
        degree_sequence=sequence_list,
        sequence_source=source,
        realized=True,
        graph=graph,
        eulerian=eulerian,
        trail=trail,
        shortest_paths=shortest_paths,
        spanning_tree=spanning_tree,
    )
