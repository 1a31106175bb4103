"""Orchestrator: render all figures for one toolkit run."""

import logging
from pathlib import Path

from degreegraph.visualization.adjacency import plot_weighted_adjacency
from degreegraph.visualization.distances import plot_distances
from degreegraph.visualization.style import apply_style, save_figure

log = logging.getLogger(__name__)


def render_all(report, output_dir: str | Path) -> list[Path]:
    """Write every figure the report supports to output_dir.

    Figures:
    - adjacency: weighted adjacency heatmap, spanning tree outlined
    - distances: shortest distances from the query source

    A run whose sequence was not graphical has nothing to draw.

    Returns:
        Paths of all files written (PNG and SVG per figure).
    """
    output_dir = Path(output_dir)
    written: list[Path] = []

    if not report.realized or report.graph is None:
        log.info("Nothing to render: graph was not realized")
        return written

    apply_style()

    tree_edges = report.spanning_tree.edges() if report.spanning_tree else []
    fig = plot_weighted_adjacency(report.graph.to_dense(), tree_edges)
    written.extend(save_figure(fig, output_dir, "adjacency"))

    if report.shortest_paths is not None:
        fig = plot_distances(
            report.shortest_paths.distances, report.shortest_paths.source
        )
        written.extend(save_figure(fig, output_dir, "distances"))

    log.info("Generated %d figure files in %s", len(written), output_dir)
    return written
