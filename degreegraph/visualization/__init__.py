"""Static figures for toolkit runs (PNG + SVG)."""

from degreegraph.visualization.adjacency import plot_weighted_adjacency
from degreegraph.visualization.distances import plot_distances
from degreegraph.visualization.render import render_all
from degreegraph.visualization.style import apply_style, save_figure

__all__ = [
    "apply_style",
    "plot_distances",
    "plot_weighted_adjacency",
    "render_all",
    "save_figure",
]
