"""Bar chart of single-source shortest distances."""

import matplotlib.pyplot as plt
import numpy as np

from degreegraph.paths.types import UNREACHED
from degreegraph.visualization.style import (
    EDGE_COLOR,
    SOURCE_COLOR,
    UNREACHED_COLOR,
    vertex_figsize,
)


def plot_distances(distances: np.ndarray, source: int) -> plt.Figure:
    """One bar per vertex; unreached vertices get a gray marker at zero.

    Args:
        distances: Dijkstra distance array (UNREACHED sentinel allowed).
        source: Source vertex, highlighted.

    Returns:
        The matplotlib Figure containing the bar chart.
    """
    distances = np.asarray(distances)
    n = distances.shape[0]
    vertices = np.arange(n)
    reached = distances != UNREACHED

    fig, ax = plt.subplots(figsize=vertex_figsize(n, per_vertex=0.4, minimum=6, height=4))
    colors = [SOURCE_COLOR if v == source else EDGE_COLOR for v in vertices[reached]]
    ax.bar(vertices[reached], distances[reached], color=colors)

    if (~reached).any():
        ax.scatter(
            vertices[~reached], np.zeros(int((~reached).sum())),
            marker="x", color=UNREACHED_COLOR, label="unreachable", zorder=3,
        )
        ax.legend()

    ax.set_xticks(vertices)
    ax.set_xlabel("Vertex")
    ax.set_ylabel("Shortest distance")
    ax.set_title(f"Shortest distances from vertex {source}")
    fig.tight_layout()
    return fig
