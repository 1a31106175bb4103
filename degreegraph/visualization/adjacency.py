"""Weighted adjacency heatmap with spanning-tree edges outlined."""

from collections.abc import Sequence

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
from matplotlib.patches import Rectangle

from degreegraph.visualization.style import (
    ANNOTATE_MAX_VERTICES,
    HEATMAP_CMAP,
    TREE_COLOR,
    vertex_figsize,
)


def plot_weighted_adjacency(
    matrix: np.ndarray,
    tree_edges: Sequence[tuple[int, int]] = (),
    title: str = "Weighted adjacency",
) -> plt.Figure:
    """Heatmap of edge weights; non-edges are masked.

    Args:
        matrix: Symmetric (n, n) weight table, 0 = no edge.
        tree_edges: (parent, child) pairs to outline in both triangles.
        title: Axes title.

    Returns:
        The matplotlib Figure containing the heatmap.
    """
    n = matrix.shape[0]
    if n == 0 or not np.any(matrix):
        fig, ax = plt.subplots(figsize=(6, 5))
        ax.text(
            0.5, 0.5, "No edges to display",
            transform=ax.transAxes, ha="center", va="center",
            fontsize=12, color="gray",
        )
        ax.set_title(title)
        return fig

    fig, ax = plt.subplots(figsize=vertex_figsize(n, per_vertex=0.5, minimum=5))

    sns.heatmap(
        matrix,
        mask=matrix == 0,
        annot=n <= ANNOTATE_MAX_VERTICES,
        fmt="g",
        cmap=HEATMAP_CMAP,
        square=True,
        cbar_kws={"label": "Edge weight"},
        linewidths=0.5,
        linecolor="white",
        ax=ax,
    )

    for parent, child in tree_edges:
        for r, c in ((parent, child), (child, parent)):
            ax.add_patch(Rectangle(
                (c, r), 1, 1, fill=False, edgecolor=TREE_COLOR, linewidth=2,
            ))

    ax.set_xlabel("Vertex")
    ax.set_ylabel("Vertex")
    ax.set_title(title)
    fig.tight_layout()
    return fig
