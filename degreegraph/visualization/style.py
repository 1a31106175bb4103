"""Shared look for toolkit figures.

Figures are drawn headless on the Agg backend with the seaborn whitegrid
theme. Colors come from the colorblind preset so tree edges, the query
source and unreached vertices stay distinguishable in print.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path

PALETTE = sns.color_palette("colorblind", n_colors=8)
EDGE_COLOR = PALETTE[0]
TREE_COLOR = PALETTE[3]
SOURCE_COLOR = PALETTE[2]
UNREACHED_COLOR = (0.5, 0.5, 0.5)

HEATMAP_CMAP = "YlGnBu"
ANNOTATE_MAX_VERTICES = 20  # larger tables get no per-cell weight labels
FIGURE_FORMATS = ("png", "svg")


def apply_style() -> None:
    """Set the whitegrid theme and print-quality rcParams. Idempotent."""
    sns.set_theme(style="whitegrid", palette=PALETTE)
    plt.rcParams.update({
        "figure.dpi": 150,
        "savefig.dpi": 300,
        "savefig.bbox": "tight",
        "font.size": 10,
        "axes.titlesize": 12,
        "axes.labelsize": 11,
        "legend.fontsize": 9,
        "svg.fonttype": "none",
    })


def vertex_figsize(n: int, per_vertex: float, minimum: float, height: float | None = None) -> tuple[float, float]:
    """Figure size that grows with the vertex count.

    With height=None the figure is square-ish (for n x n tables); otherwise
    only the width scales.
    """
    width = max(minimum, n * per_vertex)
    return (width + 1, width) if height is None else (width, height)


def save_figure(fig: plt.Figure, output_dir: Path, name: str) -> tuple[Path, ...]:
    """Write fig once per FIGURE_FORMATS entry, then close it.

    Args:
        fig: Matplotlib figure to save.
        output_dir: Directory to write into. Created if absent.
        name: Base filename (without extension).

    Returns:
        Written paths in FIGURE_FORMATS order (PNG first, then SVG).
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = tuple(output_dir / f"{name}.{ext}" for ext in FIGURE_FORMATS)
    for path in paths:
        fig.savefig(path)
    plt.close(fig)
    return paths
