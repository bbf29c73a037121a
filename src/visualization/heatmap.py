"""Heatmap of how often the walk arrived at each grid vertex."""

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns


def plot_visit_heatmap(visit_counts: np.ndarray) -> plt.Figure:
    """Plot per-vertex visit counts.

    Args:
        visit_counts: Integer array of shape (height, width). Unvisited
            vertices are masked.

    Returns:
        The matplotlib Figure containing the heatmap.
    """
    height, width = visit_counts.shape
    fig, ax = plt.subplots(figsize=(max(5, width * 0.15), max(4, height * 0.15)))

    if not visit_counts.any():
        ax.text(
            0.5, 0.5, "No visits recorded",
            transform=ax.transAxes, ha="center", va="center",
            fontsize=12, color="gray",
        )
        ax.set_title("Vertex visits")
        return fig

    sns.heatmap(
        visit_counts,
        mask=visit_counts == 0,
        cmap="YlOrRd",
        annot=width * height <= 100,
        fmt="d",
        square=True,
        cbar_kws={"label": "Visits"},
        xticklabels=width <= 20,
        yticklabels=height <= 20,
        ax=ax,
    )
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(
        f"Vertex visits ({np.count_nonzero(visit_counts)} of {width * height} visited)"
    )
    fig.tight_layout()
    return fig
