"""Static figures of a walk: path snapshot and visit heatmap."""

from src.visualization.heatmap import plot_visit_heatmap
from src.visualization.render import render_all
from src.visualization.style import apply_style, save_figure
from src.visualization.walk_plot import plot_walk

__all__ = [
    "render_all",
    "plot_walk",
    "plot_visit_heatmap",
    "apply_style",
    "save_figure",
]
