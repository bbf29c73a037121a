"""Orchestrator: render all figures for a finished walk.

Applies the project style, draws each figure type and saves it as
PNG + SVG into the output directory.
"""

import logging
from pathlib import Path

from src.grid.aco_map import AcoMap
from src.visualization.heatmap import plot_visit_heatmap
from src.visualization.style import apply_style, save_figure
from src.visualization.walk_plot import plot_walk
from src.walk.types import WalkState, WalkSummary

log = logging.getLogger(__name__)


def render_all(
    aco_map: AcoMap,
    state: WalkState,
    summary: WalkSummary,
    output_dir: str | Path,
    window_size: tuple[int, int] = (1200, 1200),
) -> list[Path]:
    """Generate every walk figure.

    A failing figure is logged and skipped; the others are still written.

    Args:
        aco_map: Map the walk ran on.
        state: Final walk state.
        summary: Summary returned by WalkController.run().
        output_dir: Directory for the figure files.
        window_size: Window size used to lay out vertices.

    Returns:
        List of written file paths.
    """
    output_dir = Path(output_dir)
    apply_style()
    generated: list[Path] = []

    try:
        fig = plot_walk(aco_map, state, window_size)
        generated.extend(save_figure(fig, output_dir, "walk"))
        log.info("Generated: walk")
    except Exception as e:
        log.warning("Failed to generate walk: %s", e)

    try:
        fig = plot_visit_heatmap(summary.visit_counts)
        generated.extend(save_figure(fig, output_dir, "visit_heatmap"))
        log.info("Generated: visit_heatmap")
    except Exception as e:
        log.warning("Failed to generate visit_heatmap: %s", e)

    log.info("Rendered %d files to %s", len(generated), output_dir)
    return generated
