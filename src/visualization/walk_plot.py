"""Snapshot of a walk in window coordinates.

Draws every grid vertex as a small gray marker, the path as a green
polyline ending at the current vertex, excluded vertices in orange, and
the current vertex in red. All positions go through vertex_to_screen, so
the figure matches what an interactive shell would draw.
"""

import matplotlib.pyplot as plt
import numpy as np

from src.grid.aco_map import AcoMap
from src.walk.types import WalkState
from src.visualization.style import (
    CURRENT_COLOR,
    EXCLUDED_COLOR,
    PATH_COLOR,
    VERTEX_COLOR,
)


def plot_walk(
    aco_map: AcoMap,
    state: WalkState,
    window_size: tuple[int, int] = (1200, 1200),
) -> plt.Figure:
    """Plot the grid, the walk path and the current vertex.

    Args:
        aco_map: Map the walk runs on.
        state: Walk state to draw (read only).
        window_size: Window size in pixels used for the layout.

    Returns:
        The matplotlib Figure.
    """
    grid = aco_map.grid
    points = np.array([
        aco_map.vertex_to_screen(window_size, grid.vertex_at(i))
        for i in range(grid.n_vertices)
    ])

    fig, ax = plt.subplots()
    marker_size = max(1.0, 400.0 / max(aco_map.width, aco_map.height))
    ax.scatter(points[:, 0], points[:, 1], s=marker_size, color=VERTEX_COLOR, zorder=1)

    if state.exclusions:
        excluded = np.array([
            aco_map.vertex_to_screen(window_size, v) for v in state.exclusions
        ])
        ax.scatter(
            excluded[:, 0], excluded[:, 1],
            s=marker_size * 2, color=EXCLUDED_COLOR, zorder=2, label="excluded",
        )

    line = np.array([
        aco_map.vertex_to_screen(window_size, v)
        for v in [*state.path, state.current]
    ])
    ax.plot(line[:, 0], line[:, 1], color=PATH_COLOR, linewidth=1.0, zorder=3, label="path")

    cx, cy = aco_map.vertex_to_screen(window_size, state.current)
    ax.scatter([cx], [cy], s=40, color=CURRENT_COLOR, zorder=4, label="current")

    ax.set_xlim(0, window_size[0])
    ax.set_ylim(window_size[1], 0)  # screen coordinates grow downwards
    ax.set_aspect("equal")
    ax.set_title(
        f"Walk on {aco_map.width}x{aco_map.height} grid: "
        f"{state.steps} steps, path length {len(state.path)}"
    )
    ax.legend(loc="upper right")
    fig.tight_layout()
    return fig
