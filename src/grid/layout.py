"""Screen layout of grid vertices for rendering collaborators."""

from src.grid.types import Vertex


def vertex_to_screen(
    window_size: tuple[float, float],
    vertex: Vertex,
    width: int,
    height: int,
) -> tuple[float, float]:
    """Pixel coordinates of vertex in a window of window_size.

    Columns and rows are spaced evenly across the window, and every vertex
    sits at the centre of its cell (half-cell margin on each side). Pure
    and injective for a fixed window and grid.

    Args:
        window_size: (window width, window height) in pixels.
        vertex: Grid vertex to place.
        width: Number of grid columns.
        height: Number of grid rows.

    Returns:
        (x, y) pixel coordinates as floats.
    """
    x_spacing = window_size[0] / width
    y_spacing = window_size[1] / height
    x = x_spacing / 2.0 + vertex.x * x_spacing
    y = y_spacing / 2.0 + vertex.y * y_spacing
    return (x, y)
