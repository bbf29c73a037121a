"""Dense directed edge-weight table over the vertices of a grid.

The same structure backs both the static traversal-cost table and the
mutable pheromone table of a map.
"""

import numpy as np

from src.grid.types import GridIndex, Vertex


class EdgeWeightStore:
    """N x N float32 matrix of directed edge weights, N = width * height.

    Entry (col, row) holds the weight of the edge from the vertex with
    linear index row to the vertex with linear index col. The diagonal
    (self-edges) is always zero and carries no meaning.
    """

    def __init__(self, grid: GridIndex, default: float = 0.0) -> None:
        self.grid = grid
        n = grid.n_vertices
        self._mat = np.full((n, n), default, dtype=np.float32)
        np.fill_diagonal(self._mat, 0.0)

    @property
    def shape(self) -> tuple[int, int]:
        return self._mat.shape

    @property
    def frozen(self) -> bool:
        return not self._mat.flags.writeable

    def _cell(self, v0: Vertex, v1: Vertex) -> tuple[int, int]:
        row = self.grid.linear_index(v0)
        col = self.grid.linear_index(v1)
        return col, row

    def get(self, v0: Vertex, v1: Vertex) -> float:
        """Weight of the directed edge v0 -> v1."""
        return float(self._mat[self._cell(v0, v1)])

    def set(self, v0: Vertex, v1: Vertex, value: float) -> None:
        """Overwrite the weight of the directed edge v0 -> v1.

        Raises:
            ValueError: If the table has been frozen.
        """
        self._mat[self._cell(v0, v1)] = value

    def fill(self, value: float) -> None:
        """Set every off-diagonal entry to value."""
        self._mat.fill(value)
        np.fill_diagonal(self._mat, 0.0)

    def scale(self, factor: float) -> None:
        """Multiply every entry by factor (decay-style updates)."""
        self._mat *= np.float32(factor)

    def freeze(self) -> None:
        """Make the table read-only; later writes raise ValueError."""
        self._mat.flags.writeable = False

    def as_array(self) -> np.ndarray:
        """Read-only view of the underlying matrix."""
        view = self._mat.view()
        view.flags.writeable = False
        return view
