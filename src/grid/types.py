"""Grid value types: vertices and the coordinate <-> linear index bijection."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vertex:
    """A cell of the grid graph, identified by its (x, y) coordinates.

    Vertices are plain values: two vertices with the same coordinates are
    the same vertex. Whether a vertex lies inside a particular grid is
    checked by GridIndex, not here.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(
                f"Vertex coordinates must be non-negative, got ({self.x}, {self.y})"
            )

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class GridIndex:
    """Maps grid coordinates to a linear vertex index and back.

    linear_index(v) = v.x + v.y * width, so vertices are stored row by row.
    """

    width: int
    height: int

    @property
    def n_vertices(self) -> int:
        return self.width * self.height

    def contains(self, vertex: Vertex) -> bool:
        return vertex.x < self.width and vertex.y < self.height

    def linear_index(self, vertex: Vertex) -> int:
        """Linear index of vertex.

        Raises:
            IndexError: If the vertex lies outside the grid.
        """
        if not self.contains(vertex):
            raise IndexError(
                f"Vertex ({vertex.x}, {vertex.y}) outside "
                f"{self.width}x{self.height} grid"
            )
        return vertex.x + vertex.y * self.width

    def vertex_at(self, index: int) -> Vertex:
        """Inverse of linear_index."""
        if not 0 <= index < self.n_vertices:
            raise IndexError(
                f"Linear index {index} outside [0, {self.n_vertices})"
            )
        y, x = divmod(index, self.width)
        return Vertex(x, y)
