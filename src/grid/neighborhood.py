"""Chebyshev radius-1 neighbourhoods on a bounded grid and move costs."""

import math
from collections.abc import Container

from src.grid.types import Vertex

SQRT_2 = math.sqrt(2.0)
_OFFSETS = (-1, 0, 1)


def neighbours(vertex: Vertex, width: int, height: int) -> list[Vertex]:
    """All grid cells adjacent to vertex, diagonals included.

    Cells are enumerated with the x offset in the outer loop and the y
    offset in the inner loop. Callers must not attach meaning to the order.
    A vertex on a 1x1 grid has no neighbours.
    """
    result: list[Vertex] = []
    for dx in _OFFSETS:
        x = vertex.x + dx
        if x < 0 or x >= width:
            continue
        for dy in _OFFSETS:
            y = vertex.y + dy
            if y < 0 or y >= height or (dx == 0 and dy == 0):
                continue
            result.append(Vertex(x, y))
    return result


def neighbours_excluding(
    vertex: Vertex,
    width: int,
    height: int,
    exclusions: Container[Vertex],
) -> list[Vertex]:
    """Neighbours of vertex that are not contained in exclusions."""
    return [
        v for v in neighbours(vertex, width, height) if v not in exclusions
    ]


def traversal_cost(v0: Vertex, v1: Vertex) -> float:
    """Cost of moving between two adjacent vertices.

    sqrt(2) for a diagonal move, 1.0 for an orthogonal one. Symmetric.
    """
    if v0.x != v1.x and v0.y != v1.y:
        return SQRT_2
    return 1.0
