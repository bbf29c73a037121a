"""Grid graph model: vertices, edge-weight tables, neighbourhoods, and the pheromone map."""

from src.grid.aco_map import (
    AcoMap,
    MapConstructionError,
    PheromoneUpdate,
    build_cost_table,
)
from src.grid.layout import vertex_to_screen
from src.grid.neighborhood import (
    SQRT_2,
    neighbours,
    neighbours_excluding,
    traversal_cost,
)
from src.grid.types import GridIndex, Vertex
from src.grid.weights import EdgeWeightStore

__all__ = [
    "AcoMap",
    "EdgeWeightStore",
    "GridIndex",
    "MapConstructionError",
    "PheromoneUpdate",
    "SQRT_2",
    "Vertex",
    "build_cost_table",
    "neighbours",
    "neighbours_excluding",
    "traversal_cost",
    "vertex_to_screen",
]
