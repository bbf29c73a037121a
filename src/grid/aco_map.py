"""Pheromone map over a grid graph.

Holds the static traversal-cost table and the mutable pheromone table and
turns them into per-edge desirabilities for the walk:

    likelihood(v0, v1) = pheromone(v0, v1) / cost(v0, v1)

Evaporation and reinforcement are left to a caller-supplied
PheromoneUpdate; the map only stores the evaporation rate.
"""

import logging
from collections.abc import Container
from typing import Protocol

from src.config.simulation import MapConfig
from src.grid.layout import vertex_to_screen
from src.grid.neighborhood import neighbours, neighbours_excluding, traversal_cost
from src.grid.types import GridIndex, Vertex
from src.grid.weights import EdgeWeightStore
from src.roulette.selector import RouletteSelector

log = logging.getLogger(__name__)


class MapConstructionError(ValueError):
    """Raised when a map is requested with invalid dimensions or evaporation rate."""


class PheromoneUpdate(Protocol):
    """Extension point for evaporation/reinforcement policies."""

    def __call__(self, pheromones: EdgeWeightStore, evaporation_rate: float) -> None:
        ...


def build_cost_table(grid: GridIndex) -> EdgeWeightStore:
    """Traversal cost of every edge between adjacent cells, frozen after build.

    Entries for non-adjacent pairs stay at zero and are never read.
    """
    costs = EdgeWeightStore(grid)
    for index in range(grid.n_vertices):
        v0 = grid.vertex_at(index)
        for v1 in neighbours(v0, grid.width, grid.height):
            costs.set(v0, v1, traversal_cost(v0, v1))
    costs.freeze()
    return costs


class AcoMap:
    """Grid map with cost and pheromone tables.

    Args:
        width: Number of grid columns (> 0).
        height: Number of grid rows (> 0).
        evaporation_rate: Stored for update policies, must be <= 1.0.
        initial_pheromone: Uniform starting pheromone on every edge.

    Raises:
        MapConstructionError: If width or height is not positive or
            evaporation_rate exceeds 1.0.
    """

    def __init__(
        self,
        width: int,
        height: int,
        evaporation_rate: float,
        initial_pheromone: float = 1.0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise MapConstructionError(
                f"Grid dimensions must be positive, got {width}x{height}"
            )
        if evaporation_rate > 1.0:
            raise MapConstructionError(
                f"evaporation_rate must be <= 1.0, got {evaporation_rate}"
            )
        self.grid = GridIndex(width, height)
        self.evaporation_rate = evaporation_rate
        self.costs = build_cost_table(self.grid)
        self.pheromones = EdgeWeightStore(self.grid, default=initial_pheromone)
        log.info(
            "Map built: %dx%d (%d vertices), evaporation_rate=%.3f, "
            "initial_pheromone=%.3f",
            width, height, self.grid.n_vertices,
            evaporation_rate, initial_pheromone,
        )

    @classmethod
    def from_config(cls, config: MapConfig) -> "AcoMap":
        return cls(
            config.width,
            config.height,
            config.evaporation_rate,
            initial_pheromone=config.initial_pheromone,
        )

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def cost(self, v0: Vertex, v1: Vertex) -> float:
        return self.costs.get(v0, v1)

    def pheromone(self, v0: Vertex, v1: Vertex) -> float:
        return self.pheromones.get(v0, v1)

    def set_pheromone(self, v0: Vertex, v1: Vertex, value: float) -> None:
        self.pheromones.set(v0, v1, value)

    def apply_pheromone_update(self, update: PheromoneUpdate) -> None:
        """Run an evaporation/reinforcement policy against the pheromone table."""
        update(self.pheromones, self.evaporation_rate)

    def neighbours(
        self, vertex: Vertex, exclusions: Container[Vertex] | None = None
    ) -> list[Vertex]:
        """In-grid neighbours of vertex, minus any in exclusions."""
        self.grid.linear_index(vertex)  # fail loudly on out-of-grid input
        if exclusions is None:
            return neighbours(vertex, self.width, self.height)
        return neighbours_excluding(vertex, self.width, self.height, exclusions)

    def likelihood(self, v0: Vertex, v1: Vertex) -> float:
        """Unnormalised desirability of moving from v0 to v1."""
        return self.pheromone(v0, v1) / self.cost(v0, v1)

    def weighted_neighbours(
        self, vertex: Vertex, exclusions: Container[Vertex] | None = None
    ) -> list[tuple[float, Vertex]]:
        """(likelihood, neighbour) pairs, computed fresh from the current tables."""
        return [
            (self.likelihood(vertex, n), n)
            for n in self.neighbours(vertex, exclusions)
        ]

    def next_vertex(
        self,
        current: Vertex,
        selector: RouletteSelector[Vertex],
        exclusions: Container[Vertex] | None = None,
    ) -> Vertex | None:
        """Roulette-select the next vertex from current.

        Returns None at a dead end: no admissible neighbour, or all of
        them with zero likelihood.
        """
        return selector.select(self.weighted_neighbours(current, exclusions))

    def vertex_to_screen(
        self, window_size: tuple[float, float], vertex: Vertex
    ) -> tuple[float, float]:
        """Pixel position of vertex in a window of the given size."""
        return vertex_to_screen(window_size, vertex, self.width, self.height)
