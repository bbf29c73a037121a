"""Walk controller: roulette-driven forward moves with dead-end backtracking.

Each step consults the map for a likelihood-weighted choice among the
neighbours of the current vertex that are neither on the path nor
excluded. On a dead end the current vertex is excluded and the walk pops
one vertex off its path, retrying until it can move forward again.
"""

import logging

import numpy as np

from src.config.simulation import EXHAUSTION_POLICIES, SimulationConfig
from src.grid.aco_map import AcoMap
from src.grid.types import Vertex
from src.roulette.selector import RouletteSelector
from src.walk.types import (
    EXCLUSION_CAPACITY,
    PathExhaustedError,
    WalkState,
    WalkSummary,
)

log = logging.getLogger(__name__)


class WalkController:
    """Drives a single walker across an AcoMap.

    Args:
        aco_map: Map providing neighbourhoods and likelihoods.
        start: Starting vertex, must lie inside the grid.
        selector: Roulette selector holding the random source.
        exclusion_capacity: Size of the abandoned-vertex FIFO.
        on_exhausted: "reset" clears the exclusions and continues when the
            walk backtracks past its start; "raise" raises
            PathExhaustedError instead.

    Raises:
        IndexError: If start lies outside the grid.
        ValueError: If on_exhausted is not a known policy.
    """

    def __init__(
        self,
        aco_map: AcoMap,
        start: Vertex,
        selector: RouletteSelector[Vertex],
        exclusion_capacity: int = EXCLUSION_CAPACITY,
        on_exhausted: str = "reset",
    ) -> None:
        if on_exhausted not in EXHAUSTION_POLICIES:
            raise ValueError(
                f"on_exhausted must be one of {EXHAUSTION_POLICIES}, "
                f"got {on_exhausted!r}"
            )
        aco_map.grid.linear_index(start)
        self.map = aco_map
        self.selector = selector
        self.on_exhausted = on_exhausted
        self.state = WalkState.start_at(start, exclusion_capacity)
        self.visit_counts = np.zeros(
            (aco_map.height, aco_map.width), dtype=np.int64
        )
        self.visit_counts[start.y, start.x] += 1

    @classmethod
    def from_config(
        cls,
        aco_map: AcoMap,
        config: SimulationConfig,
        rng: np.random.Generator,
    ) -> "WalkController":
        return cls(
            aco_map,
            Vertex(*config.walk.start),
            RouletteSelector(rng),
            exclusion_capacity=config.walk.exclusion_capacity,
            on_exhausted=config.walk.on_exhausted,
        )

    def step(self) -> Vertex:
        """Advance the walk by one vertex, backtracking as often as needed.

        Returns:
            The new current vertex.

        Raises:
            PathExhaustedError: If the walk cannot move and has no path to
                backtrack along (always under the "raise" policy, and under
                "reset" when clearing the exclusions does not help).
        """
        state = self.state
        reset_done = False
        while True:
            nxt = self.map.next_vertex(state.current, self.selector, state.blocked())
            if nxt is not None:
                state.advance(nxt)
                self.visit_counts[nxt.y, nxt.x] += 1
                return nxt

            if state.path:
                abandoned = state.backtrack()
                log.debug(
                    "Dead end at (%d, %d), back to (%d, %d), %d excluded",
                    abandoned.x, abandoned.y,
                    state.current.x, state.current.y,
                    len(state.exclusions),
                )
                continue

            if self.on_exhausted == "raise" or reset_done:
                raise PathExhaustedError(state.current)

            state.exclusions.clear()
            state.exhaustions += 1
            reset_done = True
            log.warning(
                "Path exhausted at (%d, %d) after %d steps; clearing exclusions",
                state.current.x, state.current.y, state.steps,
            )

    def run(self, n_steps: int) -> WalkSummary:
        """Run n_steps steps and summarise the walk so far.

        Args:
            n_steps: Number of forward moves to make.

        Returns:
            WalkSummary covering the whole walk, with the trajectory of this
            call only.
        """
        trajectory = np.zeros(n_steps, dtype=np.int32)
        grid = self.map.grid
        log.info(
            "Running %d steps from (%d, %d)",
            n_steps, self.state.current.x, self.state.current.y,
        )
        for i in range(n_steps):
            trajectory[i] = grid.linear_index(self.step())

        summary = self.summary(trajectory)
        log.info(
            "Walk finished: %d steps, %d backtracks, %d exhaustions, "
            "%d distinct vertices, path length %d",
            summary.steps, summary.backtracks, summary.exhaustions,
            summary.distinct_visited, summary.path_length,
        )
        return summary

    def summary(self, trajectory: np.ndarray | None = None) -> WalkSummary:
        state = self.state
        return WalkSummary(
            steps=state.steps,
            backtracks=state.backtracks,
            exhaustions=state.exhaustions,
            path_length=len(state.path),
            final_vertex=state.current,
            trajectory=(
                trajectory if trajectory is not None
                else np.zeros(0, dtype=np.int32)
            ),
            visit_counts=self.visit_counts.copy(),
        )
