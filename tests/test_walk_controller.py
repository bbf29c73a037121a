"""Tests for the walk controller.

Covers forward moves, backtracking into the exclusion FIFO, the
exclusion capacity, the path/exclusion invariant at selection time, and
both path-exhaustion policies.
"""

import numpy as np
import pytest

from src.config.simulation import MapConfig, SimulationConfig, WalkConfig
from src.grid.aco_map import AcoMap
from src.grid.neighborhood import neighbours
from src.grid.types import Vertex
from src.roulette.selector import RouletteSelector
from src.walk.controller import WalkController
from src.walk.types import EXCLUSION_CAPACITY, PathExhaustedError, WalkState


class _CheckingSelector(RouletteSelector):
    """Selector that asserts no candidate is on the path or excluded."""

    def __init__(self, rng: np.random.Generator, state_ref: list) -> None:
        super().__init__(rng)
        self.state_ref = state_ref
        self.calls = 0

    def select(self, candidates):
        state: WalkState = self.state_ref[0]
        for _, v in candidates:
            assert v not in state.path
            assert v not in state.exclusions
            assert v != state.current
        self.calls += 1
        return super().select(candidates)


def _controller(
    width: int = 5,
    height: int = 5,
    start: Vertex = Vertex(2, 2),
    seed: int = 0,
    **kwargs,
) -> WalkController:
    aco_map = AcoMap(width, height, 0.5)
    return WalkController(
        aco_map, start, RouletteSelector(np.random.default_rng(seed)), **kwargs
    )


class TestWalkState:

    def test_advance_pushes_current(self) -> None:
        state = WalkState.start_at(Vertex(0, 0))
        state.advance(Vertex(1, 0))
        assert state.path == [Vertex(0, 0)]
        assert state.current == Vertex(1, 0)
        assert state.steps == 1
        assert Vertex(0, 0) in state.blocked()

    def test_backtrack_excludes_and_pops(self) -> None:
        state = WalkState.start_at(Vertex(0, 0))
        state.advance(Vertex(1, 0))
        abandoned = state.backtrack()
        assert abandoned == Vertex(1, 0)
        assert state.current == Vertex(0, 0)
        assert state.path == []
        assert list(state.exclusions) == [Vertex(1, 0)]
        assert Vertex(1, 0) in state.blocked()
        assert Vertex(0, 0) not in state.blocked()
        assert state.backtracks == 1

    def test_exclusions_bounded_fifo(self) -> None:
        state = WalkState.start_at(Vertex(0, 0))
        for i in range(EXCLUSION_CAPACITY + 10):
            state.exclusions.append(Vertex(i, 0))
        assert len(state.exclusions) == EXCLUSION_CAPACITY
        assert state.exclusions[0] == Vertex(10, 0)
        assert state.exclusions[-1] == Vertex(EXCLUSION_CAPACITY + 9, 0)

    def test_default_capacity_is_150(self) -> None:
        assert EXCLUSION_CAPACITY == 150
        assert WalkState.start_at(Vertex(0, 0)).exclusions.maxlen == 150


class TestStep:

    def test_step_moves_to_a_neighbour(self) -> None:
        ctrl = _controller()
        start = ctrl.state.current
        nxt = ctrl.step()
        assert nxt in neighbours(start, 5, 5)
        assert ctrl.state.path == [start]
        assert ctrl.state.current == nxt

    def test_current_never_on_path(self) -> None:
        ctrl = _controller(width=6, height=6, seed=3)
        for _ in range(2000):
            ctrl.step()
            assert ctrl.state.current not in ctrl.state.path
            assert len(set(ctrl.state.path)) == len(ctrl.state.path)

    def test_never_selects_path_or_excluded_vertex(self) -> None:
        aco_map = AcoMap(4, 4, 0.5)
        state_ref: list = []
        selector = _CheckingSelector(np.random.default_rng(11), state_ref)
        ctrl = WalkController(aco_map, Vertex(0, 0), selector)
        state_ref.append(ctrl.state)
        for _ in range(3000):
            ctrl.step()
        assert selector.calls >= 3000

    def test_consecutive_vertices_adjacent(self) -> None:
        ctrl = _controller(width=7, height=5, seed=8)
        prev = ctrl.state.current
        for _ in range(500):
            path_before = list(ctrl.state.path)
            nxt = ctrl.step()
            # the move is from the vertex the step ended on before advancing
            origin = ctrl.state.path[-1]
            assert nxt in neighbours(origin, 7, 5)
            assert origin == prev or origin in path_before
            prev = nxt

    def test_exclusions_never_exceed_capacity(self) -> None:
        ctrl = _controller(width=10, height=10, seed=4, exclusion_capacity=20)
        for _ in range(5000):
            ctrl.step()
            assert len(ctrl.state.exclusions) <= 20

    def test_forced_backtrack(self) -> None:
        """On a 1x3 strip starting at one end the walk must backtrack."""
        ctrl = _controller(width=3, height=1, start=Vertex(0, 0))
        assert ctrl.step() == Vertex(1, 0)
        assert ctrl.step() == Vertex(2, 0)
        # (2, 0) is a dead end: exclude it, back to (1, 0), which is also
        # a dead end, back to (0, 0), exhausted, reset, forward again.
        assert ctrl.step() == Vertex(1, 0)
        assert ctrl.state.backtracks == 2
        assert ctrl.state.exhaustions == 1
        assert ctrl.state.path == [Vertex(0, 0)]

    def test_visit_counts(self) -> None:
        ctrl = _controller(width=4, height=4, seed=2)
        summary = ctrl.run(100)
        assert summary.visit_counts.shape == (4, 4)
        assert summary.visit_counts.sum() == 101  # start + one per step


class TestExhaustion:

    def test_raise_policy(self) -> None:
        ctrl = _controller(width=2, height=1, start=Vertex(0, 0), on_exhausted="raise")
        assert ctrl.step() == Vertex(1, 0)
        with pytest.raises(PathExhaustedError) as excinfo:
            ctrl.step()
        assert excinfo.value.vertex == Vertex(0, 0)
        assert ctrl.state.current == Vertex(0, 0)
        assert ctrl.state.path == []

    def test_reset_policy_clears_exclusions(self) -> None:
        ctrl = _controller(width=2, height=1, start=Vertex(0, 0))
        ctrl.step()
        assert ctrl.step() == Vertex(1, 0)
        assert ctrl.state.exhaustions == 1
        assert list(ctrl.state.exclusions) == []

    def test_single_cell_grid_raises_even_with_reset(self) -> None:
        ctrl = _controller(width=1, height=1, start=Vertex(0, 0))
        with pytest.raises(PathExhaustedError):
            ctrl.step()

    def test_zero_pheromone_raises_instead_of_looping(self) -> None:
        aco_map = AcoMap(3, 3, 0.5, initial_pheromone=0.0)
        ctrl = WalkController(
            aco_map, Vertex(1, 1), RouletteSelector(np.random.default_rng(0))
        )
        with pytest.raises(PathExhaustedError):
            ctrl.step()

    def test_reset_is_logged(self, caplog) -> None:
        ctrl = _controller(width=2, height=1, start=Vertex(0, 0))
        ctrl.step()
        with caplog.at_level("WARNING", logger="src.walk.controller"):
            ctrl.step()
        assert "Path exhausted" in caplog.text


class TestConstruction:

    def test_start_outside_grid(self) -> None:
        with pytest.raises(IndexError):
            _controller(width=3, height=3, start=Vertex(3, 0))

    def test_unknown_policy(self) -> None:
        with pytest.raises(ValueError, match="on_exhausted"):
            _controller(on_exhausted="ignore")

    def test_from_config(self) -> None:
        config = SimulationConfig(
            map=MapConfig(width=8, height=6),
            walk=WalkConfig(start=(3, 4), exclusion_capacity=12, on_exhausted="raise"),
        )
        aco_map = AcoMap.from_config(config.map)
        ctrl = WalkController.from_config(aco_map, config, np.random.default_rng(0))
        assert ctrl.state.current == Vertex(3, 4)
        assert ctrl.state.exclusions.maxlen == 12
        assert ctrl.on_exhausted == "raise"


class TestRun:

    def test_run_summary(self) -> None:
        ctrl = _controller(width=6, height=6, seed=5)
        summary = ctrl.run(300)
        assert summary.steps == 300
        assert summary.trajectory.shape == (300,)
        assert summary.trajectory.dtype == np.int32
        assert summary.final_vertex == ctrl.state.current
        assert summary.path_length == len(ctrl.state.path)
        assert summary.trajectory[-1] == ctrl.map.grid.linear_index(ctrl.state.current)
        assert 1 < summary.distinct_visited <= 36

    def test_run_zero_steps(self) -> None:
        ctrl = _controller()
        summary = ctrl.run(0)
        assert summary.steps == 0
        assert summary.trajectory.shape == (0,)
        assert summary.distinct_visited == 1
