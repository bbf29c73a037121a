"""Tests for grid vertices, the linear index, and the edge-weight store."""

import numpy as np
import pytest
from dataclasses import FrozenInstanceError

from src.grid.types import GridIndex, Vertex
from src.grid.weights import EdgeWeightStore


class TestVertex:
    """Vertices are immutable values."""

    def test_value_equality(self) -> None:
        assert Vertex(2, 3) == Vertex(2, 3)
        assert Vertex(2, 3) != Vertex(3, 2)

    def test_hashable(self) -> None:
        assert len({Vertex(1, 1), Vertex(1, 1), Vertex(0, 1)}) == 2

    def test_frozen(self) -> None:
        v = Vertex(1, 2)
        with pytest.raises(FrozenInstanceError):
            v.x = 5  # type: ignore[misc]

    def test_negative_coordinates_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Vertex(-1, 0)

    def test_as_tuple(self) -> None:
        assert Vertex(4, 7).as_tuple() == (4, 7)


class TestGridIndex:
    """Coordinate <-> linear index bijection."""

    def test_linear_index_formula(self) -> None:
        grid = GridIndex(width=5, height=4)
        assert grid.linear_index(Vertex(0, 0)) == 0
        assert grid.linear_index(Vertex(4, 0)) == 4
        assert grid.linear_index(Vertex(0, 1)) == 5
        assert grid.linear_index(Vertex(3, 2)) == 3 + 2 * 5

    def test_bijection(self) -> None:
        grid = GridIndex(width=7, height=3)
        seen = set()
        for y in range(3):
            for x in range(7):
                idx = grid.linear_index(Vertex(x, y))
                assert grid.vertex_at(idx) == Vertex(x, y)
                seen.add(idx)
        assert seen == set(range(grid.n_vertices))

    def test_out_of_grid_fails_loudly(self) -> None:
        grid = GridIndex(width=3, height=3)
        with pytest.raises(IndexError):
            grid.linear_index(Vertex(3, 0))
        with pytest.raises(IndexError):
            grid.linear_index(Vertex(0, 3))

    def test_vertex_at_out_of_range(self) -> None:
        grid = GridIndex(width=3, height=3)
        with pytest.raises(IndexError):
            grid.vertex_at(9)
        with pytest.raises(IndexError):
            grid.vertex_at(-1)

    def test_contains(self) -> None:
        grid = GridIndex(width=2, height=5)
        assert grid.contains(Vertex(1, 4))
        assert not grid.contains(Vertex(2, 4))


class TestEdgeWeightStore:
    """Dense N x N directed weight table."""

    def test_shape_is_n_by_n(self) -> None:
        store = EdgeWeightStore(GridIndex(4, 3), default=1.0)
        assert store.shape == (12, 12)

    def test_zero_diagonal_and_default_off_diagonal(self) -> None:
        store = EdgeWeightStore(GridIndex(3, 3), default=2.5)
        mat = store.as_array()
        assert np.all(np.diag(mat) == 0.0)
        off = mat[~np.eye(9, dtype=bool)]
        assert np.all(off == np.float32(2.5))

    def test_float32_storage(self) -> None:
        store = EdgeWeightStore(GridIndex(2, 2))
        assert store.as_array().dtype == np.float32

    def test_get_set_directed(self) -> None:
        store = EdgeWeightStore(GridIndex(3, 3), default=1.0)
        a, b = Vertex(0, 0), Vertex(1, 1)
        store.set(a, b, 4.0)
        assert store.get(a, b) == 4.0
        assert store.get(b, a) == 1.0

    def test_entry_layout_col_row(self) -> None:
        """Entry (col, row) holds the edge from linear index row to col."""
        grid = GridIndex(3, 3)
        store = EdgeWeightStore(grid)
        a, b = Vertex(2, 0), Vertex(0, 1)
        store.set(a, b, 7.0)
        mat = store.as_array()
        assert mat[grid.linear_index(b), grid.linear_index(a)] == 7.0

    def test_out_of_grid_access_raises(self) -> None:
        store = EdgeWeightStore(GridIndex(2, 2))
        with pytest.raises(IndexError):
            store.get(Vertex(0, 0), Vertex(2, 0))
        with pytest.raises(IndexError):
            store.set(Vertex(5, 5), Vertex(0, 0), 1.0)

    def test_fill_keeps_zero_diagonal(self) -> None:
        store = EdgeWeightStore(GridIndex(2, 2), default=1.0)
        store.fill(3.0)
        mat = store.as_array()
        assert np.all(np.diag(mat) == 0.0)
        assert store.get(Vertex(0, 0), Vertex(1, 0)) == 3.0

    def test_scale(self) -> None:
        store = EdgeWeightStore(GridIndex(2, 2), default=2.0)
        store.scale(0.5)
        assert store.get(Vertex(0, 0), Vertex(1, 1)) == pytest.approx(1.0)

    def test_frozen_store_rejects_writes(self) -> None:
        store = EdgeWeightStore(GridIndex(2, 2), default=1.0)
        store.freeze()
        assert store.frozen
        with pytest.raises(ValueError):
            store.set(Vertex(0, 0), Vertex(1, 0), 2.0)
        assert store.get(Vertex(0, 0), Vertex(1, 0)) == 1.0

    def test_as_array_is_read_only(self) -> None:
        store = EdgeWeightStore(GridIndex(2, 2), default=1.0)
        view = store.as_array()
        with pytest.raises(ValueError):
            view[0, 1] = 9.0
        # the store itself stays writable
        store.set(Vertex(0, 0), Vertex(1, 0), 2.0)
        assert not store.frozen
