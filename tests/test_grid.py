"""Tests for the Grid module."""

import numpy as np
import pytest

from browser_snake.grid import CellType, Grid


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.size == 20
        assert grid.cells.shape == (20, 20)

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 1"):
            Grid(size=0)

    def test_all_cells_start_empty(self):
        grid = Grid(size=5)
        assert np.all(grid.cells == CellType.EMPTY)


class TestGridOperations:
    def test_set_and_get(self):
        grid = Grid(size=5)
        grid.set(3, 1, CellType.SNAKE)
        assert grid.get(3, 1) == CellType.SNAKE
        # Stored row-major: cells[y, x].
        assert grid.cells[1, 3] == CellType.SNAKE

    def test_clear(self):
        grid = Grid(size=5)
        grid.set(0, 0, CellType.SNAKE)
        grid.set(1, 1, CellType.FOOD)
        grid.clear()
        assert np.all(grid.cells == CellType.EMPTY)

    def test_wrap(self):
        grid = Grid(size=20)
        assert grid.wrap(-1, 7) == (19, 7)
        assert grid.wrap(20, 7) == (0, 7)
        assert grid.wrap(7, -1) == (7, 19)
        assert grid.wrap(7, 20) == (7, 0)
        assert grid.wrap(3, 4) == (3, 4)


class TestGridPaint:
    def test_paint_marks_snake_and_food(self):
        grid = Grid(size=5)
        cells = grid.paint([(1, 1), (0, 1)], (3, 4))
        assert cells[1, 1] == CellType.SNAKE
        assert cells[1, 0] == CellType.SNAKE
        assert cells[4, 3] == CellType.FOOD
        assert int((cells == CellType.EMPTY).sum()) == 22

    def test_snake_hides_food_underneath(self):
        grid = Grid(size=5)
        grid.paint([(2, 2)], (2, 2))
        assert grid.get(2, 2) == CellType.SNAKE

    def test_paint_clears_previous_frame(self):
        grid = Grid(size=5)
        grid.paint([(0, 0)], (4, 4))
        grid.paint([(1, 0)], (3, 3))
        assert grid.get(0, 0) == CellType.EMPTY
        assert grid.get(4, 4) == CellType.EMPTY


class TestGridSerialization:
    def test_to_dict_structure(self):
        grid = Grid(size=5)
        d = grid.to_dict()
        assert d["size"] == 5
        assert len(d["cells"]) == 5
        assert len(d["cells"][0]) == 5

    def test_to_dict_reflects_state(self):
        grid = Grid(size=4)
        grid.set(2, 1, CellType.FOOD)
        d = grid.to_dict()
        assert d["cells"][1][2] == CellType.FOOD
