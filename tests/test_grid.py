"""Tests for grid construction, validation and lookup."""

import numpy as np
import pytest

from mazecost.api.grid import Grid, GridError
from mazecost.api.models import Cell


MAZE_ROWS = [
    "#####",
    "#S..#",
    "#.#E#",
    "#####",
]


class TestFromRows:
    """Tests for building a grid from text rows."""

    def test_basic_maze(self):
        grid = Grid.from_rows(MAZE_ROWS)

        assert grid.width == 5
        assert grid.height == 4
        assert grid.start == Cell(1, 1)
        assert grid.end == Cell(3, 2)
        assert grid.open_cells() == 5

    def test_round_trip_to_rows(self):
        assert Grid.from_rows(MAZE_ROWS).to_rows() == MAZE_ROWS

    def test_ragged_row_is_rejected(self):
        with pytest.raises(GridError, match="Row 1"):
            Grid.from_rows(["S..", "..", "..E"])

    def test_missing_start(self):
        with pytest.raises(GridError, match="no start"):
            Grid.from_rows(["...", "..E"])

    def test_missing_end(self):
        with pytest.raises(GridError, match="no end"):
            Grid.from_rows(["S..", "..."])

    def test_duplicate_start(self):
        with pytest.raises(GridError, match="2 start"):
            Grid.from_rows(["S.S", "..E"])

    def test_duplicate_end(self):
        with pytest.raises(GridError, match="2 end"):
            Grid.from_rows(["S.E", "..E"])

    def test_unknown_character(self):
        with pytest.raises(GridError, match="Unexpected"):
            Grid.from_rows(["S.x", "..E"])

    def test_no_rows(self):
        with pytest.raises(GridError):
            Grid.from_rows([])

    def test_grid_error_is_value_error(self):
        assert issubclass(GridError, ValueError)


class TestConstructor:
    """Tests for building a grid from a wall array."""

    def test_start_must_be_open(self):
        walls = np.zeros((2, 2), dtype=bool)
        walls[0, 0] = True
        with pytest.raises(GridError, match="start"):
            Grid(walls, Cell(0, 0), Cell(1, 1))

    def test_end_must_be_in_bounds(self):
        with pytest.raises(GridError, match="end"):
            Grid(np.zeros((2, 2), dtype=bool), Cell(0, 0), Cell(2, 0))

    def test_one_dimensional_array_rejected(self):
        with pytest.raises(GridError):
            Grid(np.zeros(4, dtype=bool), Cell(0, 0), Cell(1, 0))

    def test_caller_array_is_copied(self):
        walls = np.zeros((2, 2), dtype=bool)
        grid = Grid(walls, Cell(0, 0), Cell(1, 1))
        walls[0, 1] = True
        assert grid.is_open(Cell(1, 0))

    def test_walls_are_read_only(self):
        grid = Grid.from_rows(MAZE_ROWS)
        with pytest.raises(ValueError):
            grid.walls[1, 2] = True


class TestLookup:
    """Tests for cell lookup and bounds checks."""

    def test_is_open(self):
        grid = Grid.from_rows(MAZE_ROWS)
        assert grid.is_open(Cell(2, 1))
        assert not grid.is_open(Cell(2, 2))
        assert grid.is_wall(Cell(0, 0))

    def test_out_of_bounds_is_not_open(self):
        grid = Grid.from_rows(MAZE_ROWS)
        for cell in (Cell(-1, 1), Cell(5, 1), Cell(1, -1), Cell(1, 4)):
            assert not grid.in_bounds(cell)
            assert not grid.is_open(cell)

    def test_cells_lists_open_cells_row_major(self):
        grid = Grid.from_rows(MAZE_ROWS)
        assert list(grid.cells()) == [
            Cell(1, 1), Cell(2, 1), Cell(3, 1), Cell(1, 2), Cell(3, 2),
        ]


class TestWithWall:
    """Tests for deriving a grid with an extra wall."""

    def test_adds_wall_without_touching_original(self):
        grid = Grid.from_rows(MAZE_ROWS)
        walled = grid.with_wall(Cell(2, 1))

        assert walled.is_wall(Cell(2, 1))
        assert grid.is_open(Cell(2, 1))
        assert walled.start == grid.start
        assert walled.end == grid.end

    @pytest.mark.parametrize("cell", [Cell(1, 1), Cell(3, 2), Cell(9, 9)])
    def test_rejects_start_end_and_out_of_bounds(self, cell):
        with pytest.raises(GridError):
            Grid.from_rows(MAZE_ROWS).with_wall(cell)
