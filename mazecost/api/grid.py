"""
Immutable wall map for the maze search.

A Grid is a rectangular boolean wall array (True = wall) with exactly one
start cell and one end cell, both open. It only answers lookup questions;
construction is where all structural validation happens.
"""

from typing import Iterable, Optional, Sequence

import numpy as np

from .models import Cell


WALL_CHAR = "#"
OPEN_CHAR = "."
START_CHAR = "S"
END_CHAR = "E"


class GridError(ValueError):
    """Structural problem with a maze (ragged rows, missing markers, ...)."""


class Grid:
    """A read-only maze with a start and an end cell."""

    def __init__(self, walls: np.ndarray, start: Cell, end: Cell):
        """
        Build a grid from a wall array.

        Args:
            walls: 2D array indexed [row, column]; True marks a wall
            start: Start cell (searched from facing East)
            end: Goal cell

        Raises:
            GridError: If the array is empty or not 2D, or if start/end
                are out of bounds or walls
        """
        walls = np.array(walls, dtype=bool)
        if walls.ndim != 2 or walls.size == 0:
            raise GridError(f"Wall map must be a non-empty 2D array, got shape {walls.shape}")
        walls.flags.writeable = False
        self._walls = walls

        for name, cell in (("start", start), ("end", end)):
            if not self.in_bounds(cell):
                raise GridError(f"{name} cell {cell} is outside the {self.width} x {self.height} grid")
            if self.is_wall(cell):
                raise GridError(f"{name} cell {cell} is a wall")

        self._start = start
        self._end = end

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        """
        Build a grid from text rows of '#', '.', 'S' and 'E'.

        Raises:
            GridError: On ragged rows, unknown characters, or a missing or
                duplicated start/end marker
        """
        if not rows:
            raise GridError("Maze has no rows")

        width = len(rows[0])
        starts: list[Cell] = []
        ends: list[Cell] = []
        walls = np.zeros((len(rows), width), dtype=bool)

        for y, row in enumerate(rows):
            if len(row) != width:
                raise GridError(f"Row {y} has length {len(row)}, expected {width}")
            for x, ch in enumerate(row):
                if ch == WALL_CHAR:
                    walls[y, x] = True
                elif ch == START_CHAR:
                    starts.append(Cell(x, y))
                elif ch == END_CHAR:
                    ends.append(Cell(x, y))
                elif ch != OPEN_CHAR:
                    raise GridError(f"Unexpected character {ch!r} at ({x},{y})")

        for name, found in (("start", starts), ("end", ends)):
            if not found:
                raise GridError(f"Maze has no {name} cell")
            if len(found) > 1:
                cells = ", ".join(str(c) for c in found)
                raise GridError(f"Maze has {len(found)} {name} cells: {cells}")

        return cls(walls, starts[0], ends[0])

    @property
    def width(self) -> int:
        return self._walls.shape[1]

    @property
    def height(self) -> int:
        return self._walls.shape[0]

    @property
    def start(self) -> Cell:
        return self._start

    @property
    def end(self) -> Cell:
        return self._end

    @property
    def walls(self) -> np.ndarray:
        """The read-only wall array, indexed [row, column]."""
        return self._walls

    def in_bounds(self, cell: Cell) -> bool:
        """Check if a cell lies inside the grid."""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def is_wall(self, cell: Cell) -> bool:
        """Check if an in-bounds cell is a wall."""
        return bool(self._walls[cell.y, cell.x])

    def is_open(self, cell: Cell) -> bool:
        """Check if a cell can be entered. Out-of-bounds cells never can."""
        return self.in_bounds(cell) and not self.is_wall(cell)

    def open_cells(self) -> int:
        """Number of open cells (start and end included)."""
        return int(self._walls.size - np.count_nonzero(self._walls))

    def with_wall(self, cell: Cell) -> "Grid":
        """
        Get a copy of this grid with one more wall.

        Raises:
            GridError: If the cell is out of bounds, or is the start or end
        """
        if not self.in_bounds(cell):
            raise GridError(f"Cannot wall {cell}: outside the grid")
        if cell in (self._start, self._end):
            raise GridError(f"Cannot wall {cell}: it is the start or end cell")
        walls = self._walls.copy()
        walls[cell.y, cell.x] = True
        return Grid(walls, self._start, self._end)

    def to_rows(self, overlay: Optional[dict[Cell, str]] = None) -> list[str]:
        """
        Render the grid back to text rows.

        Args:
            overlay: Optional characters drawn over open cells; start and
                end markers always win
        """
        overlay = overlay or {}
        rows = []
        for y in range(self.height):
            chars = []
            for x in range(self.width):
                cell = Cell(x, y)
                if cell == self._start:
                    chars.append(START_CHAR)
                elif cell == self._end:
                    chars.append(END_CHAR)
                elif self._walls[y, x]:
                    chars.append(WALL_CHAR)
                else:
                    chars.append(overlay.get(cell, OPEN_CHAR))
            rows.append("".join(chars))
        return rows

    def cells(self) -> Iterable[Cell]:
        """Iterate all open cells in row-major order."""
        for y, x in zip(*np.nonzero(~self._walls)):
            yield Cell(int(x), int(y))

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, start={self._start}, end={self._end})"
