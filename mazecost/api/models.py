"""
Data models for the maze search.

These value types describe positions, facings and search states on an
oriented grid. All of them are immutable and hashable so they can key
the search tables directly.
"""

from dataclasses import dataclass
from enum import Enum


# Cost of moving one cell forward / rotating 90 degrees in place
MOVE_COST = 1
TURN_COST = 1000


class Facing(Enum):
    """Cardinal facings, in clockwise order."""

    N = "^"
    E = ">"
    S = "v"
    W = "<"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this facing. Rows grow downward."""
        deltas = {
            Facing.N: (0, -1),
            Facing.E: (1, 0),
            Facing.S: (0, 1),
            Facing.W: (-1, 0),
        }
        return deltas[self]

    @property
    def index(self) -> int:
        """Position in clockwise order, starting at North."""
        return _CLOCKWISE.index(self)

    @property
    def symbol(self) -> str:
        """Arrow used when drawing this facing."""
        return self.value

    def rotate_right(self) -> "Facing":
        """Turn 90 degrees clockwise."""
        return _CLOCKWISE[(self.index + 1) % 4]

    def rotate_left(self) -> "Facing":
        """Turn 90 degrees counter-clockwise."""
        return _CLOCKWISE[(self.index - 1) % 4]

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> "Facing":
        """Get the facing for a unit vector."""
        for facing in cls:
            if facing.delta == (dx, dy):
                return facing
        raise ValueError(f"Not a unit vector: ({dx}, {dy})")


_CLOCKWISE = (Facing.N, Facing.E, Facing.S, Facing.W)

# Direction constants for iteration
CARDINAL_FACINGS = _CLOCKWISE


class Action(Enum):
    """A single state transition."""

    FORWARD = "forward"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"

    @property
    def cost(self) -> int:
        """Cost charged for taking this action."""
        return MOVE_COST if self is Action.FORWARD else TURN_COST


@dataclass(frozen=True, order=True)
class Cell:
    """A cell on the grid, as (column, row)."""

    x: int
    y: int

    def step(self, facing: Facing) -> "Cell":
        """Get the neighbouring cell one unit along a facing."""
        dx, dy = facing.delta
        return Cell(self.x + dx, self.y + dy)

    def manhattan_distance(self, other: "Cell") -> int:
        """Number of cardinal moves between two cells, ignoring walls."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class State:
    """A (cell, facing) pair: the unit explored by the search."""

    cell: Cell
    facing: Facing

    @property
    def sort_key(self) -> tuple[int, int, int]:
        """Deterministic ordering key (row-major cell, then facing)."""
        return (self.cell.y, self.cell.x, self.facing.index)

    def apply(self, action: Action) -> "State":
        """Get the state reached by taking an action (no wall checks)."""
        if action is Action.FORWARD:
            return State(self.cell.step(self.facing), self.facing)
        if action is Action.ROTATE_LEFT:
            return State(self.cell, self.facing.rotate_left())
        return State(self.cell, self.facing.rotate_right())

    def action_to(self, other: "State") -> Action:
        """
        Get the action that turns this state into another.

        Raises:
            ValueError: If no single action connects the two states
        """
        for action in Action:
            if self.apply(action) == other:
                return action
        raise ValueError(f"No single action leads from {self} to {other}")

    def __str__(self) -> str:
        return f"{self.cell}{self.facing.symbol}"
