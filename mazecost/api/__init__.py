"""Grid model, parser and minimum-cost search."""

from .grid import Grid, GridError
from .models import (
    CARDINAL_FACINGS,
    MOVE_COST,
    TURN_COST,
    Action,
    Cell,
    Facing,
    State,
)
from .parser import load_grid, parse_grid
from .search import (
    SearchInvariantError,
    SearchResult,
    SearchStopReason,
    minimum_cost,
    path_cost,
    solve,
    tiles_on_any_minimum_cost_path,
)

__all__ = [
    # Models
    "Action",
    "CARDINAL_FACINGS",
    "Cell",
    "Facing",
    "MOVE_COST",
    "State",
    "TURN_COST",
    # Grid
    "Grid",
    "GridError",
    "load_grid",
    "parse_grid",
    # Search
    "SearchInvariantError",
    "SearchResult",
    "SearchStopReason",
    "minimum_cost",
    "path_cost",
    "solve",
    "tiles_on_any_minimum_cost_path",
]
