"""Human-readable output for search results."""

from typing import Optional

from rich.text import Text

from .api.grid import END_CHAR, START_CHAR, WALL_CHAR, Grid
from .api.models import Cell, Facing
from .api.search import SearchResult

TILE_CHAR = "O"

_STYLES = {
    WALL_CHAR: "dim",
    START_CHAR: "bold green",
    END_CHAR: "bold red",
    TILE_CHAR: "cyan",
}
_ROUTE_STYLE = "bold yellow"
_ROUTE_CHARS = {facing.symbol for facing in Facing}


def format_result(result: SearchResult, grid: Optional[Grid] = None) -> list[str]:
    """
    Describe a search result in a few lines of text.

    Args:
        result: Result from solve()
        grid: If given, prefix a line with the maze dimensions
    """
    lines = []
    if grid is not None:
        lines.append(f"Maze is {grid.width} x {grid.height}")

    if not result.success:
        lines.append(f"No path found: {result.message}")
        return lines

    lines.append(f"Lowest score: {result.cost}")
    lines.append(f"Route: {result.moves} moves, {result.turns} turns")
    if result.tiles:
        lines.append(f"Tiles on a best path: {len(result.tiles)}")
    return lines


def route_overlay(result: SearchResult) -> dict[Cell, str]:
    """Map each cell on the reconstructed route to the last facing held there."""
    overlay: dict[Cell, str] = {}
    for state in result.path:
        overlay[state.cell] = state.facing.symbol
    return overlay


def render_maze(grid: Grid, result: SearchResult) -> Text:
    """
    Draw the maze with the result overlaid.

    Tiles on any best path are drawn as 'O'; the reconstructed route is
    drawn with facing arrows on top of them.
    """
    overlay = {cell: TILE_CHAR for cell in result.tiles}
    overlay.update(route_overlay(result))

    text = Text()
    for row in grid.to_rows(overlay):
        for ch in row:
            if ch in _STYLES:
                text.append(ch, style=_STYLES[ch])
            elif ch in _ROUTE_CHARS:
                text.append(ch, style=_ROUTE_STYLE)
            else:
                text.append(ch)
        text.append("\n")
    text.rstrip()
    return text
