"""Turn puzzle text into a Grid."""

import logging
import re
from pathlib import Path
from typing import Union

from .grid import Grid, GridError

logger = logging.getLogger(__name__)

_LINE_SPLIT = re.compile(r"\r?\n")


def parse_grid(text: str) -> Grid:
    """
    Parse maze text ('#' wall, '.' open, 'S' start, 'E' end).

    Trailing whitespace on each line and blank lines at either end of the
    text are ignored. Blank lines inside the maze are not.

    Raises:
        GridError: If the text does not describe a valid maze
    """
    lines = [line.rstrip() for line in _LINE_SPLIT.split(text)]
    while lines and not lines[-1]:
        lines.pop()
    while lines and not lines[0]:
        lines.pop(0)

    grid = Grid.from_rows(lines)
    logger.info(f"Parsed maze {grid.width} x {grid.height}")
    logger.debug(f"Maze start={grid.start} end={grid.end} open_cells={grid.open_cells()}")
    return grid


def load_grid(path: Union[str, Path]) -> Grid:
    """
    Read and parse a maze file.

    Raises:
        OSError: If the file cannot be read
        GridError: If the file does not describe a valid maze
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        return parse_grid(text)
    except GridError as e:
        raise GridError(f"{path}: {e}") from e
