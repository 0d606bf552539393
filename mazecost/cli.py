"""
Command-line interface for the maze solver.

Usage:
    python -m mazecost.cli solve input.txt              Lowest score and best tiles
    python -m mazecost.cli solve input.txt --render     Also draw the best route
    python -m mazecost.cli check input.txt              Validate a maze file
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console

from mazecost.api import GridError, load_grid, solve
from mazecost.config import load_config, setup_logging
from mazecost.report import format_result, render_maze

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2


def cmd_solve(args: argparse.Namespace) -> int:
    """Solve a maze and print the result."""
    config = args.config_obj.search
    track_tiles = config.track_tiles and not args.no_tiles
    render = config.render or args.render
    reverse_ties = config.reverse_ties or args.reverse_ties

    try:
        grid = load_grid(args.file)
    except (GridError, OSError) as e:
        logger.error(f"Cannot load maze: {e}")
        print(f"Error: {e}")
        return EXIT_BAD_INPUT

    result = solve(grid, track_tiles=track_tiles, reverse_ties=reverse_ties)
    logger.info(f"Search finished: {result!r} after {result.expanded} expansions")

    console = Console(highlight=False)
    for line in format_result(result, grid):
        console.print(line, markup=False, soft_wrap=True)
    if render and result.success:
        console.print()
        console.print(render_maze(grid, result), soft_wrap=True)

    return EXIT_OK if result.success else EXIT_NO_PATH


def cmd_check(args: argparse.Namespace) -> int:
    """Validate a maze file without solving it."""
    try:
        grid = load_grid(args.file)
    except (GridError, OSError) as e:
        logger.error(f"Cannot load maze: {e}")
        print(f"Error: {e}")
        return EXIT_BAD_INPUT

    print(f"OK: maze is {grid.width} x {grid.height}, start {grid.start}, end {grid.end}")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="mazecost - minimum-cost routes through oriented grid mazes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--log-level",
        "-l",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level override",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # solve command
    solve_parser = subparsers.add_parser("solve", help="Find the lowest score through a maze")
    solve_parser.add_argument("file", help="Maze file ('#' wall, '.' open, 'S' start, 'E' end)")
    solve_parser.add_argument(
        "--no-tiles",
        action="store_true",
        help="Skip collecting the tiles on every best path",
    )
    solve_parser.add_argument(
        "--render",
        "-r",
        action="store_true",
        help="Draw the maze with the best route overlaid",
    )
    solve_parser.add_argument(
        "--reverse-ties",
        action="store_true",
        help="Expand equal-cost states newest first (results are unchanged)",
    )
    solve_parser.set_defaults(func=cmd_solve)

    # check command
    check_parser = subparsers.add_parser("check", help="Validate a maze file")
    check_parser.add_argument("file", help="Maze file")
    check_parser.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)

    # Load config and set up logging
    config = load_config(args.config)
    if args.log_level:
        config.logging.level = args.log_level
    setup_logging(config.logging)

    if args.command is None:
        parser.print_help()
        return EXIT_NO_PATH

    args.config_obj = config
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
