"""Minimum-cost pathfinding over oriented grid mazes."""

__version__ = "0.1.0"
