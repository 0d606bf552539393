"""
Minimum-cost search over an oriented grid.

Runs a uniform-cost (Dijkstra) search over (cell, facing) states:
- Moving forward one cell costs MOVE_COST, rotating 90 degrees costs TURN_COST
- The start state faces East; the goal is the end cell in any facing
- Returns SearchResult with the reason for success/failure, so an
  unreachable goal is a normal result rather than an exception

Each call to solve() owns its own best-cost table, predecessor table and
frontier. Nothing is shared between calls.
"""

import heapq
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Sequence

from .grid import Grid
from .models import MOVE_COST, TURN_COST, Action, Cell, Facing, State

logger = logging.getLogger(__name__)

START_FACING = Facing.E


class SearchStopReason(Enum):
    """Reasons why the search stopped."""
    SUCCESS = "success"
    ALREADY_AT_GOAL = "already_at_goal"
    NO_PATH_EXISTS = "no_path_exists"


class SearchInvariantError(RuntimeError):
    """The frontier and the best-cost table disagree. Always a bug."""


@dataclass
class SearchResult:
    """Result of a search."""
    reason: SearchStopReason
    cost: Optional[int] = None
    # Cells on at least one minimum-cost path (empty if not tracked)
    tiles: frozenset[Cell] = frozenset()
    # One minimum-cost route, start state first
    path: list[State] = field(default_factory=list)
    # Every goal facing finalized at the minimum cost
    goal_states: list[State] = field(default_factory=list)
    expanded: int = 0
    message: str = ""

    @property
    def success(self) -> bool:
        """Whether the goal was reached."""
        return self.reason in (SearchStopReason.SUCCESS, SearchStopReason.ALREADY_AT_GOAL)

    @property
    def actions(self) -> list[Action]:
        """Actions taken along the reconstructed path."""
        return [a.action_to(b) for a, b in zip(self.path, self.path[1:])]

    @property
    def moves(self) -> int:
        """Forward moves along the reconstructed path."""
        return sum(1 for action in self.actions if action is Action.FORWARD)

    @property
    def turns(self) -> int:
        """Rotations along the reconstructed path."""
        return len(self.actions) - self.moves

    def __bool__(self) -> bool:
        """Allow `if result:` to check for success."""
        return self.success

    def __repr__(self) -> str:
        if self.success:
            return (
                f"SearchResult(cost={self.cost}, tiles={len(self.tiles)}, "
                f"path=[{len(self.path)} states], reason={self.reason.value})"
            )
        return f"SearchResult(cost=None, reason={self.reason.value}, message='{self.message}')"


def path_cost(path: Sequence[State], grid: Optional[Grid] = None) -> int:
    """
    Add up the cost of a state path from its first state to its last.

    Args:
        path: Consecutive states, each one action apart
        grid: If given, forward moves must land on open cells

    Returns:
        Total cost (0 for an empty or single-state path)

    Raises:
        ValueError: If two consecutive states are not one legal action apart
    """
    total = 0
    for current, following in zip(path, path[1:]):
        action = current.action_to(following)
        if action is Action.FORWARD and grid is not None and not grid.is_open(following.cell):
            raise ValueError(f"Forward move from {current} enters blocked cell {following.cell}")
        total += action.cost
    return total


class _StateSearch:
    """Tables for one search invocation. Not reused across calls."""

    def __init__(self, grid: Grid, track_ties: bool, reverse_ties: bool):
        self.grid = grid
        self.track_ties = track_ties
        self.reverse_ties = reverse_ties
        self.best: dict[State, int] = {}
        self.predecessors: dict[State, set[State]] = {}
        self.frontier: list[tuple[int, int, State]] = []
        self.expanded = 0
        self._counter = 0

    def _push(self, state: State, cost: int) -> None:
        # Sequence number keeps heap order stable when costs are equal;
        # negating it pops equal-cost entries newest first instead
        self._counter += 1
        sequence = -self._counter if self.reverse_ties else self._counter
        heapq.heappush(self.frontier, (cost, sequence, state))

    def _successors(self, state: State) -> Iterator[tuple[State, int]]:
        yield State(state.cell, state.facing.rotate_left()), TURN_COST
        yield State(state.cell, state.facing.rotate_right()), TURN_COST
        ahead = state.cell.step(state.facing)
        if self.grid.is_open(ahead):
            yield State(ahead, state.facing), MOVE_COST

    def run(self) -> tuple[Optional[int], list[State]]:
        """
        Drain the frontier.

        Returns:
            Tuple of (goal cost, goal states at that cost); (None, []) if
            the goal was never finalized
        """
        start = State(self.grid.start, START_FACING)
        self.best[start] = 0
        self.predecessors[start] = set()
        self._push(start, 0)

        goal_cost: Optional[int] = None
        goals: list[State] = []

        while self.frontier:
            cost, _, state = heapq.heappop(self.frontier)

            best = self.best.get(state)
            if best is None:
                raise SearchInvariantError(f"Frontier entry {state} (cost {cost}) has no recorded best cost")

            # Costs pop in non-decreasing order, so nothing left can tie the goal
            if goal_cost is not None and cost > goal_cost:
                break

            if cost > best:
                continue  # stale

            self.expanded += 1

            if state.cell == self.grid.end:
                goal_cost = cost
                goals.append(state)
                continue

            for successor, step_cost in self._successors(state):
                tentative = cost + step_cost
                known = self.best.get(successor)
                if known is None or tentative < known:
                    self.best[successor] = tentative
                    self.predecessors[successor] = {state}
                    self._push(successor, tentative)
                elif tentative == known and self.track_ties:
                    self.predecessors[successor].add(state)

        return goal_cost, goals

    def tiles(self, goals: list[State]) -> frozenset[Cell]:
        """Cells of every state that can walk back from a goal to the start."""
        seen = set(goals)
        stack = list(goals)
        while stack:
            state = stack.pop()
            for previous in self.predecessors.get(state, ()):
                if previous not in seen:
                    seen.add(previous)
                    stack.append(previous)
        return frozenset(state.cell for state in seen)

    def reconstruct(self, goal: State) -> list[State]:
        """Walk back from a goal along the lowest-ordered predecessors."""
        path = [goal]
        current = goal
        while self.predecessors.get(current):
            current = min(self.predecessors[current], key=lambda s: s.sort_key)
            path.append(current)
        path.reverse()
        return path


def solve(grid: Grid, track_tiles: bool = True, reverse_ties: bool = False) -> SearchResult:
    """
    Find the minimum cost from the grid's start (facing East) to its end.

    Args:
        grid: Maze to search
        track_tiles: Keep every equal-cost predecessor so the result lists
            all cells on any minimum-cost path
        reverse_ties: Pop equal-cost frontier entries newest first. The
            cost and tiles do not depend on this.

    Returns:
        SearchResult with cost, tiles and one reconstructed path, or with
        reason NO_PATH_EXISTS if the end cannot be reached

    Raises:
        SearchInvariantError: If the search tables become inconsistent
    """
    logger.debug(f"solve: {grid!r}, track_tiles={track_tiles}, reverse_ties={reverse_ties}")

    search = _StateSearch(grid, track_ties=track_tiles, reverse_ties=reverse_ties)
    goal_cost, goals = search.run()

    if goal_cost is None:
        logger.debug(f"solve: no path from {grid.start} to {grid.end} after {search.expanded} expansions")
        return SearchResult(
            SearchStopReason.NO_PATH_EXISTS,
            expanded=search.expanded,
            message=f"No path from {grid.start} to {grid.end}",
        )

    goals.sort(key=lambda s: s.sort_key)
    path = search.reconstruct(goals[0])
    if path_cost(path, grid) != goal_cost:
        raise SearchInvariantError(f"Reconstructed path costs {path_cost(path)}, search reported {goal_cost}")

    tiles = search.tiles(goals) if track_tiles else frozenset()
    reason = SearchStopReason.ALREADY_AT_GOAL if grid.start == grid.end else SearchStopReason.SUCCESS

    logger.debug(
        f"solve: cost={goal_cost}, goal_facings={[g.facing.name for g in goals]}, "
        f"tiles={len(tiles)}, expanded={search.expanded}"
    )
    return SearchResult(
        reason,
        cost=goal_cost,
        tiles=tiles,
        path=path,
        goal_states=goals,
        expanded=search.expanded,
    )


def minimum_cost(grid: Grid) -> Optional[int]:
    """Minimum cost from start to end, or None if no path exists."""
    return solve(grid, track_tiles=False).cost


def tiles_on_any_minimum_cost_path(grid: Grid) -> frozenset[Cell]:
    """All cells on at least one minimum-cost path (empty if no path)."""
    return solve(grid, track_tiles=True).tiles
