"""Tests for cells, facings, actions and states."""

import pytest

from mazecost.api.models import (
    CARDINAL_FACINGS,
    MOVE_COST,
    TURN_COST,
    Action,
    Cell,
    Facing,
    State,
)


class TestFacing:
    """Tests for facing rotation and vectors."""

    def test_unit_vectors(self):
        assert Facing.N.delta == (0, -1)
        assert Facing.E.delta == (1, 0)
        assert Facing.S.delta == (0, 1)
        assert Facing.W.delta == (-1, 0)

    def test_rotate_right_is_clockwise(self):
        assert Facing.N.rotate_right() == Facing.E
        assert Facing.E.rotate_right() == Facing.S
        assert Facing.S.rotate_right() == Facing.W
        assert Facing.W.rotate_right() == Facing.N

    def test_rotate_left_undoes_rotate_right(self):
        for facing in CARDINAL_FACINGS:
            assert facing.rotate_right().rotate_left() == facing

    @pytest.mark.parametrize("facing", list(Facing))
    def test_four_rotations_return_to_start(self, facing):
        left = facing
        right = facing
        for _ in range(4):
            left = left.rotate_left()
            right = right.rotate_right()
        assert left == facing
        assert right == facing

    def test_from_delta(self):
        for facing in Facing:
            assert Facing.from_delta(*facing.delta) == facing

    def test_from_delta_rejects_diagonal(self):
        with pytest.raises(ValueError):
            Facing.from_delta(1, 1)

    def test_symbols(self):
        assert [f.symbol for f in CARDINAL_FACINGS] == ["^", ">", "v", "<"]


class TestCell:
    """Tests for Cell."""

    def test_equality_and_hashing(self):
        assert Cell(2, 3) == Cell(2, 3)
        assert Cell(2, 3) != Cell(3, 2)
        assert len({Cell(1, 1), Cell(1, 1), Cell(1, 2)}) == 2

    def test_step(self):
        cell = Cell(5, 5)
        assert cell.step(Facing.N) == Cell(5, 4)
        assert cell.step(Facing.E) == Cell(6, 5)
        assert cell.step(Facing.S) == Cell(5, 6)
        assert cell.step(Facing.W) == Cell(4, 5)

    def test_manhattan_distance(self):
        assert Cell(0, 0).manhattan_distance(Cell(3, -4)) == 7


class TestState:
    """Tests for State transitions."""

    def test_equality_needs_matching_facing(self):
        assert State(Cell(1, 1), Facing.E) == State(Cell(1, 1), Facing.E)
        assert State(Cell(1, 1), Facing.E) != State(Cell(1, 1), Facing.N)

    def test_apply(self):
        state = State(Cell(1, 1), Facing.E)
        assert state.apply(Action.FORWARD) == State(Cell(2, 1), Facing.E)
        assert state.apply(Action.ROTATE_LEFT) == State(Cell(1, 1), Facing.N)
        assert state.apply(Action.ROTATE_RIGHT) == State(Cell(1, 1), Facing.S)

    def test_action_to_inverts_apply(self):
        state = State(Cell(4, 2), Facing.W)
        for action in Action:
            assert state.action_to(state.apply(action)) == action

    def test_action_to_rejects_u_turn(self):
        state = State(Cell(0, 0), Facing.N)
        with pytest.raises(ValueError):
            state.action_to(State(Cell(0, 0), Facing.S))

    def test_sort_key_is_row_major(self):
        states = [
            State(Cell(0, 1), Facing.N),
            State(Cell(1, 0), Facing.W),
            State(Cell(1, 0), Facing.N),
        ]
        ordered = sorted(states, key=lambda s: s.sort_key)
        assert ordered == [states[2], states[1], states[0]]


class TestActionCost:
    def test_costs(self):
        assert Action.FORWARD.cost == MOVE_COST == 1
        assert Action.ROTATE_LEFT.cost == TURN_COST == 1000
        assert Action.ROTATE_RIGHT.cost == TURN_COST
