import pytest

from tilemerge.components.board import Board
from tilemerge.components.direction import Direction, MoveOutcome
from tilemerge.components.tile import EMPTY, Empty, Value, is_tile_value


def test_value_accepts_powers_of_two():
    assert Value(2).value == 2
    assert Value(2048).value == 2048
    assert Value(4).doubled() == Value(8)


@pytest.mark.parametrize("bad", [0, 1, 3, 6, -2, 2.0])
def test_value_rejects_non_tile_numbers(bad):
    with pytest.raises(ValueError):
        Value(bad)


def test_empty_is_distinct_from_any_value():
    assert EMPTY == Empty()
    assert EMPTY != Value(2)
    assert not is_tile_value(0)


def test_board_requires_size_two():
    with pytest.raises(ValueError):
        Board(size=1)
    assert Board(size=2).contains(1, 1)
    assert not Board(size=2).contains(2, 0)
    assert not Board(size=2).contains(0, -1)


def test_direction_offsets():
    assert Direction.UP.offset == (-1, 0)
    assert Direction.DOWN.offset == (1, 0)
    assert Direction.LEFT.offset == (0, -1)
    assert Direction.RIGHT.offset == (0, 1)


def test_move_outcome_truthiness():
    assert MoveOutcome.CHANGED
    assert not MoveOutcome.UNCHANGED
