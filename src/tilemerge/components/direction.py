from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Move directions with their unit (drow, dcol) offsets."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value


class MoveOutcome(Enum):
    CHANGED = "changed"
    UNCHANGED = "unchanged"

    def __bool__(self) -> bool:
        return self is MoveOutcome.CHANGED
