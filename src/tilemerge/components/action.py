from enum import Enum, auto
from typing import Optional

from tilemerge.components.direction import Direction


class Action(Enum):
    """Decoded player intent for a single key press."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    QUIT = auto()
    UNKNOWN = auto()

    @property
    def direction(self) -> Optional[Direction]:
        return _ACTION_DIRECTIONS.get(self)


_ACTION_DIRECTIONS = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}
