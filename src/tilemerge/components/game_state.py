"""Game state resource describing the session's current mode."""
from dataclasses import dataclass
from enum import Enum, auto

from tilemerge.constants import WIN_THRESHOLD


class GameMode(Enum):
    """Session modes. Everything except PLAYING is terminal."""
    PLAYING = auto()
    WON = auto()
    LOST = auto()
    QUIT = auto()

    @property
    def terminal(self) -> bool:
        return self is not GameMode.PLAYING


@dataclass
class GameState:
    """Singleton component storing the current game mode."""
    mode: GameMode = GameMode.PLAYING
    win_threshold: int = WIN_THRESHOLD
