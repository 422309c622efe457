from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"            # payload: key=int|str
EVENT_MOVE_REQUEST = "move_request"      # payload: direction=Direction
EVENT_QUIT_REQUEST = "quit_request"      # payload: reason=str


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_MOVE_APPLIED = "move_applied"      # payload: direction=Direction, merged=list[(r,c)]
EVENT_MOVE_REJECTED = "move_rejected"    # payload: direction=Direction
EVENT_TILES_MERGED = "tiles_merged"      # payload: direction=Direction, positions=list[(r,c)]
EVENT_TILE_SPAWNED = "tile_spawned"      # payload: row=int, col=int, value=int
EVENT_BOARD_CHANGED = "board_changed"    # payload: reason=str


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"    # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_WON = "game_won"                      # payload: max_tile=int
EVENT_GAME_LOST = "game_lost"                    # payload: max_tile=int
EVENT_GAME_QUIT = "game_quit"                    # payload: reason=str
