import curses
from typing import Dict, Union

from tilemerge.components.action import Action
from tilemerge.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_MOVE_REQUEST,
    EVENT_QUIT_REQUEST,
)

Key = Union[int, str]

ESCAPE = 27
CTRL_C = 3

KEY_ACTIONS: Dict[int, Action] = {
    curses.KEY_UP: Action.UP,
    curses.KEY_DOWN: Action.DOWN,
    curses.KEY_LEFT: Action.LEFT,
    curses.KEY_RIGHT: Action.RIGHT,
    ord('w'): Action.UP,
    ord('s'): Action.DOWN,
    ord('a'): Action.LEFT,
    ord('d'): Action.RIGHT,
    ord('q'): Action.QUIT,
    ord('Q'): Action.QUIT,
    ESCAPE: Action.QUIT,
    CTRL_C: Action.QUIT,
}


def decode_key(key: Key) -> Action:
    """Map a curses key code (or a one-character string) to an Action."""
    if isinstance(key, str):
        if len(key) != 1:
            return Action.UNKNOWN
        key = ord(key)
    return KEY_ACTIONS.get(key, Action.UNKNOWN)


class InputSystem:
    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.last_action: Action | None = None
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        key = kwargs.get('key')
        if key is None:
            return
        action = decode_key(key)
        self.last_action = action
        if action is Action.QUIT:
            self.event_bus.emit(EVENT_QUIT_REQUEST, reason='key')
        elif action.direction is not None:
            self.event_bus.emit(EVENT_MOVE_REQUEST, direction=action.direction)
        # Unknown keys are ignored.
