import random

from esper import World

from tilemerge.components.game_state import GameMode
from tilemerge.constants import WIN_THRESHOLD
from tilemerge.events.bus import EventBus
from tilemerge.utils.game_state import get_game_state, set_game_mode


def create_world(
    event_bus: EventBus,
    *,
    win_threshold: int = WIN_THRESHOLD,
    rng: random.Random | None = None,
) -> World:
    """Create a world holding the session GameState; BoardSystem adds the board."""
    world = World()
    setattr(world, "random", rng or random.Random())
    set_game_mode(world, event_bus, GameMode.PLAYING)
    state = get_game_state(world)
    state.win_threshold = win_threshold
    return world
