import logging
import random
from typing import List, Optional

from esper import World

from tilemerge.components.board import Board
from tilemerge.constants import GRID_SIZE, START_TILES
from tilemerge.engine import setup_board
from tilemerge.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_MOVE_APPLIED,
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_REQUEST,
    EVENT_TILE_SPAWNED,
    EVENT_TILES_MERGED,
)
from tilemerge.systems.board_ops import board_snapshot
from tilemerge.systems.move_resolver import resolve_move
from tilemerge.systems.spawner import spawn_tile, world_random
from tilemerge.utils.game_state import current_mode

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and runs one turn per move request.

    A turn resolves the move and, only when the board changed, spawns a new
    tile and announces the change. Requests arriving after the game reached
    a terminal mode are dropped.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        size: int = GRID_SIZE,
        *,
        rng: Optional[random.Random] = None,
        start_tiles: int = START_TILES,
    ):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or world_random(world)
        self.board_entity = setup_board(world, size, start_tiles=start_tiles, rng=self._rng)
        self.moves_applied = 0
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)

    @property
    def size(self) -> int:
        return self.world.component_for_entity(self.board_entity, Board).size

    def snapshot(self) -> List[List[int]]:
        return board_snapshot(self.world)

    def on_move_request(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if direction is None:
            return
        mode = current_mode(self.world)
        if mode is not None and mode.terminal:
            logger.debug("Ignoring move %s in mode %s", direction, mode.name)
            return
        result = resolve_move(self.world, direction)
        if not result.changed:
            self.event_bus.emit(EVENT_MOVE_REJECTED, direction=direction)
            return
        self.moves_applied += 1
        if result.merged:
            self.event_bus.emit(EVENT_TILES_MERGED, direction=direction, positions=list(result.merged))
        self.event_bus.emit(EVENT_MOVE_APPLIED, direction=direction, merged=list(result.merged))
        row, col, value = spawn_tile(self.world, self._rng)
        self.event_bus.emit(EVENT_TILE_SPAWNED, row=row, col=col, value=value)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='move')
