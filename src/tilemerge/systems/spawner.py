from __future__ import annotations

import logging
import random
from typing import Tuple

from esper import World

from tilemerge.constants import SPAWN_HIGH_VALUE, SPAWN_LOW_VALUE, SPAWN_TWO_PROBABILITY
from tilemerge.systems.board_ops import empty_cell_count, iter_cells

logger = logging.getLogger(__name__)


def world_random(world: World) -> random.Random:
    candidate = getattr(world, "random", None)
    if isinstance(candidate, random.Random):
        return candidate
    rng = random.Random()
    setattr(world, "random", rng)
    return rng


def choose_tile_value(rng: random.Random) -> int:
    return SPAWN_HIGH_VALUE if rng.random() > SPAWN_TWO_PROBABILITY else SPAWN_LOW_VALUE


def insert_tile(world: World, rng: random.Random) -> Tuple[int, int, int]:
    """Place a new tile on a uniformly chosen empty cell.

    Draws k in [1, empty count] and walks the board row by row until the
    k-th empty cell. Returns (row, col, value).
    """
    empty_cells = empty_cell_count(world)
    if empty_cells == 0:
        raise RuntimeError("Cannot spawn a tile on a board with no empty cells")
    value = choose_tile_value(rng)
    fill_cell = rng.randint(1, empty_cells)
    empty_seen = 0
    for row, col, switch, tile in iter_cells(world):
        if switch.active:
            continue
        empty_seen += 1
        if empty_seen == fill_cell:
            tile.value = value
            switch.active = True
            logger.debug("Spawned %d at (%d, %d)", value, row, col)
            return row, col, value
    raise RuntimeError("Empty cell count changed while spawning")


def spawn_tile(world: World, rng: random.Random | None = None) -> Tuple[int, int, int]:
    return insert_tile(world, rng or world_random(world))
