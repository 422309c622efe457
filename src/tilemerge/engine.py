"""Engine surface used by the front end: board setup, moves, spawning, end checks."""
from __future__ import annotations

import random

from esper import World

from tilemerge.constants import GRID_SIZE, START_TILES
from tilemerge.systems.board_ops import board_snapshot, create_board
from tilemerge.systems.game_over import has_lost, has_won
from tilemerge.systems.move_resolver import apply_move, can_move
from tilemerge.systems.spawner import spawn_tile, world_random

__all__ = [
    "new_board",
    "setup_board",
    "apply_move",
    "can_move",
    "spawn_tile",
    "has_won",
    "has_lost",
    "board_snapshot",
]


def setup_board(
    world: World,
    size: int = GRID_SIZE,
    *,
    start_tiles: int = START_TILES,
    rng: random.Random | None = None,
) -> int:
    """Create the board on an existing world and spawn the opening tiles."""
    board_entity = create_board(world, size)
    rng = rng or world_random(world)
    for _ in range(start_tiles):
        spawn_tile(world, rng)
    return board_entity


def new_board(size: int = GRID_SIZE, *, rng: random.Random | None = None) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())
    setup_board(world, size)
    return world
