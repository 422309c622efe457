from esper import World

from tilemerge.components.direction import Direction
from tilemerge.constants import WIN_THRESHOLD
from tilemerge.systems.board_ops import iter_cells
from tilemerge.systems.move_resolver import can_move


def has_won(world: World, threshold: int = WIN_THRESHOLD) -> bool:
    return any(switch.active and tile.value >= threshold for _, _, switch, tile in iter_cells(world))


def has_lost(world: World) -> bool:
    """No direction can slide or merge anything."""
    return not any(can_move(world, direction) for direction in Direction)
