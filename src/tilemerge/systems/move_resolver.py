"""Slide/merge resolution for a single directional move.

Every move runs the same three steps over one scan order:

1. slide tiles into empty neighbours until a full sweep moves nothing,
2. merge each tile into an equal neighbour (one sweep),
3. slide again to close the gaps left by merges.

The scan starts at the edge the tiles move towards, so a tile never
overtakes one that has not been visited yet and a freshly doubled tile is
never visited again as a merge source.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from esper import World

from tilemerge.components.direction import Direction, MoveOutcome
from tilemerge.systems.board_ops import CellComponents, Position, board_size, cell_components

logger = logging.getLogger(__name__)

Grid = Dict[Position, CellComponents]


@dataclass(slots=True)
class MoveResult:
    outcome: MoveOutcome
    merged: List[Position] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.outcome is MoveOutcome.CHANGED


def _check_direction(direction) -> Direction:
    if not isinstance(direction, Direction):
        raise ValueError(f"Unknown direction {direction!r}")
    return direction


def scan_order(size: int, direction: Direction) -> Tuple[range, range]:
    """Return (row order, col order) for the direction."""
    rows = range(size)
    cols = range(size)
    if direction is Direction.DOWN:
        rows = range(size - 1, -1, -1)
    elif direction is Direction.RIGHT:
        cols = range(size - 1, -1, -1)
    return rows, cols


def _to_border(size: int, row: int, col: int, drow: int, dcol: int) -> bool:
    target_row = row + drow
    target_col = col + dcol
    return not (0 <= target_row < size and 0 <= target_col < size)


def _movable_tiles(grid: Grid, size: int, direction: Direction) -> Iterator[Tuple[Position, Position]]:
    """Yield (source, target) for occupied cells that have a neighbour in the direction.

    Occupancy is read when a cell is reached, so changes made by the caller
    during iteration are seen by later cells.
    """
    drow, dcol = direction.offset
    rows, cols = scan_order(size, direction)
    for row in rows:
        for col in cols:
            switch, _ = grid[(row, col)]
            if not switch.active or _to_border(size, row, col, drow, dcol):
                continue
            yield (row, col), (row + drow, col + dcol)


def _slide(grid: Grid, size: int, direction: Direction) -> int:
    moves = 0
    modified = True
    while modified:
        modified = False
        for source, target in _movable_tiles(grid, size, direction):
            src_switch, src_tile = grid[source]
            dst_switch, dst_tile = grid[target]
            if dst_switch.active:
                continue
            dst_tile.value = src_tile.value
            dst_switch.active = True
            src_switch.active = False
            src_tile.value = 0
            modified = True
            moves += 1
    return moves


def _merge(grid: Grid, size: int, direction: Direction) -> List[Position]:
    merged: List[Position] = []
    for source, target in _movable_tiles(grid, size, direction):
        src_switch, src_tile = grid[source]
        dst_switch, dst_tile = grid[target]
        if not dst_switch.active or dst_tile.value != src_tile.value:
            continue
        dst_tile.value = src_tile.value * 2
        src_switch.active = False
        src_tile.value = 0
        merged.append(target)
    return merged


def _grid_state(grid: Grid) -> Dict[Position, int]:
    return {pos: (tile.value if switch.active else 0) for pos, (switch, tile) in grid.items()}


def resolve_move(world: World, direction: Direction) -> MoveResult:
    """Apply slide, merge and slide for the direction. Never spawns a tile."""
    direction = _check_direction(direction)
    size = board_size(world)
    grid = cell_components(world)
    before = _grid_state(grid)
    _slide(grid, size, direction)
    merged = _merge(grid, size, direction)
    _slide(grid, size, direction)
    if _grid_state(grid) == before:
        logger.debug("Move %s left the board unchanged", direction.name)
        return MoveResult(MoveOutcome.UNCHANGED)
    # merged holds doubling positions from before the closing slide.
    logger.debug("Move %s changed the board, %d merge(s)", direction.name, len(merged))
    return MoveResult(MoveOutcome.CHANGED, merged=merged)


def apply_move(world: World, direction: Direction) -> MoveOutcome:
    return resolve_move(world, direction).outcome


def can_move(world: World, direction: Direction) -> bool:
    """True if the direction would slide or merge at least one tile. Read-only."""
    direction = _check_direction(direction)
    size = board_size(world)
    grid = cell_components(world)
    for source, target in _movable_tiles(grid, size, direction):
        dst_switch, dst_tile = grid[target]
        if not dst_switch.active or dst_tile.value == grid[source][1].value:
            return True
    return False


def legal_directions(world: World) -> List[Direction]:
    return [direction for direction in Direction if can_move(world, direction)]
