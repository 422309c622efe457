from __future__ import annotations

from typing import Dict, Iterator, List, Sequence, Tuple

from esper import World

from tilemerge.components.active_switch import ActiveSwitch
from tilemerge.components.board import Board
from tilemerge.components.board_position import BoardPosition
from tilemerge.components.tile import EMPTY, Cell, Empty, TileValue, Value, is_tile_value

Position = Tuple[int, int]
CellComponents = Tuple[ActiveSwitch, TileValue]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def board_size(world: World) -> int:
    return get_board(world).size


def create_board(world: World, size: int) -> int:
    """Create the board entity plus one empty cell entity per position."""
    board_entity = world.create_entity(Board(size=size))
    for row in range(size):
        for col in range(size):
            world.create_entity(BoardPosition(row=row, col=col), ActiveSwitch(active=False), TileValue())
    return board_entity


def _check_bounds(board: Board, row: int, col: int) -> None:
    if not board.contains(row, col):
        raise IndexError(f"Cell ({row}, {col}) is outside a {board.size}x{board.size} board")


def get_entity_at(world: World, row: int, col: int) -> int | None:
    for entity, position in world.get_component(BoardPosition):
        if position.row == row and position.col == col:
            return entity
    return None


def cell_components(world: World) -> Dict[Position, CellComponents]:
    """Map every board position to its (ActiveSwitch, TileValue) pair."""
    grid: Dict[Position, CellComponents] = {}
    for _, (position, switch, tile) in world.get_components(BoardPosition, ActiveSwitch, TileValue):
        grid[(position.row, position.col)] = (switch, tile)
    return grid


def iter_cells(world: World) -> Iterator[Tuple[int, int, ActiveSwitch, TileValue]]:
    """Yield (row, col, switch, tile) in row-major order."""
    size = board_size(world)
    grid = cell_components(world)
    for row in range(size):
        for col in range(size):
            switch, tile = grid[(row, col)]
            yield row, col, switch, tile


def _components_at(world: World, row: int, col: int) -> CellComponents:
    _check_bounds(get_board(world), row, col)
    entity = get_entity_at(world, row, col)
    if entity is None:
        raise RuntimeError(f"No cell entity at ({row}, {col})")
    return world.component_for_entity(entity, ActiveSwitch), world.component_for_entity(entity, TileValue)


def cell_at(world: World, row: int, col: int) -> Cell:
    switch, tile = _components_at(world, row, col)
    if not switch.active:
        return EMPTY
    return Value(tile.value)


def set_cell(world: World, row: int, col: int, cell: Cell) -> None:
    switch, tile = _components_at(world, row, col)
    if isinstance(cell, Empty):
        switch.active = False
        tile.value = 0
    elif isinstance(cell, Value):
        tile.value = cell.value
        switch.active = True
    else:
        raise ValueError(f"Not a cell: {cell!r}")


def is_empty(world: World, row: int, col: int) -> bool:
    switch, _ = _components_at(world, row, col)
    return not switch.active


def empty_cell_count(world: World) -> int:
    return sum(1 for _, _, switch, _ in iter_cells(world) if not switch.active)


def any_cell_equals(world: World, value: int) -> bool:
    return any(switch.active and tile.value == value for _, _, switch, tile in iter_cells(world))


def max_tile(world: World) -> int:
    values = [tile.value for _, _, switch, tile in iter_cells(world) if switch.active]
    return max(values, default=0)


def board_snapshot(world: World) -> List[List[int]]:
    """Rows of cell values for rendering; 0 marks an empty cell."""
    size = board_size(world)
    rows = [[0] * size for _ in range(size)]
    for row, col, switch, tile in iter_cells(world):
        if switch.active:
            rows[row][col] = tile.value
    return rows


def load_grid(world: World, rows: Sequence[Sequence[int]]) -> None:
    """Overwrite the whole board from rows of numbers (0 = empty)."""
    size = board_size(world)
    if len(rows) != size or any(len(row) != size for row in rows):
        raise ValueError(f"Grid must be {size}x{size}")
    for r, row_values in enumerate(rows):
        for c, value in enumerate(row_values):
            if value != 0 and not is_tile_value(value):
                raise ValueError(f"Invalid tile value {value!r} at ({r}, {c})")
    grid = cell_components(world)
    for r, row_values in enumerate(rows):
        for c, value in enumerate(row_values):
            switch, tile = grid[(r, c)]
            switch.active = value != 0
            tile.value = value
