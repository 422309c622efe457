from dataclasses import dataclass
from typing import Union


def is_tile_value(value: int) -> bool:
    """Return True for powers of two >= 2."""
    return isinstance(value, int) and value >= 2 and (value & (value - 1)) == 0


@dataclass(slots=True)
class TileValue:
    """Number carried by a cell entity. Only read when ActiveSwitch is on."""
    value: int = 0


@dataclass(frozen=True, slots=True)
class Empty:
    """Cell without a tile."""


@dataclass(frozen=True, slots=True)
class Value:
    """Cell holding a tile."""
    value: int

    def __post_init__(self) -> None:
        if not is_tile_value(self.value):
            raise ValueError(f"Tile value must be a power of two >= 2, got {self.value!r}")

    def doubled(self) -> "Value":
        return Value(self.value * 2)


EMPTY = Empty()

Cell = Union[Empty, Value]
