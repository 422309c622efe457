from __future__ import annotations

import random
from typing import Sequence

from esper import World

from tilemerge.events.bus import EventBus
from tilemerge.systems.board_ops import create_board, load_grid
from tilemerge.world import create_world


def seeded_board(rows: Sequence[Sequence[int]], *, seed: int = 0) -> World:
    """Bare world whose board holds exactly the given rows (0 = empty)."""

    world = World()
    setattr(world, "random", random.Random(seed))
    create_board(world, len(rows))
    load_grid(world, rows)
    return world


def make_world(bus: EventBus | None = None, *, seed: int = 0, **kwargs) -> tuple[EventBus, World]:
    """Event bus plus a world with GameState, ready for systems."""

    bus = bus or EventBus()
    world = create_world(bus, rng=random.Random(seed), **kwargs)
    return bus, world


def count_tiles(rows: Sequence[Sequence[int]]) -> int:
    return sum(1 for row in rows for value in row if value)


def total(rows: Sequence[Sequence[int]]) -> int:
    return sum(value for row in rows for value in row)


class ScriptedRandom(random.Random):
    """Random whose random()/randint() results are fixed up front."""

    def __init__(self, draws: Sequence[float] = (), picks: Sequence[int] = ()):
        super().__init__(0)
        self._draws = list(draws)
        self._picks = list(picks)

    def random(self) -> float:
        return self._draws.pop(0)

    def randint(self, a: int, b: int) -> int:
        value = self._picks.pop(0)
        assert a <= value <= b, f"scripted pick {value} outside [{a}, {b}]"
        return value
