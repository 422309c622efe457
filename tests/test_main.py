import random

import pytest

from tilemerge.components.game_state import GameMode
from tilemerge.constants import GRID_SIZE, WIN_THRESHOLD
from tilemerge.main import TileMergeGame, parse_args
from tilemerge.systems.board_ops import board_snapshot, load_grid
from tests.helpers import count_tiles


class FakeScreen:
    """Feeds keys to run() and ignores drawing."""

    def __init__(self, keys):
        self._keys = list(keys)

    def getch(self):
        return self._keys.pop(0)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.size == GRID_SIZE
    assert args.target == WIN_THRESHOLD
    assert args.seed is None
    assert args.log_file is None


def test_parse_args_rejects_tiny_board():
    with pytest.raises(SystemExit):
        parse_args(["--size", "1"])


def test_game_starts_with_two_tiles():
    game = TileMergeGame(size=4, rng=random.Random(8))
    assert game.mode is GameMode.PLAYING
    assert count_tiles(game.board_system.snapshot()) == 2


def test_keys_drive_the_board():
    game = TileMergeGame(size=4, rng=random.Random(8))
    load_grid(game.world, [[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
    game.handle_key('a')
    assert board_snapshot(game.world)[0][0] == 4
    assert count_tiles(board_snapshot(game.world)) == 2
    game.handle_key('x')
    assert game.mode is GameMode.PLAYING


def test_run_until_quit():
    game = TileMergeGame(rng=random.Random(8))
    game.screen = FakeScreen(['x', 'q', 'a'])
    game.render_system.screen = None
    assert game.run() is GameMode.QUIT
    assert game.screen._keys == ['a']


def test_run_until_win():
    game = TileMergeGame(target=8, rng=random.Random(8))
    load_grid(game.world, [[4, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
    game.screen = FakeScreen(['d', 'q'])
    game.render_system.screen = None
    assert game.run() is GameMode.WON
