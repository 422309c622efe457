from tilemerge.systems.game_over import has_lost, has_won
from tests.helpers import seeded_board

CHECKERBOARD = [
    [2, 4, 2, 4],
    [4, 2, 4, 2],
    [2, 4, 2, 4],
    [4, 2, 4, 2],
]


def test_full_board_without_pairs_is_lost():
    assert has_lost(seeded_board(CHECKERBOARD))


def test_one_adjacent_pair_anywhere_keeps_game_alive():
    for row, col in [(0, 0), (1, 2), (3, 3)]:
        rows = [r[:] for r in CHECKERBOARD]
        # Copy a neighbour's value to create an equal pair.
        rows[row][col] = rows[row][col - 1] if col > 0 else rows[row][col + 1]
        assert not has_lost(seeded_board(rows)), (row, col)


def test_board_with_empty_cell_is_not_lost():
    rows = [r[:] for r in CHECKERBOARD]
    rows[2][2] = 0
    assert not has_lost(seeded_board(rows))


def test_win_at_default_threshold():
    rows = [[0, 0, 0, 0], [0, 2048, 0, 0], [0, 0, 0, 0], [0, 0, 0, 2]]
    assert has_won(seeded_board(rows))
    rows[1][1] = 1024
    assert not has_won(seeded_board(rows))


def test_win_counts_values_above_threshold():
    rows = [[4096, 0], [0, 0]]
    assert has_won(seeded_board(rows))
    assert has_won(seeded_board([[8, 0], [0, 0]]), threshold=8)
    assert not has_won(seeded_board([[4, 0], [0, 0]]), threshold=8)
