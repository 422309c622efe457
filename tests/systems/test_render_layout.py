from tilemerge.components.game_state import GameMode
from tilemerge.constants import FALLBACK_TILE_COLOR, INNER_CELL_HEIGHT, INNER_CELL_WIDTH
from tilemerge.events.bus import EVENT_BOARD_CHANGED
from tilemerge.systems.board import BoardSystem
from tilemerge.systems.render import RenderSystem, end_message, tile_colors
from tilemerge.ui.layout import board_lines, cell_text, content_row, line_text, render_text
from tests.helpers import make_world

SNAPSHOT = [
    [2, 0, 0, 0],
    [0, 128, 0, 0],
    [0, 0, 0, 0],
    [0, 0, 0, 2048],
]


def test_cell_text_centers_value():
    assert cell_text(2, 6) == "  2   "
    assert cell_text(2048, 6) == " 2048 "
    assert cell_text(0, 4) == "    "
    assert cell_text(16, 4, content=False) == "    "


def test_board_lines_have_uniform_width_and_height():
    lines = board_lines(SNAPSHOT)
    widths = {len(line_text(line)) for line in lines}
    assert widths == {4 * (INNER_CELL_WIDTH + 1) + 1}
    assert len(lines) == 2 + 4 * INNER_CELL_HEIGHT + 3


def test_borders_use_box_drawing():
    text = render_text(SNAPSHOT).splitlines()
    assert text[0].startswith("┌") and text[0].endswith("┐")
    assert text[-1].startswith("└") and text[-1].endswith("┘")
    assert text[1 + INNER_CELL_HEIGHT].startswith("├")
    assert "┼" in text[1 + INNER_CELL_HEIGHT]


def test_values_on_content_row_only():
    lines = board_lines(SNAPSHOT)
    first_content = 1 + content_row()
    assert "2" in line_text(lines[first_content])
    for i in range(1, 1 + INNER_CELL_HEIGHT):
        if i != first_content:
            assert line_text(lines[i]).strip("│ ") == ""
    last_content = len(lines) - 2 - INNER_CELL_HEIGHT + 1 + content_row()
    assert "2048" in line_text(lines[last_content])


def test_colored_segments_carry_values():
    lines = board_lines([[0, 4], [8, 0]], cell_width=6, cell_height=3)
    values = [value for line in lines for _, value in line if value is not None]
    assert set(values) == {0, 4, 8}


def test_tile_colors_and_fallback():
    assert tile_colors(2) == ("black", "white")
    assert tile_colors(0) == ("white", "black")
    assert tile_colors(131072) == FALLBACK_TILE_COLOR


def test_end_messages():
    assert end_message(GameMode.WON) == "You won!"
    assert end_message(GameMode.LOST) == "You lost!"
    assert end_message(GameMode.QUIT) == "Bye"
    assert end_message(GameMode.PLAYING) is None


def test_render_system_redraws_only_when_dirty():
    bus, world = make_world(seed=4)
    BoardSystem(world, bus, 4)
    render = RenderSystem(world, bus)
    assert render.process() is True
    assert render.process() is False
    bus.emit(EVENT_BOARD_CHANGED, reason='test')
    assert render.dirty
    assert render.process() is True
    assert render.process(force=True) is True
    assert render.frames == 3
    assert len(render.lines()) == 2 + 4 * INNER_CELL_HEIGHT + 3
