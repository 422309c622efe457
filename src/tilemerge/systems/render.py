import curses
import logging
from typing import Dict, Optional, Tuple

from esper import World

from tilemerge.components.game_state import GameMode
from tilemerge.constants import FALLBACK_TILE_COLOR, INNER_CELL_HEIGHT, INNER_CELL_WIDTH, TILE_COLORS
from tilemerge.events.bus import EventBus, EVENT_BOARD_CHANGED, EVENT_GAME_MODE_CHANGED
from tilemerge.systems.board_ops import board_snapshot
from tilemerge.ui.layout import Line, board_lines
from tilemerge.utils.game_state import current_mode

logger = logging.getLogger(__name__)

CURSES_COLORS = {
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}

END_MESSAGES = {
    GameMode.WON: "You won!",
    GameMode.LOST: "You lost!",
    GameMode.QUIT: "Bye",
}

HELP_TEXT = "arrows/WASD: move   q/Esc: quit"


def tile_colors(value: int) -> Tuple[str, str]:
    return TILE_COLORS.get(value, FALLBACK_TILE_COLOR)


def end_message(mode: Optional[GameMode]) -> Optional[str]:
    return END_MESSAGES.get(mode)


class RenderSystem:
    """Draws the board on a curses screen whenever the board changed."""

    def __init__(self, world: World, event_bus: EventBus, screen=None):
        self.world = world
        self.event_bus = event_bus
        self.screen = screen
        self.cell_width = INNER_CELL_WIDTH
        self.cell_height = INNER_CELL_HEIGHT
        self._dirty = True
        self._color_pairs: Dict[Tuple[str, str], int] = {}
        self.frames = 0
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)
        self.event_bus.subscribe(EVENT_GAME_MODE_CHANGED, self.on_game_mode_changed)

    def on_board_changed(self, sender, **kwargs):
        self._dirty = True

    def on_game_mode_changed(self, sender, **kwargs):
        self._dirty = True

    @property
    def dirty(self) -> bool:
        return self._dirty

    def lines(self) -> list[Line]:
        return board_lines(board_snapshot(self.world), self.cell_width, self.cell_height)

    def process(self, force: bool = False) -> bool:
        """Redraw if needed; returns True when a frame was drawn."""
        if not (self._dirty or force):
            return False
        self._dirty = False
        self.frames += 1
        if self.screen is not None:
            self._draw()
        return True

    # ------------------------------------------------------------------
    # curses drawing
    # ------------------------------------------------------------------

    def _init_colors(self) -> None:
        if self._color_pairs or not curses.has_colors():
            return
        curses.start_color()
        pairs = sorted(set(TILE_COLORS.values()) | {FALLBACK_TILE_COLOR})
        for index, (fg, bg) in enumerate(pairs, start=1):
            curses.init_pair(index, CURSES_COLORS[fg], CURSES_COLORS[bg])
            self._color_pairs[(fg, bg)] = index

    def _attr_for(self, value: Optional[int]) -> int:
        if value is None:
            return curses.A_NORMAL
        pair = self._color_pairs.get(tile_colors(value))
        return curses.color_pair(pair) if pair else curses.A_NORMAL

    def _draw(self) -> None:
        self._init_colors()
        screen = self.screen
        screen.erase()
        max_y, max_x = screen.getmaxyx()
        y = 0
        for line in self.lines():
            if y >= max_y - 1:
                break
            x = 0
            for text, value in line:
                if x >= max_x:
                    break
                try:
                    screen.addstr(y, x, text[: max_x - x], self._attr_for(value))
                except curses.error:
                    # Writing the bottom-right cell raises even though the text is drawn.
                    pass
                x += len(text)
            y += 1
        footer = end_message(current_mode(self.world)) or HELP_TEXT
        if y < max_y:
            try:
                screen.addstr(y, 0, footer[: max_x - 1])
            except curses.error:
                pass
        screen.refresh()
