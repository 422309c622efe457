"""Entry point for the tilemerge terminal game.

Sets up the ECS world, event bus, systems, and the curses screen.
"""
import argparse
import curses
import logging
import random

from tilemerge.components.game_state import GameMode
from tilemerge.constants import GRID_SIZE, WIN_THRESHOLD
from tilemerge.events.bus import EventBus, EVENT_KEY_PRESS
from tilemerge.systems.board import BoardSystem
from tilemerge.systems.game_flow_system import GameFlowSystem
from tilemerge.systems.input import InputSystem
from tilemerge.systems.render import RenderSystem, end_message
from tilemerge.utils.game_state import current_mode
from tilemerge.world import create_world

logger = logging.getLogger(__name__)


class TileMergeGame:
    def __init__(self, screen=None, *, size: int = GRID_SIZE, target: int = WIN_THRESHOLD,
                 rng: random.Random | None = None):
        self.screen = screen
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, win_threshold=target, rng=rng)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus, size)
        self.input_system = InputSystem(self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, screen)

    @property
    def mode(self) -> GameMode:
        return current_mode(self.world) or GameMode.PLAYING

    def handle_key(self, key) -> None:
        self.event_bus.emit(EVENT_KEY_PRESS, key=key)
        self.render_system.process()

    def run(self) -> GameMode:
        self.game_flow_system.evaluate()
        self.render_system.process(force=True)
        while not self.mode.terminal:
            self.handle_key(self.screen.getch())
        return self.mode


def _play(screen, args: argparse.Namespace) -> GameMode:
    curses.raw()
    curses.curs_set(0)
    screen.keypad(True)
    rng = random.Random(args.seed) if args.seed is not None else None
    game = TileMergeGame(screen, size=args.size, target=args.target, rng=rng)
    return game.run()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Slide and merge tiles until one reaches the target.")
    parser.add_argument("--size", type=int, default=GRID_SIZE, help="board dimension (default: %(default)s)")
    parser.add_argument("--target", type=int, default=WIN_THRESHOLD, help="tile value that wins (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None, help="seed for tile spawning")
    parser.add_argument("--log-file", default=None, help="write logs to this file")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.size < 2:
        parser.error("--size must be at least 2")
    return args


def configure_logging(log_file: str | None, level: str) -> None:
    # Nothing goes to stderr while curses owns the terminal.
    if log_file is None:
        logging.getLogger("tilemerge").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    mode = curses.wrapper(_play, args)
    message = end_message(mode)
    if message:
        print(message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
