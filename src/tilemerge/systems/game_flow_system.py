"""Moves the session from PLAYING to WON, LOST or QUIT."""
from __future__ import annotations

import logging

from esper import World

from tilemerge.components.game_state import GameMode
from tilemerge.constants import WIN_THRESHOLD
from tilemerge.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_GAME_LOST,
    EVENT_GAME_QUIT,
    EVENT_GAME_WON,
    EVENT_QUIT_REQUEST,
    EventBus,
)
from tilemerge.systems.board_ops import max_tile
from tilemerge.systems.game_over import has_lost, has_won
from tilemerge.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self._on_board_changed)
        self.event_bus.subscribe(EVENT_QUIT_REQUEST, self._on_quit_request)

    @property
    def mode(self) -> GameMode:
        state = get_game_state(self.world)
        return state.mode if state is not None else GameMode.PLAYING

    def _threshold(self) -> int:
        state = get_game_state(self.world)
        return state.win_threshold if state is not None else WIN_THRESHOLD

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_board_changed(self, sender, **payload) -> None:
        self.evaluate()

    def _on_quit_request(self, sender, **payload) -> None:
        if self.mode.terminal:
            return
        reason = payload.get("reason", "quit")
        set_game_mode(self.world, self.event_bus, GameMode.QUIT)
        logger.info("Game quit (%s)", reason)
        self.event_bus.emit(EVENT_GAME_QUIT, reason=reason)

    # ------------------------------------------------------------------
    # Terminal checks
    # ------------------------------------------------------------------

    def evaluate(self) -> GameMode:
        """Check win before loss; returns the resulting mode."""
        if self.mode.terminal:
            return self.mode
        if has_won(self.world, self._threshold()):
            best = max_tile(self.world)
            set_game_mode(self.world, self.event_bus, GameMode.WON)
            logger.info("Game won with tile %d", best)
            self.event_bus.emit(EVENT_GAME_WON, max_tile=best)
        elif has_lost(self.world):
            best = max_tile(self.world)
            set_game_mode(self.world, self.event_bus, GameMode.LOST)
            logger.info("Game lost with best tile %d", best)
            self.event_bus.emit(EVENT_GAME_LOST, max_tile=best)
        return self.mode
