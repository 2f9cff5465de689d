from __future__ import annotations

import logging
from threading import Lock
from typing import Any

from engine.game import CheckersGame
from engine.position import Position

from .schemas import MoveRequest, TapRequest
from .serializers import serialize_game

logger = logging.getLogger(__name__)


class GameSession:
    """Thread-safe orchestrator around a single CheckersGame instance."""

    def __init__(self) -> None:
        self.lock = Lock()
        self.game = CheckersGame()

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def reset(self) -> dict[str, Any]:
        with self.lock:
            self.game.reset()
            logger.info("Game reset.")
            return self._serialize_locked()

    def check_move(self, start: Position, end: Position) -> dict[str, Any]:
        with self.lock:
            return {
                "start": {"x": start.x, "y": start.y},
                "end": {"x": end.x, "y": end.y},
                "valid": self.game.is_valid_move(start, end),
            }

    def make_move(self, payload: MoveRequest) -> dict[str, Any]:
        with self.lock:
            start = payload.start.to_position()
            end = payload.end.to_position()
            if not self.game.is_valid_move(start, end):
                raise ValueError(f"Move {start} -> {end} is not legal.")
            self.game.apply_move(start, end)
            self.game.clear_selection()
            return self._serialize_locked()

    def tap(self, payload: TapRequest) -> dict[str, Any]:
        with self.lock:
            outcome = self.game.tap(payload.to_position())
            logger.debug("Tap at %s,%s -> %s", payload.x, payload.y, outcome.value)
            return {"outcome": outcome.value, **self._serialize_locked()}

    # helpers ------------------------------------------------------------

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(self.game)
