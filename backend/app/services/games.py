"""In-memory store of bowling games shared by the HTTP routes."""

from __future__ import annotations

from asyncio import Lock
import logging
import uuid
from typing import Any

from ..exceptions import GameIncomplete, GameNotFound
from ..scoring import bowling
from ..scoring.bowling import BowlingGame, IncompleteGameError, summarize_game

logger = logging.getLogger(__name__)


class GameRegistry:
    """Games keyed by id; one lock covers every read and write."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._games: dict[str, BowlingGame] = {}

    def _get(self, game_id: str) -> BowlingGame:
        game = self._games.get(game_id)
        if game is None:
            logger.warning("Lookup for unknown bowling game %s", game_id)
            raise GameNotFound(game_id)
        return game

    async def create(self) -> str:
        game_id = uuid.uuid4().hex
        async with self._lock:
            self._games[game_id] = BowlingGame()
        logger.info("Created bowling game %s", game_id)
        return game_id

    async def record(self, game_id: str, pins: int) -> list[int]:
        async with self._lock:
            game = self._get(game_id)
            game.record(pins)
            return game.rolls

    async def apply_event(self, game_id: str, event: dict[str, Any]) -> dict[str, Any]:
        """Validate ``event`` through the engine protocol, then record it."""
        async with self._lock:
            game = self._get(game_id)
            game.record(bowling.roll_from_event(event))
            return summarize_game(game)

    async def rolls(self, game_id: str) -> list[int]:
        async with self._lock:
            return self._get(game_id).rolls

    async def score(self, game_id: str) -> int:
        async with self._lock:
            game = self._get(game_id)
            try:
                return game.score()
            except IncompleteGameError as exc:
                raise GameIncomplete(game_id, exc.frame) from exc

    async def summary(self, game_id: str) -> dict[str, Any]:
        async with self._lock:
            return summarize_game(self._get(game_id))

    async def delete(self, game_id: str) -> None:
        async with self._lock:
            self._get(game_id)
            del self._games[game_id]
        logger.info("Deleted bowling game %s", game_id)

    async def clear(self) -> None:
        async with self._lock:
            self._games.clear()

    def __len__(self) -> int:
        return len(self._games)


game_registry = GameRegistry()


def get_game_registry() -> GameRegistry:
    return game_registry
