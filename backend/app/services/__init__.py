"""Internal application services."""

from .games import GameRegistry, game_registry, get_game_registry

__all__ = [
    "GameRegistry",
    "game_registry",
    "get_game_registry",
]
