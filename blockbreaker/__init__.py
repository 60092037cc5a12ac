"""Arcade block breaker.

``GameEnv`` (in ``blockbreaker.env``) wraps the game as a gymnasium
environment; ``python -m blockbreaker`` plays it in a window.
"""

from .config import DEFAULT_CONFIG, GameConfig
from .errors import BlockBreakerError, FontLoadError
from .states import GameState
from .world import Controls, GameWorld

__all__ = [
    "BlockBreakerError",
    "Controls",
    "DEFAULT_CONFIG",
    "FontLoadError",
    "GameConfig",
    "GameState",
    "GameWorld",
]
