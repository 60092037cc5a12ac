from enum import Enum


class GameState(Enum):
    MENU = "menu"
    GAME = "game"
    LEVEL_COMPLETED = "level_completed"
    DEAD = "dead"
