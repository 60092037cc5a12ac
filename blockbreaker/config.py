"""Game constants.

Everything that sizes, paces or colours the game lives on ``GameConfig`` so
tests can build smaller playfields with ``dataclasses.replace``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class GameConfig:
    # --- Playfield ---
    SCREEN_WIDTH: int = 1000
    SCREEN_HEIGHT: int = 700
    FPS: int = 60
    MAX_STEPS: int = 10000

    # --- Entities ---
    PLAYER_WIDTH: float = 150.0
    PLAYER_HEIGHT: float = 40.0
    PLAYER_SPEED: float = 700.0
    PLAYER_BOTTOM_OFFSET: float = 50.0
    BLOCK_WIDTH: float = 100.0
    BLOCK_HEIGHT: float = 40.0
    BLOCK_LIVES: int = 2
    BALL_SIZE: float = 50.0
    BALL_SPEED: float = 400.0
    BALL_SPAWN_DROP: float = 80.0  # below screen centre

    # --- Board ---
    BOARD_COLS: int = 10
    BOARD_ROWS: int = 6
    BOARD_PADDING: float = 5.0
    BOARD_TOP: float = 50.0

    # --- Rules ---
    INITIAL_LIVES: int = 3
    BLOCK_AWARD: int = 10

    # --- Colors ---
    COLOR_BG: Color = (255, 255, 255)
    COLOR_PLAYER: Color = (0, 121, 241)
    COLOR_BALL: Color = (80, 80, 80)
    COLOR_BLOCK_STRONG: Color = (0, 228, 48)
    COLOR_BLOCK: Color = (230, 41, 55)
    COLOR_BLOCK_WEAK: Color = (255, 161, 0)
    COLOR_TEXT: Color = (0, 0, 0)
    COLOR_SCORE: Color = (0, 117, 44)
    COLOR_LIVES: Color = (255, 109, 194)

    # --- Fonts ---
    # None means the font file bundled with pygame.
    FONT_PATH: Optional[str] = None
    FONT_SIZE_LARGE: int = 50
    FONT_SIZE_HUD: int = 25
    HUD_BASELINE: float = 40.0
    HUD_LEFT: float = 30.0

    def __post_init__(self):
        for name in (
            "SCREEN_WIDTH", "SCREEN_HEIGHT", "FPS", "PLAYER_WIDTH", "PLAYER_HEIGHT",
            "PLAYER_SPEED", "BLOCK_WIDTH", "BLOCK_HEIGHT", "BALL_SIZE", "BALL_SPEED",
            "BOARD_COLS", "BOARD_ROWS", "INITIAL_LIVES",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.BLOCK_LIVES < 1:
            raise ValueError("BLOCK_LIVES must be at least 1")

    @property
    def frame_time(self) -> float:
        return 1.0 / self.FPS

    @property
    def ball_spawn_point(self) -> Tuple[float, float]:
        return (self.SCREEN_WIDTH * 0.5, self.SCREEN_HEIGHT * 0.5 + self.BALL_SPAWN_DROP)


DEFAULT_CONFIG = GameConfig()
