import logging
import os

import pygame

from .errors import FontLoadError
from .states import GameState

logger = logging.getLogger(__name__)


def default_font_path():
    return os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())


def load_font(path, size):
    if path is None:
        path = default_font_path()
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        font = pygame.font.Font(path, size)
    except (FileNotFoundError, OSError, pygame.error) as e:
        raise FontLoadError(f"Could not load font {path!r}: {e}") from e
    logger.debug("loaded font %s at size %d", path, size)
    return font


def _to_pygame_rect(rect):
    return pygame.Rect(int(rect[0]), int(rect[1]), int(rect[2]), int(rect[3]))


class Renderer:
    """Draws a ``GameWorld`` onto a pygame surface. Never mutates the world."""

    def __init__(self, surface, config):
        self.surface = surface
        self.config = config
        self.font_large = load_font(config.FONT_PATH, config.FONT_SIZE_LARGE)
        self.font_hud = load_font(config.FONT_PATH, config.FONT_SIZE_HUD)

    def draw(self, world):
        self.surface.fill(self.config.COLOR_BG)
        self._render_game(world)

        if world.state is GameState.MENU:
            self._draw_centered("Press SPACE to start")
        elif world.state is GameState.GAME:
            self._render_hud(world)
        elif world.state is GameState.LEVEL_COMPLETED:
            self._draw_centered(f"You win! {world.score} score")
        elif world.state is GameState.DEAD:
            self._draw_centered("You died")
        else:
            raise ValueError(f"Unknown game state: {world.state!r}")

    def _render_game(self, world):
        pygame.draw.rect(self.surface, world.player.color, _to_pygame_rect(world.player.rect))
        for block in world.blocks:
            pygame.draw.rect(self.surface, block.color, _to_pygame_rect(block.rect))
        for ball in world.balls:
            pygame.draw.rect(self.surface, ball.color, _to_pygame_rect(ball.rect))

    def _render_hud(self, world):
        # Both HUD lines sit on a shared text baseline.
        top = int(self.config.HUD_BASELINE - self.font_hud.get_ascent())

        score_text = self.font_hud.render(f"score : {world.score}", True, self.config.COLOR_SCORE)
        score_rect = score_text.get_rect(midtop=(self.config.SCREEN_WIDTH // 2, top))
        self.surface.blit(score_text, score_rect)

        lives_text = self.font_hud.render(f"lives : {world.lives}", True, self.config.COLOR_LIVES)
        self.surface.blit(lives_text, (self.config.HUD_LEFT, top))

    def _draw_centered(self, text):
        width, height = self.font_large.size(text)
        pos = (
            self.config.SCREEN_WIDTH * 0.5 - width * 0.5,
            self.config.SCREEN_HEIGHT * 0.5 - height * 0.5,
        )
        self.surface.blit(self.font_large.render(text, True, self.config.COLOR_TEXT), pos)
