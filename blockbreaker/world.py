"""The game world and its per-frame state machine.

``GameWorld`` owns every piece of mutable game state. ``update`` is the only
place that changes it; the renderer reads it and never writes.
"""

import logging
from collections import namedtuple

from .config import DEFAULT_CONFIG
from .entities import Ball, Player, build_board
from .geometry import resolve_collision
from .states import GameState

logger = logging.getLogger(__name__)

Controls = namedtuple("Controls", ["left", "right", "start"], defaults=(False, False, False))


class GameWorld:
    def __init__(self, rng, config=DEFAULT_CONFIG):
        self.config = config
        self.rng = rng
        self.state = GameState.MENU
        self.score = 0
        self.lives = config.INITIAL_LIVES
        self.player = Player(config)
        self.blocks = build_board(config)
        self.balls = []
        self.points_this_frame = 0
        self._serve_ball()

    # --- Entry actions ---

    def _serve_ball(self):
        self.balls.append(Ball(self.config.ball_spawn_point, self.rng, self.config))

    def _full_reset(self):
        self.player = Player(self.config)
        self.score = 0
        self.lives = self.config.INITIAL_LIVES
        self.balls.clear()
        self.blocks = build_board(self.config)

    def _continue_after_lost_life(self):
        # Blocks survive a lost life, only the paddle and balls start over.
        self.player = Player(self.config)
        self.balls.clear()
        self._serve_ball()

    def _enter(self, state):
        logger.debug("state %s -> %s", self.state.value, state.value)
        self.state = state

    # --- Per-frame dispatch ---

    def update(self, dt, controls):
        self.points_this_frame = 0
        if self.state is GameState.MENU:
            self._update_menu(controls)
        elif self.state is GameState.GAME:
            self._update_game(dt, controls)
        elif self.state is GameState.LEVEL_COMPLETED:
            self._update_level_completed(controls)
        elif self.state is GameState.DEAD:
            self._update_dead(controls)
        else:
            raise ValueError(f"Unknown game state: {self.state!r}")

    def _update_menu(self, controls):
        if controls.start:
            self._enter(GameState.GAME)
            self._serve_ball()

    def _update_level_completed(self, controls):
        if controls.start:
            self._enter(GameState.MENU)
            self._full_reset()

    def _update_dead(self, controls):
        if controls.start:
            self._enter(GameState.MENU)
            self._full_reset()
            # Unlike a completed level, the first ball is served right away.
            self._serve_ball()

    def _update_game(self, dt, controls):
        self.player.update(dt, controls.left, controls.right)
        for ball in self.balls:
            ball.update(dt)

        spawn_later = self._collide_balls()
        self.balls.extend(spawn_later)

        self._remove_fallen_balls()

        self.blocks = [block for block in self.blocks if block.alive]
        if not self.blocks:
            logger.info("level completed with score %d", self.score)
            self._enter(GameState.LEVEL_COMPLETED)

    def _collide_balls(self):
        """Bounce every ball off the paddle and blocks.

        New balls for destroyed blocks are returned instead of appended, so the
        ball list is not modified while it is being walked.
        """
        spawn_later = []
        for ball in self.balls:
            resolve_collision(ball.rect, ball.vel, self.player.rect)
            for block in self.blocks:
                if not block.alive:
                    continue
                if resolve_collision(ball.rect, ball.vel, block.rect) and block.hit():
                    self.score += self.config.BLOCK_AWARD
                    self.points_this_frame += self.config.BLOCK_AWARD
                    spawn_later.append(Ball(self.config.ball_spawn_point, self.rng, self.config))
        return spawn_later

    def _remove_fallen_balls(self):
        before = len(self.balls)
        self.balls = [ball for ball in self.balls if not ball.is_out()]
        if before == len(self.balls) or self.balls:
            return

        self.lives -= 1
        logger.info("all balls lost, %d lives left", self.lives)
        if self.lives > 0:
            self._continue_after_lost_life()
            self._enter(GameState.MENU)
        else:
            self._enter(GameState.DEAD)

    # --- Queries ---

    @property
    def is_over(self):
        return self.state in (GameState.DEAD, GameState.LEVEL_COMPLETED)
