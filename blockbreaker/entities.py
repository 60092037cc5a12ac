import numpy as np

from .geometry import make_rect


class Player:
    """The paddle. Only moves horizontally and never leaves the screen."""

    def __init__(self, config):
        self.config = config
        self.rect = make_rect(
            config.SCREEN_WIDTH * 0.5 - config.PLAYER_WIDTH * 0.5,
            config.SCREEN_HEIGHT - config.PLAYER_BOTTOM_OFFSET,
            config.PLAYER_WIDTH,
            config.PLAYER_HEIGHT,
        )

    def update(self, dt, left, right):
        if left and not right:
            x_move = -1.0
        elif right and not left:
            x_move = 1.0
        else:
            x_move = 0.0
        self.rect[0] += x_move * dt * self.config.PLAYER_SPEED
        self.rect[0] = np.clip(self.rect[0], 0.0, self.config.SCREEN_WIDTH - self.rect[2])

    @property
    def color(self):
        return self.config.COLOR_PLAYER


class Block:
    def __init__(self, pos, config):
        self.config = config
        self.rect = make_rect(pos[0], pos[1], config.BLOCK_WIDTH, config.BLOCK_HEIGHT)
        self.lives = config.BLOCK_LIVES

    @property
    def alive(self):
        return self.lives > 0

    def hit(self):
        """Take one hit. Returns True if this hit destroyed the block."""
        self.lives -= 1
        return self.lives <= 0

    @property
    def color(self):
        # Blocks start at 2 lives, so the strong tier only shows if that changes.
        if self.lives == 3:
            return self.config.COLOR_BLOCK_STRONG
        if self.lives == 2:
            return self.config.COLOR_BLOCK
        return self.config.COLOR_BLOCK_WEAK


class Ball:
    def __init__(self, pos, rng, config):
        self.config = config
        self.rect = make_rect(pos[0], pos[1], config.BALL_SIZE, config.BALL_SIZE)
        vel = np.array([rng.uniform(-1.0, 1.0), 1.0], dtype=np.float64)
        self.vel = vel / np.linalg.norm(vel)

    def update(self, dt):
        self.rect[:2] += self.vel * dt * self.config.BALL_SPEED

        # No bottom wall: balls that fall out are removed by the world.
        if self.rect[0] < 0:
            self.vel[0] = 1.0
        if self.rect[0] > self.config.SCREEN_WIDTH - self.rect[2]:
            self.vel[0] = -1.0
        if self.rect[1] < 0:
            self.vel[1] = 1.0

    def is_out(self):
        return self.rect[1] >= self.config.SCREEN_HEIGHT

    @property
    def color(self):
        return self.config.COLOR_BALL


def build_board(config):
    """Lay out a fresh grid of blocks centred horizontally."""
    stride_x = config.BLOCK_WIDTH + config.BOARD_PADDING
    stride_y = config.BLOCK_HEIGHT + config.BOARD_PADDING
    start_x = (config.SCREEN_WIDTH - stride_x * config.BOARD_COLS) * 0.5

    blocks = []
    for i in range(config.BOARD_COLS * config.BOARD_ROWS):
        col, row = i % config.BOARD_COLS, i // config.BOARD_COLS
        blocks.append(Block((start_x + col * stride_x, config.BOARD_TOP + row * stride_y), config))
    return blocks
