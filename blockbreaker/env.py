import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

from .config import DEFAULT_CONFIG
from .render import Renderer
from .world import Controls, GameWorld

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    # Must be a short, user-facing control string:
    user_guide = "Controls: ← and → move the paddle. Press Space to start or continue."

    # Must be a short, user-facing description of the game:
    game_description = (
        "Deflect balls with your paddle to break every block. Each broken block releases another ball."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    def __init__(self, render_mode="rgb_array", config=None):
        super().__init__()
        self.render_mode = render_mode
        self.config = config or DEFAULT_CONFIG

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.config.SCREEN_HEIGHT, self.config.SCREEN_WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.config.SCREEN_WIDTH, self.config.SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()
        # Raises FontLoadError before any frame is produced.
        self.renderer = Renderer(self.screen, self.config)

        # State variables are initialized in reset()
        self.world = None
        self.steps = 0
        self.prev_space_held = False

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.world = GameWorld(self.np_random, self.config)
        self.steps = 0
        self.prev_space_held = False

        return self._get_observation(), self._get_info()

    def step(self, action, dt=None):
        if dt is None:
            dt = self.config.frame_time

        controls = self._handle_input(action)
        self.world.update(dt, controls)
        self.steps += 1

        reward = float(self.world.points_this_frame)
        terminated = self.world.is_over
        truncated = self.steps >= self.config.MAX_STEPS

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info()
        )

    def _handle_input(self, action):
        movement, space_held = action[0], action[1] == 1

        # Space is a "pressed" key: only the frame it goes down counts.
        start = space_held and not self.prev_space_held
        self.prev_space_held = space_held

        return Controls(left=movement == 3, right=movement == 4, start=start)

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        self.renderer.draw(self.world)
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        return {
            "score": self.world.score,
            "steps": self.steps,
            "lives": self.world.lives,
            "state": self.world.state.value,
            "balls": len(self.world.balls),
            "blocks_remaining": len(self.world.blocks),
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.config.SCREEN_HEIGHT, self.config.SCREEN_WIDTH, 3)
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.config.SCREEN_HEIGHT, self.config.SCREEN_WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert isinstance(trunc, bool)
        assert isinstance(info, dict)

        # Test specific game mechanics
        self.reset()
        full_board = self.config.BOARD_COLS * self.config.BOARD_ROWS
        assert len(self.world.blocks) == full_board, "Board is not full after reset"
        assert self.world.lives == self.config.INITIAL_LIVES, "Lives incorrect at start"

        print("✓ Implementation validated successfully")
