import logging
import os
import sys

# Remember whether the caller picked a video driver before the env module
# installs its headless default.
_USER_VIDEO_DRIVER = os.environ.get("SDL_VIDEODRIVER")

import numpy as np
import pygame

from .env import GameEnv
from .errors import FontLoadError
from .policies import policy

logger = logging.getLogger("blockbreaker")

HEADLESS_STEPS = 1000


def _keys_to_action(keys):
    left, right = keys[pygame.K_LEFT], keys[pygame.K_RIGHT]
    action = np.array([0, 0, 0])
    if left and not right:
        action[0] = 3
    elif right and not left:
        action[0] = 4
    action[1] = 1 if keys[pygame.K_SPACE] else 0
    return action


def _use_real_video_driver():
    # Must run before GameEnv calls pygame.init(), which would otherwise start
    # the display on the headless driver.
    if _USER_VIDEO_DRIVER is None:
        os.environ.pop("SDL_VIDEODRIVER", None)


def _open_window(env):
    if pygame.display.get_init() and pygame.display.get_driver() == "dummy" and _USER_VIDEO_DRIVER is None:
        pygame.display.quit()
        os.environ.pop("SDL_VIDEODRIVER", None)
    try:
        pygame.display.init()
        screen = pygame.display.set_mode((env.config.SCREEN_WIDTH, env.config.SCREEN_HEIGHT))
        pygame.display.set_caption("BreakOut")
    except pygame.error as e:
        logger.warning("Pygame display could not be initialized (%s). Running in headless mode.", e)
        return None
    if pygame.display.get_driver() == "dummy":
        logger.warning("No video device (dummy driver). Running in headless mode.")
        return None
    return screen


def main(config=None):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    _use_real_video_driver()
    try:
        env = GameEnv(render_mode="rgb_array", config=config)
    except FontLoadError as e:
        logger.error("%s", e)
        sys.exit(1)

    screen = _open_window(env)
    is_headless = screen is None

    obs, info = env.reset()
    dt = env.config.frame_time

    running = True
    while running:
        if is_headless:
            action = policy(env)
        else:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            action = _keys_to_action(pygame.key.get_pressed())

        obs, reward, terminated, truncated, info = env.step(action, dt=dt)

        if not is_headless:
            surf = pygame.surfarray.make_surface(np.transpose(obs, (1, 0, 2)))
            screen.blit(surf, (0, 0))
            pygame.display.flip()
            dt = env.clock.tick(env.config.FPS) / 1000.0

        if truncated:
            running = False

        # Example of headless run: break after some steps
        if is_headless and env.steps >= HEADLESS_STEPS:
            running = False

    print(f"Final score: {info['score']}, lives: {info['lives']}, state: {info['state']}")
    env.close()


if __name__ == "__main__":
    main()
