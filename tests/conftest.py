import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from blockbreaker.config import DEFAULT_CONFIG
from blockbreaker.world import GameWorld


@pytest.fixture
def config():
    return DEFAULT_CONFIG


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def world(rng, config):
    return GameWorld(rng, config)


@pytest.fixture
def env():
    from blockbreaker.env import GameEnv

    env = GameEnv()
    env.reset(seed=0)
    yield env
    env.close()
