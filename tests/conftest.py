import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from collapse_config import make_config


@pytest.fixture
def small_config():
    return make_config(WIDTH=4, HEIGHT=3, N_LINES=2, SEED=7, BOMB_CHANCE=0.0)
