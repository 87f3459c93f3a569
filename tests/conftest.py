"""
Shared fixtures. pygame runs without a window or sound device.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random  # noqa: E402
import pytest  # noqa: E402
from src.models.pong import GameOptions  # noqa: E402
from src.pong.game_state import GameState  # noqa: E402


@pytest.fixture
def options():
    return GameOptions()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state(options, rng):
    return GameState.new(options, rng)
