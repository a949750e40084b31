import random
from collections import deque

import pytest

from termsnake.config import Config, RIGHT
from termsnake.game import GameState


@pytest.fixture
def cfg():
    return Config(width=20, height=20, seed=0)


@pytest.fixture
def make_state(cfg):
    """Build a GameState from an explicit body, heading and food."""
    def _make(snake, direction=RIGHT, food=(15, 15), config=None, seed=0):
        return GameState(
            snake=deque(snake),
            direction=direction,
            pending=direction,
            food=food,
            cfg=config or cfg,
            rng=random.Random(seed),
        )
    return _make
