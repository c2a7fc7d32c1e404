import os

# Headless SDL so pygame never needs a real window or sound card.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from retrosnake.game import Game


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def game():
    return Game(rng=random.Random(1234))


@pytest.fixture
def fake_clock():
    return FakeClock()
