"""Shared fixtures: headless pygame, a recording sound stub and a game context."""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from config.config import SCREEN_HEIGHT, SCREEN_WIDTH  # noqa: E402
from shooter.assets import GameContext  # noqa: E402


class RecordingSounds:
    """Stands in for SoundManager and remembers what was played."""

    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)

    def count(self, name):
        return self.played.count(name)


def make_texture(size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


@pytest.fixture
def sounds():
    return RecordingSounds()


@pytest.fixture
def context(sounds):
    return GameContext(
        screen_size=(SCREEN_WIDTH, SCREEN_HEIGHT),
        player_texture=make_texture((64, 64), (0, 0, 255)),
        enemy_texture=make_texture((64, 64), (0, 255, 0)),
        background_texture=make_texture((16, 16), (255, 255, 255)),
        sounds=sounds,
    )


@pytest.fixture
def rng():
    return random.Random(1234)
