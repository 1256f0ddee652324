from __future__ import annotations

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from space_flappy.config import GameConfig
from space_flappy.physics_engine import GameEngine
from space_flappy.scheduler import FrameScheduler


@pytest.fixture(autouse=True)
def _init_pygame_fonts():
    """Headless font support; app teardown may have shut pygame down."""
    pygame.font.init()


@pytest.fixture()
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture()
def engine(config: GameConfig) -> GameEngine:
    return GameEngine(config=config, rng=random.Random(1234))


@pytest.fixture()
def scheduler() -> FrameScheduler:
    return FrameScheduler()
