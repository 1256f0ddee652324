from __future__ import annotations

import random

import pygame
import pytest

from space_flappy import constants
from space_flappy.config import GameConfig
from space_flappy.data_models import Actor, Obstacle, SessionState
from space_flappy.renderer import (
    Renderer,
    branch_rects,
    make_starfield,
    restart_hint,
    tilt_for,
)


def rgb(surface: pygame.Surface, pos: tuple[int, int]) -> tuple[int, int, int]:
    return tuple(surface.get_at(pos))[:3]


@pytest.fixture()
def renderer(config: GameConfig) -> Renderer:
    r = Renderer(config, random.Random(42))
    r.reset_surface(800, 500)
    return r


def test_starfield_is_reproducible_and_inside_the_field() -> None:
    stars = make_starfield(800, 500, random.Random(5))
    again = make_starfield(800, 500, random.Random(5))
    assert stars == again
    assert len(stars) == 100
    for star in stars:
        assert 0 <= star.x < 800
        assert 0 <= star.y < 500
        assert 1.0 <= star.size <= 3.0


def test_starfield_only_changes_when_surface_is_recreated(renderer: Renderer) -> None:
    stars = list(renderer.stars)
    surface = pygame.Surface((800, 500))
    renderer.draw_frame(surface, SessionState(actor=Actor(y=250.0)))
    assert renderer.stars == stars
    renderer.reset_surface(800, 500)
    assert renderer.stars != stars


@pytest.mark.parametrize("velocity, expected", [(0.0, 0.0), (4.0, 0.2), (-8.0, -0.4), (20.0, 0.5), (-30.0, -0.5)])
def test_tilt_is_clamped(velocity: float, expected: float) -> None:
    assert tilt_for(velocity) == pytest.approx(expected)


def test_branch_accents_sit_at_fixed_offsets(config: GameConfig) -> None:
    rects = branch_rects(300.0, 120.0, config)
    assert rects == [
        (285.0, 100.0, 15, 5),
        (350.0, 80.0, 15, 5),
        (285.0, 300.0, 15, 5),
        (350.0, 320.0, 15, 5),
    ]


def test_frame_draws_obstacles_and_actor(renderer: Renderer) -> None:
    renderer.stars = []
    surface = pygame.Surface((800, 500))
    state = SessionState(actor=Actor(y=250.0), obstacles=[Obstacle(x=400.0, gap_top=200.0)])

    renderer.draw_frame(surface, state)

    assert rgb(surface, (10, 10)) == constants.BACKGROUND_COLOR
    assert rgb(surface, (425, 100)) == constants.OBSTACLE_COLOR
    assert rgb(surface, (425, 275)) == constants.BACKGROUND_COLOR
    assert rgb(surface, (425, 450)) == constants.OBSTACLE_COLOR
    assert rgb(surface, (390, 182)) == constants.BRANCH_COLOR
    assert rgb(surface, (100, 250)) == constants.CHICK_BODY_COLOR


def test_idle_frame_shows_preview_actor(renderer: Renderer) -> None:
    renderer.stars = []
    surface = pygame.Surface((800, 500))
    renderer.draw_idle(surface, SessionState(actor=Actor(y=250.0)))
    assert rgb(surface, (100, 250)) == constants.CHICK_BODY_COLOR


def test_restart_hint_depends_on_touch() -> None:
    assert restart_hint(True) == "Tap to Restart"
    assert restart_hint(False) == "Press Space to Restart"


def test_game_over_frame_overlays_text(renderer: Renderer) -> None:
    renderer.stars = []
    plain = pygame.Surface((800, 500))
    over = pygame.Surface((800, 500))
    state = SessionState(actor=Actor(y=100.0), score=7)

    renderer.draw_frame(plain, state)
    renderer.draw_game_over(over, state, touch_primary=False)

    center_band = [(x, y) for x in range(300, 500, 2) for y in range(210, 310, 2)]
    assert any(rgb(over, p) != rgb(plain, p) for p in center_band)
