from __future__ import annotations

import pytest

from space_flappy.config import GameConfig
from space_flappy.data_models import Actor, Obstacle
from space_flappy.physics_core import PhysicsCore


@pytest.fixture()
def wide_hitbox_core() -> PhysicsCore:
    # Sprite 36 at full scale gives a hitbox half-size of 18.
    return PhysicsCore(GameConfig(sprite_size=36, hitbox_scale=1.0))


def test_velocity_integrates_before_position(config: GameConfig) -> None:
    core = PhysicsCore(config)
    y, v = core.apply_gravity_and_movement(100.0, -3.0)
    assert v == -3.0 + config.gravity
    assert y == 100.0 + v


def test_jump_overwrites_any_velocity(config: GameConfig) -> None:
    core = PhysicsCore(config)
    assert core.jump() == config.jump_impulse == -8.0


def test_default_hitbox_is_sixty_percent_of_sprite(config: GameConfig) -> None:
    assert PhysicsCore(config).hitbox_half == pytest.approx(9.0)


@pytest.mark.parametrize(
    "y, expected",
    [(9.0, True), (9.5, False), (250.0, False), (490.5, False), (491.0, True), (-5.0, True)],
)
def test_bounds_include_touching_the_edges(config: GameConfig, y: float, expected: bool) -> None:
    assert PhysicsCore(config).is_out_of_bounds(y) is expected


def test_obstacle_above_gap_collides(wide_hitbox_core: PhysicsCore) -> None:
    obstacle = Obstacle(x=80.0, gap_top=200.0)
    # top edge 195 - 18 = 177 is above the gap top
    assert wide_hitbox_core.check_collision(195.0, obstacle)


def test_top_edge_just_inside_gap_uses_strict_inequality(wide_hitbox_core: PhysicsCore) -> None:
    obstacle = Obstacle(x=80.0, gap_top=200.0)
    # top edge 210 - 18 = 192 is still above 200
    assert wide_hitbox_core.check_collision(210.0, obstacle)
    # top edge exactly on the gap top is not a hit
    assert not wide_hitbox_core.check_collision(218.0, obstacle)


def test_bottom_of_gap(wide_hitbox_core: PhysicsCore) -> None:
    obstacle = Obstacle(x=80.0, gap_top=200.0)
    # gap bottom is 350
    assert not wide_hitbox_core.check_collision(332.0, obstacle)
    assert wide_hitbox_core.check_collision(333.0, obstacle)


def test_no_collision_outside_the_lane(wide_hitbox_core: PhysicsCore) -> None:
    ahead = Obstacle(x=118.0, gap_top=200.0)
    behind = Obstacle(x=32.0, gap_top=200.0)
    assert not wide_hitbox_core.overlaps_lane(ahead)
    assert not wide_hitbox_core.overlaps_lane(behind)
    assert not wide_hitbox_core.check_collision(0.0, ahead)
    assert wide_hitbox_core.overlaps_lane(Obstacle(x=117.0, gap_top=200.0))


def test_passed_and_off_screen(config: GameConfig) -> None:
    core = PhysicsCore(config)
    assert not core.has_passed(Obstacle(x=50.0, gap_top=100.0))
    assert core.has_passed(Obstacle(x=49.5, gap_top=100.0))
    assert not core.is_off_screen(Obstacle(x=-50.0, gap_top=100.0))
    assert core.is_off_screen(Obstacle(x=-50.5, gap_top=100.0))


def test_respawn_centers_and_stops(config: GameConfig) -> None:
    actor = Actor(y=12.0, velocity=7.5)
    PhysicsCore(config).respawn(actor)
    assert actor.y == 250.0
    assert actor.velocity == 0.0
