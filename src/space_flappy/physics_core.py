"""
physics_core.py: Per-tick kinematics plus bounds, collision and scoring checks for the chick.
"""

from typing import Tuple

from .config import GameConfig
from .data_models import Actor, Obstacle


class PhysicsCore:
    """
    Stateless physics used by the engine. All distances are pixels and all
    velocities pixels per tick; one call advances exactly one tick.
    """

    def __init__(self, config: GameConfig):
        self.config = config
        self.hitbox_half = config.hitbox_half

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """
        Calculates new position and velocity after one tick.
        Velocity is integrated before position.
        """
        velocity += self.config.gravity
        y += velocity
        return y, velocity

    def jump(self) -> float:
        """Returns the velocity after a jump, whatever it was before."""
        return self.config.jump_impulse

    def is_out_of_bounds(self, y: float) -> bool:
        """Touching the ceiling or the floor with the hitbox counts."""
        return y - self.hitbox_half <= 0 or y + self.hitbox_half >= self.config.field_height

    def overlaps_lane(self, obstacle: Obstacle) -> bool:
        actor_x = self.config.actor_x
        return (obstacle.x < actor_x + self.hitbox_half
                and obstacle.x + self.config.obstacle_width > actor_x - self.hitbox_half)

    def check_collision(self, y: float, obstacle: Obstacle) -> bool:
        """Checks the actor hitbox against the solid parts of one obstacle."""
        if not self.overlaps_lane(obstacle):
            return False
        gap_bottom = obstacle.gap_top + self.config.gap_height
        return y - self.hitbox_half < obstacle.gap_top or y + self.hitbox_half > gap_bottom

    def has_passed(self, obstacle: Obstacle) -> bool:
        """True once the obstacle's trailing edge is left of the actor lane."""
        return obstacle.x + self.config.obstacle_width < self.config.actor_x

    def is_off_screen(self, obstacle: Obstacle) -> bool:
        return obstacle.x + self.config.obstacle_width < 0

    def respawn(self, actor: Actor):
        actor.y = self.config.field_height / 2
        actor.velocity = 0.0
