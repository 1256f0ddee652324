"""
renderer.py: Draws the simulation state onto the canvas surface.
"""

import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import pygame

from . import constants
from .config import GameConfig
from .data_models import Actor, SessionState


@dataclass
class Star:
    x: float
    y: float
    size: float


def make_starfield(width: int, height: int, rng: random.Random,
                   count: int = constants.STAR_COUNT) -> List[Star]:
    """Random star positions; only regenerated when the surface is (re)created."""
    return [
        Star(
            x=rng.random() * width,
            y=rng.random() * height,
            size=rng.uniform(constants.STAR_MIN_SIZE, constants.STAR_MAX_SIZE),
        )
        for _ in range(count)
    ]


def tilt_for(velocity: float) -> float:
    """Nose up while climbing, down while falling, clamped to MAX_TILT radians."""
    return max(-constants.MAX_TILT, min(velocity * constants.TILT_FACTOR, constants.MAX_TILT))


def branch_rects(x: float, gap_top: float, config: GameConfig) -> List[Tuple[float, float, float, float]]:
    """The four decorative accents of one obstacle, as (x, y, w, h)."""
    gap_bottom = gap_top + config.gap_height
    right = x + config.obstacle_width
    return [
        (x - 15, gap_top - 20, 15, 5),
        (right, gap_top - 40, 15, 5),
        (x - 15, gap_bottom + 30, 15, 5),
        (right, gap_bottom + 50, 15, 5),
    ]


def restart_hint(touch_primary: bool) -> str:
    return "Tap to Restart" if touch_primary else "Press Space to Restart"


class Renderer:
    """Holds the starfield and fonts; everything else comes from the state."""

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random()
        self.stars: List[Star] = []
        self._fonts: Dict[int, pygame.font.Font] = {}

    def reset_surface(self, width: int, height: int):
        self.stars = make_starfield(width, height, self.rng)

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    # --- Layers ---

    def draw_background(self, surface: pygame.Surface):
        surface.fill(constants.BACKGROUND_COLOR)
        for star in self.stars:
            pygame.draw.circle(surface, constants.STAR_COLOR, (int(star.x), int(star.y)),
                               max(1, round(star.size)))

    def draw_obstacles(self, surface: pygame.Surface, state: SessionState):
        width = self.config.obstacle_width
        height = surface.get_height()
        for obstacle in state.obstacles:
            gap_bottom = obstacle.gap_top + self.config.gap_height
            pygame.draw.rect(surface, constants.OBSTACLE_COLOR,
                             (obstacle.x, 0, width, obstacle.gap_top))
            pygame.draw.rect(surface, constants.OBSTACLE_COLOR,
                             (obstacle.x, gap_bottom, width, height - gap_bottom))
            for rect in branch_rects(obstacle.x, obstacle.gap_top, self.config):
                pygame.draw.rect(surface, constants.BRANCH_COLOR, rect)

    def draw_actor(self, surface: pygame.Surface, actor: Actor):
        cx, cy = self.config.actor_x, actor.y
        radius = self.config.sprite_size / 2
        angle = tilt_for(actor.velocity)
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        def rotate(dx, dy):
            return (cx + dx * cos_a - dy * sin_a, cy + dx * sin_a + dy * cos_a)

        pygame.draw.circle(surface, constants.CHICK_BODY_COLOR, (int(cx), int(cy)), int(radius))
        beak = [rotate(radius * 0.7, -radius * 0.25), rotate(radius * 1.3, 0),
                rotate(radius * 0.7, radius * 0.25)]
        pygame.draw.polygon(surface, constants.CHICK_BEAK_COLOR, beak)
        ex, ey = rotate(radius * 0.35, -radius * 0.35)
        pygame.draw.circle(surface, constants.CHICK_EYE_COLOR, (int(ex), int(ey)),
                           max(1, int(radius * 0.15)))

    def draw_centered_text(self, surface: pygame.Surface, text: str, size: int, center_y: float):
        rendered = self.font(size).render(text, True, constants.TEXT_COLOR)
        rect = rendered.get_rect(center=(surface.get_width() // 2, int(center_y)))
        surface.blit(rendered, rect)

    # --- Frames ---

    def draw_idle(self, surface: pygame.Surface, state: SessionState):
        """Background plus a preview chick before the first start."""
        self.draw_background(surface)
        self.draw_actor(surface, state.actor)

    def draw_frame(self, surface: pygame.Surface, state: SessionState):
        self.draw_background(surface)
        self.draw_obstacles(surface, state)
        self.draw_actor(surface, state.actor)

    def draw_game_over(self, surface: pygame.Surface, state: SessionState, touch_primary: bool):
        self.draw_frame(surface, state)
        mid = surface.get_height() / 2
        self.draw_centered_text(surface, "Game Over!", 30, mid - 30)
        self.draw_centered_text(surface, f"Score: {state.score}", 30, mid + 10)
        self.draw_centered_text(surface, restart_hint(touch_primary), 20, mid + 50)
