"""
physics_engine.py: The game state machine and the ordered per-tick simulation.
"""

import logging
import random
from dataclasses import dataclass, field

from .config import GameConfig
from .data_models import Actor, GamePhase, Obstacle, SessionState
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class GameEngine:
    """
    Owns the session state and advances it one tick at a time.
    Knows nothing about scheduling or drawing.
    """
    config: GameConfig = field(default_factory=GameConfig)
    rng: random.Random = field(default_factory=random.Random)
    tick_count: int = 0

    def __post_init__(self):
        self.core = PhysicsCore(self.config)
        self.state = SessionState(actor=Actor(y=self.config.field_height / 2))

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def running(self) -> bool:
        return self.state.phase is GamePhase.RUNNING

    def start(self):
        """Start or restart: the same reset from NOT_STARTED and from OVER."""
        self.core.respawn(self.state.actor)
        self.state.obstacles = []
        self.state.score = 0
        self.tick_count = 0
        previous = self.state.phase
        self.state.phase = GamePhase.RUNNING
        logger.info("Game %s", "restarted" if previous is GamePhase.OVER else "started")

    def jump(self) -> bool:
        """Applies the jump impulse. Ignored unless the game is running."""
        if not self.running:
            return False
        self.state.actor.velocity = self.core.jump()
        return True

    def _end(self, reason: str):
        self.state.phase = GamePhase.OVER
        logger.info("Game over after %d ticks (%s), score %d",
                    self.tick_count, reason, self.state.score)

    def _spawn_obstacle(self):
        """Appends a new obstacle at the right edge with a random gap."""
        gap_top = self.rng.uniform(self.config.min_height, self.config.max_gap_top)
        self.state.obstacles.append(Obstacle(x=float(self.config.field_width), gap_top=gap_top))
        logger.debug("Spawned obstacle with gap top %.1f", gap_top)

    def _spawn_due(self) -> bool:
        obstacles = self.state.obstacles
        if not obstacles:
            return True
        return obstacles[-1].x < self.config.field_width - self.config.spawn_spacing

    def step(self) -> bool:
        """
        Runs one tick. Returns True if the game is still running afterwards.
        Does nothing when the game is not running.
        """
        if not self.running:
            return False
        self.tick_count += 1
        actor = self.state.actor

        # 1-2. Integrate velocity, then position
        actor.y, actor.velocity = self.core.apply_gravity_and_movement(actor.y, actor.velocity)

        # 3. Ceiling / floor
        if self.core.is_out_of_bounds(actor.y):
            self._end("out of bounds")
            return False

        # 4. Spawn
        if self._spawn_due():
            self._spawn_obstacle()

        # 5. Scroll, recycle, collide, score (oldest first)
        obstacles = self.state.obstacles
        i = 0
        while i < len(obstacles):
            obstacle = obstacles[i]
            obstacle.x -= self.config.scroll_speed
            if self.core.is_off_screen(obstacle):
                del obstacles[i]
                continue

            if self.core.check_collision(actor.y, obstacle):
                self._end("hit obstacle")
                return False

            if not obstacle.scored and self.core.has_passed(obstacle):
                obstacle.scored = True
                self.state.score += 1
                logger.debug("Scored, total %d", self.state.score)
            i += 1

        return True
