"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class GamePhase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


@dataclass
class Actor:
    """The flying chick. Its horizontal lane is fixed by the config."""
    y: float
    velocity: float = 0.0


@dataclass
class Obstacle:
    """A tree pair with a gap; `gap_top` never changes once spawned."""
    x: float
    gap_top: float
    scored: bool = False


@dataclass
class SessionState:
    """Everything the simulation mutates between ticks."""
    actor: Actor
    obstacles: List[Obstacle] = field(default_factory=list)
    score: int = 0
    phase: GamePhase = GamePhase.NOT_STARTED

