"""
Space Flappy Bird: a chick flaps through scrolling space trees.
"""

from .config import GameConfig
from .data_models import Actor, GamePhase, Obstacle, SessionState
from .physics_engine import GameEngine

__all__ = ["GameConfig", "Actor", "GamePhase", "Obstacle", "SessionState", "GameEngine"]

__version__ = "0.1.0"
