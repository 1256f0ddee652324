"""
game_loop.py: Drives the engine from the frame scheduler and hands frames to the renderer.
"""

import logging
from typing import Optional

import pygame

from .data_models import GamePhase
from .physics_engine import GameEngine
from .renderer import Renderer
from .scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Connects inputs, the engine, the scheduler and the renderer.

    Inputs only record intents: a jump sets the velocity straight away, a
    start request raises a flag that the next tick consumes. Exactly one
    tick is scheduled at a time while running, and none once the game is
    over or the loop has been disposed.
    """

    def __init__(self, engine: GameEngine, scheduler: FrameScheduler,
                 renderer: Optional[Renderer] = None, touch_primary: bool = False):
        self.engine = engine
        self.scheduler = scheduler
        self.renderer = renderer
        self.touch_primary = touch_primary
        self.surface: Optional[pygame.Surface] = None
        self._frame_handle: Optional[int] = None
        self._pending_start = False
        self._disposed = False

    # --- Read-only outputs for the presentation shell ---

    @property
    def score(self) -> int:
        return self.engine.state.score

    @property
    def game_over(self) -> bool:
        return self.engine.phase is GamePhase.OVER

    @property
    def started(self) -> bool:
        return self.engine.phase is not GamePhase.NOT_STARTED

    @property
    def running(self) -> bool:
        return self.engine.running

    @property
    def tick_scheduled(self) -> bool:
        return self._frame_handle is not None

    # --- Setup / teardown ---

    def attach(self, surface: Optional[pygame.Surface]) -> bool:
        """Binds the drawing surface. Without one the loop never starts."""
        if surface is None:
            logger.warning("No drawing surface available; game loop not started")
            return False
        self.surface = surface
        if self.renderer is not None:
            self.renderer.reset_surface(surface.get_width(), surface.get_height())
            self.renderer.draw_idle(surface, self.engine.state)
        return True

    def dispose(self):
        """Cancels any scheduled tick; later ticks and inputs are ignored."""
        self._cancel_tick()
        self._pending_start = False
        self._disposed = True
        self.surface = None
        logger.debug("Game loop disposed")

    # --- Inputs ---

    def jump(self) -> bool:
        if self._disposed:
            return False
        return self.engine.jump()

    def request_start(self) -> bool:
        """Queues a start/restart for the next tick. Ignored while running."""
        if self._disposed or self.surface is None or self.engine.running:
            return False
        self._pending_start = True
        self._schedule_tick()
        return True

    def activate(self):
        """A single physical activation: jump while running, otherwise (re)start."""
        if self.engine.running:
            self.jump()
        else:
            self.request_start()

    # --- Ticking ---

    def _schedule_tick(self):
        if self._frame_handle is None:
            self._frame_handle = self.scheduler.request(self.tick)

    def _cancel_tick(self):
        if self._frame_handle is not None:
            self.scheduler.cancel(self._frame_handle)
            self._frame_handle = None

    def tick(self):
        """One display refresh: consume intents, step once, draw, reschedule."""
        self._frame_handle = None
        if self._disposed:
            return
        if self._pending_start:
            self._pending_start = False
            self.engine.start()
        if not self.engine.running:
            return

        if not self.engine.step():
            self._cancel_tick()
            if self.renderer is not None and self.surface is not None:
                self.renderer.draw_game_over(self.surface, self.engine.state, self.touch_primary)
            return

        if self.renderer is not None and self.surface is not None:
            self.renderer.draw_frame(self.surface, self.engine.state)
        self._schedule_tick()
