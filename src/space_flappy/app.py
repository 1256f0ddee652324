"""
app.py: The pygame window, the per-frame main loop and teardown.
"""

import logging
import random
from typing import Optional

import pygame

from . import constants
from .config import GameConfig
from .device import TouchDetector
from .game_loop import GameLoop
from .input_adapter import InputAdapter
from .physics_engine import GameEngine
from .presentation import PresentationShell
from .renderer import Renderer
from .scheduler import FrameScheduler

logger = logging.getLogger(__name__)

PAGE_COLOR = (3, 7, 18)


class SpaceFlappyApp:
    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        self.config = config or GameConfig()
        rng = random.Random(seed)

        self.scheduler = FrameScheduler()
        self.engine = GameEngine(config=self.config, rng=rng)
        self.renderer = Renderer(self.config, rng)
        self.loop = GameLoop(self.engine, self.scheduler, self.renderer)

        self.window_size = (self.config.field_width,
                            self.config.field_height + constants.FOOTER_HEIGHT)
        self.canvas_rect = pygame.Rect(0, 0, self.config.field_width, self.config.field_height)
        self.detector = TouchDetector(self.window_size[0], self.config.touch_override)

        self.screen: Optional[pygame.Surface] = None
        self.canvas: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.input: Optional[InputAdapter] = None
        self.shell: Optional[PresentationShell] = None

    def setup(self) -> bool:
        """Opens the window and canvas. Returns False if no display is available."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(self.window_size, pygame.RESIZABLE)
        except pygame.error as e:
            logger.warning("Could not open a display: %s", e)
            pygame.quit()
            return False
        pygame.display.set_caption(constants.WINDOW_TITLE)

        self.canvas = pygame.Surface((self.config.field_width, self.config.field_height))
        if not self.loop.attach(self.canvas):
            pygame.quit()
            return False

        self.clock = pygame.time.Clock()
        self.input = InputAdapter(self.loop, self.canvas_rect, self._current_window_size)
        self.shell = PresentationShell(self.loop, self.canvas_rect)
        self._layout(*self.window_size)
        logger.info("Window ready (%dx%d canvas)", self.config.field_width, self.config.field_height)
        return True

    def _current_window_size(self):
        return self.screen.get_size() if self.screen else self.window_size

    def _layout(self, width: int, height: int):
        """Centers the canvas horizontally and refreshes the touch signal."""
        self.canvas_rect.x = max(0, (width - self.canvas_rect.width) // 2)
        self.canvas_rect.y = 0
        self.loop.touch_primary = self.detector.on_resize(width)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.VIDEORESIZE:
                self._layout(event.w, event.h)
            self.input.handle(event)

    def draw(self):
        self.screen.fill(PAGE_COLOR)
        self.screen.blit(self.canvas, self.canvas_rect)
        self.shell.draw(self.screen, self.loop.touch_primary)
        pygame.display.flip()

    def run(self):
        """The main execution loop: one scheduler frame per display refresh."""
        if not self.setup():
            return

        try:
            while not self.input.quit_requested:
                self.clock.tick(self.config.fps)
                self.handle_events()
                self.scheduler.run_pending()
                self.draw()
        finally:
            self.teardown()

    def teardown(self):
        self.loop.dispose()
        self.scheduler.clear()
        pygame.quit()
        logger.info("Closed with score %d", self.loop.score)
