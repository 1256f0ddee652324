"""
input_adapter.py: Maps raw pygame events onto the game loop's logical inputs.
"""

from typing import Callable, Tuple

import pygame

from .game_loop import GameLoop


class InputAdapter:
    """
    Space, a primary click on the canvas and a touch on the canvas all
    become one activation: a jump while running, a start otherwise.
    """

    def __init__(self, loop: GameLoop, canvas_rect: pygame.Rect,
                 window_size: Callable[[], Tuple[int, int]]):
        self.loop = loop
        self.canvas_rect = canvas_rect
        self.window_size = window_size
        self.quit_requested = False

    def handle(self, event: pygame.event.Event) -> bool:
        """Returns True if the event was consumed as a game activation."""
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.quit_requested = True
                return False
            if event.key == pygame.K_SPACE:
                self.loop.activate()
                return True
            return False

        if event.type == pygame.MOUSEBUTTONDOWN:
            # SDL mirrors touches as mouse clicks; the FINGERDOWN already counted
            if getattr(event, "touch", False) or event.button != 1:
                return False
            if self.canvas_rect.collidepoint(event.pos):
                self.loop.activate()
                return True
            return False

        if event.type == pygame.FINGERDOWN:
            width, height = self.window_size()
            pos = (int(event.x * width), int(event.y * height))
            if self.canvas_rect.collidepoint(pos):
                self.loop.activate()
                return True
            return False

        return False
