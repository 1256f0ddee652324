"""
presentation.py: Start overlay, score readout and instruction copy around the canvas.
"""

import pygame

from . import constants
from .game_loop import GameLoop


def instruction_text(touch_primary: bool) -> str:
    return "Tap on the game to flap" if touch_primary else "Press SPACE or click to flap"


def start_prompt(touch_primary: bool) -> str:
    return "Tap to Start" if touch_primary else "Press Space or Click to Start"


class PresentationShell:
    """Only reads score, game-over and started from the loop; never mutates it."""

    def __init__(self, loop: GameLoop, canvas_rect: pygame.Rect):
        self.loop = loop
        self.canvas_rect = canvas_rect
        self.title_font = pygame.font.Font(None, 48)
        self.body_font = pygame.font.Font(None, 28)
        self.small_font = pygame.font.Font(None, 22)

    def _blit_centered(self, surface, font, text, color, center):
        rendered = font.render(text, True, color)
        surface.blit(rendered, rendered.get_rect(center=center))

    def draw(self, surface: pygame.Surface, touch_primary: bool):
        if not self.loop.started:
            self.draw_start_overlay(surface, touch_primary)
        elif not self.loop.game_over:
            self.draw_footer(surface, touch_primary)

    def draw_start_overlay(self, surface: pygame.Surface, touch_primary: bool):
        overlay = pygame.Surface(self.canvas_rect.size, pygame.SRCALPHA)
        overlay.fill(constants.OVERLAY_COLOR)
        surface.blit(overlay, self.canvas_rect.topleft)

        cx, cy = self.canvas_rect.center
        self._blit_centered(surface, self.title_font, constants.WINDOW_TITLE,
                            constants.TEXT_COLOR, (cx, cy - 50))
        self._blit_centered(surface, self.body_font, "Help the chick navigate through space!",
                            constants.TEXT_COLOR, (cx, cy))
        self._blit_centered(surface, self.body_font, start_prompt(touch_primary),
                            constants.ACCENT_COLOR, (cx, cy + 50))

    def draw_footer(self, surface: pygame.Surface, touch_primary: bool):
        cx = self.canvas_rect.centerx
        top = self.canvas_rect.bottom
        self._blit_centered(surface, self.body_font, f"Score: {self.loop.score}",
                            constants.TEXT_COLOR, (cx, top + 18))
        self._blit_centered(surface, self.small_font, instruction_text(touch_primary),
                            constants.MUTED_TEXT_COLOR, (cx, top + 44))
