"""UI rendering utilities for the cat toy screensaver.

This module handles the on-screen overlay: the touch hint shown until the
first interaction and the status line with population, speed and kind.
"""

from typing import Any, Dict, Optional

import pygame

from cattoy.config.display import HINT_COLOR, HINT_TEXT, HUD_PAUSED_COLOR, HUD_TEXT_COLOR


class UIRenderer:
    """Renders overlay text on top of the scene.

    Attributes:
        screen: Pygame surface to render to
        font: Font for overlay text; without one nothing is drawn
        show_status: Whether the status line is visible
    """

    def __init__(self, screen: pygame.Surface, font: Optional[pygame.font.Font]) -> None:
        self.screen = screen
        self.font = font
        self.show_status: bool = True

    def set_screen(self, screen: pygame.Surface) -> None:
        self.screen = screen

    def draw_hint(self) -> None:
        """Centered "tap to play" hint."""
        if self.font is None:
            return
        text = self.font.render(HINT_TEXT, True, HINT_COLOR)
        x = (self.screen.get_width() - text.get_width()) // 2
        y = self.screen.get_height() - text.get_height() * 3
        self.screen.blit(text, (x, y))

    def format_status(self, stats: Dict[str, Any]) -> str:
        line = (
            f"{stats['population']}/{stats['max_population']} | "
            f"{stats['kind']} | speed x{stats['speed']:.2f}"
        )
        if stats["paused"]:
            line += " | PAUSED"
        return line

    def draw_status(self, stats: Dict[str, Any]) -> None:
        if self.font is None or not self.show_status:
            return
        color = HUD_PAUSED_COLOR if stats["paused"] else HUD_TEXT_COLOR
        text = self.font.render(self.format_status(stats), True, color)
        self.screen.blit(text, (10, 10))
