"""
Spinner atom - Busy indicator for listings, previews and uploads.
"""

import math
import pygame
from typing import Tuple, Optional

from ui.theme import Theme, Color, default_theme

ARC_SPAN = math.pi * 0.75
LINE_WIDTH = 4


class Spinner:
    """Arc that turns around a faint track, driven by pygame ticks."""

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

    def render(
        self,
        screen: pygame.Surface,
        center: Tuple[int, int],
        size: int = 48,
        color: Optional[Color] = None,
        speed: float = 1.0,
    ) -> pygame.Rect:
        """
        Draw the spinner at the current animation phase.

        Args:
            screen: Target surface
            center: Center point
            size: Outer diameter
            color: Arc color, primary when omitted
            speed: Turns per second

        Returns:
            Bounding rect
        """
        bounds = pygame.Rect(0, 0, size, size)
        bounds.center = center

        pygame.draw.circle(screen, self.theme.surface_hover, center, size // 2, LINE_WIDTH)

        turns = pygame.time.get_ticks() / 1000.0 * speed
        start = -(turns % 1.0) * 2 * math.pi
        pygame.draw.arc(screen, color or self.theme.primary, bounds, start, start + ARC_SPAN, LINE_WIDTH)

        return bounds
