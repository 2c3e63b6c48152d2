"""
Button atom - Button shapes and round icon buttons.
"""

import pygame
from typing import Tuple, Optional

from ui.theme import Theme, Color, default_theme

HOVER_LIGHTEN = 0.15


def lighten(color: Color, amount: float) -> Color:
    """Blend ``color`` towards white by ``amount`` (0..1)."""
    return tuple(min(255, int(channel + (255 - channel) * amount)) for channel in color)


class Button:
    """
    Button atom.

    ``render`` fills a rounded rect (labels are drawn by ActionButton);
    ``render_icon_button`` draws the close and previous/next buttons of
    dialogs.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        color: Optional[Color] = None,
        border_color: Optional[Color] = None,
        border_width: int = 0,
        hover: bool = False,
    ) -> pygame.Rect:
        """Fill the button shape, lighter while hovered, with an optional outline."""
        fill = color or self.theme.primary
        if hover:
            fill = lighten(fill, HOVER_LIGHTEN)

        radius = self.theme.radius_sm
        pygame.draw.rect(screen, fill, rect, border_radius=radius)
        if border_color is not None and border_width:
            pygame.draw.rect(screen, border_color, rect, border_width, border_radius=radius)
        return rect

    def render_icon_button(
        self,
        screen: pygame.Surface,
        center: Tuple[int, int],
        size: int,
        icon_type: str = "close",
        color: Optional[Color] = None,
        icon_color: Optional[Color] = None,
    ) -> pygame.Rect:
        """
        Draw a round button with a line icon.

        Args:
            screen: Target surface
            center: Button center
            size: Diameter
            icon_type: "close", "prev" or "next"
            color: Disc color
            icon_color: Stroke color of the icon

        Returns:
            Bounding rect, for hit-testing
        """
        bounds = pygame.Rect(0, 0, size, size)
        bounds.center = center
        pygame.draw.circle(screen, color or self.theme.surface_hover, center, size // 2)

        stroke = icon_color or self.theme.text_primary
        cx, cy = center
        arm = size // 4
        if icon_type == "close":
            pygame.draw.line(screen, stroke, (cx - arm, cy - arm), (cx + arm, cy + arm), 2)
            pygame.draw.line(screen, stroke, (cx - arm, cy + arm), (cx + arm, cy - arm), 2)
        elif icon_type in ("prev", "next"):
            # Chevron pointing left for prev, right for next
            tip = -arm // 2 if icon_type == "prev" else arm // 2
            chevron = [(cx - tip, cy - arm), (cx + tip, cy), (cx - tip, cy + arm)]
            pygame.draw.lines(screen, stroke, False, chevron, 3)
        return bounds
