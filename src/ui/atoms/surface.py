"""
Surface atom - Panels behind cards, menus and dialogs.
"""

import pygame
from typing import Optional

from ui.theme import Theme, Color, default_theme

SHADOW_OFFSET = 3


class Surface:
    """
    Rounded panel atom.

    File cards pass their selection and hover flags and let the panel
    pick the fill; menus and dialogs pass an explicit color.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

    def fill_for(self, selected: bool, highlighted: bool) -> Color:
        """Panel color for a card state. Selection wins over hover."""
        if selected:
            return self.theme.surface_selected
        if highlighted:
            return self.theme.surface_hover
        return self.theme.surface

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        color: Optional[Color] = None,
        shadow: bool = False,
        border_color: Optional[Color] = None,
        border_width: int = 0,
        selected: bool = False,
        highlighted: bool = False,
    ) -> pygame.Rect:
        """
        Draw a panel.

        Args:
            screen: Target surface
            rect: Panel area
            color: Explicit fill, overrides the selected/highlighted fill
            shadow: Draw a soft drop shadow below the panel
            border_color: Outline color, None for no outline
            border_width: Outline width in pixels
            selected: Card is part of the selection
            highlighted: Pointer is over the card

        Returns:
            The panel rect
        """
        radius = self.theme.radius_md

        if shadow:
            shade = pygame.Surface(rect.size, pygame.SRCALPHA)
            pygame.draw.rect(shade, self.theme.shadow, shade.get_rect(), border_radius=radius)
            screen.blit(shade, rect.move(0, SHADOW_OFFSET))

        fill = color if color is not None else self.fill_for(selected, highlighted)
        pygame.draw.rect(screen, fill, rect, border_radius=radius)

        if border_color is not None and border_width:
            pygame.draw.rect(screen, border_color, rect, border_width, border_radius=radius)

        return rect

    def render_modal_backdrop(self, screen: pygame.Surface, alpha: int = 160) -> None:
        """Dim the browser behind an open dialog."""
        veil = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        r, g, b = self.theme.background
        veil.fill((r, g, b, alpha))
        screen.blit(veil, (0, 0))
