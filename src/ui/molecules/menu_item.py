"""
Menu item molecule - Text-based menu items.
"""

import pygame
from typing import Optional

from ui.theme import Theme, default_theme
from ui.atoms.text import Text


class MenuItem:
    """
    Menu item molecule.

    Renders a text row with highlight and disabled states, an optional
    checkbox and optional right-aligned secondary text.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        highlighted: bool = False,
        disabled: bool = False,
        checked: Optional[bool] = None,
        secondary_text: Optional[str] = None,
    ) -> pygame.Rect:
        """
        Render a menu item.

        Args:
            screen: Surface to render to
            rect: Item rectangle
            label: Primary text
            highlighted: Item is highlighted/hovered
            disabled: Item cannot be chosen
            checked: Draw a checkbox in this state (None for no checkbox)
            secondary_text: Optional secondary text (right side)

        Returns:
            Item rect
        """
        padding = self.theme.padding_sm
        content_left = rect.left + padding
        content_right = rect.right - padding

        if highlighted and not disabled:
            pygame.draw.rect(screen, self.theme.surface_hover, rect, border_radius=self.theme.radius_sm)

        if checked is not None:
            box = pygame.Rect(content_left, rect.centery - 9, 18, 18)
            border = self.theme.primary if checked else self.theme.text_secondary
            pygame.draw.rect(screen, border, box, width=2, border_radius=3)
            if checked:
                points = [
                    (box.left + 4, box.centery),
                    (box.centerx - 1, box.bottom - 5),
                    (box.right - 4, box.top + 4),
                ]
                pygame.draw.lines(screen, self.theme.primary, False, points, 2)
            content_left = box.right + padding

        size = self.theme.font_size_sm
        _, text_height = self.text.measure(label, size=size)
        text_y = rect.centery - text_height // 2

        if secondary_text:
            secondary_rect = self.text.render(
                screen,
                secondary_text,
                (content_right, text_y),
                color=self.theme.text_secondary,
                size=self.theme.font_size_xs,
                align="right",
            )
            content_right = secondary_rect.left - padding

        if disabled:
            color = self.theme.text_disabled
        elif highlighted:
            color = self.theme.primary_light
        else:
            color = self.theme.text_primary

        self.text.render(
            screen,
            label,
            (content_left, text_y),
            color=color,
            size=size,
            max_width=max(10, content_right - content_left),
        )

        return rect
