"""
Action button molecule - Labelled button used in dialogs and the error view.
"""

import pygame

from ui.theme import Theme, default_theme
from ui.atoms.button import Button
from ui.atoms.text import Text

# Theme attribute holding the fill of each button style
STYLE_COLORS = {
    "primary": "primary",
    "secondary": "surface_hover",
    "danger": "error",
}


class ActionButton:
    """Rounded button with a centered label, e.g. Retry, Delete, Upload."""

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.button = Button(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        style: str = "primary",
        hover: bool = False,
        disabled: bool = False,
    ) -> pygame.Rect:
        """
        Draw the button.

        Args:
            screen: Target surface
            rect: Button area
            label: Text on the button
            style: "primary", "secondary" or "danger"
            hover: Pointer over the button or keyboard focus on it
            disabled: Greyed out, e.g. Upload with nothing picked

        Returns:
            The button rect, for hit-testing
        """
        focused = hover and not disabled
        if disabled:
            fill = self.theme.surface
            label_color = self.theme.text_disabled
        else:
            fill = getattr(self.theme, STYLE_COLORS.get(style, "primary"))
            label_color = self.theme.text_primary

        self.button.render(
            screen,
            rect,
            color=fill,
            hover=focused,
            border_color=self.theme.primary_light if focused else None,
            border_width=2,
        )

        size = self.theme.font_size_sm
        label_height = self.text.get_font(size).get_height()
        self.text.render(
            screen,
            label,
            (rect.centerx, rect.centery - label_height // 2),
            color=label_color,
            size=size,
            max_width=rect.width - 2 * self.theme.padding_sm,
            align="center",
        )
        return rect
