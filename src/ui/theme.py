"""
Theme and design tokens for File Browser.
Centralizes all visual constants for consistent styling.
"""

from dataclasses import dataclass
from typing import Tuple, Optional

# Type alias for colors
Color = Tuple[int, int, int]
ColorAlpha = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Theme:
    """
    Design tokens for the application UI.

    Immutable so screens can share one instance.
    """

    # ---- Base Colors ---- #
    background: Color = (24, 26, 31)
    surface: Color = (38, 41, 48)
    surface_hover: Color = (50, 54, 63)
    surface_selected: Color = (36, 62, 102)

    # ---- Accents ---- #
    primary: Color = (66, 135, 245)
    primary_dark: Color = (44, 98, 186)
    primary_light: Color = (120, 170, 250)
    folder: Color = (232, 184, 72)

    # ---- Text Colors ---- #
    text_primary: Color = (235, 237, 240)
    text_secondary: Color = (160, 166, 178)
    text_disabled: Color = (95, 100, 110)

    # ---- Status Colors ---- #
    error: Color = (230, 80, 70)
    success: Color = (80, 190, 120)

    # ---- Effects ---- #
    shadow: ColorAlpha = (0, 0, 0, 90)

    # ---- Spacing ---- #
    padding_xs: int = 4
    padding_sm: int = 8
    padding_md: int = 16
    padding_lg: int = 24

    # ---- Typography ---- #
    font_size_xs: int = 14
    font_size_sm: int = 18
    font_size_md: int = 24
    font_size_lg: int = 32
    font_path: Optional[str] = None  # pygame default font

    # ---- Border Radius ---- #
    radius_sm: int = 4
    radius_md: int = 8
    radius_lg: int = 12

    # ---- Component Sizes ---- #
    button_height: int = 40
    menu_item_height: int = 40
    card_size: Tuple[int, int] = (140, 130)
    icon_size: int = 56
    grid_columns: int = 6

    cursor_blink_rate: int = 500  # ms

    @property
    def card_padding(self) -> int:
        """Default card padding."""
        return self.padding_sm


# Default theme instance
default_theme = Theme()
