"""
Options menu organism - Context menu opened at the pointer.
"""

import pygame
from typing import List, Tuple

from ui.theme import Theme, default_theme
from ui.atoms.surface import Surface
from ui.organisms.menu_list import MenuList
from ui.view_models import OptionsMenuItem

MENU_WIDTH = 200


class OptionsMenu:
    """Floating menu kept inside the screen bounds."""

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.surface = Surface(theme)
        self.menu_list = MenuList(theme)

    def render(
        self,
        screen: pygame.Surface,
        position: Tuple[int, int],
        items: List[OptionsMenuItem],
        highlighted: int = -1,
    ) -> Tuple[pygame.Rect, List[pygame.Rect]]:
        """
        Render the menu with its top-left corner at ``position``.

        Returns:
            Tuple of (menu rect, item rects)
        """
        padding = self.theme.padding_xs
        item_height = self.theme.menu_item_height
        menu_rect = pygame.Rect(
            position[0], position[1], MENU_WIDTH, len(items) * item_height + padding * 2
        )
        menu_rect.clamp_ip(screen.get_rect())

        self.surface.render(
            screen,
            menu_rect,
            shadow=True,
            border_color=self.theme.surface_hover,
            border_width=1,
        )

        item_rects, _ = self.menu_list.render(
            screen,
            menu_rect.inflate(-padding * 2, -padding * 2),
            items,
            highlighted=highlighted,
            disabled={i for i, item in enumerate(items) if not item.enabled},
            item_height=item_height,
        )
        return menu_rect, item_rects
