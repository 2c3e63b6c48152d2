"""
File card molecule - Icon, name field and detail line for one entry.
"""

import pygame
from typing import Tuple

from ui.theme import Theme, Color, default_theme
from ui.atoms.surface import Surface
from ui.atoms.text import Text
from ui.view_models import FileCardView


class FileCard:
    """
    File card molecule.

    Draws a folder or file icon, the entry name (an editable field with
    a cursor while renaming) and a secondary detail line.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.surface = Surface(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        card: FileCardView,
        highlighted: bool = False,
        show_cursor: bool = False,
    ) -> Tuple[pygame.Rect, pygame.Rect]:
        """
        Render a file card.

        Args:
            screen: Surface to render to
            rect: Card rectangle
            card: View model of the entry
            highlighted: Pointer is over the card
            show_cursor: Draw the text cursor (blink phase)

        Returns:
            Tuple of (card rect, name field rect)
        """
        self.surface.render(
            screen,
            rect,
            selected=card.selected,
            highlighted=highlighted,
            shadow=True,
            border_color=self.theme.primary if card.selected else None,
            border_width=2,
        )

        padding = self.theme.card_padding
        icon_size = self.theme.icon_size
        icon_rect = pygame.Rect(0, 0, icon_size, icon_size)
        icon_rect.midtop = (rect.centerx, rect.top + padding)
        if card.is_dir:
            self._draw_folder(screen, icon_rect, self.theme.folder)
        else:
            self._draw_file(screen, icon_rect, self.theme.text_secondary)

        name_height = self.theme.font_size_sm + padding
        name_rect = pygame.Rect(
            rect.left + padding // 2,
            icon_rect.bottom + padding // 2,
            rect.width - padding,
            name_height,
        )

        if card.editing:
            pygame.draw.rect(screen, self.theme.background, name_rect, border_radius=self.theme.radius_sm)
            pygame.draw.rect(
                screen, self.theme.primary, name_rect, width=1, border_radius=self.theme.radius_sm
            )

        label_args = dict(
            color=self.theme.text_primary,
            size=self.theme.font_size_sm,
            max_width=name_rect.width - padding,
            align="center",
        )
        label_pos = (name_rect.centerx, name_rect.top + padding // 2)
        label_rect = self.text.render(screen, card.label, label_pos, **label_args)

        if card.text_selected:
            # Selection highlight, label drawn again on top of it
            pygame.draw.rect(screen, self.theme.primary_dark, label_rect.inflate(4, 0))
            self.text.render(screen, card.label, label_pos, **label_args)
        elif card.editing and show_cursor:
            pygame.draw.line(
                screen,
                self.theme.text_primary,
                (label_rect.right + 1, label_rect.top),
                (label_rect.right + 1, label_rect.bottom),
                2,
            )

        if card.detail:
            self.text.render(
                screen,
                card.detail,
                (rect.centerx, name_rect.bottom + 2),
                color=self.theme.text_secondary,
                size=self.theme.font_size_xs,
                max_width=rect.width - padding * 2,
                align="center",
            )

        return rect, name_rect

    def _draw_folder(self, screen: pygame.Surface, rect: pygame.Rect, color: Color) -> None:
        tab = pygame.Rect(rect.left + 4, rect.top + 8, rect.width // 2 - 4, 10)
        body = pygame.Rect(rect.left + 4, rect.top + 14, rect.width - 8, rect.height - 22)
        pygame.draw.rect(screen, color, tab, border_radius=3)
        pygame.draw.rect(screen, color, body, border_radius=4)

    def _draw_file(self, screen: pygame.Surface, rect: pygame.Rect, color: Color) -> None:
        fold = 12
        left, top = rect.left + 10, rect.top + 4
        right, bottom = rect.right - 10, rect.bottom - 4
        outline = [
            (left, top),
            (right - fold, top),
            (right, top + fold),
            (right, bottom),
            (left, bottom),
        ]
        pygame.draw.polygon(screen, color, outline, 2)
        pygame.draw.lines(
            screen, color, False, [(right - fold, top), (right - fold, top + fold), (right, top + fold)], 2
        )
