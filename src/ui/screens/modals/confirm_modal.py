"""
Confirm modal - Asks before the selected entries are deleted.
"""

import pygame
from typing import Tuple, Optional, List

from ui.theme import Theme, default_theme
from ui.templates.modal_template import ModalTemplate
from ui.atoms.text import Text

MODAL_WIDTH = 420
LINE_SPACING = 4


class ConfirmModal:
    """
    Confirmation modal.

    The first button confirms (drawn as a danger button), the second
    cancels. ``button_index`` marks the one Enter would press.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_template = ModalTemplate(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        title: str,
        message_lines: List[str],
        ok_label: str = "OK",
        cancel_label: str = "Cancel",
        button_index: int = 0,
    ) -> Tuple[pygame.Rect, pygame.Rect, pygame.Rect, Optional[pygame.Rect]]:
        """
        Draw the dialog, e.g. "Delete 3 file(s)?" over Delete / Cancel.

        Returns:
            Tuple of (modal rect, confirm rect, cancel rect, close rect)
        """
        size = self.theme.font_size_md
        step = self.text.get_font(size).get_linesize() + LINE_SPACING

        modal_rect, content_rect, close_rect, (ok_rect, cancel_rect) = self.modal_template.render(
            screen,
            MODAL_WIDTH,
            len(message_lines) * step + self.theme.padding_md,
            title=title,
            buttons=[(ok_label, "danger"), (cancel_label, "secondary")],
            focused=button_index,
        )

        for row, line in enumerate(message_lines):
            self.text.render(
                screen,
                line,
                (content_rect.centerx, content_rect.top + row * step),
                size=size,
                max_width=content_rect.width,
                align="center",
            )

        return modal_rect, ok_rect, cancel_rect, close_rect
