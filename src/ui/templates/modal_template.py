"""
Modal template - Dialog with a row of buttons, and the spinner dialog.
"""

import pygame
from typing import Tuple, Optional, List

from ui.theme import Theme, default_theme
from ui.organisms.modal_frame import ModalFrame
from ui.molecules.action_button import ActionButton
from ui.atoms.spinner import Spinner
from ui.atoms.text import Text

BUTTON_SIZE = (120, 40)
LOADING_SIZE = (340, 110)


class ModalTemplate:
    """
    Modal template.

    Buttons are (label, style) pairs laid out centered along the bottom
    edge of the frame, e.g. [("Delete", "danger"), ("Cancel", "secondary")].
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_frame = ModalFrame(theme)
        self.action_button = ActionButton(theme)
        self.spinner = Spinner(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        width: int,
        height: int,
        title: Optional[str] = None,
        show_close: bool = True,
        buttons: Optional[List[Tuple[str, str]]] = None,
        focused: int = -1,
    ) -> Tuple[pygame.Rect, pygame.Rect, Optional[pygame.Rect], List[pygame.Rect]]:
        """
        Draw a centered dialog.

        Args:
            screen: Target surface
            width: Dialog width
            height: Height needed by the content, buttons excluded
            title: Title bar text
            show_close: Close button in the title bar
            buttons: (label, style) pairs, left to right
            focused: Index of the button with keyboard focus

        Returns:
            Tuple of (dialog rect, content rect, close rect, button rects)
        """
        pad = self.theme.padding_md
        button_width, button_height = BUTTON_SIZE
        row_height = button_height + pad if buttons else 0

        modal_rect, content_rect, close_rect = self.modal_frame.render_centered(
            screen, width, height + row_height, title, show_close
        )
        content_rect.height -= row_height

        button_rects: List[pygame.Rect] = []
        if buttons:
            row_width = len(buttons) * (button_width + pad) - pad
            row = pygame.Rect(0, 0, row_width, button_height)
            row.midbottom = (modal_rect.centerx, modal_rect.bottom - pad)
            for index, (label, style) in enumerate(buttons):
                rect = pygame.Rect(row.left + index * (button_width + pad), row.top, button_width, button_height)
                self.action_button.render(screen, rect, label, style=style, hover=index == focused)
                button_rects.append(rect)

        return modal_rect, content_rect, close_rect, button_rects

    def render_loading(self, screen: pygame.Surface, message: str) -> pygame.Rect:
        """Draw an untitled dialog with a spinner above ``message``."""
        modal_rect, content_rect, _, _ = self.render(screen, *LOADING_SIZE, show_close=False)

        spinner_center = (content_rect.centerx, content_rect.top + 30)
        self.spinner.render(screen, spinner_center, size=48)
        self.text.render(
            screen,
            message,
            (content_rect.centerx, spinner_center[1] + 40),
            size=self.theme.font_size_sm,
            max_width=content_rect.width,
            align="center",
        )
        return modal_rect
