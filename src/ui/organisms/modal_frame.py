"""
Modal frame organism - Dialog panel over a dimmed browser.
"""

import pygame
from typing import Tuple, Optional

from ui.theme import Theme, default_theme
from ui.atoms.surface import Surface
from ui.atoms.text import Text
from ui.atoms.button import Button

FrameRects = Tuple[pygame.Rect, pygame.Rect, Optional[pygame.Rect]]

TITLE_BAR_HEIGHT = 50
CLOSE_SIZE = 30
SCREEN_MARGIN = 10


class ModalFrame:
    """
    Panel shared by the preview, picker and confirmation dialogs.

    A titled frame gets a title bar with a close button; an untitled one
    (the upload spinner) is just a panel.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.surface = Surface(theme)
        self.text = Text(theme)
        self.button = Button(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        title: Optional[str] = None,
        show_close: bool = True,
        with_backdrop: bool = True,
    ) -> FrameRects:
        """
        Draw the frame.

        Args:
            screen: Target surface
            rect: Frame area
            title: Title bar text; no title bar when None
            show_close: Put a close button in the title bar
            with_backdrop: Dim what was drawn before the frame

        Returns:
            Tuple of (frame rect, content rect, close button rect or None)
        """
        if with_backdrop:
            self.surface.render_modal_backdrop(screen)
        self.surface.render(screen, rect, color=self.theme.surface, shadow=True)

        pad = self.theme.padding_md
        bar = TITLE_BAR_HEIGHT if title else 0
        content = pygame.Rect(rect.left, rect.top + bar, rect.width, rect.height - bar).inflate(-2 * pad, -2 * pad)

        if not title:
            return rect, content, None

        divider_y = rect.top + bar
        pygame.draw.line(screen, self.theme.surface_hover, (rect.left, divider_y), (rect.right - 1, divider_y), 2)

        close_rect = None
        title_limit = rect.right - pad
        if show_close:
            close_center = (rect.right - pad - CLOSE_SIZE // 2, rect.top + bar // 2)
            close_rect = self.button.render_icon_button(screen, close_center, CLOSE_SIZE, icon_type="close")
            title_limit = close_rect.left - pad

        size = self.theme.font_size_md
        title_height = self.text.get_font(size).get_height()
        self.text.render(
            screen,
            title,
            (rect.left + pad, rect.top + (bar - title_height) // 2),
            size=size,
            max_width=title_limit - rect.left - pad,
        )
        return rect, content, close_rect

    def render_centered(
        self,
        screen: pygame.Surface,
        width: int,
        height: int,
        title: Optional[str] = None,
        show_close: bool = True,
    ) -> FrameRects:
        """Draw a frame of the given size in the middle of the window, shrunk on small windows."""
        bounds = screen.get_rect().inflate(-2 * SCREEN_MARGIN, -2 * SCREEN_MARGIN)
        rect = pygame.Rect(0, 0, min(width, bounds.width), min(height, bounds.height))
        rect.center = bounds.center
        return self.render(screen, rect, title, show_close)

    def render_fullscreen(
        self,
        screen: pygame.Surface,
        margin: int = 30,
        title: Optional[str] = None,
        show_close: bool = True,
    ) -> FrameRects:
        """Draw a frame covering the window except ``margin`` on each side."""
        return self.render(screen, screen.get_rect().inflate(-2 * margin, -2 * margin), title, show_close)
