"""
Loading modal - Blocks input while an upload batch runs.
"""

import pygame

from ui.theme import Theme, default_theme
from ui.templates.modal_template import ModalTemplate

DEFAULT_MESSAGE = "Working..."


class LoadingModal:
    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_template = ModalTemplate(theme)

    def render(self, screen: pygame.Surface, message: str) -> pygame.Rect:
        """Draw the spinner dialog with e.g. "Uploading 3 file(s)..." under it."""
        return self.modal_template.render_loading(screen, message or DEFAULT_MESSAGE)
