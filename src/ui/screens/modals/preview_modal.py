"""
Preview modal - Shows a file with previous/next navigation.
"""

import pygame
from typing import Any, Dict

from state import PreviewState
from ui.theme import Theme, default_theme
from ui.organisms.modal_frame import ModalFrame
from ui.molecules.action_button import ActionButton
from ui.atoms.button import Button
from ui.atoms.spinner import Spinner
from ui.atoms.text import Text

NAV_BUTTON_SIZE = 44


class PreviewModal:
    """
    Preview modal.

    Draws one pane depending on the preview kind: an image, text, a
    media player card (audio, video, PDF) or a bare download prompt.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_frame = ModalFrame(theme)
        self.action_button = ActionButton(theme)
        self.button = Button(theme)
        self.spinner = Spinner(theme)
        self.text = Text(theme)

    def render(
        self, screen: pygame.Surface, preview: PreviewState, playing: bool = False
    ) -> Dict[str, Any]:
        """
        Render the preview modal.

        Args:
            screen: Surface to render to
            preview: Preview state
            playing: Whether audio is playing

        Returns:
            Dictionary of interactive element rects
        """
        modal_rect, content_rect, close_rect = self.modal_frame.render_fullscreen(
            screen, title=preview.name or "Preview"
        )
        rects: Dict[str, Any] = {"preview_close": close_rect}

        padding = self.theme.padding_md
        footer_height = 40
        footer_y = content_rect.bottom - footer_height
        pane = pygame.Rect(
            content_rect.left + NAV_BUTTON_SIZE + padding,
            content_rect.top,
            content_rect.width - (NAV_BUTTON_SIZE + padding) * 2,
            content_rect.height - footer_height - padding,
        )

        if preview.index >= 0:
            rects["preview_prev"] = self.button.render_icon_button(
                screen, (content_rect.left + NAV_BUTTON_SIZE // 2, pane.centery), NAV_BUTTON_SIZE, "prev"
            )
            rects["preview_next"] = self.button.render_icon_button(
                screen, (content_rect.right - NAV_BUTTON_SIZE // 2, pane.centery), NAV_BUTTON_SIZE, "next"
            )

        open_label = self._render_pane(screen, pane, preview, playing)

        if preview.download_url:
            buttons = [("Download", "preview_download")]
            if open_label:
                buttons.insert(0, (open_label, "preview_open"))
            width = 150
            x = content_rect.centerx - (len(buttons) * width + (len(buttons) - 1) * padding) // 2
            for label, key in buttons:
                rect = pygame.Rect(x, footer_y, width, footer_height)
                self.action_button.render(
                    screen, rect, label, style="primary" if key == "preview_download" else "secondary"
                )
                rects[key] = rect
                x += width + padding

        return rects

    def _render_pane(
        self, screen: pygame.Surface, pane: pygame.Rect, preview: PreviewState, playing: bool
    ) -> str:
        """Draw the pane of the preview kind; returns the label of its open button."""
        if preview.loading:
            self.spinner.render(screen, pane.center)
            return ""

        if preview.error:
            self._render_notice(screen, pane, preview.error, self.theme.error)
            return ""

        if preview.kind == "image" and preview.image is not None:
            image = preview.image
            scale = min(pane.width / image.get_width(), pane.height / image.get_height(), 1.0)
            if scale < 1.0:
                image = pygame.transform.smoothscale(
                    image, (int(image.get_width() * scale), int(image.get_height() * scale))
                )
            screen.blit(image, image.get_rect(center=pane.center))
            return ""

        if preview.kind == "text":
            pygame.draw.rect(screen, self.theme.background, pane, border_radius=self.theme.radius_sm)
            self.text.render_wrapped(
                screen,
                preview.text,
                pane.inflate(-self.theme.padding_md, -self.theme.padding_md),
                color=self.theme.text_primary,
                size=self.theme.font_size_sm,
            )
            return ""

        if preview.kind == "audio":
            self._render_notice(screen, pane, "Playing" if playing else "Audio file")
            return "Pause" if playing else "Play"

        if preview.kind == "video":
            self._render_notice(screen, pane, "Video file")
            return "Open video"

        if preview.kind == "pdf":
            self._render_notice(screen, pane, "PDF document")
            return "Open PDF"

        if preview.index >= 0:
            self._render_notice(screen, pane, "No preview available")
        return ""

    def _render_notice(self, screen: pygame.Surface, pane: pygame.Rect, message: str, color=None) -> None:
        self.text.render(
            screen,
            message,
            (pane.centerx, pane.centery - self.theme.font_size_md // 2),
            color=color or self.theme.text_secondary,
            size=self.theme.font_size_md,
            max_width=pane.width,
            align="center",
        )
