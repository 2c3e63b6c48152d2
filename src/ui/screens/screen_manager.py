"""
Screen manager - Coordinates screen rendering based on app state.
"""

import pygame
from typing import Dict, Any, Optional, Tuple

from state import AppState, VIEW_CONTENT
from ui.theme import Theme, default_theme
from ui.organisms.options_menu import OptionsMenu
from ui.view_models import build_options_menu
from .browser_screen import BrowserScreen
from .modals.preview_modal import PreviewModal
from .modals.confirm_modal import ConfirmModal
from .modals.loading_modal import LoadingModal
from .modals.upload_picker_modal import UploadPickerModal


class ScreenManager:
    """
    Screen manager.

    Draws the browser screen and then every open overlay on top of it,
    in stacking order: options menu, preview, upload picker,
    confirmation, spinner.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

        self.browser_screen = BrowserScreen(theme)
        self.options_menu = OptionsMenu(theme)

        self.preview_modal = PreviewModal(theme)
        self.confirm_modal = ConfirmModal(theme)
        self.loading_modal = LoadingModal(theme)
        self.upload_picker_modal = UploadPickerModal(theme)

    def render(
        self,
        screen: pygame.Surface,
        state: AppState,
        hover_pos: Optional[Tuple[int, int]] = None,
        show_cursor: bool = False,
        playing: bool = False,
    ) -> Dict[str, Any]:
        """
        Render the current frame.

        Args:
            screen: Surface to render to
            state: Application state object
            hover_pos: Pointer position
            show_cursor: Blink phase of text cursors
            playing: Whether audio is playing

        Returns:
            Dictionary of interactive element rects, keyed like UIRects
        """
        rects = self.browser_screen.render(screen, state, hover_pos, show_cursor)

        menu = state.options_menu
        if menu.show and state.browser.view == VIEW_CONTENT:
            menu_rect, item_rects = self.options_menu.render(
                screen,
                menu.position,
                build_options_menu(len(state.selected)),
                menu.highlighted,
            )
            rects["options_menu"] = menu_rect
            rects["options_items"] = item_rects

        if state.preview.show:
            rects.update(self.preview_modal.render(screen, state.preview, playing))

        picker = state.local_picker
        if picker.show:
            _, item_rects, scroll, upload_rect, cancel_rect, close_rect = self.upload_picker_modal.render(
                screen, picker.current_path, picker.items, picker.highlighted, picker.selected
            )
            rects["picker_items"] = item_rects
            rects["picker_scroll_offset"] = scroll
            rects["picker_upload_button"] = upload_rect
            rects["picker_cancel_button"] = cancel_rect
            rects["close_button"] = close_rect

        confirm = state.confirm_modal
        if confirm.show:
            _, ok_rect, cancel_rect, close_rect = self.confirm_modal.render(
                screen,
                confirm.title,
                confirm.message_lines,
                confirm.ok_label,
                confirm.cancel_label,
                confirm.button_index,
            )
            rects["confirm_ok_button"] = ok_rect
            rects["confirm_cancel_button"] = cancel_rect
            rects["close_button"] = close_rect

        if state.loading.show:
            self.loading_modal.render(screen, state.loading.message)

        return rects
