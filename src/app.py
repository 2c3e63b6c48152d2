"""
File Browser Application - Main orchestrator.

This module provides the main application class that coordinates
all components: state, settings, services, input, and UI.
"""

import pygame
import os
from typing import Any, Dict, List, Optional, Tuple

from constants import (
    APP_NAME,
    FPS,
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    ROOT_PATH,
    MAX_NAME_LENGTH,
)
from state import AppState, UIRects, VIEW_CONTENT, VIEW_ERROR
from config.settings import load_settings
from services.api_client import FileServerClient
from services.file_browser import FileBrowserController
from services.local_files import load_folder_contents
from services.media_player import MediaPlayer
from services.task_runner import TaskRunner
from input.touch import TouchHandler
from ui.theme import Theme
from ui.screens.screen_manager import ScreenManager
from ui.view_models import build_breadcrumb, build_options_menu
from utils.logging import log_error, init_log_file


class FileBrowserApp:
    """
    Main application class for File Browser.

    Owns the window and the main loop; translates pygame events into
    controller operations and hit-tests clicks against the rects the
    screen manager returns every frame.
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        """Initialize the application."""
        init_log_file()

        pygame.init()
        pygame.display.set_caption(APP_NAME)

        self.settings = settings if settings is not None else load_settings()

        if self.settings.get("fullscreen", False):
            display_info = pygame.display.Info()
            self.screen = pygame.display.set_mode(
                (display_info.current_w, display_info.current_h),
                pygame.FULLSCREEN,
            )
        else:
            self.screen = pygame.display.set_mode(
                (SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE
            )
        self.clock = pygame.time.Clock()

        self.theme = Theme()
        self.state = AppState()

        self.touch = TouchHandler()
        self.screen_manager = ScreenManager(self.theme)

        self.runner = TaskRunner()
        self.client = FileServerClient.from_settings(self.settings)
        self.media_player = MediaPlayer()
        self.controller = FileBrowserController(
            self.state, self.client, self.runner, self.settings, self.media_player
        )

        self.hover_pos: Optional[Tuple[int, int]] = None
        self._menu_entered = False
        self._dropped_files: List[str] = []
        self._scroll_accumulated = 0.0

        print(f"Server: {self.client.server_url}")

    def run(self):
        """Run the main application loop."""
        self.controller.list_directory(ROOT_PATH)

        while self.state.running:
            self.clock.tick(FPS)

            for event in pygame.event.get():
                self._handle_event(event)

            if self._dropped_files:
                self._upload_files(self._dropped_files)
                self._dropped_files = []

            long_press_pos = self.touch.check_long_press()
            if long_press_pos:
                self._open_options_menu(long_press_pos)

            # Apply results of finished background requests
            self.runner.update()

            show_cursor = (pygame.time.get_ticks() // self.theme.cursor_blink_rate) % 2 == 0
            rects = self.screen_manager.render(
                self.screen,
                self.state,
                hover_pos=self.hover_pos,
                show_cursor=show_cursor,
                playing=self.media_player.playing,
            )
            self.state.ui_rects = UIRects(**rects)

            pygame.display.flip()

        self.media_player.pause()
        pygame.quit()

    # ---- Event Dispatch ---- #

    def _handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.state.running = False

        elif event.type == pygame.KEYDOWN:
            self._handle_key_event(event)

        elif event.type == pygame.TEXTINPUT:
            self._handle_text_input(event.text)

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.touch.handle_mouse_down(event)
            elif event.button == 3:
                self._open_options_menu(event.pos)

        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1:
                self.touch.handle_mouse_up(event, on_click=self._handle_click)

        elif event.type == pygame.MOUSEMOTION:
            self.hover_pos = event.pos
            self.touch.handle_mouse_motion(event, on_scroll=self._handle_scroll)
            self._track_options_menu(event.pos)

        elif event.type == pygame.MOUSEWHEEL:
            self.touch.handle_mouse_wheel(event, on_scroll=self._handle_scroll)

        elif event.type == pygame.WINDOWFOCUSLOST:
            # A press released outside the window never sends MOUSEBUTTONUP
            self.touch.reset()

        elif event.type == pygame.DROPFILE:
            if os.path.isfile(event.file):
                self._dropped_files.append(event.file)

    def _editing_field(self):
        """Text field currently accepting input, if any."""
        if self.state.rename.active:
            return self.state.rename
        if self.state.new_folder.active:
            return self.state.new_folder
        return None

    def _handle_text_input(self, text: str):
        field = self._editing_field()
        if field is None:
            return
        field.type_text(text, MAX_NAME_LENGTH)

    def _commit_editing(self):
        if self.state.rename.active:
            self.controller.commit_rename()
        elif self.state.new_folder.active:
            self.controller.commit_new_folder()

    def _cancel_editing(self):
        self.controller.cancel_rename()
        self.controller.cancel_new_folder()

    # ---- Keyboard ---- #

    def _handle_key_event(self, event: pygame.event.Event):
        """Handle keyboard events, topmost overlay first."""
        key = event.key
        state = self.state

        if state.loading.show:
            return

        if state.confirm_modal.show:
            if key in (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_TAB):
                state.confirm_modal.button_index = 1 - state.confirm_modal.button_index
            elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                if state.confirm_modal.button_index == 0:
                    self.controller.confirm()
                else:
                    self.controller.cancel_confirm()
            elif key == pygame.K_ESCAPE:
                self.controller.cancel_confirm()
            return

        if state.local_picker.show:
            self._handle_picker_key(key)
            return

        if state.preview.show:
            if key == pygame.K_ESCAPE:
                self.controller.close_preview()
            elif key == pygame.K_LEFT:
                self.controller.preview_previous()
            elif key == pygame.K_RIGHT:
                self.controller.preview_next()
            elif key == pygame.K_SPACE:
                self.controller.toggle_playback()
            return

        field = self._editing_field()
        if field is not None:
            if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self._commit_editing()
            elif key == pygame.K_ESCAPE:
                self._cancel_editing()
            elif key == pygame.K_BACKSPACE:
                field.backspace()
            return

        if state.options_menu.show and key == pygame.K_ESCAPE:
            self.controller.hide_options_menu()
        elif key == pygame.K_ESCAPE:
            state.selected.clear()
        elif key == pygame.K_F5:
            if state.browser.view == VIEW_ERROR:
                self.controller.retry()
            else:
                self.controller.refresh()
        elif key == pygame.K_BACKSPACE:
            self.controller.go_up()
        elif key == pygame.K_DELETE:
            self.controller.request_delete()
        elif key == pygame.K_F2 and len(state.selected) == 1:
            self.controller.start_rename(next(iter(state.selected)))

    def _handle_picker_key(self, key: int):
        picker = self.state.local_picker
        if key == pygame.K_ESCAPE:
            picker.show = False
        elif key == pygame.K_UP and picker.items:
            picker.highlighted = (picker.highlighted - 1) % len(picker.items)
        elif key == pygame.K_DOWN and picker.items:
            picker.highlighted = (picker.highlighted + 1) % len(picker.items)
        elif key in (pygame.K_RETURN, pygame.K_SPACE) and picker.items:
            self._activate_picker_item(picker.highlighted)
        elif key == pygame.K_u:
            self._confirm_picker()

    # ---- Mouse ---- #

    def _handle_click(self, pos: Tuple[int, int]):
        """Handle click/tap events, topmost overlay first."""
        state = self.state
        rects = state.ui_rects

        if state.loading.show:
            return

        if state.confirm_modal.show:
            if rects.confirm_ok_button and rects.confirm_ok_button.collidepoint(pos):
                self.controller.confirm()
            elif rects.confirm_cancel_button and rects.confirm_cancel_button.collidepoint(pos):
                self.controller.cancel_confirm()
            elif rects.close_button and rects.close_button.collidepoint(pos):
                self.controller.cancel_confirm()
            return

        if state.local_picker.show:
            self._handle_picker_click(pos)
            return

        if state.preview.show:
            self._handle_preview_click(pos)
            return

        if state.options_menu.show:
            self._handle_options_menu_click(pos)
            return

        for index, rect in enumerate(rects.breadcrumb):
            if rect.collidepoint(pos):
                segments = build_breadcrumb(state.browser.current_path)
                if index < len(segments):
                    self._cancel_editing()
                    self.controller.list_directory(segments[index].path)
                return

        if state.browser.view == VIEW_ERROR:
            if rects.retry_button and rects.retry_button.collidepoint(pos):
                self.controller.retry()
            return

        if state.browser.view != VIEW_CONTENT:
            return

        self._handle_card_click(pos)

    def _handle_card_click(self, pos: Tuple[int, int]):
        state = self.state
        rects = state.ui_rects
        entries = state.browser.entries

        for i, name_rect in enumerate(rects.card_names):
            if not name_rect.collidepoint(pos):
                continue
            index = i + rects.scroll_offset
            if index >= len(entries):
                return
            name = entries[index].name
            if state.rename.active and state.rename.target == name:
                return
            self._commit_editing()
            if self.touch.check_double_click(("name", name)):
                self.controller.start_rename(name)
            return

        # Clicking anywhere else ends the edit, like leaving the field
        self._commit_editing()

        for i, card_rect in enumerate(rects.cards):
            if not card_rect.collidepoint(pos):
                continue
            index = i + rects.scroll_offset
            if index >= len(entries):
                return
            entry = entries[index]
            if self.settings.get("single_click_preview", False) and not entry.is_dir:
                self.controller.preview(entry.name)
                return
            self.controller.select(entry.name)
            if self.touch.check_double_click(("card", entry.name)):
                self.controller.open_entry(entry.name)
            return

    def _handle_preview_click(self, pos: Tuple[int, int]):
        rects = self.state.ui_rects
        if rects.preview_close and rects.preview_close.collidepoint(pos):
            self.controller.close_preview()
        elif rects.preview_prev and rects.preview_prev.collidepoint(pos):
            self.controller.preview_previous()
        elif rects.preview_next and rects.preview_next.collidepoint(pos):
            self.controller.preview_next()
        elif rects.preview_download and rects.preview_download.collidepoint(pos):
            self.controller.download()
        elif rects.preview_open and rects.preview_open.collidepoint(pos):
            self.controller.toggle_playback()

    def _handle_options_menu_click(self, pos: Tuple[int, int]):
        rects = self.state.ui_rects
        items = build_options_menu(len(self.state.selected))
        for i, rect in enumerate(rects.options_items):
            if rect.collidepoint(pos) and i < len(items):
                if not items[i].enabled:
                    return
                if items[i].action == "upload":
                    self.controller.hide_options_menu()
                    self._open_upload_picker()
                else:
                    self.controller.run_menu_action(items[i].action)
                return
        self.controller.hide_options_menu()

    def _handle_picker_click(self, pos: Tuple[int, int]):
        rects = self.state.ui_rects
        if rects.picker_upload_button and rects.picker_upload_button.collidepoint(pos):
            self._confirm_picker()
            return
        if (rects.picker_cancel_button and rects.picker_cancel_button.collidepoint(pos)) or (
            rects.close_button and rects.close_button.collidepoint(pos)
        ):
            self.state.local_picker.show = False
            return
        for i, rect in enumerate(rects.picker_items):
            if rect.collidepoint(pos):
                self._activate_picker_item(i + rects.picker_scroll_offset)
                return

    def _handle_scroll(self, amount: float):
        """Scroll the grid (or the picker highlight) by rows."""
        self._scroll_accumulated += amount
        steps = int(self._scroll_accumulated)
        if steps == 0:
            return
        self._scroll_accumulated -= steps

        picker = self.state.local_picker
        if picker.show:
            if picker.items:
                picker.highlighted = max(0, min(len(picker.items) - 1, picker.highlighted - steps))
            return
        if self.state.preview.show or self.state.confirm_modal.show:
            return
        browser = self.state.browser
        browser.scroll_offset = max(0, browser.scroll_offset - steps)

    # ---- Options Menu ---- #

    def _open_options_menu(self, pos: Tuple[int, int]):
        state = self.state
        if state.preview.show or state.local_picker.show or state.loading.show:
            return
        if state.browser.view != VIEW_CONTENT:
            return
        self.controller.show_options_menu(pos)
        self._menu_entered = False

    def _track_options_menu(self, pos: Tuple[int, int]):
        """Highlight the item under the pointer; hide once the pointer leaves."""
        menu = self.state.options_menu
        menu_rect = self.state.ui_rects.options_menu
        if not menu.show or menu_rect is None:
            return
        if menu_rect.collidepoint(pos):
            self._menu_entered = True
            menu.highlighted = -1
            for i, rect in enumerate(self.state.ui_rects.options_items):
                if rect.collidepoint(pos):
                    menu.highlighted = i
        elif self._menu_entered:
            self.controller.hide_options_menu()

    # ---- Upload Picker ---- #

    def _open_upload_picker(self):
        picker = self.state.local_picker
        start_dir = picker.current_path or self.settings.get("local_start_dir") or os.path.expanduser("~")
        picker.show = True
        picker.selected = set()
        self._load_picker_folder(start_dir)

    def _load_picker_folder(self, path: str):
        picker = self.state.local_picker
        picker.current_path = os.path.abspath(path)
        picker.items = load_folder_contents(picker.current_path)
        picker.highlighted = 0

    def _activate_picker_item(self, index: int):
        picker = self.state.local_picker
        if index < 0 or index >= len(picker.items):
            return
        picker.highlighted = index
        item = picker.items[index]
        if item["type"] in ("parent", "folder"):
            self._load_picker_folder(item["path"])
        elif item["path"] in picker.selected:
            picker.selected.discard(item["path"])
        else:
            picker.selected.add(item["path"])

    def _confirm_picker(self):
        picker = self.state.local_picker
        paths = sorted(picker.selected)
        picker.show = False
        picker.selected = set()
        self._upload_files(paths)

    def _upload_files(self, paths: List[str]):
        if not paths:
            return
        if self.state.browser.view != VIEW_CONTENT:
            self.state.set_status("Wait for the folder to load before uploading", is_error=True)
            return
        self.controller.upload(paths)


def main():
    """Entry point for the application."""
    try:
        app = FileBrowserApp()
        app.run()
    except Exception as e:
        import traceback

        log_error(f"Application error: {e}", type(e).__name__, traceback.format_exc())
        raise


if __name__ == "__main__":
    main()
