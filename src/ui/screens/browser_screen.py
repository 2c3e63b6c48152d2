"""
Browser screen - Breadcrumb, file grid and status bar.
"""

import pygame
from typing import Any, Dict, Optional, Tuple

from constants import APP_NAME, HEADER_HEIGHT, STATUS_BAR_HEIGHT
from state import AppState, VIEW_LOADING, VIEW_ERROR
from ui.theme import Theme, default_theme
from ui.atoms.spinner import Spinner
from ui.atoms.text import Text
from ui.molecules.action_button import ActionButton
from ui.organisms.header import Header
from ui.organisms.grid import Grid
from ui.view_models import build_breadcrumb, build_file_cards


class BrowserScreen:
    """
    Main screen of the file browser.

    Shows exactly one of the loading, error and content views below
    the breadcrumb header.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.header = Header(theme)
        self.grid = Grid(theme)
        self.spinner = Spinner(theme)
        self.text = Text(theme)
        self.action_button = ActionButton(theme)

    def content_rect(self, screen: pygame.Surface) -> pygame.Rect:
        """Area between the header and the status bar."""
        return pygame.Rect(
            0,
            HEADER_HEIGHT,
            screen.get_width(),
            screen.get_height() - HEADER_HEIGHT - STATUS_BAR_HEIGHT,
        )

    def render(
        self,
        screen: pygame.Surface,
        state: AppState,
        hover_pos: Optional[Tuple[int, int]] = None,
        show_cursor: bool = False,
    ) -> Dict[str, Any]:
        """
        Render the browser screen.

        Args:
            screen: Surface to render to
            state: Application state
            hover_pos: Pointer position
            show_cursor: Blink phase of text cursors

        Returns:
            Dictionary of interactive element rects
        """
        browser = state.browser
        screen.fill(self.theme.background)
        rects: Dict[str, Any] = {}

        _, rects["breadcrumb"] = self.header.render(
            screen, APP_NAME, build_breadcrumb(browser.current_path), height=HEADER_HEIGHT
        )

        area = self.content_rect(screen)
        if browser.view == VIEW_LOADING:
            self.spinner.render(screen, area.center, size=56)
        elif browser.view == VIEW_ERROR:
            rects["retry_button"] = self._render_error(screen, area, browser.error_message)
        else:
            cards = build_file_cards(
                browser.entries,
                browser.current_path,
                state.selected,
                rename_target=state.rename.target,
                rename_text=state.rename.input_text,
                rename_active=state.rename.active,
                new_folder_text=state.new_folder.input_text if state.new_folder.visible else None,
                new_folder_selected=state.new_folder.text_selected,
            )
            if cards:
                browser.scroll_offset = self.grid.clamp_scroll(browser.scroll_offset, len(cards), area)
                card_rects, name_rects, first = self.grid.render(
                    screen, area, cards, browser.scroll_offset, hover_pos, show_cursor
                )
                rects["cards"] = card_rects
                rects["card_names"] = name_rects
                rects["scroll_offset"] = first
            else:
                self.text.render(
                    screen,
                    "This folder is empty",
                    (area.centerx, area.centery - 10),
                    color=self.theme.text_secondary,
                    size=self.theme.font_size_md,
                    align="center",
                )

        self._render_status_bar(screen, state)
        return rects

    def _render_error(self, screen: pygame.Surface, area: pygame.Rect, message: str) -> pygame.Rect:
        y = area.centery - 60
        self.text.render(
            screen,
            "Something went wrong",
            (area.centerx, y),
            color=self.theme.error,
            size=self.theme.font_size_lg,
            align="center",
        )
        self.text.render(
            screen,
            message,
            (area.centerx, y + 44),
            color=self.theme.text_secondary,
            size=self.theme.font_size_sm,
            max_width=area.width - self.theme.padding_lg * 2,
            align="center",
        )
        retry_rect = pygame.Rect(0, 0, 140, 40)
        retry_rect.midtop = (area.centerx, y + 84)
        self.action_button.render(screen, retry_rect, "Retry")
        return retry_rect

    def _render_status_bar(self, screen: pygame.Surface, state: AppState) -> None:
        bar = pygame.Rect(0, screen.get_height() - STATUS_BAR_HEIGHT, screen.get_width(), STATUS_BAR_HEIGHT)
        pygame.draw.rect(screen, self.theme.surface, bar)

        size = self.theme.font_size_xs
        _, text_height = self.text.measure("A", size=size)
        y = bar.centery - text_height // 2
        padding = self.theme.padding_md

        browser = state.browser
        summary = f"{len(browser.entries)} item(s)"
        if state.selected:
            summary += f", {len(state.selected)} selected"
        summary_rect = self.text.render(
            screen,
            summary,
            (bar.right - padding, y),
            color=self.theme.text_secondary,
            size=size,
            align="right",
        )

        if state.status.message:
            color = self.theme.error if state.status.is_error else self.theme.text_primary
            self.text.render(
                screen,
                state.status.message,
                (bar.left + padding, y),
                color=color,
                size=size,
                max_width=summary_rect.left - padding * 2,
            )
