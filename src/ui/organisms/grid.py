"""
Grid organism - Grid layout of file cards.
"""

import pygame
from typing import List, Optional, Tuple

from ui.theme import Theme, default_theme
from ui.molecules.file_card import FileCard
from ui.view_models import FileCardView


class Grid:
    """
    Grid organism.

    Lays out file cards in rows that fill the available width and
    scrolls by whole rows.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.file_card = FileCard(theme)

    def columns_for(self, width: int) -> int:
        """Number of card columns that fit ``width``."""
        padding = self.theme.padding_sm
        card_width = self.theme.card_size[0]
        return max(1, (width - padding) // (card_width + padding))

    def visible_rows(self, height: int) -> int:
        padding = self.theme.padding_sm
        return max(1, (height - padding) // (self.theme.card_size[1] + padding))

    def clamp_scroll(self, scroll_row: int, item_count: int, rect: pygame.Rect) -> int:
        """Clamp a row offset so the last row stays at the bottom."""
        columns = self.columns_for(rect.width)
        rows = (item_count + columns - 1) // columns
        max_row = max(0, rows - self.visible_rows(rect.height))
        return max(0, min(scroll_row, max_row))

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        cards: List[FileCardView],
        scroll_row: int = 0,
        hover_pos: Optional[Tuple[int, int]] = None,
        show_cursor: bool = False,
    ) -> Tuple[List[pygame.Rect], List[pygame.Rect], int]:
        """
        Render the visible cards.

        Args:
            screen: Surface to render to
            rect: Grid area rectangle
            cards: Card view models in display order
            scroll_row: First visible row
            hover_pos: Pointer position for hover highlight
            show_cursor: Blink phase of the name field cursor

        Returns:
            Tuple of (card rects, name field rects, index of first rendered card)
        """
        if not cards:
            return [], [], 0

        padding = self.theme.padding_sm
        card_width, card_height = self.theme.card_size
        columns = self.columns_for(rect.width)
        scroll_row = self.clamp_scroll(scroll_row, len(cards), rect)

        used_width = columns * card_width + (columns - 1) * padding
        left = rect.left + (rect.width - used_width) // 2
        start_idx = scroll_row * columns

        card_rects = []
        name_rects = []
        previous_clip = screen.get_clip()
        screen.set_clip(rect)

        y = rect.top + padding
        idx = start_idx
        while idx < len(cards) and y < rect.bottom:
            x = left
            for _ in range(columns):
                if idx >= len(cards):
                    break
                cell = pygame.Rect(x, y, card_width, card_height)
                hovered = hover_pos is not None and cell.collidepoint(hover_pos)
                card_rect, name_rect = self.file_card.render(
                    screen, cell, cards[idx], highlighted=hovered, show_cursor=show_cursor
                )
                card_rects.append(card_rect)
                name_rects.append(name_rect)
                x += card_width + padding
                idx += 1
            y += card_height + padding

        screen.set_clip(previous_clip)
        self._draw_scroll_indicators(screen, rect, scroll_row, len(cards), columns)

        return card_rects, name_rects, start_idx

    def _draw_scroll_indicators(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        scroll_row: int,
        item_count: int,
        columns: int,
    ) -> None:
        """Draw arrows when rows are hidden above or below."""
        total_rows = (item_count + columns - 1) // columns
        visible_rows = self.visible_rows(rect.height)
        if total_rows <= visible_rows:
            return

        size = 8
        cx = rect.right - size * 2
        color = self.theme.text_secondary
        if scroll_row > 0:
            pygame.draw.polygon(
                screen, color, [(cx - size, rect.top + size + 2), (cx, rect.top + 2), (cx + size, rect.top + size + 2)]
            )
        if scroll_row + visible_rows < total_rows:
            pygame.draw.polygon(
                screen,
                color,
                [(cx - size, rect.bottom - size - 2), (cx, rect.bottom - 2), (cx + size, rect.bottom - size - 2)],
            )
