"""
Header organism - Breadcrumb bar.
"""

import pygame
from typing import List, Tuple

from ui.theme import Theme, default_theme
from ui.atoms.text import Text
from ui.view_models import BreadcrumbSegment


class Header:
    """
    Header organism.

    Draws the application title and the breadcrumb of the current
    directory. Every segment is clickable.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        title: str,
        segments: List[BreadcrumbSegment],
        height: int = 60,
    ) -> Tuple[pygame.Rect, List[pygame.Rect]]:
        """
        Render the header.

        Args:
            screen: Surface to render to
            title: Application title, drawn on the right
            segments: Breadcrumb segments in display order
            height: Header height

        Returns:
            Tuple of (header rect, one rect per segment)
        """
        header_rect = pygame.Rect(0, 0, screen.get_width(), height)
        pygame.draw.rect(screen, self.theme.surface, header_rect)
        pygame.draw.line(
            screen, self.theme.surface_hover, (0, height - 1), (header_rect.width, height - 1), 2
        )

        size = self.theme.font_size_md
        _, text_height = self.text.measure("Home", size=size)
        y = (height - text_height) // 2

        title_rect = self.text.render(
            screen,
            title,
            (header_rect.right - self.theme.padding_md, y),
            color=self.theme.text_secondary,
            size=self.theme.font_size_sm,
            align="right",
        )

        separator = " / "
        separator_width, _ = self.text.measure(separator, size=size)
        x = self.theme.padding_md
        limit = title_rect.left - self.theme.padding_md

        segment_rects = []
        last = len(segments) - 1
        for index, segment in enumerate(segments):
            color = self.theme.text_primary if index == last else self.theme.primary_light
            rect = self.text.render(
                screen,
                segment.label,
                (x, y),
                color=color,
                size=size,
                max_width=max(20, limit - x),
            )
            segment_rects.append(rect)
            x = rect.right
            if index != last:
                self.text.render(
                    screen, separator, (x, y), color=self.theme.text_disabled, size=size
                )
                x += separator_width

        return header_rect, segment_rects
