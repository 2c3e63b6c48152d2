"""
Text atom - Basic text rendering component.
"""

import pygame
from typing import List, Tuple, Optional

from ui.theme import Theme, Color, default_theme


class Text:
    """
    Basic text rendering atom.

    Renders single lines with truncation and alignment, and
    word-wrapped blocks for longer content.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self._font_cache: dict = {}

    def get_font(self, size: int) -> pygame.font.Font:
        """Get or create a font of the given size."""
        if size not in self._font_cache:
            self._font_cache[size] = pygame.font.Font(self.theme.font_path, size)
        return self._font_cache[size]

    def render(
        self,
        screen: pygame.Surface,
        text: str,
        position: Tuple[int, int],
        color: Optional[Color] = None,
        size: Optional[int] = None,
        max_width: Optional[int] = None,
        align: str = "left",  # "left", "center", "right"
    ) -> pygame.Rect:
        """
        Render one line of text.

        Args:
            screen: Surface to render to
            text: Text to render
            position: (x, y) anchor; x is the left, center or right edge
            color: Text color (default: text_primary)
            size: Font size (default: font_size_md)
            max_width: Truncate with an ellipsis beyond this width
            align: Horizontal alignment

        Returns:
            Rect of rendered text
        """
        color = color or self.theme.text_primary
        font = self.get_font(size or self.theme.font_size_md)

        if max_width:
            text = self._truncate(text, font, max_width)

        rendered = font.render(text, True, color)
        rect = rendered.get_rect()
        x, y = position
        if align == "center":
            rect.midtop = (x, y)
        elif align == "right":
            rect.topright = (x, y)
        else:
            rect.topleft = (x, y)

        screen.blit(rendered, rect)
        return rect

    def wrap(self, text: str, max_width: int, size: Optional[int] = None) -> List[str]:
        """
        Split text into lines that fit ``max_width``.

        Existing newlines are kept; words longer than a line are cut.
        """
        font = self.get_font(size or self.theme.font_size_md)
        lines: List[str] = []
        for paragraph in text.replace("\t", "    ").split("\n"):
            current = ""
            for word in paragraph.split(" "):
                candidate = f"{current} {word}" if current else word
                if font.size(candidate)[0] <= max_width:
                    current = candidate
                    continue
                if current:
                    lines.append(current)
                while font.size(word)[0] > max_width and len(word) > 1:
                    cut = len(word) - 1
                    while cut > 1 and font.size(word[:cut])[0] > max_width:
                        cut -= 1
                    lines.append(word[:cut])
                    word = word[cut:]
                current = word
            lines.append(current)
        return lines

    def render_wrapped(
        self,
        screen: pygame.Surface,
        text: str,
        rect: pygame.Rect,
        color: Optional[Color] = None,
        size: Optional[int] = None,
        line_spacing: int = 2,
        first_line: int = 0,
    ) -> int:
        """
        Render word-wrapped text clipped to ``rect``.

        Args:
            screen: Surface to render to
            text: Text to render
            rect: Area to fill
            color: Text color
            size: Font size
            line_spacing: Space between lines
            first_line: Index of the first wrapped line to draw

        Returns:
            Total number of wrapped lines
        """
        size = size or self.theme.font_size_sm
        lines = self.wrap(text, rect.width, size)
        line_height = self.get_font(size).get_linesize() + line_spacing

        y = rect.top
        for line in lines[first_line:]:
            if y + line_height > rect.bottom:
                break
            self.render(screen, line, (rect.left, y), color=color, size=size)
            y += line_height
        return len(lines)

    def measure(self, text: str, size: Optional[int] = None) -> Tuple[int, int]:
        """Measure text dimensions without rendering."""
        return self.get_font(size or self.theme.font_size_md).size(text)

    def _truncate(
        self, text: str, font: pygame.font.Font, max_width: int, suffix: str = "..."
    ) -> str:
        """Cut text so that it plus ``suffix`` fits within max_width."""
        if font.size(text)[0] <= max_width:
            return text

        available_width = max_width - font.size(suffix)[0]

        # Binary search for the longest prefix that fits
        low, high = 0, len(text)
        while low < high:
            mid = (low + high + 1) // 2
            if font.size(text[:mid])[0] <= available_width:
                low = mid
            else:
                high = mid - 1

        return text[:low] + suffix
