"""
Menu list organism - Vertical list of rows used by the options menu and
the upload picker.
"""

import pygame
from typing import List, Set, Tuple, Optional, Any, Callable

from ui.theme import Theme, default_theme
from ui.molecules.menu_item import MenuItem

# Rows kept visible below the highlighted one while scrolling
SCROLL_CONTEXT = 2


class MenuList:
    """
    Menu list organism.

    Only the rows that fit in the given area are drawn; the window
    follows the highlighted row.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.menu_item = MenuItem(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        items: List[Any],
        highlighted: int = -1,
        get_label: Optional[Callable[[Any], str]] = None,
        get_secondary: Optional[Callable[[Any], Optional[str]]] = None,
        get_checked: Optional[Callable[[Any], Optional[bool]]] = None,
        disabled: Optional[Set[int]] = None,
        item_height: Optional[int] = None,
    ) -> Tuple[List[pygame.Rect], int]:
        """
        Render the visible rows.

        Args:
            screen: Target surface
            rect: Area of the list
            items: Row data (menu entries or local folder items)
            highlighted: Index of the hovered or keyboard-selected row
            get_label: Row text, defaults to ``label`` or the ``name`` key
            get_secondary: Right-aligned text such as a file size
            get_checked: Checkbox state, None for rows without one
            disabled: Indices of rows that cannot be chosen
            item_height: Row height, theme default when omitted

        Returns:
            Tuple of (rects of the drawn rows, index of the first drawn row)
        """
        if not items:
            return [], 0

        label_of = get_label or _label
        row_height = item_height or self.theme.menu_item_height
        disabled = disabled or set()

        fits = max(1, rect.height // row_height)
        first = first_visible_row(highlighted, len(items), fits)

        rows = []
        for offset, index in enumerate(range(first, min(first + fits, len(items)))):
            item = items[index]
            row = pygame.Rect(rect.left, rect.top + offset * row_height, rect.width, row_height)
            self.menu_item.render(
                screen,
                row,
                label_of(item),
                highlighted=index == highlighted,
                disabled=index in disabled,
                checked=get_checked(item) if get_checked else None,
                secondary_text=get_secondary(item) if get_secondary else None,
            )
            rows.append(row)

        return rows, first


def first_visible_row(highlighted: int, total: int, fits: int) -> int:
    """First row to draw so the highlighted row stays on screen."""
    if highlighted < 0 or total <= fits:
        return 0
    return min(max(0, highlighted - fits + SCROLL_CONTEXT + 1), total - fits)


def _label(item: Any) -> str:
    if isinstance(item, dict):
        return str(item.get("name", item))
    return str(getattr(item, "label", item))
