"""
Upload picker modal - Local file selection for uploads.
"""

import pygame
from typing import List, Dict, Any, Optional, Set, Tuple

from ui.theme import Theme, default_theme
from ui.organisms.menu_list import MenuList
from ui.templates.modal_template import ModalTemplate
from ui.atoms.text import Text
from utils.formatting import format_size


class UploadPickerModal:
    """
    Upload picker modal.

    Lists a local folder; folders open on click, files toggle a
    checkbox. The Upload button sends every checked file.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_template = ModalTemplate(theme)
        self.menu_list = MenuList(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        current_path: str,
        items: List[Dict[str, Any]],
        highlighted: int,
        selected: Set[str],
    ) -> Tuple[pygame.Rect, List[pygame.Rect], int, pygame.Rect, pygame.Rect, Optional[pygame.Rect]]:
        """
        Render the picker.

        Args:
            screen: Surface to render to
            current_path: Local directory being shown
            items: Items from load_folder_contents
            highlighted: Highlighted item index
            selected: Paths of checked files

        Returns:
            Tuple of (modal_rect, item_rects, scroll_offset, upload_rect,
            cancel_rect, close_rect)
        """
        margin = 30
        width = screen.get_width() - margin * 2
        height = screen.get_height() - margin * 2 - 160

        upload_label = f"Upload ({len(selected)})" if selected else "Upload"
        modal_rect, content_rect, close_rect, button_rects = self.modal_template.render(
            screen,
            width,
            height,
            title="Upload files",
            buttons=[(upload_label, "primary"), ("Cancel", "secondary")],
        )

        path_rect = self.text.render(
            screen,
            current_path,
            (content_rect.left, content_rect.top),
            color=self.theme.text_secondary,
            size=self.theme.font_size_sm,
            max_width=content_rect.width,
        )

        list_rect = pygame.Rect(
            content_rect.left,
            path_rect.bottom + self.theme.padding_sm,
            content_rect.width,
            content_rect.bottom - path_rect.bottom - self.theme.padding_sm,
        )
        item_rects, scroll_offset = self.menu_list.render(
            screen,
            list_rect,
            items,
            highlighted,
            get_label=self._get_item_label,
            get_secondary=self._get_item_secondary,
            get_checked=lambda item: item["path"] in selected if item["type"] == "file" else None,
        )

        return modal_rect, item_rects, scroll_offset, button_rects[0], button_rects[1], close_rect

    def _get_item_label(self, item: Dict[str, Any]) -> str:
        item_type = item.get("type", "")
        if item_type == "parent":
            return ".. (Parent Directory)"
        if item_type == "folder":
            return f"[DIR] {item['name']}"
        return item.get("name", "")

    def _get_item_secondary(self, item: Dict[str, Any]) -> Optional[str]:
        if item.get("type") == "file":
            return format_size(item.get("size", 0))
        return None
