"""
UI Organisms - Complex UI sections.
Composed of multiple molecules working together.
"""

from .header import Header
from .menu_list import MenuList
from .grid import Grid
from .modal_frame import ModalFrame
from .options_menu import OptionsMenu

__all__ = [
    "Header",
    "MenuList",
    "Grid",
    "ModalFrame",
    "OptionsMenu",
]
