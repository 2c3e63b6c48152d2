"""
UI Molecules - Combinations of atoms.
Simple groups of atoms functioning together.
"""

from .menu_item import MenuItem
from .file_card import FileCard
from .action_button import ActionButton

__all__ = [
    "MenuItem",
    "FileCard",
    "ActionButton",
]
