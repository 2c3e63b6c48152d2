"""
UI Screens - Full page components with data binding.
The final layer of the atomic design hierarchy.
"""

from .browser_screen import BrowserScreen
from .screen_manager import ScreenManager

__all__ = [
    'BrowserScreen',
    'ScreenManager',
]
