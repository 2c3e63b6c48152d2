"""
Input handling for File Browser.
Handles mouse and touch input.
"""

from .touch import TouchHandler

__all__ = [
    "TouchHandler",
]
