"""
UI Templates - Page layouts.
Compositions of organisms into complete page structures.
"""

from .modal_template import ModalTemplate

__all__ = [
    "ModalTemplate",
]
