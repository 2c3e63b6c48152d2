"""
UI Modal Screens - Modal dialog page components.
"""

from .preview_modal import PreviewModal
from .confirm_modal import ConfirmModal
from .loading_modal import LoadingModal
from .upload_picker_modal import UploadPickerModal

__all__ = [
    'PreviewModal',
    'ConfirmModal',
    'LoadingModal',
    'UploadPickerModal',
]
