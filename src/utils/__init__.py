"""
Utility functions for File Browser.
"""

from .logging import log_error, init_log_file, get_log_file, set_log_file
from .formatting import (
    format_size,
    sanitize_filename,
    join_path,
    copy_name,
)

__all__ = [
    "log_error",
    "init_log_file",
    "get_log_file",
    "set_log_file",
    "format_size",
    "sanitize_filename",
    "join_path",
    "copy_name",
]
