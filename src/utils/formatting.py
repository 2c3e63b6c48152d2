"""
Formatting utilities for File Browser.
Provides functions for formatting sizes and deriving file names.
"""

import os


def format_size(size_bytes: float) -> str:
    """
    Convert bytes to human readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string with appropriate unit (B, KB, MB, GB, TB)
    """
    for unit in ["B", "KB", "MB", "GB"]:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"


def sanitize_filename(filename: str) -> str:
    """
    Sanitize a filename by removing or replacing invalid characters.

    Args:
        filename: The filename to sanitize

    Returns:
        Sanitized filename
    """
    # Characters not allowed in filenames on various systems
    invalid_chars = '<>:"/\\|?*'

    result = filename
    for char in invalid_chars:
        result = result.replace(char, "_")

    # Remove leading/trailing spaces and dots
    result = result.strip(" .")

    return result


def join_path(current_path: str, name: str) -> str:
    """
    Join a remote directory path and an entry name.

    Remote paths are plain strings built by concatenation, so "." and
    "a/b" become "./name" and "a/b/name".
    """
    return f"{current_path}/{name}"


def copy_name(name: str) -> str:
    """
    Build the name used for a duplicated entry.

    "report.pdf" becomes "report (copy).pdf"; names without an
    extension (and dotfiles) get the suffix appended.

    Args:
        name: Original entry name

    Returns:
        Name for the copy
    """
    stem, ext = os.path.splitext(name)
    if not stem:
        return f"{name} (copy)"
    return f"{stem} (copy){ext}"
