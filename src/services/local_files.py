"""
Local file services for File Browser.
Lists local folders for the upload picker and reads files to upload.
"""

import os
import traceback
from typing import List, Dict, Any, Tuple

from utils.logging import log_error


def load_folder_contents(path: str, show_hidden: bool = False) -> List[Dict[str, Any]]:
    """
    Load local folder contents for the upload picker.

    Args:
        path: Directory path to list
        show_hidden: Include dotfiles

    Returns:
        List of item dictionaries with name, type, path and size.
        A parent entry comes first, then folders, then files.
    """
    try:
        path = os.path.abspath(path)
        items = []

        if path != os.path.dirname(path):
            items.append({"name": "..", "type": "parent", "path": os.path.dirname(path)})

        try:
            entries = os.listdir(path)
        except PermissionError:
            return items

        dirs = []
        files = []

        for entry in entries:
            if entry.startswith(".") and not show_hidden:
                continue

            full_path = os.path.join(path, entry)

            if os.path.isdir(full_path):
                dirs.append({"name": entry, "type": "folder", "path": full_path})
            else:
                try:
                    size = os.path.getsize(full_path)
                except OSError:
                    size = 0
                files.append(
                    {"name": entry, "type": "file", "path": full_path, "size": size}
                )

        dirs.sort(key=lambda x: x["name"].lower())
        files.sort(key=lambda x: x["name"].lower())

        return items + dirs + files

    except Exception as e:
        log_error(
            f"Failed to load folder contents for {path}",
            type(e).__name__,
            traceback.format_exc(),
        )
        return []


def read_upload_file(path: str) -> Tuple[str, bytes]:
    """
    Read a local file fully into memory.

    Args:
        path: Local file path

    Returns:
        Tuple of (base name, file bytes)

    Raises:
        OSError: If the file cannot be read
    """
    with open(path, "rb") as f:
        data = f.read()
    return os.path.basename(path), data
