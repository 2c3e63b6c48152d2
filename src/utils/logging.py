"""
Error log for File Browser.

Failed requests, unreadable uploads and preview decode errors are appended
to error.log as timestamped blocks. Informational start-up lines go to the
console with print().
"""

import os
import sys
from datetime import datetime
from typing import Optional

from constants import APP_NAME, LOG_FILE

SEPARATOR = "-" * 80

_log_file: str = LOG_FILE


def _now() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def get_log_file() -> str:
    """Path errors are currently written to."""
    return _log_file


def set_log_file(path: str) -> None:
    """
    Write errors to ``path`` from now on, creating its folder if needed.

    Args:
        path: Full path of the log file
    """
    global _log_file
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    _log_file = path


def log_error(
    error_msg: str,
    error_type: Optional[str] = None,
    traceback_str: Optional[str] = None,
) -> None:
    """
    Append an error block to the log.

    Args:
        error_msg: What failed, e.g. "Failed to rename ./a to ./b: exists"
        error_type: Exception class or operation tag such as "RenameError"
        traceback_str: Formatted traceback, when an exception was caught
    """
    lines = [f"[{_now()}] ERROR: {error_msg}"]
    if error_type:
        lines.append(f"Type: {error_type}")
    if traceback_str:
        lines.append(f"Traceback:\n{traceback_str}")
    lines.append(SEPARATOR)
    block = "\n".join(lines) + "\n"

    try:
        with open(_log_file, "a") as f:
            f.write(block)
    except OSError as e:
        # Log file unusable; keep the message visible on the console
        print(f"Failed to write to log file: {e}")
        print(block)


def init_log_file() -> bool:
    """
    Start a fresh log for this session.

    Returns:
        True if the log file could be written
    """
    try:
        folder = os.path.dirname(_log_file) or "."
        os.makedirs(folder, exist_ok=True)
        with open(_log_file, "w") as f:
            f.write(f"{APP_NAME} error log - started at {_now()}\n")
            f.write(f"Python version: {sys.version}\n")
            f.write(f"Platform: {sys.platform}\n")
            f.write(SEPARATOR + "\n")
    except OSError as e:
        print(f"Failed to initialize log file: {e}")
        return False

    print(f"Log file initialized: {_log_file}")
    return True
