"""
Settings management for File Browser.
Handles loading, saving, and managing application settings.
"""

import json
import os
import traceback
from dataclasses import dataclass, asdict
from typing import Dict, Any

from constants import (
    CONFIG_FILE,
    SCRIPT_DIR,
    DEV_MODE,
    DEFAULT_SERVER_URL,
    SERVER_URL_ENV,
    REQUEST_TIMEOUT,
)


@dataclass
class Settings:
    """Application settings with default values."""

    server_url: str = DEFAULT_SERVER_URL
    request_timeout: float = REQUEST_TIMEOUT
    # Ask before deleting the selected entries
    confirm_delete: bool = True
    # Open files with a single click instead of a double click
    single_click_preview: bool = False
    # Refresh after every uploaded file (False: once per batch)
    refresh_after_each_upload: bool = True
    # Percent-encode paths in query strings (False: plain concatenation)
    escape_paths: bool = True
    new_folder_name: str = "New Folder"
    download_dir: str = ""
    local_start_dir: str = ""
    fullscreen: bool = False

    def __post_init__(self):
        """Set default paths if not specified."""
        if not self.download_dir:
            self.download_dir = _get_default_download_dir()
        if not self.local_start_dir:
            self.local_start_dir = os.path.expanduser("~")

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create Settings from dictionary."""
        # Filter out unknown keys
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered_data)


def _get_default_download_dir() -> str:
    """Get the default download directory based on environment."""
    if DEV_MODE:
        return os.path.join(SCRIPT_DIR, "..", "downloads")
    return os.path.join(os.path.expanduser("~"), "Downloads")


def get_default_settings() -> Dict[str, Any]:
    """Get default settings as a dictionary."""
    return Settings().to_dict()


def load_settings(config_file: str = CONFIG_FILE) -> Dict[str, Any]:
    """
    Load settings from config file.

    The server URL can be overridden with the FILE_BROWSER_URL
    environment variable.

    Args:
        config_file: Path of the JSON config file

    Returns:
        Dictionary of settings with defaults for missing values
    """
    default_settings = get_default_settings()

    try:
        if os.path.exists(config_file):
            with open(config_file, "r") as f:
                loaded_settings = json.load(f)
                # Merge with defaults to handle new settings
                default_settings.update(loaded_settings)
        else:
            # Create config file with defaults
            save_settings(default_settings, config_file)
    except Exception as e:
        from utils.logging import log_error

        log_error(
            "Failed to load settings, using defaults",
            type(e).__name__,
            traceback.format_exc(),
        )

    env_url = os.getenv(SERVER_URL_ENV)
    if env_url:
        default_settings["server_url"] = env_url

    return default_settings


def save_settings(
    settings_to_save: Dict[str, Any], config_file: str = CONFIG_FILE
) -> bool:
    """
    Save settings to config file.

    Args:
        settings_to_save: Dictionary of settings to save
        config_file: Path of the JSON config file

    Returns:
        True if successful, False otherwise
    """
    try:
        # Create directory if it doesn't exist
        config_dir = os.path.dirname(config_file)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(config_file, "w") as f:
            json.dump(settings_to_save, f, indent=2)
        return True
    except Exception as e:
        from utils.logging import log_error

        log_error("Failed to save settings", type(e).__name__, traceback.format_exc())
        return False
