"""
Services layer for File Browser.
Handles the file server API, background tasks, local files and media.
"""

from .models import DirectoryEntry, ApiResponse
from .api_client import FileServerClient
from .task_runner import TaskRunner, ImmediateTaskRunner
from .local_files import load_folder_contents, read_upload_file
from .media_player import MediaPlayer

__all__ = [
    # Models
    "DirectoryEntry",
    "ApiResponse",
    # API
    "FileServerClient",
    # Tasks
    "TaskRunner",
    "ImmediateTaskRunner",
    # Local files
    "load_folder_contents",
    "read_upload_file",
    # Media
    "MediaPlayer",
]
