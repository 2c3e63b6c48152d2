"""
File server API client for File Browser.
Wraps the backend REST endpoints (ls, download, upload, mv, cp, mkdir, rm, rmdir).
"""

import os
import traceback
from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode

import requests

from constants import (
    API_LS,
    API_DOWNLOAD,
    API_UPLOAD,
    API_MOVE,
    API_COPY,
    API_MKDIR,
    API_RM,
    API_RMDIR,
    DEFAULT_SERVER_URL,
    REQUEST_TIMEOUT,
)
from services.models import ApiResponse, DirectoryEntry
from utils.logging import log_error


class FileServerClient:
    """
    Thin client for the file server REST API.

    Every request method returns an ApiResponse and never raises for
    network or server failures.
    """

    def __init__(
        self,
        server_url: str = DEFAULT_SERVER_URL,
        timeout: float = REQUEST_TIMEOUT,
        escape_paths: bool = True,
        session: Optional[requests.Session] = None,
    ):
        self.server_url = server_url.rstrip("/")
        self.timeout = timeout
        self.escape_paths = escape_paths
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "FileServerClient":
        """Create a client configured from the settings dictionary."""
        return cls(
            server_url=settings.get("server_url", DEFAULT_SERVER_URL),
            timeout=settings.get("request_timeout", REQUEST_TIMEOUT),
            escape_paths=settings.get("escape_paths", True),
        )

    # ---- URL Building ---- #

    def build_url(self, route: str, params: Dict[str, str]) -> str:
        """
        Build the full URL for an API route.

        With escape_paths disabled the query string is concatenated as-is,
        so names containing '&', '#' or '?' reach the server mangled.

        Args:
            route: API route (e.g. "/api/v1/ls")
            params: Query parameters in order

        Returns:
            Absolute URL
        """
        if self.escape_paths:
            query = urlencode(params, safe="/", quote_via=quote)
        else:
            query = "&".join(f"{key}={value}" for key, value in params.items())
        return f"{self.server_url}{route}?{query}"

    def download_url(self, path: str, peek: bool = False) -> str:
        """Get the download URL of a file (peek=True for inline content)."""
        params = {"path": path}
        if peek:
            params["peek"] = "true"
        return self.build_url(API_DOWNLOAD, params)

    # ---- Endpoints ---- #

    def list_directory(self, path: str) -> ApiResponse:
        """
        List a directory.

        Args:
            path: Directory path relative to the server data directory

        Returns:
            ApiResponse with ``files`` populated on success
        """
        return self._request("GET", API_LS, {"path": path})

    def download(self, path: str, peek: bool = False) -> ApiResponse:
        """
        Fetch the raw bytes of a file.

        Args:
            path: File path
            peek: Request inline content instead of an attachment

        Returns:
            ApiResponse with ``content`` and ``content_type`` on success
        """
        url = self.download_url(path, peek)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            return self._transport_failure(e)

        if response.status_code != 200:
            return ApiResponse.failure(self._error_message(response))

        return ApiResponse(
            success=True,
            content=response.content,
            content_type=response.headers.get("Content-Type", ""),
        )

    def download_to_file(self, path: str, dest_path: str) -> ApiResponse:
        """
        Stream a file from the server into a local file.

        Args:
            path: Remote file path
            dest_path: Local destination path

        Returns:
            ApiResponse describing the outcome
        """
        url = self.download_url(path)
        try:
            with self.session.get(url, stream=True, timeout=self.timeout) as response:
                if response.status_code != 200:
                    return ApiResponse.failure(self._error_message(response))

                dest_dir = os.path.dirname(dest_path)
                if dest_dir:
                    os.makedirs(dest_dir, exist_ok=True)

                with open(dest_path, "wb") as f:
                    for chunk in response.iter_content(chunk_size=8192):
                        if chunk:
                            f.write(chunk)
        except requests.exceptions.RequestException as e:
            return self._transport_failure(e)
        except OSError as e:
            log_error(
                f"Failed to write {dest_path}", type(e).__name__, traceback.format_exc()
            )
            return ApiResponse.failure(f"Could not save file: {e}")

        return ApiResponse(success=True, message=f"Saved to {dest_path}")

    def upload(self, path: str, data: bytes) -> ApiResponse:
        """Upload raw bytes as a new file at ``path``."""
        return self._request("PUT", API_UPLOAD, {"path": path}, data=data)

    def move(self, source: str, target: str) -> ApiResponse:
        """Move or rename a file or directory."""
        return self._request("PUT", API_MOVE, {"from": source, "to": target})

    def copy(self, source: str, target: str) -> ApiResponse:
        """Copy a file or directory."""
        return self._request("PUT", API_COPY, {"from": source, "to": target})

    def make_directory(self, path: str) -> ApiResponse:
        """Create a directory."""
        return self._request("PUT", API_MKDIR, {"path": path})

    def remove_file(self, path: str) -> ApiResponse:
        """Delete a file."""
        return self._request("DELETE", API_RM, {"path": path})

    def remove_directory(self, path: str) -> ApiResponse:
        """Delete a directory and its contents."""
        return self._request("DELETE", API_RMDIR, {"path": path})

    # ---- Internals ---- #

    def _request(
        self,
        method: str,
        route: str,
        params: Dict[str, str],
        data: Optional[bytes] = None,
    ) -> ApiResponse:
        """Send a request and convert the JSON payload to an ApiResponse."""
        url = self.build_url(route, params)
        try:
            response = self.session.request(
                method, url, data=data, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            return self._transport_failure(e)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict):
            return ApiResponse.failure(f"HTTP {response.status_code}")

        message = str(payload.get("message", ""))
        if response.status_code >= 400:
            return ApiResponse.failure(message or f"HTTP {response.status_code}")

        return ApiResponse(
            success=bool(payload.get("success")),
            message=message,
            files=[
                DirectoryEntry.from_dict(item) for item in payload.get("files") or []
            ],
        )

    def _transport_failure(self, error: Exception) -> ApiResponse:
        """Convert a requests exception into a failed ApiResponse."""
        if isinstance(error, requests.exceptions.ConnectionError):
            return ApiResponse.failure("No connection to server")
        if isinstance(error, requests.exceptions.Timeout):
            return ApiResponse.failure("Connection timed out")

        log_error("Request failed", type(error).__name__, traceback.format_exc())
        return ApiResponse.failure(f"Request failed: {type(error).__name__}")

    def _error_message(self, response: requests.Response) -> str:
        """Extract a readable error from a non-200 response."""
        try:
            payload = response.json()
            if isinstance(payload, dict) and payload.get("message"):
                return str(payload["message"])
        except ValueError:
            pass
        text = (response.text or "").strip()
        return text or f"HTTP {response.status_code}"
