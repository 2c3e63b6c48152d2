"""
Data models for the file server API.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DirectoryEntry:
    """A file or directory returned by the listing endpoint."""

    name: str
    is_dir: bool = False
    mime: Optional[str] = None
    size: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DirectoryEntry":
        """Build an entry from one item of the ``files`` array."""
        return cls(
            name=str(data.get("name", "")),
            is_dir=bool(data.get("is_dir", False)),
            mime=data.get("mime"),
            size=int(data.get("size") or 0),
        )


@dataclass
class ApiResponse:
    """
    Outcome of a single API request.

    ``transport_error`` is True when the request never produced a usable
    JSON payload (connection failure, timeout, HTTP error status). When it
    is False and ``success`` is False, the server rejected the operation
    and ``message`` carries its explanation.
    """

    success: bool
    message: str = ""
    files: List[DirectoryEntry] = field(default_factory=list)
    transport_error: bool = False
    content: Optional[bytes] = None
    content_type: str = ""

    @classmethod
    def failure(cls, message: str) -> "ApiResponse":
        """Build a transport failure result."""
        return cls(success=False, message=message, transport_error=True)
