"""
View models for the file browser screens.

Pure functions that turn session state into plain data describing what
to draw (breadcrumb segments, file cards, options menu entries). The
pygame screens only consume these, so layout decisions stay testable
without a display.
"""

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from constants import ROOT_PATH, PATH_SEPARATOR
from services.models import DirectoryEntry
from utils.formatting import format_size, join_path

# Open actions of a card
ACTION_NAVIGATE = "navigate"
ACTION_PREVIEW = "preview"

# Preview kinds, checked in this order against the MIME type
PREVIEW_KINDS = (
    ("image/", "image"),
    ("text/", "text"),
    ("video/", "video"),
    ("audio/", "audio"),
    ("application/pdf", "pdf"),
)
PREVIEW_UNKNOWN = "unknown"


@dataclass(frozen=True)
class BreadcrumbSegment:
    """One clickable element of the breadcrumb trail."""

    label: str
    path: str
    is_home: bool = False


@dataclass(frozen=True)
class FileCardView:
    """Everything the grid needs to draw one entry."""

    name: str
    label: str
    icon: str  # "folder" or "file"
    is_dir: bool
    selected: bool
    editing: bool
    open_action: Optional[str]
    open_target: Optional[str]
    detail: str = ""
    pending: bool = False  # Optimistic card of a folder not yet created
    text_selected: bool = False  # Name highlighted, replaced by the next keystroke


@dataclass(frozen=True)
class OptionsMenuItem:
    """Entry of the options menu."""

    label: str
    action: str
    enabled: bool = True


def build_breadcrumb(path: str) -> List[BreadcrumbSegment]:
    """
    Build the breadcrumb for a directory path.

    The first segment always points home. Every other path component
    except "." and ".." gets a segment whose path is the original path
    truncated to that component.

    Args:
        path: Current directory path, e.g. "a/b/c" or "./docs"

    Returns:
        Breadcrumb segments in display order
    """
    segments = [BreadcrumbSegment("Home", ROOT_PATH, is_home=True)]
    parts = path.split(PATH_SEPARATOR)

    for index, part in enumerate(parts):
        if part in (".", ".."):
            continue
        target = PATH_SEPARATOR.join(parts[: index + 1])
        segments.append(BreadcrumbSegment(part, target))

    return segments


def build_file_card(
    entry: DirectoryEntry,
    current_path: str,
    selected: bool = False,
    edit_text: Optional[str] = None,
    editing: bool = False,
) -> FileCardView:
    """
    Map a directory entry to its card.

    Args:
        entry: Entry from the listing
        current_path: Directory the entry lives in
        selected: Whether the card is selected
        edit_text: Name shown instead of the entry name while a rename is
            typed or in flight
        editing: Whether the name field accepts input

    Returns:
        Card view model
    """
    if entry.is_dir:
        open_action = ACTION_NAVIGATE
        open_target = join_path(current_path, entry.name)
        detail = "Folder"
    else:
        open_action = ACTION_PREVIEW
        open_target = entry.name
        detail = format_size(entry.size)

    return FileCardView(
        name=entry.name,
        label=edit_text if edit_text is not None else entry.name,
        icon="folder" if entry.is_dir else "file",
        is_dir=entry.is_dir,
        selected=selected,
        editing=editing,
        open_action=open_action,
        open_target=open_target,
        detail=detail,
    )


def build_pending_folder_card(input_text: str, text_selected: bool = False) -> FileCardView:
    """Card shown for a folder whose name is still being typed."""
    return FileCardView(
        name="",
        label=input_text,
        icon="folder",
        is_dir=True,
        selected=False,
        editing=True,
        open_action=None,
        open_target=None,
        detail="New folder",
        pending=True,
        text_selected=text_selected,
    )


def build_file_cards(
    entries: List[DirectoryEntry],
    current_path: str,
    selected: Set[str],
    rename_target: str = "",
    rename_text: str = "",
    rename_active: bool = False,
    new_folder_text: Optional[str] = None,
    new_folder_selected: bool = False,
) -> List[FileCardView]:
    """
    Build the cards of the whole grid.

    Args:
        entries: Listing in server order
        current_path: Directory being shown
        selected: Names of selected entries
        rename_target: Name of the entry being renamed, if any
        rename_text: Current text of the rename field
        rename_active: Whether the rename field is still accepting input
        new_folder_text: Text of the pending folder card, None if absent
        new_folder_selected: Whether that text is highlighted

    Returns:
        Cards in display order, the pending folder card last
    """
    cards = [
        build_file_card(
            entry,
            current_path,
            selected=entry.name in selected,
            edit_text=rename_text if entry.name == rename_target else None,
            editing=rename_active and entry.name == rename_target,
        )
        for entry in entries
    ]
    if new_folder_text is not None:
        cards.append(build_pending_folder_card(new_folder_text, new_folder_selected))
    return cards


def split_file_list(entries: List[DirectoryEntry]) -> List[DirectoryEntry]:
    """Files of a listing in server order, directories excluded."""
    return [entry for entry in entries if not entry.is_dir]


def preview_kind(mime: Optional[str]) -> str:
    """
    Decide how a file is previewed from its declared MIME type.

    Args:
        mime: MIME type from the listing (None for unknown)

    Returns:
        One of "image", "text", "video", "audio", "pdf", "unknown"
    """
    if not mime:
        return PREVIEW_UNKNOWN
    for marker, kind in PREVIEW_KINDS:
        if marker in mime:
            return kind
    return PREVIEW_UNKNOWN


def find_file_index(file_list: List[DirectoryEntry], name: str) -> int:
    """Index of a file in the file list, -1 when absent."""
    for index, entry in enumerate(file_list):
        if entry.name == name:
            return index
    return -1


def adjacent_files(
    file_list: List[DirectoryEntry], index: int
) -> Tuple[DirectoryEntry, DirectoryEntry]:
    """
    Previous and next file around ``index``, wrapping at both ends.

    Args:
        file_list: Non-empty file list
        index: Position of the current file

    Returns:
        Tuple of (previous, next)
    """
    count = len(file_list)
    return file_list[(index - 1) % count], file_list[(index + 1) % count]


def build_options_menu(selection_count: int) -> List[OptionsMenuItem]:
    """Entries of the options menu for the current selection."""
    has_selection = selection_count > 0
    return [
        OptionsMenuItem("Upload files", "upload"),
        OptionsMenuItem("New folder", "new_folder"),
        OptionsMenuItem("Duplicate", "duplicate", enabled=has_selection),
        OptionsMenuItem("Delete", "delete", enabled=has_selection),
        OptionsMenuItem("Refresh", "refresh"),
    ]


def delete_confirm_lines(count: int) -> List[str]:
    """Message lines of the delete confirmation modal."""
    return [f"Delete {count} file(s)?", "This cannot be undone."]
