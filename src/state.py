"""
Application state management for File Browser.
Centralizes all session state into a single AppState class owned by the app instance.
"""

from dataclasses import dataclass, field
from typing import List, Set, Dict, Optional, Any, Tuple
import pygame

from constants import ROOT_PATH
from services.models import DirectoryEntry

# Main view states (mutually exclusive)
VIEW_LOADING = "loading"
VIEW_CONTENT = "content"
VIEW_ERROR = "error"


@dataclass
class BrowserState:
    """State of the remote directory being browsed."""

    current_path: str = ROOT_PATH
    entries: List[DirectoryEntry] = field(default_factory=list)
    file_list: List[DirectoryEntry] = field(default_factory=list)
    view: str = VIEW_LOADING
    error_message: str = ""
    # Incremented on every listing request; older responses are dropped
    listing_generation: int = 0
    # Path of the latest listing request, retried from the error view
    requested_path: str = ""
    scroll_offset: int = 0

    def set_view(self, view: str, error_message: str = "") -> None:
        """Switch between loading, content and error views."""
        self.view = view
        self.error_message = error_message if view == VIEW_ERROR else ""

    def find_entry(self, name: str) -> Optional[DirectoryEntry]:
        """Find an entry of the current listing by name."""
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None


@dataclass
class TextInputState:
    """State for an inline text field (rename or new folder)."""

    active: bool = False
    target: str = ""  # Original entry name, empty for a new folder
    input_text: str = ""
    # Whole text selected; the next keystroke replaces it
    text_selected: bool = False

    def start(self, target: str, text: str, select_all: bool = False) -> None:
        """Begin editing."""
        self.active = True
        self.target = target
        self.input_text = text
        self.text_selected = select_all

    @property
    def visible(self) -> bool:
        """True while typing or while the committed text awaits the server."""
        return self.active or bool(self.target or self.input_text)

    def type_text(self, text: str, max_length: int) -> None:
        """Insert typed characters, replacing the text while it is selected."""
        current = "" if self.text_selected else self.input_text
        self.input_text = (current + text)[:max_length]
        self.text_selected = False

    def backspace(self) -> None:
        """Delete the last character, or the whole text while it is selected."""
        self.input_text = "" if self.text_selected else self.input_text[:-1]
        self.text_selected = False

    def commit(self) -> None:
        """Stop accepting input but keep showing the typed text."""
        self.active = False
        self.text_selected = False

    def stop(self) -> None:
        """Leave edit mode and forget the typed text."""
        self.active = False
        self.target = ""
        self.input_text = ""
        self.text_selected = False


@dataclass
class PreviewState:
    """State for the file preview overlay."""

    show: bool = False
    name: str = ""
    kind: str = ""  # image, text, video, audio, pdf, unknown
    index: int = -1
    download_url: str = ""
    peek_url: str = ""
    text: str = ""
    image: Optional[Any] = None  # pygame.Surface once decoded
    audio_data: Optional[bytes] = None
    loading: bool = False
    error: str = ""

    def reset(self) -> None:
        """Hide every preview pane."""
        self.kind = ""
        self.index = -1
        self.download_url = ""
        self.peek_url = ""
        self.text = ""
        self.image = None
        self.audio_data = None
        self.loading = False
        self.error = ""


@dataclass
class OptionsMenuState:
    """State for the right-click / long-press options menu."""

    show: bool = False
    position: Tuple[int, int] = (0, 0)
    highlighted: int = -1


@dataclass
class LoadingState:
    """State for the global spinner shown during uploads."""

    show: bool = False
    message: str = ""


@dataclass
class ConfirmModalState:
    """State for confirmation modal."""

    show: bool = False
    title: str = ""
    message_lines: List[str] = field(default_factory=list)
    ok_label: str = "OK"
    cancel_label: str = "Cancel"
    button_index: int = 0  # 0 = OK, 1 = Cancel
    context: str = ""  # Action to take on confirm (e.g., "delete")
    data: Any = None  # Additional data needed for the action


@dataclass
class LocalPickerState:
    """State for the local file picker used to choose uploads."""

    show: bool = False
    current_path: str = ""
    items: List[Dict[str, Any]] = field(default_factory=list)
    highlighted: int = 0
    selected: Set[str] = field(default_factory=set)


@dataclass
class StatusState:
    """One-line status message shown at the bottom of the window."""

    message: str = ""
    is_error: bool = False


@dataclass
class UIRects:
    """Stores rectangles for clickable UI elements."""

    cards: List[pygame.Rect] = field(default_factory=list)
    card_names: List[pygame.Rect] = field(default_factory=list)
    breadcrumb: List[pygame.Rect] = field(default_factory=list)
    options_menu: Optional[pygame.Rect] = None
    options_items: List[pygame.Rect] = field(default_factory=list)
    retry_button: Optional[pygame.Rect] = None
    preview_close: Optional[pygame.Rect] = None
    preview_prev: Optional[pygame.Rect] = None
    preview_next: Optional[pygame.Rect] = None
    preview_download: Optional[pygame.Rect] = None
    preview_open: Optional[pygame.Rect] = None
    confirm_ok_button: Optional[pygame.Rect] = None
    confirm_cancel_button: Optional[pygame.Rect] = None
    picker_items: List[pygame.Rect] = field(default_factory=list)
    picker_scroll_offset: int = 0  # Index of the first rendered picker item
    picker_upload_button: Optional[pygame.Rect] = None
    picker_cancel_button: Optional[pygame.Rect] = None
    close_button: Optional[pygame.Rect] = None
    scroll_offset: int = 0  # Index of the first rendered card


class AppState:
    """
    Centralized application state for File Browser.

    Owned by the app instance and passed to the controller and screens,
    instead of living in module globals.
    """

    def __init__(self):
        # ---- Remote Directory ---- #
        self.browser = BrowserState()

        # ---- Selection (entry names, cleared on every listing) ---- #
        self.selected: Set[str] = set()

        # ---- Inline Editing ---- #
        self.rename = TextInputState()
        self.new_folder = TextInputState()

        # ---- Overlays ---- #
        self.preview = PreviewState()
        self.options_menu = OptionsMenuState()
        self.loading = LoadingState()
        self.confirm_modal = ConfirmModalState()
        self.local_picker = LocalPickerState()
        self.status = StatusState()

        # ---- UI Rectangles ---- #
        self.ui_rects = UIRects()

        # ---- Runtime Flags ---- #
        self.running: bool = True

    def set_status(self, message: str, is_error: bool = False) -> None:
        """Show a message in the status bar."""
        self.status.message = message
        self.status.is_error = is_error

    def toggle_selected(self, name: str) -> None:
        """Select or deselect an entry by name."""
        if name in self.selected:
            self.selected.discard(name)
        else:
            self.selected.add(name)

    def selected_entries(self) -> List[DirectoryEntry]:
        """Selected entries in listing order."""
        return [e for e in self.browser.entries if e.name in self.selected]
