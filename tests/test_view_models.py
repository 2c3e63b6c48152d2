"""Tests for the pure view models behind the browser screens."""

import os
import sys

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from services.models import DirectoryEntry
from ui.view_models import (
    ACTION_NAVIGATE,
    ACTION_PREVIEW,
    adjacent_files,
    build_breadcrumb,
    build_file_card,
    build_file_cards,
    build_options_menu,
    delete_confirm_lines,
    find_file_index,
    preview_kind,
    split_file_list,
)


# ---------------------------------------------------------------------------
# Breadcrumb
# ---------------------------------------------------------------------------

def test_breadcrumb_root_is_home_only():
    segments = build_breadcrumb(".")
    assert len(segments) == 1
    assert segments[0].is_home
    assert segments[0].path == "."


def test_breadcrumb_nested_path():
    segments = build_breadcrumb("a/b/c")
    assert [s.label for s in segments] == ["Home", "a", "b", "c"]
    assert [s.path for s in segments] == [".", "a", "a/b", "a/b/c"]


def test_breadcrumb_skips_dot_components():
    segments = build_breadcrumb("./docs/../img")
    assert [s.label for s in segments] == ["Home", "docs", "img"]
    assert segments[1].path == "./docs"
    assert segments[2].path == "./docs/../img"


# ---------------------------------------------------------------------------
# File cards
# ---------------------------------------------------------------------------

def test_folder_card_navigates():
    card = build_file_card(DirectoryEntry("photos", is_dir=True), "./home")
    assert card.icon == "folder"
    assert card.open_action == ACTION_NAVIGATE
    assert card.open_target == "./home/photos"
    assert card.detail == "Folder"


def test_file_card_previews():
    card = build_file_card(DirectoryEntry("a.txt", size=2048), ".", selected=True)
    assert card.icon == "file"
    assert card.open_action == ACTION_PREVIEW
    assert card.open_target == "a.txt"
    assert card.detail == "2.0 KB"
    assert card.selected


def test_cards_show_rename_text_and_pending_folder():
    entries = [DirectoryEntry("a.txt"), DirectoryEntry("b.txt")]
    cards = build_file_cards(
        entries,
        ".",
        {"b.txt"},
        rename_target="a.txt",
        rename_text="c.txt",
        rename_active=True,
        new_folder_text="New Folder",
        new_folder_selected=True,
    )

    assert [c.label for c in cards] == ["c.txt", "b.txt", "New Folder"]
    assert cards[0].editing and cards[0].name == "a.txt"
    assert not cards[1].editing and cards[1].selected
    assert cards[2].pending and cards[2].open_action is None
    assert cards[2].text_selected and not cards[0].text_selected


def test_split_file_list_keeps_order():
    entries = [
        DirectoryEntry("z.txt"),
        DirectoryEntry("dir", is_dir=True),
        DirectoryEntry("a.txt"),
    ]
    assert [e.name for e in split_file_list(entries)] == ["z.txt", "a.txt"]
    assert find_file_index(split_file_list(entries), "a.txt") == 1
    assert find_file_index(split_file_list(entries), "dir") == -1


# ---------------------------------------------------------------------------
# Preview
# ---------------------------------------------------------------------------

def test_preview_kind_from_mime():
    assert preview_kind("image/png") == "image"
    assert preview_kind("text/plain; charset=utf-8") == "text"
    assert preview_kind("video/mp4") == "video"
    assert preview_kind("audio/mpeg") == "audio"
    assert preview_kind("application/pdf") == "pdf"
    assert preview_kind("application/zip") == "unknown"
    assert preview_kind(None) == "unknown"


def test_adjacent_files_wrap():
    files = [DirectoryEntry("a"), DirectoryEntry("b"), DirectoryEntry("c")]
    prev_file, next_file = adjacent_files(files, 0)
    assert (prev_file.name, next_file.name) == ("c", "b")
    prev_file, next_file = adjacent_files(files, 2)
    assert (prev_file.name, next_file.name) == ("b", "a")

    single = [DirectoryEntry("only")]
    assert adjacent_files(single, 0) == (single[0], single[0])


# ---------------------------------------------------------------------------
# Options menu
# ---------------------------------------------------------------------------

def test_options_menu_requires_selection_for_destructive_items():
    items = {item.action: item for item in build_options_menu(0)}
    assert items["upload"].enabled
    assert items["new_folder"].enabled
    assert not items["delete"].enabled
    assert not items["duplicate"].enabled

    items = {item.action: item for item in build_options_menu(2)}
    assert items["delete"].enabled


def test_delete_confirm_lines():
    assert delete_confirm_lines(3)[0] == "Delete 3 file(s)?"
