"""Tests for local folder listing and upload reads."""

import os
import sys

import pytest

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from services.local_files import load_folder_contents, read_upload_file


def test_parent_then_folders_then_files(tmp_path):
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "A.txt").write_text("a")
    (tmp_path / "zdir").mkdir()
    (tmp_path / "adir").mkdir()
    (tmp_path / ".hidden").write_text("h")

    items = load_folder_contents(str(tmp_path))

    assert [(i["type"], i["name"]) for i in items] == [
        ("parent", ".."),
        ("folder", "adir"),
        ("folder", "zdir"),
        ("file", "A.txt"),
        ("file", "b.txt"),
    ]
    assert items[0]["path"] == os.path.dirname(str(tmp_path))
    assert items[-1]["size"] == 1


def test_hidden_files_on_request(tmp_path):
    (tmp_path / ".hidden").write_text("h")
    names = [i["name"] for i in load_folder_contents(str(tmp_path), show_hidden=True)]
    assert ".hidden" in names


def test_missing_folder_returns_empty_list(tmp_path):
    assert load_folder_contents(str(tmp_path / "missing")) == []


def test_read_upload_file(tmp_path):
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8")

    assert read_upload_file(str(path)) == ("photo.jpg", b"\xff\xd8")

    with pytest.raises(OSError):
        read_upload_file(str(tmp_path / "nope.jpg"))
