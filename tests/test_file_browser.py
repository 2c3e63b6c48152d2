"""Tests for the file browser controller.

Runs every operation against a scripted in-memory client with the
ImmediateTaskRunner, so completion callbacks fire synchronously.
"""

import os
import sys

import pygame

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from services.file_browser import FileBrowserController
from services.models import ApiResponse, DirectoryEntry
from services.task_runner import ImmediateTaskRunner
from state import AppState, VIEW_CONTENT, VIEW_ERROR, VIEW_LOADING


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class _FakeClient:
    """Records calls and answers from per-method scripts."""

    def __init__(self, listing=None):
        self.calls = []
        self.listing = listing if listing is not None else []
        self.list_response = None
        self.failures = {}
        self.errors = {}
        self.content = b"hello world"

    def _result(self, method, *args):
        self.calls.append((method,) + args)
        if method in self.errors:
            raise self.errors[method]
        failing = self.failures.get(method)
        if failing is not None and (failing is True or args[0] in failing):
            return ApiResponse(success=False, message=f"{method} refused")
        return ApiResponse(success=True)

    def list_directory(self, path):
        self.calls.append(("ls", path))
        if "ls" in self.errors:
            raise self.errors["ls"]
        if self.list_response is not None:
            return self.list_response
        return ApiResponse(success=True, files=list(self.listing))

    def move(self, source, target):
        return self._result("mv", source, target)

    def copy(self, source, target):
        return self._result("cp", source, target)

    def make_directory(self, path):
        return self._result("mkdir", path)

    def remove_file(self, path):
        return self._result("rm", path)

    def remove_directory(self, path):
        return self._result("rmdir", path)

    def upload(self, path, data):
        return self._result("upload", path)

    def download(self, path, peek=False):
        self.calls.append(("download", path, peek))
        return ApiResponse(success=True, content=self.content)

    def download_to_file(self, path, dest_path):
        self.calls.append(("save", path, dest_path))
        return ApiResponse(success=True, message=f"Saved to {dest_path}")

    def download_url(self, path, peek=False):
        return f"http://server/api/v1/download?path={path}" + ("&peek=true" if peek else "")

    def count(self, method):
        return sum(1 for call in self.calls if call[0] == method)


class _FakePlayer:
    def __init__(self):
        self.playing = False
        self.opened = []

    def play_audio(self, data):
        self.playing = True
        return True

    def pause(self):
        self.playing = False

    def open_external(self, url):
        self.opened.append(url)
        return True


class _DeferredRunner:
    """Holds submitted work until run() so responses can be applied out of order."""

    def __init__(self):
        self.pending = []

    def submit(self, work, on_done=None, on_error=None):
        self.pending.append((work, on_done))

    def call_soon(self, callback):
        callback()

    def run(self, index):
        work, on_done = self.pending.pop(index)
        result = work()
        if on_done is not None:
            on_done(result)


_LISTING = [
    DirectoryEntry("a.txt", is_dir=False, mime="text/plain", size=12),
    DirectoryEntry("sub", is_dir=True),
    DirectoryEntry("b.png", is_dir=False, mime="image/png", size=2048),
    DirectoryEntry("song.mp3", is_dir=False, mime="audio/mpeg", size=4096),
]


def _make_controller(listing=None, settings=None, runner=None):
    state = AppState()
    client = _FakeClient(_LISTING if listing is None else listing)
    player = _FakePlayer()
    controller = FileBrowserController(
        state,
        client,
        runner or ImmediateTaskRunner(),
        dict(settings or {}),
        player,
    )
    return controller, state, client, player


def _loaded(listing=None, settings=None):
    controller, state, client, player = _make_controller(listing, settings)
    controller.list_directory(".")
    client.calls.clear()
    return controller, state, client, player


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------

def test_listing_fills_entries_and_file_list():
    controller, state, client, _ = _make_controller()
    controller.list_directory(".")

    assert state.browser.view == VIEW_CONTENT
    assert [e.name for e in state.browser.entries] == ["a.txt", "sub", "b.png", "song.mp3"]
    assert [e.name for e in state.browser.file_list] == ["a.txt", "b.png", "song.mp3"]
    assert client.calls == [("ls", ".")]


def test_listing_failure_shows_error_view():
    controller, state, client, _ = _make_controller()
    client.list_response = ApiResponse.failure("No connection to server")
    controller.list_directory("docs")

    assert state.browser.view == VIEW_ERROR
    assert state.browser.error_message == "No connection to server"


def test_listing_that_raises_shows_error_view():
    controller, state, client, _ = _make_controller()
    client.errors["ls"] = RuntimeError("boom")

    controller.list_directory(".")

    assert state.browser.view == VIEW_ERROR
    assert state.browser.error_message == "Unexpected error: RuntimeError"


def test_retry_lists_the_path_that_failed():
    controller, state, client, _ = _loaded()
    client.list_response = ApiResponse.failure("No such directory")
    controller.open_directory("sub")
    assert state.browser.view == VIEW_ERROR
    assert state.browser.current_path == "."

    client.list_response = None
    client.calls.clear()
    controller.retry()

    assert client.calls == [("ls", "./sub")]
    assert state.browser.current_path == "./sub"
    assert state.browser.view == VIEW_CONTENT


def test_listing_clears_selection_and_edits():
    controller, state, _, _ = _loaded()
    state.selected.add("a.txt")
    controller.add_folder()

    controller.refresh()

    assert state.selected == set()
    assert not state.new_folder.visible


def test_stale_listing_is_dropped():
    runner = _DeferredRunner()
    controller, state, client, _ = _make_controller(runner=runner)

    controller.list_directory("old")
    controller.list_directory("new")
    assert state.browser.view == VIEW_LOADING

    runner.run(1)
    assert state.browser.current_path == "new"
    runner.run(0)
    assert state.browser.current_path == "new"
    assert state.browser.view == VIEW_CONTENT


def test_navigation_paths():
    controller, state, client, _ = _loaded()

    controller.open_directory("sub")
    assert state.browser.current_path == "./sub"

    controller.go_up()
    assert state.browser.current_path == "."

    client.calls.clear()
    controller.go_up()
    assert client.calls == []

    controller.list_directory("a")
    controller.go_up()
    assert state.browser.current_path == "."


# ---------------------------------------------------------------------------
# Rename
# ---------------------------------------------------------------------------

def test_rename_to_same_name_issues_no_request():
    controller, state, client, _ = _loaded()
    controller.start_rename("a.txt")
    controller.commit_rename()

    assert client.calls == []
    assert not state.rename.visible


def test_rename_success_moves_and_refreshes():
    controller, state, client, _ = _loaded()
    controller.start_rename("a.txt")
    state.rename.input_text = "c.txt"
    controller.commit_rename()

    assert client.calls[0] == ("mv", "./a.txt", "./c.txt")
    assert client.count("ls") == 1
    assert not state.rename.visible


def test_rename_failure_restores_name_without_refresh(error_log):
    controller, state, client, _ = _loaded()
    client.failures["mv"] = True

    controller.rename("a.txt", "taken.txt")

    assert client.count("mv") == 1
    assert client.count("ls") == 0
    assert state.rename.target == ""
    assert state.status.is_error
    assert state.status.message == "mv refused"
    assert "Type: RenameError" in error_log.read_text()


# ---------------------------------------------------------------------------
# Create Folder
# ---------------------------------------------------------------------------

def test_new_folder_uses_configured_name():
    controller, state, client, _ = _loaded(settings={"new_folder_name": "Untitled"})
    controller.add_folder()

    assert state.new_folder.active
    assert state.new_folder.input_text == "Untitled"

    controller.commit_new_folder()
    assert client.calls[0] == ("mkdir", "./Untitled")
    assert client.count("ls") == 1


def test_typing_replaces_selected_folder_name():
    controller, state, client, _ = _loaded()
    controller.add_folder()
    assert state.new_folder.text_selected

    state.new_folder.type_text("P", 255)
    state.new_folder.type_text("ics", 255)
    assert state.new_folder.input_text == "Pics"
    assert not state.new_folder.text_selected

    controller.commit_new_folder()
    assert client.calls[0] == ("mkdir", "./Pics")


def test_backspace_clears_selected_folder_name():
    controller, state, _, _ = _loaded()
    controller.add_folder()

    state.new_folder.backspace()
    assert state.new_folder.input_text == ""

    state.new_folder.type_text("ab", 255)
    state.new_folder.backspace()
    assert state.new_folder.input_text == "a"


def test_create_folder_refreshes_after_failure():
    controller, state, client, _ = _loaded()
    client.failures["mkdir"] = True

    controller.create_folder("x")

    assert client.count("ls") == 1
    assert state.browser.view == VIEW_CONTENT


def test_empty_folder_name_is_discarded():
    controller, state, client, _ = _loaded()
    controller.add_folder()
    state.new_folder.input_text = "   "
    controller.commit_new_folder()

    assert client.calls == []
    assert not state.new_folder.visible


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------

def test_delete_asks_for_confirmation():
    controller, state, client, _ = _loaded()
    state.selected.update({"a.txt", "sub"})

    controller.request_delete()

    modal = state.confirm_modal
    assert modal.show
    assert modal.message_lines[0] == "Delete 2 file(s)?"
    assert client.calls == []

    controller.confirm()
    assert not modal.show
    assert ("rm", "./a.txt") in client.calls
    assert ("rmdir", "./sub") in client.calls


def test_cancel_confirmation_deletes_nothing():
    controller, state, client, _ = _loaded()
    state.selected.add("a.txt")
    controller.request_delete()
    controller.cancel_confirm()

    assert client.calls == []
    assert not state.confirm_modal.show


def test_delete_sends_one_request_per_entry():
    controller, state, client, _ = _loaded(settings={"confirm_delete": False})
    state.selected.update({"a.txt", "b.png", "song.mp3"})

    controller.request_delete()

    assert client.count("rm") == 3
    assert client.count("ls") == 3


def test_delete_failure_does_not_stop_other_deletes():
    controller, state, client, _ = _loaded()
    client.failures["rm"] = {"./b.png"}
    entries = [e for e in _LISTING if not e.is_dir]

    controller.delete(entries)

    assert client.count("rm") == 3
    assert state.browser.view == VIEW_CONTENT
    assert client.count("ls") == 2


def test_delete_failure_alone_shows_error():
    controller, state, client, _ = _loaded()
    client.failures["rm"] = True

    controller.delete([_LISTING[0]])

    assert state.browser.view == VIEW_ERROR
    assert state.browser.error_message == "rm refused"


def test_confirm_modal_blocks_selection_and_menu():
    controller, state, _, _ = _loaded()
    state.selected.add("a.txt")
    controller.request_delete()

    controller.select("b.png")
    controller.show_options_menu((100, 100))

    assert state.selected == {"a.txt"}
    assert not state.options_menu.show


# ---------------------------------------------------------------------------
# Duplicate
# ---------------------------------------------------------------------------

def test_duplicate_copies_with_suffix():
    controller, state, client, _ = _loaded()
    state.selected.add("a.txt")

    controller.run_menu_action("duplicate")

    assert client.calls[0] == ("cp", "./a.txt", "./a (copy).txt")
    assert client.count("ls") == 1


# ---------------------------------------------------------------------------
# Upload
# ---------------------------------------------------------------------------

def _write_files(tmp_path, *names):
    paths = []
    for name in names:
        path = tmp_path / name
        path.write_bytes(b"data")
        paths.append(str(path))
    return paths


def test_upload_refreshes_after_each_file(tmp_path):
    controller, state, client, _ = _loaded()
    paths = _write_files(tmp_path, "one.txt", "two.txt")

    controller.upload(paths)

    assert [c for c in client.calls if c[0] == "upload"] == [
        ("upload", "./one.txt"),
        ("upload", "./two.txt"),
    ]
    assert client.count("ls") == 2
    assert not state.loading.show


def test_upload_refreshes_once_per_batch_when_configured(tmp_path):
    controller, state, client, _ = _loaded(settings={"refresh_after_each_upload": False})
    paths = _write_files(tmp_path, "one.txt", "two.txt", "three.txt")

    controller.upload(paths)

    assert client.count("upload") == 3
    assert client.count("ls") == 1


def test_upload_failure_continues_batch(tmp_path):
    controller, state, client, _ = _loaded()
    paths = _write_files(tmp_path, "one.txt")
    paths.insert(0, str(tmp_path / "missing.txt"))

    controller.upload(paths)

    assert client.count("upload") == 1
    assert client.count("ls") == 1


def test_upload_that_raises_clears_spinner(tmp_path, error_log):
    controller, state, client, _ = _loaded()
    client.errors["upload"] = MemoryError()
    paths = _write_files(tmp_path, "huge.bin")

    controller.upload(paths)

    assert not state.loading.show
    assert state.browser.view == VIEW_ERROR
    assert "Background task failed" in error_log.read_text()


# ---------------------------------------------------------------------------
# Preview
# ---------------------------------------------------------------------------

def test_text_preview_is_fetched_with_peek():
    controller, state, client, _ = _loaded()
    controller.open_entry("a.txt")

    preview = state.preview
    assert preview.show
    assert preview.kind == "text"
    assert preview.text == "hello world"
    assert preview.peek_url.endswith("peek=true")
    assert ("download", "./a.txt", True) in client.calls


def _palette_png(tmp_path, size):
    surface = pygame.Surface(size, 0, 8)
    surface.fill((200, 40, 40))
    path = tmp_path / "palette.png"
    pygame.image.save(surface, str(path))
    return path.read_bytes()


def test_large_palette_image_is_scaled_down(tmp_path):
    controller, state, client, _ = _loaded()
    client.content = _palette_png(tmp_path, (1200, 900))

    controller.preview("b.png")

    preview = state.preview
    assert not preview.loading
    assert preview.error == ""
    assert preview.image.get_size() == (800, 600)


def test_undecodable_image_shows_preview_error(error_log):
    controller, state, client, _ = _loaded()
    client.content = b"not an image"

    controller.preview("b.png")

    assert not state.preview.loading
    assert state.preview.image is None
    assert state.preview.error == "Unsupported image"


def test_preview_wraps_around_file_list():
    controller, state, client, _ = _loaded()
    controller.preview("a.txt")

    controller.preview_previous()
    assert state.preview.name == "song.mp3"

    controller.preview_next()
    assert state.preview.name == "a.txt"


def test_preview_of_unknown_name_leaves_panes_empty():
    controller, state, client, _ = _loaded()
    controller.preview("ghost.bin")

    assert state.preview.show
    assert state.preview.kind == ""
    assert state.preview.index == -1
    assert client.calls == []


def test_audio_playback_toggles():
    controller, state, client, player = _loaded()
    controller.preview("song.mp3")
    assert state.preview.audio_data == b"hello world"

    controller.toggle_playback()
    assert player.playing
    controller.toggle_playback()
    assert not player.playing


def test_video_opens_external_viewer():
    listing = [DirectoryEntry("clip.mp4", mime="video/mp4")]
    controller, state, client, player = _loaded(listing=listing)
    controller.preview("clip.mp4")

    assert client.count("download") == 0
    controller.toggle_playback()
    assert player.opened == [state.preview.peek_url]


def test_close_preview_pauses_media():
    controller, state, _, player = _loaded()
    controller.preview("song.mp3")
    controller.toggle_playback()

    controller.close_preview()

    assert not player.playing
    assert not state.preview.show
    assert state.preview.audio_data is None


def test_download_saves_into_download_dir(tmp_path):
    controller, state, client, _ = _loaded(settings={"download_dir": str(tmp_path)})
    controller.preview("a.txt")
    controller.download()

    assert ("save", "./a.txt", os.path.join(str(tmp_path), "a.txt")) in client.calls
    assert not state.status.is_error


# ---------------------------------------------------------------------------
# Options Menu
# ---------------------------------------------------------------------------

def test_options_menu_opens_offset_from_pointer():
    controller, state, _, _ = _loaded()

    controller.show_options_menu((100, 80))
    assert state.options_menu.position == (85, 65)

    controller.show_options_menu((5, 5))
    assert state.options_menu.position == (0, 0)

    controller.run_menu_action("refresh")
    assert not state.options_menu.show
