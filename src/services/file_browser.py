"""
File browser controller.

Implements the user operations of the browser (navigate, rename, create
folder, delete, upload, preview, download, duplicate) on top of the API
client. Requests run through a TaskRunner and every completion callback
mutates AppState on the main thread.
"""

import os
import traceback
from io import BytesIO
from typing import Any, Dict, List, Optional, Tuple

import pygame

from constants import (
    ROOT_PATH,
    PATH_SEPARATOR,
    TEXT_PREVIEW_LIMIT,
    OPTIONS_MENU_OFFSET,
)
from services.api_client import FileServerClient
from services.local_files import read_upload_file
from services.media_player import MediaPlayer
from services.models import ApiResponse, DirectoryEntry
from services.task_runner import TaskRunner
from state import AppState, VIEW_LOADING, VIEW_CONTENT, VIEW_ERROR
from ui.view_models import (
    adjacent_files,
    delete_confirm_lines,
    find_file_index,
    preview_kind,
    split_file_list,
)
from utils.formatting import copy_name, join_path, sanitize_filename
from utils.logging import log_error

# Largest edge of a decoded preview image
PREVIEW_IMAGE_MAX = 800


def _decode_image(data: bytes) -> Any:
    """Decode image bytes into a surface no larger than PREVIEW_IMAGE_MAX."""
    image = pygame.image.load(BytesIO(data))
    width, height = image.get_size()
    max_dimension = max(width, height)
    if max_dimension > PREVIEW_IMAGE_MAX:
        scale = PREVIEW_IMAGE_MAX / max_dimension
        # smoothscale only accepts 24 and 32 bit surfaces (not GIF or palette PNG)
        resize = pygame.transform.smoothscale if image.get_bitsize() >= 24 else pygame.transform.scale
        image = resize(
            image, (max(1, int(width * scale)), max(1, int(height * scale)))
        )
    return image


def _task_failure(error: Exception) -> ApiResponse:
    """Failed response standing in for work that raised."""
    return ApiResponse.failure(f"Unexpected error: {type(error).__name__}")


class FileBrowserController:
    """
    Drives the remote file browser.

    Args:
        state: Application state to mutate
        client: API client for the file server
        runner: Task runner used for every request
        settings: Application settings dictionary
        media_player: Player used for audio and external viewers
    """

    def __init__(
        self,
        state: AppState,
        client: FileServerClient,
        runner: TaskRunner,
        settings: Dict[str, Any],
        media_player: Optional[MediaPlayer] = None,
    ):
        self.state = state
        self.client = client
        self.runner = runner
        self.settings = settings
        self.media_player = media_player if media_player is not None else MediaPlayer()

    @property
    def current_path(self) -> str:
        return self.state.browser.current_path

    # ---- Listing & Navigation ---- #

    def list_directory(self, path: str) -> None:
        """
        Request the listing of ``path`` and show it when it arrives.

        Only the most recent request is applied; responses to older
        requests are dropped.
        """
        browser = self.state.browser
        browser.listing_generation += 1
        generation = browser.listing_generation
        browser.requested_path = path
        browser.set_view(VIEW_LOADING)

        def on_done(response: ApiResponse) -> None:
            if generation != browser.listing_generation:
                return
            self._apply_listing(path, response)

        self.runner.submit(
            lambda: self.client.list_directory(path),
            on_done,
            lambda error: on_done(_task_failure(error)),
        )

    def refresh(self) -> None:
        """List the current directory again."""
        self.list_directory(self.current_path)

    def retry(self) -> None:
        """List the path of the last listing request again, e.g. after it failed."""
        self.list_directory(self.state.browser.requested_path or self.current_path)

    def go_up(self) -> None:
        """List the parent of the current directory."""
        if self.current_path == ROOT_PATH:
            return
        parts = self.current_path.split(PATH_SEPARATOR)
        self.list_directory(PATH_SEPARATOR.join(parts[:-1]) or ROOT_PATH)

    def open_directory(self, name: str) -> None:
        """Navigate into a child directory of the current one."""
        self.list_directory(join_path(self.current_path, name))

    def _apply_listing(self, path: str, response: ApiResponse) -> None:
        browser = self.state.browser
        if not response.success:
            message = response.message or "Failed to load directory"
            log_error(f"Failed to list {path}: {message}", "ListError")
            browser.set_view(VIEW_ERROR, message)
            return

        browser.current_path = path
        browser.entries = list(response.files)
        browser.file_list = split_file_list(browser.entries)
        browser.scroll_offset = 0
        self.state.selected.clear()
        self.state.rename.stop()
        self.state.new_folder.stop()
        browser.set_view(VIEW_CONTENT)

    # ---- Selection ---- #

    def select(self, name: str) -> None:
        """Toggle the selection of a card unless a confirmation is pending."""
        if self.state.confirm_modal.show:
            return
        self.state.toggle_selected(name)

    # ---- Rename ---- #

    def start_rename(self, name: str) -> None:
        """Make the name field of an entry editable."""
        if self.state.browser.find_entry(name) is None:
            return
        self.state.new_folder.stop()
        self.state.rename.start(name, name)

    def commit_rename(self) -> None:
        """Rename the edited entry to the typed text."""
        rename = self.state.rename
        if not rename.active:
            return
        self.rename(rename.target, rename.input_text.strip())

    def rename(self, old_name: str, new_name: str) -> None:
        """
        Rename an entry of the current directory.

        Equal names issue no request. On failure the card shows the
        original name again and the server message goes to the status
        bar; the listing is not refreshed. On success the listing is.
        """
        rename = self.state.rename
        if not new_name or new_name == old_name:
            rename.stop()
            return

        rename.start(old_name, new_name)
        rename.commit()
        source = join_path(self.current_path, old_name)
        target = join_path(self.current_path, new_name)

        def on_done(response: ApiResponse) -> None:
            rename.stop()
            if not response.success:
                message = response.message or "Rename failed"
                log_error(f"Failed to rename {source} to {target}: {message}", "RenameError")
                self.state.set_status(message, is_error=True)
                return
            self.refresh()

        self.runner.submit(
            lambda: self.client.move(source, target),
            on_done,
            lambda error: on_done(_task_failure(error)),
        )

    def cancel_rename(self) -> None:
        self.state.rename.stop()

    # ---- Create Folder ---- #

    def add_folder(self) -> None:
        """Show an editable card for a new folder."""
        self.hide_options_menu()
        self.state.rename.stop()
        self.state.new_folder.start(
            "", self.settings.get("new_folder_name", "New Folder"), select_all=True
        )

    def commit_new_folder(self) -> None:
        """Create the folder typed into the pending card."""
        new_folder = self.state.new_folder
        if not new_folder.active:
            return
        name = new_folder.input_text.strip()
        new_folder.commit()
        if not name:
            new_folder.stop()
            return
        self.create_folder(name)

    def cancel_new_folder(self) -> None:
        self.state.new_folder.stop()

    def create_folder(self, name: str) -> None:
        """
        Create a folder in the current directory.

        The listing is refreshed whatever the outcome; errors are only
        logged.
        """
        path = join_path(self.current_path, name)

        def on_done(response: ApiResponse) -> None:
            if not response.success:
                log_error(
                    f"Failed to create folder {path}: {response.message}", "MkdirError"
                )
            self.refresh()

        self.runner.submit(
            lambda: self.client.make_directory(path),
            on_done,
            lambda error: on_done(_task_failure(error)),
        )

    # ---- Delete ---- #

    def request_delete(self) -> None:
        """Delete the selection, asking first if confirm_delete is set."""
        entries = self.state.selected_entries()
        if not entries:
            return
        self.hide_options_menu()

        if not self.settings.get("confirm_delete", True):
            self.delete(entries)
            return

        modal = self.state.confirm_modal
        modal.show = True
        modal.title = "Delete"
        modal.message_lines = delete_confirm_lines(len(entries))
        modal.ok_label = "Delete"
        modal.cancel_label = "Cancel"
        modal.button_index = 1
        modal.context = "delete"
        modal.data = entries

    def confirm(self) -> None:
        """Run the action of the confirmation modal."""
        modal = self.state.confirm_modal
        context, data = modal.context, modal.data
        self.cancel_confirm()
        if context == "delete":
            self.delete(data)

    def cancel_confirm(self) -> None:
        modal = self.state.confirm_modal
        modal.show = False
        modal.context = ""
        modal.data = None

    def delete(self, entries: List[DirectoryEntry]) -> None:
        """
        Delete entries with one independent request each.

        A failed request switches to the error view; entries already
        deleted stay deleted. Each success refreshes the listing.
        """
        for entry in entries:
            path = join_path(self.current_path, entry.name)
            if entry.is_dir:
                work = lambda path=path: self.client.remove_directory(path)
            else:
                work = lambda path=path: self.client.remove_file(path)
            self.runner.submit(
                work,
                lambda response, path=path: self._on_deleted(path, response),
                lambda error, path=path: self._on_deleted(path, _task_failure(error)),
            )

    def _on_deleted(self, path: str, response: ApiResponse) -> None:
        if not response.success:
            message = response.message or "Delete failed"
            log_error(f"Failed to delete {path}: {message}", "DeleteError")
            self.state.browser.set_view(VIEW_ERROR, message)
            return
        self.hide_options_menu()
        self.refresh()

    # ---- Duplicate ---- #

    def duplicate(self, entries: Optional[List[DirectoryEntry]] = None) -> None:
        """Copy each entry next to itself as "<stem> (copy)<ext>"."""
        if entries is None:
            entries = self.state.selected_entries()
        self.hide_options_menu()
        for entry in entries:
            source = join_path(self.current_path, entry.name)
            target = join_path(self.current_path, copy_name(entry.name))
            self.runner.submit(
                lambda source=source, target=target: self.client.copy(source, target),
                lambda response, source=source: self._on_duplicated(source, response),
                lambda error, source=source: self._on_duplicated(source, _task_failure(error)),
            )

    def _on_duplicated(self, source: str, response: ApiResponse) -> None:
        if not response.success:
            message = response.message or "Copy failed"
            log_error(f"Failed to copy {source}: {message}", "CopyError")
            self.state.browser.set_view(VIEW_ERROR, message)
            return
        self.refresh()

    # ---- Upload ---- #

    def upload(self, paths: List[str]) -> None:
        """
        Upload local files into the current directory, one after another.

        A spinner covers the whole batch. Each success refreshes the
        listing, or only the last one when refresh_after_each_upload is
        off. A failed upload switches to the error view and the batch
        goes on.
        """
        if not paths:
            return
        self.hide_options_menu()
        loading = self.state.loading
        loading.show = True
        loading.message = f"Uploading {len(paths)} file(s)..."

        base_path = self.current_path
        refresh_each = self.settings.get("refresh_after_each_upload", True)

        def work() -> int:
            uploaded = 0
            for local_path in paths:
                response = self._upload_one(base_path, local_path)
                if response.success:
                    uploaded += 1
                self.runner.call_soon(
                    lambda response=response, local_path=local_path: self._on_uploaded(
                        local_path, response, refresh_each
                    )
                )
            return uploaded

        def on_done(uploaded: int) -> None:
            loading.show = False
            if uploaded and not refresh_each:
                self.refresh()

        def on_error(error: Exception) -> None:
            loading.show = False
            self._on_uploaded(", ".join(paths), _task_failure(error), False)

        self.runner.submit(work, on_done, on_error)

    def _upload_one(self, base_path: str, local_path: str) -> ApiResponse:
        try:
            name, data = read_upload_file(local_path)
        except OSError as e:
            log_error(f"Failed to read {local_path}", type(e).__name__, traceback.format_exc())
            return ApiResponse(success=False, message=f"Could not read {local_path}")
        return self.client.upload(join_path(base_path, name), data)

    def _on_uploaded(self, local_path: str, response: ApiResponse, refresh: bool) -> None:
        if not response.success:
            message = response.message or "Upload failed"
            log_error(f"Failed to upload {local_path}: {message}", "UploadError")
            self.state.browser.set_view(VIEW_ERROR, message)
            return
        if refresh:
            self.refresh()

    # ---- Preview ---- #

    def open_entry(self, name: str) -> None:
        """Open a card: navigate into folders, preview files."""
        entry = self.state.browser.find_entry(name)
        if entry is None:
            return
        if entry.is_dir:
            self.open_directory(name)
        else:
            self.preview(name)

    def preview(self, name: str) -> None:
        """
        Show the preview of a file of the current directory.

        Media is paused and every pane reset first. Names missing from
        the file list are logged and leave the panes empty.
        """
        self.media_player.pause()
        preview = self.state.preview
        preview.reset()
        preview.show = True
        preview.name = name

        file_list = self.state.browser.file_list
        index = find_file_index(file_list, name)
        if index < 0:
            log_error(f"File not found in file list: {name}", "PreviewError")
            return

        path = join_path(self.current_path, name)
        preview.index = index
        preview.download_url = self.client.download_url(path)
        preview.peek_url = self.client.download_url(path, peek=True)
        preview.kind = preview_kind(file_list[index].mime)

        if preview.kind in ("image", "text", "audio"):
            self._fetch_preview(name, path, preview.kind)

    def _fetch_preview(self, name: str, path: str, kind: str) -> None:
        preview = self.state.preview
        preview.loading = True

        def work() -> Tuple[ApiResponse, Any]:
            response = self.client.download(path, peek=True)
            if not response.success:
                return response, None
            if kind == "image":
                try:
                    return response, _decode_image(response.content)
                except (pygame.error, ValueError) as e:
                    log_error(f"Failed to decode {path}", type(e).__name__, traceback.format_exc())
                    return ApiResponse(success=False, message="Unsupported image"), None
            if kind == "text":
                text = response.content.decode("utf-8", errors="replace")
                return response, text[:TEXT_PREVIEW_LIMIT]
            return response, response.content

        def on_done(result: Tuple[ApiResponse, Any]) -> None:
            if not preview.show or preview.name != name:
                return
            response, payload = result
            preview.loading = False
            if not response.success:
                log_error(f"Failed to fetch preview of {path}: {response.message}", "PreviewError")
                preview.error = response.message or "Preview unavailable"
                return
            if kind == "image":
                preview.image = payload
            elif kind == "text":
                preview.text = payload
            else:
                preview.audio_data = payload

        self.runner.submit(work, on_done, lambda error: on_done((_task_failure(error), None)))

    def preview_next(self) -> None:
        self._preview_adjacent(1)

    def preview_previous(self) -> None:
        self._preview_adjacent(-1)

    def _preview_adjacent(self, step: int) -> None:
        preview = self.state.preview
        file_list = self.state.browser.file_list
        if not preview.show or preview.index < 0 or not file_list:
            return
        previous_file, next_file = adjacent_files(file_list, preview.index)
        self.preview((next_file if step > 0 else previous_file).name)

    def close_preview(self) -> None:
        self.media_player.pause()
        self.state.preview.show = False
        self.state.preview.reset()

    def toggle_playback(self) -> None:
        """Play or pause audio, or open video and PDF in the system viewer."""
        preview = self.state.preview
        if preview.kind == "audio" and preview.audio_data is not None:
            if self.media_player.playing:
                self.media_player.pause()
            else:
                self.media_player.play_audio(preview.audio_data)
        elif preview.kind in ("video", "pdf") and preview.peek_url:
            self.media_player.open_external(preview.peek_url)

    # ---- Download ---- #

    def download(self, name: Optional[str] = None) -> None:
        """Save a file of the current directory into download_dir."""
        name = name or self.state.preview.name
        if not name:
            return
        path = join_path(self.current_path, name)
        dest_path = os.path.join(self.settings.get("download_dir", "."), sanitize_filename(name))
        self.state.set_status(f"Downloading {name}...")

        def on_done(response: ApiResponse) -> None:
            if response.success:
                self.state.set_status(response.message)
            else:
                log_error(f"Failed to download {path}: {response.message}", "DownloadError")
                self.state.set_status(response.message or "Download failed", is_error=True)

        self.runner.submit(
            lambda: self.client.download_to_file(path, dest_path),
            on_done,
            lambda error: on_done(_task_failure(error)),
        )

    # ---- Options Menu ---- #

    def show_options_menu(self, position: Tuple[int, int]) -> None:
        """Show the options menu at a pointer position, offset up-left."""
        if self.state.confirm_modal.show:
            return
        menu = self.state.options_menu
        menu.show = True
        x, y = position
        menu.position = (max(0, x - OPTIONS_MENU_OFFSET), max(0, y - OPTIONS_MENU_OFFSET))
        menu.highlighted = -1

    def hide_options_menu(self) -> None:
        self.state.options_menu.show = False
        self.state.options_menu.highlighted = -1

    def run_menu_action(self, action: str) -> None:
        """Dispatch an options menu entry (except upload, which needs a picker)."""
        if action == "new_folder":
            self.add_folder()
        elif action == "delete":
            self.request_delete()
        elif action == "duplicate":
            self.duplicate()
        elif action == "refresh":
            self.hide_options_menu()
            self.refresh()
