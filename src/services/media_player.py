"""
Media playback for previews.
Audio plays through pygame.mixer; video and PDF files are handed to the
system viewer.
"""

import traceback
import webbrowser
from io import BytesIO

import pygame

from utils.logging import log_error


class MediaPlayer:
    """Plays audio previews and opens other media externally."""

    def __init__(self):
        self.playing = False

    def _ensure_mixer(self) -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
            return True
        except pygame.error as e:
            log_error("Audio device unavailable", type(e).__name__, traceback.format_exc())
            return False

    def play_audio(self, data: bytes) -> bool:
        """
        Start playing an audio file from memory.

        Args:
            data: Encoded audio (mp3, ogg, wav, ...)

        Returns:
            True if playback started
        """
        if not self._ensure_mixer():
            return False
        try:
            pygame.mixer.music.load(BytesIO(data))
            pygame.mixer.music.play()
        except pygame.error as e:
            log_error("Failed to play audio", type(e).__name__, traceback.format_exc())
            return False
        self.playing = True
        return True

    def pause(self) -> None:
        """Pause whatever is playing."""
        if self.playing and pygame.mixer.get_init():
            pygame.mixer.music.pause()
        self.playing = False

    def open_external(self, url: str) -> bool:
        """Open a URL with the system viewer."""
        try:
            return webbrowser.open(url)
        except webbrowser.Error as e:
            log_error(f"Failed to open {url}", type(e).__name__, traceback.format_exc())
            return False
