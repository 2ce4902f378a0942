"""
Local file backend.

Simulates playback of local files: the locator's last path component becomes
the track title. Transport actions are announced, nothing is decoded.
"""

from typing import Optional

from loguru import logger

from music_deck.core.output import log
from music_deck.domain.library.models import Track, track_from_locator

from .exceptions import InvalidLocatorError

LOCAL_ARTIST = "Local Artist"


class LocalTrackSource:
    """Track source for files on local storage."""

    name = "local"

    def __init__(self, announce: bool = True):
        self.announce = announce
        self._current: Optional[Track] = None

    def load_track(self, locator: str) -> None:
        if not locator or not locator.strip():
            raise InvalidLocatorError(self.name, locator)
        self._current = track_from_locator(locator, LOCAL_ARTIST)
        logger.debug(f"Local source loaded: {locator}")

    def play(self) -> None:
        self._say(f"Playing from local source: {self._title()}")

    def pause(self) -> None:
        self._say("Paused local player")

    def stop(self) -> None:
        self._say("Stopped local player")

    def current_track(self) -> Optional[Track]:
        return self._current

    def _title(self) -> str:
        return self._current.title if self._current else "Unknown"

    def _say(self, message: str) -> None:
        if self.announce:
            log(message)
        else:
            logger.info(message)
