"""
Streaming service backend (mock).

Stands in for a remote streaming service. Loading a locator does not touch
the network; the derived title is tagged so it is obvious in the output which
backend handled a track.
"""

from typing import Optional

from loguru import logger

from music_deck.core.output import log
from music_deck.domain.library.models import Track, track_from_locator

from .exceptions import InvalidLocatorError

STREAMING_ARTIST = "Streaming Artist"
STREAMING_TITLE_PREFIX = "Streaming: "


class StreamingTrackSource:
    """Mock track source for a remote streaming service."""

    name = "streaming"

    def __init__(self, announce: bool = True):
        self.announce = announce
        self._current: Optional[Track] = None

    def load_track(self, locator: str) -> None:
        if not locator or not locator.strip():
            raise InvalidLocatorError(self.name, locator)
        self._current = track_from_locator(
            locator, STREAMING_ARTIST, title_prefix=STREAMING_TITLE_PREFIX
        )
        logger.debug(f"Streaming source loaded: {locator}")

    def play(self) -> None:
        self._say(f"Streaming from remote source: {self._title()}")

    def pause(self) -> None:
        self._say("Paused streaming player")

    def stop(self) -> None:
        self._say("Stopped streaming player")

    def current_track(self) -> Optional[Track]:
        return self._current

    def _title(self) -> str:
        return self._current.title if self._current else "Unknown"

    def _say(self, message: str) -> None:
        if self.announce:
            log(message)
        else:
            logger.info(message)
