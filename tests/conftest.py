"""Shared pytest fixtures for Music Deck tests."""

from typing import List, Optional, Tuple

import pytest

from music_deck.core.output import set_console_output
from music_deck.domain.library.models import Track
from music_deck.domain.playback import PlaybackController
from music_deck.domain.playback.sources import TrackSourceError


class RecordingSource:
    """Track source test double that records every transport call."""

    def __init__(self, name: str = "recording", fail_on: Tuple[str, ...] = ()):
        self.name = name
        self.fail_on = fail_on
        self.calls: List[Tuple[str, ...]] = []
        self._current: Optional[Track] = None

    def _record(self, *call: str) -> None:
        self.calls.append(call)
        if call[0] in self.fail_on:
            raise TrackSourceError(self.name, f"{call[0]} failed")

    def load_track(self, locator: str) -> None:
        self._record("load_track", locator)
        self._current = Track(title=locator, artist="", locator=locator)

    def play(self) -> None:
        self._record("play")

    def pause(self) -> None:
        self._record("pause")

    def stop(self) -> None:
        self._record("stop")

    def current_track(self) -> Optional[Track]:
        return self._current


@pytest.fixture(autouse=True)
def restore_console_output():
    """Re-enable console output after tests that silence it."""
    yield
    set_console_output(True)


@pytest.fixture
def tracks() -> List[Track]:
    """Three distinct tracks T1, T2, T3."""
    return [
        Track(title="Song1.mp3", artist="ArtistA", locator="file:///local/song1.mp3"),
        Track(title="Song2.mp3", artist="ArtistB", locator="file:///local/song2.mp3"),
        Track(title="Song3.mp3", artist="ArtistC", locator="spotify://track/123"),
    ]


@pytest.fixture
def source() -> RecordingSource:
    return RecordingSource()


@pytest.fixture
def controller(source: RecordingSource) -> PlaybackController:
    """Controller bound to a recording source with an empty queue."""
    return PlaybackController(source)


@pytest.fixture
def loaded_controller(controller: PlaybackController, tracks: List[Track]) -> PlaybackController:
    """Controller with [T1, T2, T3] queued and the cursor unset."""
    for track in tracks:
        controller.add_to_queue(track)
    return controller
