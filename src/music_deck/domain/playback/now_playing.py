"""
Now-playing view for Music Deck.

A notification sink that mirrors the controller's state together with the
title and artist of the selected track, for UIs that want plain fields to
render. Transport actions are forwarded to the controller unchanged.
"""

from typing import Any, Callable, Dict, Optional

from loguru import logger

from .controller import PlaybackController
from .state import PlaybackState, PlaybackStatus

NO_SONG_TITLE = "No Song"


class NowPlaying:
    """Mirror of the controller's state and current track info.

    Subscribes on construction; the controller immediately delivers its
    current state, so the fields are populated before __init__ returns.
    """

    def __init__(
        self,
        controller: PlaybackController,
        on_change: Optional[Callable[["NowPlaying"], None]] = None,
    ):
        self.controller = controller
        self.on_change = on_change
        self.title: str = NO_SONG_TITLE
        self.artist: str = ""
        self.state: PlaybackState = PlaybackState.STOPPED
        self._unsubscribe: Optional[Callable[[], None]] = controller.subscribe(
            self._on_state
        )

    def _on_state(self, state: PlaybackState) -> None:
        self.state = state
        self.refresh()
        if self.on_change is not None:
            self.on_change(self)

    def refresh(self) -> None:
        """Re-read title and artist from the controller's current track."""
        track = self.controller.current_track
        if track is not None:
            self.title = track.title
            self.artist = track.artist
        else:
            self.title = NO_SONG_TITLE
            self.artist = ""

    def close(self) -> None:
        """Stop receiving state updates."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            logger.debug("NowPlaying view unsubscribed")

    def as_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "artist": self.artist,
            "state": self.state.value,
        }

    # Playback control actions forwarded to the controller

    def play(self) -> PlaybackStatus:
        return self.controller.play()

    def pause(self) -> PlaybackStatus:
        return self.controller.pause()

    def stop(self) -> PlaybackStatus:
        return self.controller.stop()

    def next(self) -> PlaybackStatus:
        return self.controller.next()

    def previous(self) -> PlaybackStatus:
        return self.controller.previous()
