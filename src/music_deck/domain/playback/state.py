"""
Playback state and operation results for Music Deck.

PlaybackState is the controller's transport mode. PlaybackStatus is what
every controller operation hands back: boundary conditions such as an empty
queue are reported here rather than raised, so callers (a UI, the shell)
can react without special-casing exceptions.
"""

from enum import Enum


class PlaybackState(Enum):
    """Controller transport mode."""

    PLAYING = "playing"
    PAUSED = "paused"
    STOPPED = "stopped"


class PlaybackStatus(Enum):
    """Outcome of a controller operation."""

    OK = "ok"
    EMPTY_QUEUE = "empty_queue"  # play() with no tracks queued
    INDEX_OUT_OF_RANGE = "index_out_of_range"  # remove/move with a bad index
    QUEUE_BOUNDARY = "queue_boundary"  # next() past the end, previous() before the start
    SOURCE_UNAVAILABLE = "source_unavailable"  # no backend bound, or backend failed

    @property
    def ok(self) -> bool:
        return self is PlaybackStatus.OK
