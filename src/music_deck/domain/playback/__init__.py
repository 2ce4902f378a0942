"""Playback domain - queue controller, backends and state notifications.

This domain handles:
- Play queue editing and cursor tracking
- Transport state machine (playing, paused, stopped)
- Swappable track sources (local files, streaming)
- State-change notification to subscribers
"""

# Controller
from .controller import NO_CURSOR, PlaybackController

# State
from .state import PlaybackState, PlaybackStatus

# Notification sinks
from .now_playing import NowPlaying

# Backends
from .sources import (
    InvalidLocatorError,
    LocalTrackSource,
    StreamingTrackSource,
    TrackSource,
    TrackSourceError,
    create_source,
    list_sources,
)

__all__ = [
    # Controller
    "NO_CURSOR",
    "PlaybackController",
    # State
    "PlaybackState",
    "PlaybackStatus",
    # Sinks
    "NowPlaying",
    # Backends
    "TrackSource",
    "TrackSourceError",
    "InvalidLocatorError",
    "LocalTrackSource",
    "StreamingTrackSource",
    "create_source",
    "list_sources",
]
