"""
Track source interface for playback backends.

Defines the protocol a playback backend must follow (local files, streaming
services, ...). The controller only ever calls these five operations and
never inspects backend-specific fields, so backends can be swapped at any
time, including mid-playback.
"""

from typing import Optional, Protocol, runtime_checkable

from music_deck.domain.library.models import Track


@runtime_checkable
class TrackSource(Protocol):
    """Protocol defining the transport capability set of a backend.

    Implementations may raise TrackSourceError from any method; the
    controller reports that as SOURCE_UNAVAILABLE and leaves its state alone.

    Example backend:

        class NullSource:
            name = "null"

            def load_track(self, locator: str) -> None: ...
            def play(self) -> None: ...
            def pause(self) -> None: ...
            def stop(self) -> None: ...
            def current_track(self) -> Optional[Track]: return None
    """

    name: str

    def load_track(self, locator: str) -> None:
        """Resolve a locator and make it the loaded track.

        Args:
            locator: Opaque track locator (path, URL, URI)
        """
        ...

    def play(self) -> None:
        """Start transport on the loaded track."""
        ...

    def pause(self) -> None:
        """Pause transport."""
        ...

    def stop(self) -> None:
        """Stop transport."""
        ...

    def current_track(self) -> Optional[Track]:
        """Track resolved by the last load_track(), or None."""
        ...
