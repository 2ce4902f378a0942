"""
Music library domain models.

Contains data structures for representing music tracks.
"""

import uuid
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from urllib.parse import urlparse


@dataclass(frozen=True)
class Track:
    """Represents a playable track.

    The locator is opaque to the controller: a file URL, a streaming URI or
    anything a backend knows how to load. Tracks are immutable; the same
    instance may be queued more than once.
    """
    title: str
    artist: str
    locator: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


def get_display_name(track: Track) -> str:
    """Format a track as "Artist - Title" for display."""
    if track.artist:
        return f"{track.artist} - {track.title}"
    return track.title


def _locator_name(locator: str) -> str:
    """Last path component of a locator (URL or plain path)."""
    parsed = urlparse(locator)
    path = parsed.path if parsed.scheme else locator
    name = PurePosixPath(path).name
    # stream://station style URIs carry the name in the netloc
    if not name and parsed.netloc:
        return parsed.netloc
    return name or locator


def track_from_locator(locator: str, artist: str, title_prefix: str = "") -> Track:
    """Build a Track whose title is derived from the locator.

    Args:
        locator: File path, file:// URL or streaming URI
        artist: Artist name to attach
        title_prefix: Optional prefix for the derived title

    Returns:
        New Track

    Example:
        >>> track_from_locator("file:///local/song1.mp3", "Local Artist").title
        'song1.mp3'
    """
    return Track(
        title=f"{title_prefix}{_locator_name(locator)}",
        artist=artist,
        locator=locator,
    )
