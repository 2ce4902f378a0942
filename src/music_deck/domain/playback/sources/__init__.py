"""
Playback backend registry.

Provides access to all available track source implementations.
"""

from typing import Callable, Dict, List

from .base import TrackSource
from .exceptions import InvalidLocatorError, TrackSourceError
from .local import LocalTrackSource
from .streaming import StreamingTrackSource

# Each factory accepts the ``announce`` flag and returns a TrackSource
SOURCES: Dict[str, Callable[..., TrackSource]] = {
    LocalTrackSource.name: LocalTrackSource,
    StreamingTrackSource.name: StreamingTrackSource,
}


def create_source(name: str, announce: bool = True) -> TrackSource:
    """Create a track source by name.

    Args:
        name: Source name (e.g., 'local', 'streaming')
        announce: Whether the source prints its transport actions

    Returns:
        New track source instance

    Raises:
        ValueError: If source not found
    """
    if name not in SOURCES:
        available = list_sources()
        raise ValueError(
            f"Unknown source: '{name}'. "
            f"Available sources: {', '.join(available) if available else 'none'}"
        )
    return SOURCES[name](announce=announce)


def list_sources() -> List[str]:
    """Get list of all registered source names."""
    return list(SOURCES.keys())


__all__ = [
    "TrackSource",
    "TrackSourceError",
    "InvalidLocatorError",
    "LocalTrackSource",
    "StreamingTrackSource",
    "SOURCES",
    "create_source",
    "list_sources",
]
