"""Library domain - track model and display helpers."""

from .models import Track, get_display_name, track_from_locator

__all__ = [
    "Track",
    "get_display_name",
    "track_from_locator",
]
