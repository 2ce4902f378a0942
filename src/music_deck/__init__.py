"""Music Deck - playlist and playback controller with swappable sources."""

__version__ = "0.1.0"
