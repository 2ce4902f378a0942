"""Domain layer - business logic for Music Deck.

Contains:
- library: Track model
- playback: playback controller, backends and notification sinks
"""
