"""Application context for explicit state passing.

This module provides the AppContext dataclass that carries the configuration
and the one shared PlaybackController to everything that needs them, instead
of a module-level singleton reached through imports.
"""

from dataclasses import dataclass, replace
from typing import Optional

from rich.console import Console

from music_deck.core.config import Config
from music_deck.domain.playback import NowPlaying, PlaybackController, create_source


@dataclass
class AppContext:
    """Application context passed to command handlers.

    The controller itself is mutable and shared; the context only changes
    when configuration or collaborators are replaced.

    Attributes:
        config: Application configuration
        controller: The shared playback controller
        now_playing: View mirroring the controller (None until attached)
        console: Rich Console for formatted output
    """

    config: Config
    controller: PlaybackController
    now_playing: Optional[NowPlaying] = None
    console: Optional[Console] = None

    @classmethod
    def create(cls, config: Config, console: Optional[Console] = None) -> 'AppContext':
        """Create the application context with a controller bound to the configured source.

        Args:
            config: Application configuration
            console: Optional Rich Console instance

        Returns:
            New AppContext with an empty queue
        """
        source = create_source(
            config.player.default_source, announce=config.player.announce
        )
        controller = PlaybackController(source)
        return cls(
            config=config,
            controller=controller,
            now_playing=NowPlaying(controller),
            console=console,
        )

    def with_config(self, config: Config) -> 'AppContext':
        """Return new context with updated configuration.

        Args:
            config: New configuration

        Returns:
            New AppContext with updated config, other fields unchanged
        """
        return replace(self, config=config)
