"""
Configuration management for Music Deck
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

KNOWN_SOURCES = ("local", "streaming")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PlayerConfig:
    """Configuration for the playback controller."""

    default_source: str = "local"  # Backend bound at startup
    announce: bool = True  # Print transport announcements to the console

    def validate(self) -> None:
        """Validate player configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.default_source not in KNOWN_SOURCES:
            raise ValueError(
                f"Invalid default source: {self.default_source!r}. "
                f"Valid sources are: {', '.join(KNOWN_SOURCES)}"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/music-deck/music-deck.log)
    )
    console_output: bool = True

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If the level is not one loguru knows
        """
        if self.level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level!r}. "
                f"Valid levels are: {', '.join(LOG_LEVELS)}"
            )


@dataclass
class Config:
    """Main configuration object."""

    player: PlayerConfig = field(default_factory=PlayerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "music-deck"
    return Path.home() / ".config" / "music-deck"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/music-deck (or ~/.config/music-deck)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "music-deck"
    return Path.home() / ".local" / "share" / "music-deck"


def get_log_file_path(config: Config) -> Path:
    """Get the path to the log file."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / "music-deck.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Music Deck Configuration

[player]
# Backend bound when the controller starts (local, streaming)
default_source = "local"

# Print transport announcements (play/pause/stop) to the console
announce = true

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/music-deck/music-deck.log)
# log_file = "/tmp/music-deck.log"

# Echo user-facing messages to stdout
console_output = true
""".strip()


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Environment variables override TOML values:
    - MUSIC_DECK_SOURCE
    - MUSIC_DECK_LOG_LEVEL
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()
    config = Config()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)

            if "player" in toml_data:
                player_data = toml_data["player"]
                config.player = PlayerConfig(
                    default_source=player_data.get(
                        "default_source", config.player.default_source
                    ),
                    announce=player_data.get("announce", config.player.announce),
                )

            if "logging" in toml_data:
                logging_data = toml_data["logging"]
                config.logging = LoggingConfig(
                    level=str(logging_data.get("level", config.logging.level)).upper(),
                    log_file=logging_data.get("log_file"),
                    console_output=logging_data.get(
                        "console_output", config.logging.console_output
                    ),
                )

        except Exception as e:
            print(f"Error loading configuration from {config_path}: {e}")
            print("Using default configuration.")
            config = Config()

    # Override with environment variables if present
    env_source = os.environ.get("MUSIC_DECK_SOURCE")
    env_level = os.environ.get("MUSIC_DECK_LOG_LEVEL")

    if env_source:
        config.player.default_source = env_source.strip().lower()
    if env_level:
        config.logging.level = env_level.strip().upper()

    try:
        config.player.validate()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        print("Using default player configuration.")
        config.player = PlayerConfig()

    try:
        config.logging.validate()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        print("Using default log level.")
        config.logging.level = LoggingConfig.level

    return config
