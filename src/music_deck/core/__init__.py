"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Output and logging (Loguru)
- Console management (Rich)
"""

# Configuration
from .config import (
    Config,
    PlayerConfig,
    LoggingConfig,
    load_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    create_default_config,
)

# Output
from .output import log, setup_loguru, set_console_output

# Console
from .console import get_console, safe_print

__all__ = [
    # Config
    "Config",
    "PlayerConfig",
    "LoggingConfig",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "create_default_config",
    # Output
    "log",
    "setup_loguru",
    "set_console_output",
    # Console
    "get_console",
    "safe_print",
]
