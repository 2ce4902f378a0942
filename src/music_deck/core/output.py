"""
Unified output system using Loguru.
Replaces print() statements and stdlib logging with dual output (console + file).
"""

import threading
from pathlib import Path
from loguru import logger

# Whether log() echoes user-facing messages to stdout
_console_output_enabled = True
_console_output_lock = threading.Lock()


def setup_loguru(log_file: Path, level: str = "INFO") -> None:
    """
    Configure loguru for file logging (console display is handled by log()).

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default handler
    logger.remove()

    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,  # Keep 5 backup files
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,  # Synchronous writes (thread-safe but blocking)
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def set_console_output(enabled: bool) -> None:
    """Enable or disable echoing of user-facing messages to stdout."""
    global _console_output_enabled
    with _console_output_lock:
        _console_output_enabled = enabled
        logger.debug(f"Console output {'enabled' if enabled else 'disabled'}")


def is_console_output_enabled() -> bool:
    with _console_output_lock:
        return _console_output_enabled


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to the log AND prints for the user.

    Use this instead of print() for user-facing messages that should also be logged.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
    """
    # Log to file via loguru (always)
    log_func = getattr(logger, level)
    log_func(message)

    if is_console_output_enabled():
        print(message)
