"""Shared Rich console for shell output.

The router, the demo and the shell all print through one Console. It goes
quiet whenever user-facing output is switched off (``--quiet`` or
``console_output = false``), so rich output and log() agree.
"""

from typing import Optional

from rich.console import Console

from .output import is_console_output_enabled

_console: Optional[Console] = None


def get_console() -> Console:
    """Return the shared Console, synced with the console-output flag."""
    global _console
    if _console is None:
        _console = Console(highlight=False)
    _console.quiet = not is_console_output_enabled()
    return _console


def safe_print(message: str, style: Optional[str] = None) -> None:
    """Print through the shared console, optionally styled (e.g. "dim")."""
    get_console().print(message, style=style)
