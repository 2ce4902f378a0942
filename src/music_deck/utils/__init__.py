"""
Cross-cutting utilities for Music Deck.

Contains:
- parsers: Shell command and argument parsing
"""

from .parsers import parse_command, parse_position, parse_quoted_args

__all__ = [
    'parse_quoted_args',
    'parse_command',
    'parse_position',
]
