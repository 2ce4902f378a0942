"""
Shell input parsing.

Splits a typed line into a command and its arguments, re-joining quoted
titles, and converts the 1-based queue positions users type.
"""

from typing import List, Optional

QUOTE_CHARS = ('"', "'")


def parse_quoted_args(args: List[str]) -> List[str]:
    """Re-join arguments that were split inside a quoted span.

    A quote only opens at the start of a word and only closes at the end of
    one, so apostrophes inside titles ("Don't") are left alone. An unclosed
    quote runs to the end of the input.

    Example:
        ['file:///a.mp3', '"Blue', 'Monday"', 'New', 'Order']
        -> ['file:///a.mp3', 'Blue Monday', 'New', 'Order']
    """
    parsed: List[str] = []
    words = iter(args)

    for word in words:
        quote = word[:1]
        if quote not in QUOTE_CHARS:
            parsed.append(word)
            continue

        closed = len(word) > 1 and word.endswith(quote)
        span = [word[1:-1] if closed else word[1:]]
        while not closed:
            following = next(words, None)
            if following is None:
                break
            closed = following.endswith(quote)
            span.append(following[:-1] if closed else following)

        parsed.append(" ".join(span))

    return parsed


def parse_command(user_input: str) -> tuple[str, List[str]]:
    """
    Parse a shell line into (command, args).

    The command is lowercased; arguments keep their case and quoted spans
    are joined. Blank input gives ("", []).
    """
    parts = user_input.split()
    if not parts:
        return "", []
    return parts[0].lower(), parse_quoted_args(parts[1:])


def parse_position(value: str) -> Optional[int]:
    """Convert a 1-based queue position typed by the user to a 0-based index.

    Returns:
        0-based index, or None if the value is not an integer
    """
    try:
        return int(value) - 1
    except (TypeError, ValueError):
        return None


__all__ = ['parse_quoted_args', 'parse_command', 'parse_position']
