"""
Path Literals - Parse and format paths as text.

Format: pairs of numbers, "x y" or "x,y", repeating, e.g.
    "0,0 10,0 10,10 0,10"

Parsing is best effort. It stops at the first token that is not a number
and returns whatever points were read up to there; it never raises.
"""

import logging
from typing import Callable, Optional, Sequence

import numpy as np

from ..config import CONFIG
from ..core.geometry import Path64, PathD, Point, Point64, PointD

logger = logging.getLogger(__name__)


class _Cursor:
    """Read position inside a string."""

    __slots__ = ['text', 'pos']

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    @property
    def done(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos]


def _is_digit(c: str) -> bool:
    return '0' <= c <= '9'


# =============================================================================
# NUMBER TOKENS
# =============================================================================

def _get_int(cur: _Cursor) -> Optional[int]:
    """Read an optionally negative integer, or None if no digits follow."""
    negative = not cur.done and cur.peek() == '-'
    if negative:
        cur.pos += 1

    start = cur.pos
    while not cur.done and _is_digit(cur.peek()):
        cur.pos += 1
    if cur.pos == start:
        return None

    value = int(cur.text[start:cur.pos])
    return -value if negative else value


def _get_float(cur: _Cursor) -> Optional[float]:
    """
    Read an optionally negative decimal ("12", "1.5", ".25").

    A second '.' or a '.' without following digits invalidates the token.
    """
    negative = not cur.done and cur.peek() == '-'
    if negative:
        cur.pos += 1

    start = cur.pos
    seen_dot = False
    while not cur.done and (cur.peek() == '.' or _is_digit(cur.peek())):
        if cur.peek() == '.':
            if seen_dot:
                return None
            seen_dot = True
        cur.pos += 1

    token = cur.text[start:cur.pos]
    if not token or token.endswith('.'):
        return None

    value = float(token)
    return -value if negative else value


# =============================================================================
# SEPARATORS
# =============================================================================

def _skip_whitespace(cur: _Cursor) -> None:
    while not cur.done and cur.peek() <= ' ':
        cur.pos += 1


def _skip_spaces_with_optional_comma(cur: _Cursor) -> None:
    """Skip whitespace and at most one comma."""
    comma_seen = False
    while not cur.done:
        c = cur.peek()
        if c <= ' ':
            cur.pos += 1
        elif c == ',':
            if comma_seen:
                return  # never skip two commas
            comma_seen = True
            cur.pos += 1
        else:
            return


def _user_skipper(skip_chars: str) -> Callable[[_Cursor], None]:
    """
    Separator skipper for a caller supplied character set.

    Whitespace is always skipped. Each listed character matches at most once
    per separator run.
    """
    allowed = skip_chars[:CONFIG.parse.max_skip_chars]

    def skip(cur: _Cursor) -> None:
        remaining = list(allowed)
        while not cur.done:
            c = cur.peek()
            if c <= ' ':
                cur.pos += 1
            elif c in remaining:
                remaining.remove(c)
                cur.pos += 1
            else:
                return

    return skip


# =============================================================================
# PARSING
# =============================================================================

def _parse(text: str, read_number, make_point, skip_chars: str) -> list:
    cur = _Cursor(text)

    if skip_chars and skip_chars != ' ':
        skip = _user_skipper(skip_chars)
        skip(cur)
    else:
        skip = _skip_spaces_with_optional_comma
        _skip_whitespace(cur)

    result = []
    while not cur.done:
        x = read_number(cur)
        if x is None:
            break
        _skip_spaces_with_optional_comma(cur)
        y = read_number(cur)
        if y is None:
            break
        result.append(make_point(x, y))
        skip(cur)

    if not cur.done:
        logger.debug("Path literal parsing stopped at offset %d of %d (%d points read)",
                     cur.pos, len(text), len(result))
    return result


def make_path(text: str, skip_chars: str = "") -> Path64:
    """
    Parse integer coordinate pairs into a Point64 path.

    Args:
        text: Path literal, e.g. "0,0 10,0 10,10"
        skip_chars: Extra separator characters. When given (and not just
            " "), it replaces the default whitespace/one-comma separator
            between points.

    Returns:
        Points read before the first unparseable token
    """
    return _parse(text, _get_int, Point64, skip_chars)


def make_path_d(text: str, skip_chars: str = "") -> PathD:
    """Parse decimal coordinate pairs into a PointD path."""
    return _parse(text, _get_float, PointD, skip_chars)


# =============================================================================
# FORMATTING
# =============================================================================

def _format_number(value) -> str:
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    # positional notation only, the parser does not read exponents
    return np.format_float_positional(value, trim='-')


def path_to_string(path: Sequence[Point]) -> str:
    """Format a path as "x,y x,y ..."; make_path/make_path_d read it back."""
    return ' '.join(f"{_format_number(pt.x)},{_format_number(pt.y)}" for pt in path)


def paths_to_string(paths: Sequence[Sequence[Point]]) -> str:
    """One path per line."""
    return '\n'.join(path_to_string(path) for path in paths)
