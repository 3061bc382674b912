"""Shared tokens and scanning helpers for the clippings grammars.

Every helper takes the full text buffer and a start offset, and returns the
offset just past what it consumed. Nothing here keeps state between calls.
"""

import re

from .errors import ClippingsError, UnexpectedEndOfInput

# Line Kindle writes between (and after) records
RECORD_SEPARATOR = "=========="

BYTE_ORDER_MARK = "\ufeff"

# Unsigned values wider than 64 bits are rejected as out of range
MAX_UNSIGNED = 2**64 - 1
MAX_UNSIGNED_DIGITS = len(str(MAX_UNSIGNED))

VERTICAL_WHITESPACE = re.compile(r"[\r\n]+")
HORIZONTAL_WHITESPACE = re.compile(r"[ \t]*")
UNSIGNED_INTEGER = re.compile(r"[0-9]+")


def line_end(text: str, pos: int) -> int:
    """Offset of the first line break at or after pos, or len(text)."""
    match = VERTICAL_WHITESPACE.search(text, pos)
    return match.start() if match else len(text)


def skip_byte_order_mark(text: str, pos: int) -> int:
    if text.startswith(BYTE_ORDER_MARK, pos):
        return pos + len(BYTE_ORDER_MARK)
    return pos


def skip_vertical_whitespace(text: str, pos: int, error: type[ClippingsError]) -> int:
    """Consume one or more line breaks.

    Raises:
        UnexpectedEndOfInput: If the buffer ends before any line break
        error: If another character sits where a line break belongs
    """
    if pos >= len(text):
        raise UnexpectedEndOfInput("Expected a line break, found end of input", offset=pos)
    match = VERTICAL_WHITESPACE.match(text, pos)
    if not match:
        raise error(f"Expected a line break, found {text[pos]!r}", offset=pos)
    return match.end()


def parse_unsigned(
    text: str,
    pos: int,
    error: type[ClippingsError],
    what: str,
) -> tuple[int, int]:
    """Parse a run of ASCII digits as an unsigned integer.

    Args:
        text: Buffer being parsed
        pos: Offset of the first digit
        error: Error class raised on failure
        what: Name of the value, used in the error message

    Returns:
        Tuple of (value, offset after the last digit)
    """
    match = UNSIGNED_INTEGER.match(text, pos)
    if not match:
        found = repr(text[pos]) if pos < len(text) else "end of input"
        raise error(f"Expected {what} as a number, found {found}", offset=pos)

    # Length is checked before int(); CPython limits str-to-int conversion size
    digits = match.group().lstrip("0") or "0"
    if len(digits) > MAX_UNSIGNED_DIGITS or int(digits) > MAX_UNSIGNED:
        shown = digits if len(digits) <= 40 else f"{digits[:20]}... ({len(digits)} digits)"
        raise error(f"{what.capitalize()} out of range: {shown}", offset=pos)
    return int(digits), match.end()
