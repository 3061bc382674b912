"""Parse a whole clippings export into highlights.

Records are separated by a ``==========`` line. The same token, followed by
nothing but whitespace, terminates the document and is required even when
there are no records. Any failure aborts the whole parse.
"""

import re
from pathlib import Path

from common.logger import get_logger

from .errors import ClippingsError, InvalidEncoding, UnexpectedEndOfInput, UnexpectedTrailingInput
from .models import Document
from .record import parse_record
from .tokens import RECORD_SEPARATOR, VERTICAL_WHITESPACE, skip_byte_order_mark

logger = get_logger(__name__)

TRAILING_WHITESPACE = re.compile(r"\s*\Z")


def _at_terminator(text: str, pos: int) -> bool:
    if not text.startswith(RECORD_SEPARATOR, pos):
        return False
    return TRAILING_WHITESPACE.match(text, pos + len(RECORD_SEPARATOR)) is not None


def _after_separator(text: str, pos: int) -> int | None:
    """Consume a separator token at pos.

    Returns:
        Offset of the next record, or None if the token was the terminator

    Raises:
        UnexpectedTrailingInput: If the token is followed by anything other
            than a line break or trailing whitespace
    """
    if _at_terminator(text, pos):
        return None
    pos += len(RECORD_SEPARATOR)
    match = VERTICAL_WHITESPACE.match(text, pos)
    if not match:
        raise UnexpectedTrailingInput(
            f"Unexpected text after {RECORD_SEPARATOR!r}: {text[pos : pos + 40]!r}",
            offset=pos,
        )
    return match.end()


def parse_document(text: str) -> Document:
    """Parse a decoded clippings buffer.

    Args:
        text: Full contents of the clippings file

    Returns:
        Highlights in file order

    Raises:
        ClippingsError: The first failure met, with record_index set when it
            happened inside a record
    """
    pos = skip_byte_order_mark(text, 0)

    if TRAILING_WHITESPACE.match(text, pos):
        raise UnexpectedEndOfInput(
            f"Expected a record or {RECORD_SEPARATOR!r}, found end of input", offset=pos
        )
    if text.startswith(RECORD_SEPARATOR, pos):
        if _after_separator(text, pos) is None:
            logger.debug("Clippings document has no records")
            return []
        raise UnexpectedTrailingInput(
            f"Document starts with {RECORD_SEPARATOR!r} but is not empty", offset=pos
        )

    highlights: Document = []
    next_pos: int | None = pos
    while next_pos is not None:
        try:
            highlight, separator_at = parse_record(text, next_pos)
        except ClippingsError as e:
            if e.record_index is None:
                e.record_index = len(highlights)
            raise
        highlights.append(highlight)
        next_pos = _after_separator(text, separator_at)

    logger.debug(f"Parsed {len(highlights)} highlights from {len(text)} characters")
    return highlights


def parse_clippings(data: bytes | str) -> Document:
    """Parse clippings from raw bytes or an already decoded string.

    Bytes must be valid UTF-8; a leading byte-order mark is allowed.

    Raises:
        InvalidEncoding: If the bytes are not valid UTF-8
        ClippingsError: For any grammar failure
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncoding(f"Clippings are not valid UTF-8: {e.reason}", offset=e.start) from e
    return parse_document(data)


def read_clippings_file(file_path: Path) -> Document:
    """Read and parse a clippings file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ClippingsError: If the file cannot be parsed
    """
    file_path = Path(file_path)
    logger.info(f"Reading clippings from {file_path}")
    return parse_clippings(file_path.read_bytes())
