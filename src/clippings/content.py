"""Grammar for the free-text body of a record."""

from .errors import UnexpectedEndOfInput
from .tokens import RECORD_SEPARATOR


def parse_content(text: str, pos: int = 0) -> tuple[str, int]:
    """Take everything up to the next record separator, trimmed.

    An empty body is valid. The separator itself is left unconsumed.

    Raises:
        UnexpectedEndOfInput: If no separator follows
    """
    separator_at = text.find(RECORD_SEPARATOR, pos)
    if separator_at == -1:
        raise UnexpectedEndOfInput(
            f"Expected {RECORD_SEPARATOR!r} after highlight text, found end of input",
            offset=len(text),
        )
    return text[pos:separator_at].strip(), separator_at
