"""Grammar for the book title and author line.

Examples:
    Tress of the Emerald Sea (Brandon Sanderson)
    The Final Empire: 1 (MISTBORN) (Sanderson, Brandon)

The last parenthesized group is taken as the author and any groups before it
are folded back into the title. A title whose own final parenthetical is not
an author name is therefore misread; that heuristic is kept as is.
"""

import re

from .errors import MalformedTitleLine, MissingAuthorError, UnexpectedEndOfInput
from .models import Book
from .tokens import HORIZONTAL_WHITESPACE, line_end, skip_byte_order_mark

# Top-level, non-nested group confined to one line
PARENTHESIS_GROUP = re.compile(r"\(([^)\r\n]*)\)")


def parse_title_author(text: str, pos: int = 0) -> tuple[Book, int]:
    """Parse a title line starting at pos.

    Returns:
        Tuple of (Book, offset of the line break ending the title line)

    Raises:
        UnexpectedEndOfInput: If there is no text left at pos
        MissingAuthorError: If the line has no parenthesized group
        MalformedTitleLine: If text other than groups follows the first group
    """
    if pos >= len(text):
        raise UnexpectedEndOfInput("Expected a title line, found end of input", offset=pos)

    pos = skip_byte_order_mark(text, pos)
    end = line_end(text, pos)

    opening = text.find("(", pos, end)
    prefix_end = opening if opening != -1 else end
    prefix = text[pos:prefix_end]

    groups: list[str] = []
    cursor = prefix_end
    while True:
        match = PARENTHESIS_GROUP.match(text, cursor, end)
        if not match:
            break
        groups.append(match.group(1))
        cursor = HORIZONTAL_WHITESPACE.match(text, match.end(), end).end()

    if not groups:
        raise MissingAuthorError(
            f"No parenthesized author in title line: {text[pos:end]!r}", offset=pos
        )
    if cursor != end:
        raise MalformedTitleLine(
            f"Unexpected text after author in title line: {text[cursor:end]!r}",
            offset=cursor,
        )

    author = groups.pop()
    title = prefix + " ".join(f"({group})" for group in groups)
    return Book(title=title.strip(), author=author.strip()), end


def parse_title_author_line(line: str) -> Book:
    """Parse a single title line on its own.

    An empty line has no author group, so it is a MissingAuthorError here
    rather than the end-of-input error a document would report.
    """
    if not line.strip():
        raise MissingAuthorError(f"No parenthesized author in title line: {line!r}", offset=0)
    book, _ = parse_title_author(line)
    return book
