"""Grammar for the metadata line under the title.

Examples:
    - Your Highlight on page 266 | location 4071-4072 | Added on Thursday, 19 April 2018 10:44:34
    - Your Highlight at location 153-154 | Added on Thursday, 19 April 2018 10:44:34

The two shapes are tried in order. Their literal prefixes never overlap, so
once a prefix matches that branch is committed and its errors are final.
"""

from collections.abc import Callable

from .date import parse_date
from .errors import MalformedMetadataLine, UnexpectedEndOfInput
from .location import parse_location
from .models import HighlightKind, Location, Metadata, Page
from .tokens import line_end, parse_unsigned

METADATA_PREFIX = "- "
PAGE_PREFIXES: dict[str, HighlightKind] = {
    "Your Highlight on page ": HighlightKind.HIGHLIGHT,
    "Your Note on page ": HighlightKind.NOTE,
}
LOCATION_PREFIXES: dict[str, HighlightKind] = {
    "Your Highlight at location ": HighlightKind.HIGHLIGHT,
    "Your Note at location ": HighlightKind.NOTE,
}
PAGE_LOCATION_SEPARATOR = " | location "
DATE_SEPARATOR = " | Added on "

# (kind, page, location) and the offset after the location
BranchResult = tuple[tuple[HighlightKind, Page | None, Location], int]


def _match_prefix(
    text: str, pos: int, prefixes: dict[str, HighlightKind]
) -> tuple[HighlightKind, int] | None:
    for prefix, kind in prefixes.items():
        if text.startswith(prefix, pos):
            return kind, pos + len(prefix)
    return None


def _expect(text: str, pos: int, literal: str) -> int:
    if not text.startswith(literal, pos):
        found = text[pos : line_end(text, pos)]
        raise MalformedMetadataLine(f"Expected {literal!r}, found {found!r}", offset=pos)
    return pos + len(literal)


def _page_branch(text: str, pos: int) -> BranchResult | None:
    """Your Highlight on page 266 | location 4071-4072"""
    matched = _match_prefix(text, pos, PAGE_PREFIXES)
    if matched is None:
        return None
    kind, pos = matched

    number, pos = parse_unsigned(text, pos, MalformedMetadataLine, "page")
    pos = _expect(text, pos, PAGE_LOCATION_SEPARATOR)
    location, pos = parse_location(text, pos)
    return (kind, Page(number=number), location), pos


def _location_branch(text: str, pos: int) -> BranchResult | None:
    """Your Highlight at location 153-154"""
    matched = _match_prefix(text, pos, LOCATION_PREFIXES)
    if matched is None:
        return None
    kind, pos = matched

    location, pos = parse_location(text, pos)
    return (kind, None, location), pos


BRANCHES: tuple[Callable[[str, int], BranchResult | None], ...] = (
    _page_branch,
    _location_branch,
)


def parse_metadata(text: str, pos: int = 0) -> tuple[Metadata, int]:
    """Parse a metadata line starting at pos.

    Returns:
        Tuple of (Metadata, offset of the line end)

    Raises:
        UnexpectedEndOfInput: If there is no text left at pos
        MalformedMetadataLine: If the line matches neither shape
        InvalidLocation: If the location is malformed
        InvalidDate: If the 'Added on' timestamp is malformed
    """
    if pos >= len(text):
        raise UnexpectedEndOfInput("Expected a metadata line, found end of input", offset=pos)

    line_start = pos
    pos = _expect(text, pos, METADATA_PREFIX)

    for branch in BRANCHES:
        result = branch(text, pos)
        if result is not None:
            break
    else:
        raise MalformedMetadataLine(
            f"Unrecognized metadata line: {text[line_start : line_end(text, line_start)]!r}",
            offset=line_start,
        )

    (kind, page, location), pos = result
    pos = _expect(text, pos, DATE_SEPARATOR)
    date, pos = parse_date(text, pos)

    return Metadata(page=page, location=location, date=date, kind=kind), pos


def parse_metadata_line(line: str) -> Metadata:
    """Parse a single metadata line on its own."""
    metadata, _ = parse_metadata(line)
    return metadata
