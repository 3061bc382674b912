"""Grammar for one full record: title line, metadata line, then text."""

from .content import parse_content
from .errors import MalformedMetadataLine, MalformedTitleLine
from .metadata import parse_metadata
from .models import Highlight
from .title_author import parse_title_author
from .tokens import skip_vertical_whitespace


def parse_record(text: str, pos: int = 0) -> tuple[Highlight, int]:
    """Parse a record starting at pos.

    Returns:
        Tuple of (Highlight, offset of the separator that ends the record)
    """
    book, pos = parse_title_author(text, pos)
    pos = skip_vertical_whitespace(text, pos, MalformedTitleLine)
    metadata, pos = parse_metadata(text, pos)
    pos = skip_vertical_whitespace(text, pos, MalformedMetadataLine)
    body, pos = parse_content(text, pos)
    return Highlight(book=book, metadata=metadata, text=body), pos
