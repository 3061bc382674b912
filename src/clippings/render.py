"""Render highlights back into canonical clippings text.

Parsing the rendered text yields records equal to the ones rendered.
"""

from .date import format_date
from .models import Book, Document, Highlight, Metadata
from .tokens import RECORD_SEPARATOR


def render_title_line(book: Book) -> str:
    return f"{book.title} ({book.author})"


def render_metadata_line(metadata: Metadata) -> str:
    kind = metadata.kind.value
    added_on = format_date(metadata.date)
    if metadata.page is None:
        return f"- Your {kind} at location {metadata.location} | Added on {added_on}"
    return (
        f"- Your {kind} on page {metadata.page.number} "
        f"| location {metadata.location} | Added on {added_on}"
    )


def render_highlight(highlight: Highlight, newline: str = "\n") -> str:
    """Render one record including its trailing separator line."""
    lines = [
        render_title_line(highlight.book),
        render_metadata_line(highlight.metadata),
        "",
        highlight.text,
        RECORD_SEPARATOR,
    ]
    return newline.join(lines) + newline


def render_document(highlights: Document, newline: str = "\n") -> str:
    """Render a document; an empty one is just the terminator line."""
    if not highlights:
        return RECORD_SEPARATOR + newline
    return "".join(render_highlight(highlight, newline) for highlight in highlights)
