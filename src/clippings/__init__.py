"""Parse Kindle 'My Clippings.txt' exports into typed highlights."""

from .document import parse_clippings, parse_document, read_clippings_file
from .errors import (
    ClippingsError,
    InvalidDate,
    InvalidEncoding,
    InvalidLocation,
    MalformedMetadataLine,
    MalformedTitleLine,
    MissingAuthorError,
    UnexpectedEndOfInput,
    UnexpectedTrailingInput,
)
from .models import Book, Document, Highlight, HighlightKind, Location, Metadata, Page
from .render import render_document, render_highlight

__all__ = [
    "Book",
    "ClippingsError",
    "Document",
    "Highlight",
    "HighlightKind",
    "InvalidDate",
    "InvalidEncoding",
    "InvalidLocation",
    "Location",
    "MalformedMetadataLine",
    "MalformedTitleLine",
    "Metadata",
    "MissingAuthorError",
    "Page",
    "UnexpectedEndOfInput",
    "UnexpectedTrailingInput",
    "parse_clippings",
    "parse_document",
    "read_clippings_file",
    "render_document",
    "render_highlight",
]
