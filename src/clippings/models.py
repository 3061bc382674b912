"""Data models for parsed clippings."""

import hashlib
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .errors import InvalidLocation


class HighlightKind(Enum):
    """Which literal introduced the metadata line."""

    HIGHLIGHT = "Highlight"
    NOTE = "Note"


@dataclass(frozen=True)
class Book:
    """Book title and author as written on the record's first line."""

    title: str
    author: str


@dataclass(frozen=True)
class Page:
    """Printed page number reported by the reader."""

    number: int


@dataclass(frozen=True)
class Location:
    """Reader location, either a single position or an inclusive range."""

    start: int
    end: int | None = None

    def __post_init__(self):
        if self.end is not None and self.end < self.start:
            raise InvalidLocation(
                f"Location range ends before it starts: {self.start}-{self.end}"
            )

    def __str__(self) -> str:
        if self.end is None:
            return str(self.start)
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class Metadata:
    """Page, location and timestamp parsed from a '- Your ...' line."""

    page: Page | None
    location: Location
    date: datetime
    kind: HighlightKind = HighlightKind.HIGHLIGHT


@dataclass(frozen=True)
class Highlight:
    """A single record from the clippings file."""

    book: Book
    metadata: Metadata
    text: str

    @property
    def item_id(self) -> str:
        """Deterministic SHA256-based identifier.

        Built from book, author, location, date and text so the same passage
        highlighted twice at different times keeps two identities.
        """
        canonical = "|".join(
            [
                self.book.title,
                self.book.author,
                str(self.metadata.location),
                self.metadata.date.isoformat(),
                self.text,
            ]
        )
        return f"sha256:{hashlib.sha256(canonical.encode('utf-8')).hexdigest()}"


# Records in file order, duplicates kept
Document = list[Highlight]
