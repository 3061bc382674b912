"""Errors raised while parsing a clippings file.

Every failure aborts the whole parse; the caller receives exactly one of
these. ``offset`` and ``record_index`` are diagnostics only.
"""


class ClippingsError(ValueError):
    """Base class for all clippings parse failures."""

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        record_index: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.record_index = record_index

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        where = []
        if self.record_index is not None:
            where.append(f"record {self.record_index}")
        if self.offset is not None:
            where.append(f"offset {self.offset}")
        if not where:
            return self.message
        return f"{self.message} ({', '.join(where)})"


class MalformedTitleLine(ClippingsError):
    """The title line has text the title/author grammar cannot account for."""


class MissingAuthorError(ClippingsError):
    """The title line has no parenthesized author group."""


class InvalidLocation(ClippingsError):
    """A location is not a number, is out of range, or is a reversed range."""


class InvalidDate(ClippingsError):
    """The 'Added on' timestamp does not match the fixed date format."""


class MalformedMetadataLine(ClippingsError):
    """The metadata line matches neither the page nor the location shape."""


class UnexpectedTrailingInput(ClippingsError):
    """Non-whitespace text follows the final separator."""


class UnexpectedEndOfInput(ClippingsError):
    """The buffer ended before a record or the terminator was complete."""


class InvalidEncoding(ClippingsError):
    """The input bytes are not valid UTF-8."""
