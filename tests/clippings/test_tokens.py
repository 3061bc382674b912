"""Tests for the shared scanning helpers."""

import pytest

from clippings.errors import MalformedMetadataLine, MalformedTitleLine, UnexpectedEndOfInput
from clippings.tokens import line_end, parse_unsigned, skip_vertical_whitespace


def test_skip_vertical_whitespace_consumes_all_breaks():
    assert skip_vertical_whitespace("\r\n\r\nbody", 0, MalformedMetadataLine) == 4


def test_skip_vertical_whitespace_raises_given_error():
    """Test that a non-break character raises the caller's error kind."""
    with pytest.raises(MalformedTitleLine) as exc_info:
        skip_vertical_whitespace("Emma (Jane Austen) x", 18, MalformedTitleLine)
    assert exc_info.value.offset == 18


def test_skip_vertical_whitespace_at_end():
    with pytest.raises(UnexpectedEndOfInput):
        skip_vertical_whitespace("abc", 3, MalformedTitleLine)


def test_parse_unsigned_uses_given_error():
    with pytest.raises(MalformedMetadataLine):
        parse_unsigned("1" * 21, 0, MalformedMetadataLine, "page")


def test_parse_unsigned_upper_bound():
    value, pos = parse_unsigned(str(2**64 - 1) + " |", 0, MalformedMetadataLine, "page")
    assert value == 2**64 - 1
    assert pos == 20


def test_line_end():
    assert line_end("abc\r\ndef", 0) == 3
    assert line_end("abc", 1) == 3
