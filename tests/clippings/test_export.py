"""Tests for JSON export of highlights."""

import json
from datetime import datetime

import pytest

from clippings.export import highlight_to_dict, read_highlights_file, write_highlights_file
from clippings.models import Book, Highlight, HighlightKind, Location, Metadata, Page


@pytest.fixture
def highlights():
    return [
        Highlight(
            book=Book(title="The Final Empire: 1 (MISTBORN)", author="Sanderson, Brandon"),
            metadata=Metadata(
                page=Page(number=266),
                location=Location(start=4071, end=4072),
                date=datetime(2018, 4, 19, 10, 44, 34),
            ),
            text="Survive.",
        ),
        Highlight(
            book=Book(title="Emma", author="Jane Austen"),
            metadata=Metadata(
                page=None,
                location=Location(start=40),
                date=datetime(2021, 12, 5, 7, 3, 9),
                kind=HighlightKind.NOTE,
            ),
            text="Ça va",
        ),
    ]


def test_highlight_to_dict(highlights):
    data = highlight_to_dict(highlights[0])

    assert data["title"] == "The Final Empire: 1 (MISTBORN)"
    assert data["author"] == "Sanderson, Brandon"
    assert data["kind"] == "Highlight"
    assert data["page"] == 266
    assert data["location_start"] == 4071
    assert data["location_end"] == 4072
    assert data["added_on"] == "2018-04-19T10:44:34"
    assert data["item_id"].startswith("sha256:")
    assert len(data["item_id"]) == len("sha256:") + 64


def test_item_id_is_deterministic(highlights):
    assert highlights[0].item_id == highlight_to_dict(highlights[0])["item_id"]
    assert highlights[0].item_id != highlights[1].item_id


def test_write_and_read_back(tmp_path, highlights):
    path = tmp_path / "nested" / "highlights.json"

    write_highlights_file(path, highlights, source_file="My Clippings.txt")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["export_metadata"]["source_file"] == "My Clippings.txt"
    assert data["export_metadata"]["highlight_count"] == 2
    assert data["highlights"][1]["text"] == "Ça va"
    assert data["highlights"][1]["page"] is None

    assert read_highlights_file(path) == highlights


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_highlights_file(tmp_path / "missing.json")
