"""JSON export of parsed highlights."""

import json
from datetime import datetime
from pathlib import Path

from .models import Book, Document, Highlight, HighlightKind, Location, Metadata, Page


def highlight_to_dict(highlight: Highlight) -> dict:
    metadata = highlight.metadata
    return {
        "item_id": highlight.item_id,
        "title": highlight.book.title,
        "author": highlight.book.author,
        "kind": metadata.kind.value,
        "page": metadata.page.number if metadata.page else None,
        "location_start": metadata.location.start,
        "location_end": metadata.location.end,
        "added_on": metadata.date.isoformat(),
        "text": highlight.text,
    }


def highlight_from_dict(item: dict) -> Highlight:
    page = item.get("page")
    return Highlight(
        book=Book(title=item["title"], author=item["author"]),
        metadata=Metadata(
            page=Page(number=page) if page is not None else None,
            location=Location(start=item["location_start"], end=item.get("location_end")),
            date=datetime.fromisoformat(item["added_on"]),
            kind=HighlightKind(item.get("kind", HighlightKind.HIGHLIGHT.value)),
        ),
        text=item["text"],
    )


def document_to_dict(highlights: Document, source_file: str) -> dict:
    return {
        "export_metadata": {
            "timestamp": datetime.now().isoformat(),
            "source_file": source_file,
            "highlight_count": len(highlights),
        },
        "highlights": [highlight_to_dict(h) for h in highlights],
    }


def write_highlights_file(file_path: Path, highlights: Document, source_file: str) -> None:
    """
    Write highlights to a JSON file.

    Args:
        file_path: Path to write the file
        highlights: Parsed highlights
        source_file: Name of the clippings file they came from
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(document_to_dict(highlights, source_file), f, indent=2, ensure_ascii=False)


def read_highlights_file(file_path: Path) -> Document:
    """
    Read highlights back from a JSON export.

    Raises:
        FileNotFoundError: If file doesn't exist
        KeyError: If a highlight entry is missing a required field
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Highlights file not found: {file_path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    return [highlight_from_dict(item) for item in data.get("highlights", [])]
