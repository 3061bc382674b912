"""Tests for the clippings CLI."""

import json

import pytest

from clippings.cli import main

CLIPPINGS = (
    "Emma (Jane Austen)\n"
    "- Your Highlight at location 40-41 | Added on Sunday, 5 December 2021 07:03:09\n"
    "\n"
    "It is a truth universally acknowledged.\n"
    "==========\n"
    "Emma (Jane Austen)\n"
    "- Your Note at location 42 | Added on Sunday, 5 December 2021 07:04:00\n"
    "\n"
    "Wrong book.\n"
    "==========\n"
    "Persuasion (Jane Austen)\n"
    "- Your Highlight on page 3 | location 50 | Added on Sunday, 5 December 2021 07:05:00\n"
    "\n"
    "Anne.\n"
    "==========\n"
)


@pytest.fixture
def clippings_file(tmp_path):
    path = tmp_path / "My Clippings.txt"
    path.write_text(CLIPPINGS, encoding="utf-8")
    return path


def test_parse_writes_json(tmp_path, clippings_file):
    output = tmp_path / "out" / "highlights.json"

    exit_code = main(["parse", "--input", str(clippings_file), "--output", str(output)])

    assert exit_code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["export_metadata"]["highlight_count"] == 3
    assert [h["kind"] for h in data["highlights"]] == ["Highlight", "Note", "Highlight"]


def test_parse_uses_environment_defaults(tmp_path, clippings_file, monkeypatch):
    output = tmp_path / "env.json"
    monkeypatch.setenv("CLIPPINGS_PATH", str(clippings_file))
    monkeypatch.setenv("CLIPPINGS_OUTPUT", str(output))

    assert main(["parse"]) == 0
    assert output.exists()


def test_check_reports_counts(clippings_file, capsys):
    exit_code = main(["check", "--input", str(clippings_file)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Emma (Jane Austen)" in out
    assert "3 highlights across 2 books" in out


def test_check_reports_parse_error(tmp_path, capsys):
    path = tmp_path / "broken.txt"
    path.write_text(CLIPPINGS.replace("Persuasion (Jane Austen)", "Persuasion"), encoding="utf-8")

    exit_code = main(["check", "--input", str(path)])

    assert exit_code == 1
    err = " ".join(capsys.readouterr().err.split())
    assert "MissingAuthorError" in err
    assert "record 2" in err


def test_missing_input_file(tmp_path, capsys):
    exit_code = main(["parse", "--input", str(tmp_path / "nope.txt"), "--output", str(tmp_path / "o.json")])

    assert exit_code == 1
    assert "not found" in " ".join(capsys.readouterr().err.split())


def test_check_warns_on_empty_document(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("==========\n", encoding="utf-8")

    exit_code = main(["check", "--input", str(path)])

    assert exit_code == 0
    out = " ".join(capsys.readouterr().out.split())
    assert "No highlights found" in out
    assert "0 highlights across 0 books" in out
