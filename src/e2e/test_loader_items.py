# src/e2e/test_loader_items.py

import io
from pathlib import Path

import pytest

from picker.loader import load_items, parse_line, parse_lines, read_items


def test_line_with_separator_splits_plugin_and_text():
    it = parse_line("files   . Documents/notes.txt", 3)
    assert it.plugin == "files"
    assert it.text == "Documents/notes.txt"
    assert it.raw == "files   . Documents/notes.txt"
    assert it.index == 3


def test_plugin_is_trimmed_and_only_first_separator_splits():
    it = parse_line("  apps   . a   . b", 0)
    assert it.plugin == "apps"
    assert it.text == "a   . b"


def test_line_without_separator_is_all_text():
    it = parse_line("just text . here", 7)
    assert it.plugin == ""
    assert it.text == "just text . here"
    assert it.raw == it.text


def test_indices_follow_input_order_and_line_endings_are_dropped():
    items = read_items(io.StringIO("one\r\ntwo\n\nfour"))
    assert [it.text for it in items] == ["one", "two", "", "four"]
    assert [it.index for it in items] == [0, 1, 2, 3]


def test_load_items_from_file(tmp_path: Path):
    p = tmp_path / "items.txt"
    p.write_text("cmds   . git status\nREADME.md\n", encoding="utf-8")
    items = load_items(str(p))
    assert len(items) == 2
    assert items[0].plugin == "cmds" and items[0].text == "git status"


def test_load_items_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_items(str(tmp_path / "nope.txt"))


def test_parse_lines_empty():
    assert parse_lines([]) == []


def test_verbose_logs_read_progress(monkeypatch, caplog):
    import picker.loader as loader
    monkeypatch.setenv("PICKER_VERBOSE", "1")
    monkeypatch.setattr(loader, "PROGRESS_EVERY_ITEMS", 2)
    with caplog.at_level("INFO", logger="picker.loader"):
        items = read_items(io.StringIO("a\nb\nc\nd\n"))
    assert len(items) == 4
    assert "[read] items=2" in caplog.text
    assert "[read] items=4" in caplog.text
