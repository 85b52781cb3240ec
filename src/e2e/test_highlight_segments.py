# src/e2e/test_highlight_segments.py

from picker.highlight import Segment, ansi, segments


def test_segments_alternate_matched_runs():
    assert segments("Hello", [0, 1]) == [Segment("He", True), Segment("llo", False)]
    assert segments("Downloads", [0, 2, 3]) == [
        Segment("D", True), Segment("o", False), Segment("wn", True), Segment("loads", False),
    ]


def test_segments_without_positions_or_text():
    assert segments("plain", []) == [Segment("plain", False)]
    assert segments("", [0]) == []


def test_out_of_range_positions_are_ignored():
    assert segments("ab", [1, 5, -1]) == [Segment("a", False), Segment("b", True)]


def test_ansi_wraps_only_matches():
    out = ansi("abc", [1])
    assert out == "a\033[1;35mb\033[0mc"
    assert ansi("abc", [1], enabled=False) == "abc"
