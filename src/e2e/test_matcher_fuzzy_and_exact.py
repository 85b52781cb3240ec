# src/e2e/test_matcher_fuzzy_and_exact.py

import pytest

from picker.matcher import Matcher, fold, match


TEXTS = ["Downloads/file.txt", "Documents/notes.txt", "README.md", "", "src/tree_utils.go"]


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("exact", [False, True])
def test_empty_query_matches_everything(text, exact):
    assert match("", text, False, exact) == (True, ())


def test_fuzzy_scenario_downloads():
    assert match("dwn", "Downloads/file.txt", False, False) == (True, (0, 2, 3))


def test_exact_scenario_notes():
    assert match("notes", "Documents/notes.txt", False, True) == (True, (10, 11, 12, 13, 14))


@pytest.mark.parametrize("query,text", [
    ("dwn", "Downloads/file.txt"),
    ("ftx", "Downloads/file.txt"),
    ("tree", "src/tree_utils.go"),
    ("rdm", "README.md"),
])
def test_fuzzy_positions_strictly_increasing_and_one_per_char(query, text):
    ok, pos = match(query, text)
    assert ok
    assert len(pos) == len(query)
    assert all(b > a for a, b in zip(pos, pos[1:]))
    assert all(0 <= p < len(text) for p in pos)


def test_fuzzy_is_greedy_first_occurrence():
    # optimal placement would be the compact "abc" at 4..6, greedy takes the first a/b
    ok, pos = match("abc", "a_b_abc")
    assert ok and pos == (0, 2, 6)


def test_fuzzy_fails_when_any_char_missing():
    assert match("dwz", "Downloads/file.txt") == (False, ())
    assert match("eid", "file") == (False, ())   # right chars, wrong order


def test_exact_requires_contiguous_substring():
    assert match("dwn", "Downloads/file.txt", False, True) == (False, ())
    ok, pos = match("own", "Downloads", False, True)
    assert ok and pos == (1, 2, 3)


def test_query_longer_than_text_never_matches():
    assert match("much longer query", "short") == (False, ())
    assert match("much longer query", "short", False, True) == (False, ())


@pytest.mark.parametrize("exact", [False, True])
@pytest.mark.parametrize("query,text", [("DwN", "DOWNLOADS/File.txt"), ("NoTeS", "Documents/NOTES.txt")])
def test_case_insensitive_equivalent_to_lowercased_inputs(query, text, exact):
    assert match(query, text, False, exact) == match(query.lower(), text.lower(), False, exact)


def test_case_sensitive_mode_distinguishes_case():
    assert match("D", "downloads", True, False) == (False, ())
    assert match("d", "Downloads", True, False) == (True, (7,))


def test_fold_preserves_length_for_expanding_lowercase():
    s = "İstanbul"
    assert len(fold(s)) == len(s)
    ok, pos = match("ist", s)
    assert ok and pos == (0, 1, 2)


def test_matcher_binds_flags():
    exact = Matcher(exact=True)
    fuzzy = Matcher()
    assert exact.match("dwn", "Downloads") == (False, ())
    assert fuzzy.match("dwn", "Downloads") == (True, (0, 2, 3))


def test_expanding_lowercase_folds_to_its_first_code_point():
    assert fold("İx") == "ix"
    # positions index the original text, not its (longer) lower() form
    assert match("x", "İx") == (True, (1,))
    assert match("x", "İx".lower()) == (True, (2,))
    assert match("i", "İx") == (True, (0,))
