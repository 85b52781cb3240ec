from __future__ import annotations
from typing import Tuple
from .models import Item, MatchPositions

_NO_MATCH: Tuple[bool, MatchPositions] = (False, ())


def fold(s: str) -> str:
    """
    Lower-case s without changing its length, so indices into the folded
    string are indices into s. Characters whose lowercase form expands
    (e.g. 'İ' -> 'i̇') keep only the first code point, so for those inputs
    matching s is not the same as matching s.lower(): 'İ' folds to 'i'.
    """
    low = s.lower()
    if len(low) == len(s):
        return low
    return "".join(ch.lower()[0] for ch in s)


def exact_match(query: str, text: str) -> Tuple[bool, MatchPositions]:
    """Leftmost substring hit -> contiguous positions."""
    idx = text.find(query)
    if idx == -1:
        return _NO_MATCH
    return True, tuple(range(idx, idx + len(query)))


def fuzzy_match(query: str, text: str) -> Tuple[bool, MatchPositions]:
    """
    Greedy subsequence match: each query character takes its first occurrence
    after the previous one. Not the most compact placement, but one pass.
    """
    if len(query) > len(text):
        return _NO_MATCH
    positions = []
    find = text.find
    cursor = 0
    for ch in query:
        cursor = find(ch, cursor)
        if cursor == -1:
            return _NO_MATCH
        positions.append(cursor)
        cursor += 1
    return True, tuple(positions)


def match(query: str, text: str, case_sensitive: bool = False,
          exact_mode: bool = False) -> Tuple[bool, MatchPositions]:
    if not query:
        return True, ()
    if not case_sensitive:
        query = fold(query)
        text = fold(text)
    if exact_mode:
        return exact_match(query, text)
    return fuzzy_match(query, text)


class Matcher:
    """Binds case/exact flags; stateless otherwise."""

    def __init__(self, case_sensitive: bool = False, exact: bool = False) -> None:
        self.case_sensitive = case_sensitive
        self.exact = exact

    def match(self, query: str, text: str) -> Tuple[bool, MatchPositions]:
        return match(query, text, self.case_sensitive, self.exact)

    def match_item(self, query: str, item: Item) -> Tuple[bool, MatchPositions]:
        return match(query, item.text, self.case_sensitive, self.exact)
