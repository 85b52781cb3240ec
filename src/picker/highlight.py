from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

CSI = "\033["
MATCH_CODE = "1;35"    # bold magenta, as the list highlight colour


@dataclass(frozen=True)
class Segment:
    text: str
    matched: bool


def segments(text: str, positions: Iterable[int]) -> List[Segment]:
    """Split text into alternating matched/unmatched runs."""
    if not text:
        return []
    hits = {p for p in positions if 0 <= p < len(text)}
    if not hits:
        return [Segment(text, False)]

    out: List[Segment] = []
    start = 0
    cur = 0 in hits
    for i in range(1, len(text)):
        m = i in hits
        if m != cur:
            out.append(Segment(text[start:i], cur))
            start, cur = i, m
    out.append(Segment(text[start:], cur))
    return out


def ansi(text: str, positions: Iterable[int], enabled: bool = True) -> str:
    if not enabled:
        return text
    return "".join(
        f"{CSI}{MATCH_CODE}m{s.text}{CSI}0m" if s.matched else s.text
        for s in segments(text, positions)
    )
