from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence
from .models import Item, MatchPositions, ScoredItem
from . import config as CFG


@dataclass(frozen=True)
class RankWeights:
    compactness: float = CFG.COMPACTNESS_WEIGHT     # how tightly grouped the matched chars are
    early_match: float = CFG.EARLY_MATCH_WEIGHT     # first match near the start of the text
    consecutive: float = CFG.CONSECUTIVE_WEIGHT     # share of adjacent matched pairs
    length_ratio: float = CFG.LENGTH_RATIO_WEIGHT   # query is a large part of the text
    original_pos: float = CFG.ORIGINAL_POS_WEIGHT   # earlier in the input list


class Ranker:
    """
    Scores matches as a weighted sum of five factors in [0, 1] and sorts them
    best first. Equal scores fall back to ascending original index.
    """

    def __init__(self, weights: RankWeights | None = None, max_index_bias: int = CFG.MAX_INDEX_BIAS) -> None:
        self.weights = weights or RankWeights()
        self.max_index_bias = float(max_index_bias)

    def score(self, query: str, text: str, positions: MatchPositions, original_index: int) -> float:
        if not positions:
            return 0.0
        w = self.weights
        qlen = len(query)
        first, last = positions[0], positions[-1]

        compactness = qlen / (last - first + 1)
        early = 1.0 / (first + 1)

        consecutive = 0.0
        if len(positions) > 1:
            pairs = sum(1 for a, b in zip(positions, positions[1:]) if b == a + 1)
            consecutive = pairs / (len(positions) - 1)

        length_ratio = qlen / len(text) if text else 0.0
        position_pref = max(0.0, 1.0 - original_index / self.max_index_bias)

        return (compactness * w.compactness
                + early * w.early_match
                + consecutive * w.consecutive
                + length_ratio * w.length_ratio
                + position_pref * w.original_pos)

    def rank_all(self, items: Sequence[Item], positions: Sequence[MatchPositions], query: str) -> List[ScoredItem]:
        """
        Score items (positions parallel to items) and sort descending.
        ScoredItem.view_index is the item's index in the input sequence.
        """
        if not items:
            return []
        score = self.score
        scored = [
            ScoredItem(item=it, score=score(query, it.text, pos, it.index),
                       positions=pos, original_index=it.index, view_index=i)
            for i, (it, pos) in enumerate(zip(items, positions))
        ]
        scored.sort(key=lambda s: (-s.score, s.original_index))
        return scored
