from __future__ import annotations
import logging
import time
from typing import List, Optional, Sequence
from .matcher import Matcher
from .models import FilteredView, Item, MatchPositions
from .ranker import Ranker

log = logging.getLogger(__name__)


class FilterPipeline:
    """
    Matcher then (optionally) Ranker over the full item set, recomputed from
    scratch on every call. Nothing is carried over between queries.
    """

    def __init__(self, matcher: Optional[Matcher] = None, ranker: Optional[Ranker] = None) -> None:
        self.matcher = matcher or Matcher()
        self.ranker = ranker or Ranker()

    def filter(self, items: Sequence[Item], query: str, rank_enabled: bool = False) -> FilteredView:
        if not query:
            return FilteredView(items=list(items), positions=[])

        t0 = time.perf_counter()
        match_item = self.matcher.match_item
        matched: List[Item] = []
        positions: List[MatchPositions] = []
        for item in items:
            ok, pos = match_item(query, item)
            if ok:
                matched.append(item)
                positions.append(pos)

        if rank_enabled and matched:
            ranked = self.ranker.rank_all(matched, positions, query)
            matched = [s.item for s in ranked]
            positions = [s.positions for s in ranked]

        log.debug("filter q=%r items=%d matched=%d ranked=%s in %.1fms",
                  query, len(items), len(matched), rank_enabled,
                  (time.perf_counter() - t0) * 1000)
        return FilteredView(items=matched, positions=positions)
