# picker/engine.py
from __future__ import annotations

import logging
import os
import time
from typing import Iterable, List, Optional, Sequence

from .config import PickerConfig
from .loader import parse_lines
from .matcher import Matcher
from .models import (
    Cancel, Command, Confirm, ConfirmQuery, FilteredView, Item, ItemClicked,
    MoveSelection, NavigationState, QueryChanged, ReportViewport, Snapshot,
)
from .navigation import NavigationController
from .pipeline import FilterPipeline
from .ranker import Ranker

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the full item set (stable input order),
      - FilterPipeline (matcher + optional ranker) per query change,
      - NavigationController per movement/click/layout event.

    Every command runs synchronously to completion. Renderers read snapshot()
    and never mutate engine state directly.

    Public API (used by CLI/desktop/Flask):
      * load(items) / load_lines(lines)
      * dispatch(command) -> Snapshot
      * snapshot()
      * done / cancelled / result
    """

    # ------------- lifecycle -------------

    def __init__(self, config: Optional[PickerConfig] = None, *, verbose: bool = False) -> None:
        if verbose or os.environ.get("PICKER_VERBOSE") == "1":
            logging.basicConfig(level=logging.INFO)
        self.config = config or PickerConfig()
        self.pipeline = FilterPipeline(
            Matcher(case_sensitive=self.config.case_sensitive, exact=self.config.exact_mode),
            Ranker(),
        )
        self.nav = NavigationController()
        self._items: Optional[List[Item]] = None
        self._query = ""
        self._view = FilteredView()
        self.result: Optional[str] = None
        self.cancelled = False

    # /* ~~~ Attach the item set and show everything for the empty query ~~~ */
    def load(self, items: Sequence[Item]) -> "Engine":
        self._items = list(items)
        self._query = ""
        self._view = FilteredView(items=self._items, positions=[])
        self.result = None
        self.cancelled = False
        self.nav.reset_bounds(len(self._view))
        log.info("Engine load() complete: items=%d", len(self._items))
        return self

    def load_lines(self, lines: Iterable[str]) -> "Engine":
        return self.load(parse_lines(lines))

    # ------------- state -------------

    @property
    def items(self) -> List[Item]:
        self._require_loaded()
        return self._items  # type: ignore[return-value]

    @property
    def query(self) -> str:
        return self._query

    @property
    def view(self) -> FilteredView:
        return self._view

    @property
    def done(self) -> bool:
        return self.cancelled or self.result is not None

    def snapshot(self) -> Snapshot:
        self._require_loaded()
        st = self.nav.state
        nav = NavigationState(
            selected=st.selected, viewport_first=st.viewport_first,
            viewport_count=st.viewport_count, scroll_target=st.scroll_target,
            needs_scroll=st.needs_scroll, count=st.count,
        )
        return Snapshot(query=self._query, view=self._view, navigation=nav, total=len(self.items))

    def selected_item(self) -> Optional[Item]:
        if not len(self._view):
            return None
        return self._view.items[self.nav.selected]

    # ------------- commands -------------

    def dispatch(self, command: Command) -> Snapshot:
        self._require_loaded()
        if isinstance(command, QueryChanged):
            self.set_query(command.query)
        elif isinstance(command, MoveSelection):
            self.move(command.direction, command.steps)
        elif isinstance(command, ItemClicked):
            self.click(command.index)
        elif isinstance(command, ReportViewport):
            self.nav.report_viewport(command.first, command.count)
        elif isinstance(command, Confirm):
            self.confirm()
        elif isinstance(command, ConfirmQuery):
            self.result = self._query
        elif isinstance(command, Cancel):
            self.cancel()
        else:
            raise TypeError(f"Unknown command: {command!r}")
        return self.snapshot()

    def set_query(self, query: str) -> None:
        self._require_loaded()
        if query == self._query:
            return
        t0 = time.perf_counter()
        self._query = query
        self._view = self.pipeline.filter(self.items, query, self.config.rank_enabled)
        self.nav.reset_bounds(len(self._view))
        log.info("[query] %r -> %d/%d in %.2fs", query, len(self._view), len(self.items),
                 time.perf_counter() - t0)

    def move(self, direction: str, steps: int = 1) -> None:
        if direction not in ("up", "down"):
            raise ValueError(f"direction must be 'up' or 'down', got {direction!r}")
        for _ in range(max(0, int(steps))):
            if direction == "up":
                self.nav.move_up()
            else:
                self.nav.move_down(len(self._view))

    def click(self, index: int) -> bool:
        """Select a clicked view row; False (and no change) when nothing is there."""
        return self.nav.click(index)

    def confirm(self) -> Optional[str]:
        item = self.selected_item()
        if item is not None:
            self.result = item.raw
        return self.result

    def cancel(self) -> None:
        self.cancelled = True
        self.result = None

    # ------------- internals -------------

    def _require_loaded(self) -> None:
        if self._items is None:
            raise RuntimeError("Engine not initialized. Call load() first.")
