"""
Selection + scroll bookkeeping for the result list.

The controller never renders anything. It keeps the selected view index in
bounds and computes a scroll target that the renderer applies once and then
acknowledges through consume_scroll():

    nav = NavigationController()
    nav.reset_bounds(len(view))          # after every query change
    nav.report_viewport(first, visible)  # after every layout pass
    nav.move_down(len(view))
    target = nav.consume_scroll()        # None when nothing to scroll

Run reset_bounds() whenever the view size changes so that both the selection
and the scroll target stay in range; move_down() also clamps the selection
against the count it is given.
"""
from __future__ import annotations
from typing import Optional
from .models import NavigationState
from . import config as CFG


class NavigationController:
    def __init__(self, scroll_offset: int = CFG.SCROLL_OFFSET) -> None:
        self.scroll_offset = max(0, int(scroll_offset))
        self.state = NavigationState()

    # ------------- read-only accessors -------------

    @property
    def selected(self) -> int:
        return self.state.selected

    @property
    def scroll_target(self) -> int:
        return self.state.scroll_target

    @property
    def needs_scroll(self) -> bool:
        return self.state.needs_scroll

    # ------------- events -------------

    def move_up(self) -> None:
        st = self.state
        if st.selected > 0:
            st.selected -= 1
        st.scroll_target = max(0, st.selected - self.scroll_offset)
        # only scroll when the context row would sit above the visible window
        st.needs_scroll = st.scroll_target < st.viewport_first

    def move_down(self, count: int) -> None:
        st = self.state
        st.count = max(0, int(count))
        if st.count == 0:
            st.selected = 0
            st.scroll_target = 0
            st.needs_scroll = False
            return
        st.selected = self._clamp(st.selected)
        if st.selected < st.count - 1:
            st.selected += 1

        target_bottom = st.selected + self.scroll_offset
        if st.viewport_count > 0:
            last_visible = st.viewport_first + st.viewport_count - 1
            if target_bottom > last_visible:
                # biased one row past the bottom so the target stays inside the window
                st.scroll_target = self._clamp(target_bottom - st.viewport_count + 2)
                st.needs_scroll = True
            else:
                st.needs_scroll = False
        else:
            # no layout yet: just bring the selected row into view
            st.scroll_target = self._clamp(st.selected)
            st.needs_scroll = True

    def reset_bounds(self, count: int) -> None:
        st = self.state
        st.count = max(0, int(count))
        st.selected = self._clamp(st.selected)
        st.scroll_target = self._clamp(st.scroll_target)

    def report_viewport(self, first: int, count: int) -> None:
        self.state.viewport_first = max(0, int(first))
        self.state.viewport_count = max(0, int(count))

    def click(self, index: int) -> bool:
        """Select a row the user clicked; it is already visible so no scroll."""
        if not 0 <= index < self.state.count:
            return False
        self.state.selected = index
        return True

    def consume_scroll(self) -> Optional[int]:
        st = self.state
        if not st.needs_scroll:
            return None
        st.needs_scroll = False
        return st.scroll_target

    # ------------- internals -------------

    def _clamp(self, i: int) -> int:
        if self.state.count == 0:
            return 0
        return min(max(0, i), self.state.count - 1)
