# picker_ui/desktop.py
# CustomTkinter window for the picker (dark, fzf-like).
# - Count line "X/Y", search entry, result rows with matched characters highlighted.
# - Keys go through the configured bindings into Engine commands.
# - Only the visible slice of the view is drawn; scrolling follows NavigationController.

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import customtkinter as ctk

from picker.config import WINDOW_HEIGHT, WINDOW_WIDTH
from picker.engine import Engine
from picker.highlight import segments
from picker.models import (
    Cancel, Confirm, ConfirmQuery, ItemClicked, MoveSelection, QueryChanged, ReportViewport,
)

log = logging.getLogger(__name__)

BG = "#000000"
FG = "#dcdcdc"
DIM = "#969696"
MATCH = "#ff64b4"
MATCH_SELECTED = "#ffb4dc"
BAR = "#ff0080"

_KEYSYMS = {"Up": "up", "Down": "down", "Return": "enter", "KP_Enter": "enter", "Escape": "esc"}


@dataclass
class FontSet:
    """
    Fonts for the window. Create one at startup and pass it in; the CTkFont
    objects are built on first use (they need a Tk root) and reused after.
    """
    family: str = "Cascadia Mono, Menlo, Consolas, Courier New"
    size: int = 14
    _cache: Dict[str, ctk.CTkFont] = field(default_factory=dict, repr=False)

    def get(self, kind: str = "regular") -> ctk.CTkFont:
        if kind not in self._cache:
            weight = "bold" if kind == "bold" else "normal"
            self._cache[kind] = ctk.CTkFont(family=self.family, size=self.size, weight=weight)
        return self._cache[kind]


def key_name(keysym: str, state: int) -> str:
    """Tk key event -> binding key name ("ctrl-j", "shift-enter", "up", ...)."""
    name = _KEYSYMS.get(keysym, keysym.lower())
    prefix = ""
    if state & 0x4:
        prefix += "ctrl-"
    if state & 0x1 and len(name) > 1:
        prefix += "shift-"
    return prefix + name


def click_row(engine: Engine, index: int) -> bool:
    """ItemClicked then Confirm, but only when a row is under the pointer."""
    snap = engine.dispatch(ItemClicked(index))
    if not 0 <= index < len(snap.view):
        return False
    engine.dispatch(Confirm())
    return True


class PickerWindow(ctk.CTk):
    """Dark-themed picker window. Closes itself once the engine is done."""

    def __init__(self, engine: Engine, fonts: FontSet) -> None:
        super().__init__()
        self.engine = engine
        self.fonts = fonts
        cfg = engine.config

        ctk.set_appearance_mode("dark")
        self.title("Picker")
        height = max(200, WINDOW_HEIGHT * cfg.height // 100)
        self.geometry(f"{WINDOW_WIDTH}x{height}")
        self.configure(fg_color=BG)

        self._first = 0       # first view index currently drawn
        self._visible = 0     # rows that fit in the list area

        self.grid_columnconfigure(0, weight=1)
        reverse = cfg.layout == "reverse"
        list_row, count_row, entry_row = (0, 1, 2) if reverse else (2, 0, 1)
        self.grid_rowconfigure(list_row, weight=1)

        self.lbl_count = ctk.CTkLabel(self, text="", anchor="w", text_color=DIM, font=fonts.get())
        self.lbl_count.grid(row=count_row, column=0, sticky="ew", padx=12, pady=(4, 4))

        self.entry_query = ctk.CTkEntry(self, placeholder_text="Search...", font=fonts.get(),
                                        fg_color=BG, border_color="#c8c8c8", border_width=1)
        self.entry_query.grid(row=entry_row, column=0, sticky="ew", padx=8, pady=8)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)
        self.entry_query.bind("<KeyPress>", self._on_key)

        self.txt_rows = ctk.CTkTextbox(self, wrap="none", font=fonts.get(), fg_color=BG,
                                       text_color=FG, activate_scrollbars=False)
        self.txt_rows.grid(row=list_row, column=0, sticky="nsew", padx=8, pady=(0, 8))
        self.txt_rows.tag_config("match", foreground=MATCH)
        self.txt_rows.tag_config("sel", foreground="#ffffff")
        self.txt_rows.tag_config("sel_match", foreground=MATCH_SELECTED)
        self.txt_rows.tag_config("bar", foreground=BAR)
        self.txt_rows.bind("<Button-1>", self._on_click)
        self.txt_rows.bind("<Configure>", self._on_resize)

        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self.after(10, self.entry_query.focus_set)
        self._render()

    # --------- events ---------

    def _on_query_changed(self, _ev=None) -> None:
        if self.engine.done:
            return
        q = self.entry_query.get()
        if q != self.engine.query:
            self.engine.dispatch(QueryChanged(q))
            self._first = 0
            self._render()

    def _on_key(self, ev) -> Optional[str]:
        action = self.engine.config.bindings.get(key_name(ev.keysym, ev.state))
        if action is None:
            return None
        if action in ("up", "down"):
            self.engine.dispatch(MoveSelection(action))
            self._apply_scroll()
            self._render()
        elif action == "accept":
            self._on_query_changed()
            self.engine.dispatch(Confirm())
        elif action == "accept-query":
            self._on_query_changed()
            self.engine.dispatch(ConfirmQuery())
        elif action == "abort":
            self.engine.dispatch(Cancel())
        self._close_if_done()
        return "break"

    def _on_click(self, ev) -> str:
        line = int(self.txt_rows.index(f"@{ev.x},{ev.y}").split(".")[0])
        # blank space below the last row selects nothing
        if click_row(self.engine, self._first + line - 1):
            self._close_if_done()
        else:
            self._render()
        return "break"

    def _on_resize(self, _ev=None) -> None:
        line_px = max(1, self.fonts.get().metrics("linespace"))
        visible = max(1, self.txt_rows.winfo_height() // line_px)
        if visible != self._visible:
            self._visible = visible
            self._render()

    # --------- drawing ---------

    def _apply_scroll(self) -> None:
        target = self.engine.nav.consume_scroll()
        if target is not None:
            self._first = target

    def _render(self) -> None:
        snap = self.engine.snapshot()
        view, sel = snap.view, snap.navigation.selected
        n = len(view)
        visible = self._visible or 1

        # keep the selected row on screen and the window inside the view
        if sel < self._first:
            self._first = sel
        elif sel >= self._first + visible:
            self._first = sel - visible + 1
        self._first = max(0, min(self._first, max(0, n - visible)))
        if self._visible:
            self.engine.dispatch(ReportViewport(self._first, visible))

        self.lbl_count.configure(text=f"  {n}/{snap.total}")
        hl = self.engine.config.highlight_matches
        box = self.txt_rows
        box.configure(state="normal")
        box.delete("0.0", "end")
        for i in range(self._first, min(n, self._first + visible)):
            item = view.items[i]
            selected = i == sel
            box.insert("end", "▌ " if selected else "  ", "bar")
            for seg in segments(item.text, view.positions_at(i) if hl else ()):
                if seg.matched:
                    tag = "sel_match" if selected else "match"
                else:
                    tag = "sel" if selected else None
                box.insert("end", seg.text, tag)
            box.insert("end", "\n")
        box.configure(state="disabled")

    # --------- lifecycle ---------

    def _close_if_done(self) -> None:
        if self.engine.done:
            log.info("Picker closing (result=%r)", self.engine.result)
            self.destroy()

    def _on_close(self) -> None:
        if not self.engine.done:
            self.engine.dispatch(Cancel())
        self.destroy()


def run_window(engine: Engine, fonts: FontSet) -> Optional[str]:
    """Show the window until the user confirms or cancels. Returns the selection."""
    win = PickerWindow(engine, fonts)
    win.mainloop()
    return engine.result
