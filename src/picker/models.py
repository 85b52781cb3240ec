from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple, Union

# Strictly increasing code-point offsets into Item.text
MatchPositions = Tuple[int, ...]


@dataclass(frozen=True, slots=True)
class Item:
    plugin: str               # text before the separator ("" when absent)
    text: str                 # text that is matched and displayed
    raw: str                  # original input line, printed on selection
    index: int                # 0-based position in the unfiltered input


@dataclass(frozen=True, slots=True)
class ScoredItem:
    item: Item
    score: float
    positions: MatchPositions
    original_index: int
    view_index: int           # index in the match-order view it was scored from


@dataclass(frozen=True)
class FilteredView:
    """
    Filtered (and possibly ranked) items with match positions kept in a list
    parallel to `items`. For the empty query `positions` is empty.
    """
    items: List[Item] = field(default_factory=list)
    positions: List[MatchPositions] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def positions_at(self, view_index: int) -> MatchPositions:
        if 0 <= view_index < len(self.positions):
            return self.positions[view_index]
        return ()


@dataclass
class NavigationState:
    selected: int = 0
    viewport_first: int = 0
    viewport_count: int = 0   # 0 until the renderer reports a layout
    scroll_target: int = 0
    needs_scroll: bool = False
    count: int = 0            # size of the view the state was last bounded to


# ---------- commands fed into the engine ----------

@dataclass(frozen=True)
class QueryChanged:
    query: str


@dataclass(frozen=True)
class MoveSelection:
    direction: str            # "up" | "down"
    steps: int = 1


@dataclass(frozen=True)
class ItemClicked:
    index: int


@dataclass(frozen=True)
class ReportViewport:
    first: int
    count: int


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class ConfirmQuery:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


Command = Union[QueryChanged, MoveSelection, ItemClicked, ReportViewport, Confirm, ConfirmQuery, Cancel]


@dataclass(frozen=True)
class Snapshot:
    query: str
    view: FilteredView
    navigation: NavigationState
    total: int
