"""
Interactive Item Picker

Reads a list of text items, narrows and ranks it while the user types, and
returns the selected item. The package holds the parts that need to be right
and fast at up to a million items:

- matcher:    fuzzy (greedy subsequence) and exact substring matching with positions
- ranker:     weighted five-factor relevance score, best first
- pipeline:   matcher + optional ranker -> one FilteredView per query
- navigation: selection index and scroll target under a changing view size

Windows, key handling and flag parsing live in the adapters (engine, CLI,
picker_ui) and only call into these modules.

Example Usage:
    from picker import Engine, QueryChanged, MoveSelection, Confirm

    eng = Engine().load_lines(["src/tree.go", "retrieve.go"])
    eng.dispatch(QueryChanged("tree"))
    eng.dispatch(MoveSelection("down"))
    eng.dispatch(Confirm())
    print(eng.result)
"""

# src/picker/__init__.py
from .config import PickerConfig
from .engine import Engine
from .matcher import Matcher, match
from .models import (
    Cancel, Confirm, ConfirmQuery, FilteredView, Item, ItemClicked, MoveSelection,
    NavigationState, QueryChanged, ReportViewport, ScoredItem, Snapshot,
)
from .navigation import NavigationController
from .pipeline import FilterPipeline
from .ranker import Ranker, RankWeights

__version__ = "1.0.0"
__all__ = [
    "Engine", "PickerConfig", "Matcher", "match", "Ranker", "RankWeights",
    "FilterPipeline", "NavigationController", "Item", "ScoredItem", "FilteredView",
    "NavigationState", "Snapshot", "QueryChanged", "MoveSelection", "ItemClicked",
    "ReportViewport", "Confirm", "ConfirmQuery", "Cancel",
]
