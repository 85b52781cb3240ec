from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

TOP_K: int = 50

# Separator between plugin name and item text on an input line
SEPARATOR: str = "   . "

# /* ~~~ rows of context kept visible beyond the selected row ~~~ */
SCROLL_OFFSET: int = 3

# Items past this original index get no position bonus when ranking
MAX_INDEX_BIAS: int = 10_000

# Default ranking weights (sum to 100)
COMPACTNESS_WEIGHT: float = 35.0
EARLY_MATCH_WEIGHT: float = 25.0
CONSECUTIVE_WEIGHT: float = 20.0
LENGTH_RATIO_WEIGHT: float = 10.0
ORIGINAL_POS_WEIGHT: float = 10.0

# Window geometry
WINDOW_WIDTH: int = 800
WINDOW_HEIGHT: int = 600
DEFAULT_HEIGHT_PCT: int = 100
LAYOUTS = ("default", "reverse")

ACTIONS = ("up", "down", "accept", "accept-query", "abort")

DEFAULT_BINDINGS: Dict[str, str] = {
    "up": "up",
    "ctrl-k": "up",
    "down": "down",
    "ctrl-j": "down",
    "enter": "accept",
    "shift-enter": "accept-query",
    "esc": "abort",
}


def parse_bindings(specs: Iterable[str]) -> Dict[str, str]:
    """
    Parse --bind values ("key:action[,key:action...]") on top of the defaults.
    Keys are lower-cased; later specs override earlier ones.
    """
    out = dict(DEFAULT_BINDINGS)
    for spec in specs:
        for pair in spec.split(","):
            pair = pair.strip()
            if not pair:
                continue
            key, sep, action = pair.partition(":")
            key, action = key.strip().lower(), action.strip().lower()
            if not sep or not key or not action:
                raise ValueError(f"Malformed binding: {pair!r} (expected key:action)")
            if action not in ACTIONS:
                raise ValueError(f"Unknown binding action: {action!r}")
            out[key] = action
    return out


@dataclass(frozen=True)
class PickerConfig:
    """Options supplied once at startup. case_sensitive is fixed False for the picker UI."""
    exact_mode: bool = False
    case_sensitive: bool = False
    rank_enabled: bool = False
    highlight_matches: bool = True   # rendering only; the core never reads it
    height: int = DEFAULT_HEIGHT_PCT
    layout: str = "default"
    bindings: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_BINDINGS))

    def __post_init__(self) -> None:
        if not 1 <= int(self.height) <= 100:
            raise ValueError(f"height must be a percentage in 1..100, got {self.height}")
        if self.layout not in LAYOUTS:
            raise ValueError(f"layout must be one of {LAYOUTS}, got {self.layout!r}")

    @classmethod
    def from_flags(
        cls,
        *,
        exact: bool = False,
        rank: bool = False,
        highlight_matches: bool = True,
        height: int = DEFAULT_HEIGHT_PCT,
        layout: str = "default",
        bind: List[str] | None = None,
    ) -> "PickerConfig":
        return cls(
            exact_mode=exact,
            rank_enabled=rank,
            highlight_matches=highlight_matches,
            height=height,
            layout=layout,
            bindings=parse_bindings(bind or []),
        )
