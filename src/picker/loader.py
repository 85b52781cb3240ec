from __future__ import annotations
import logging
import os
from typing import Iterable, List, TextIO
from .models import Item
from .config import SEPARATOR

log = logging.getLogger(__name__)

# Progress logging (set PICKER_VERBOSE=1 to enable)
PROGRESS_EVERY_ITEMS = 100_000


def parse_line(line: str, index: int) -> Item:
    """
    "plugin   . text" -> Item(plugin, text); a line without the separator is
    all text. Only the first separator splits.
    """
    plugin, sep, text = line.partition(SEPARATOR)
    if sep:
        return Item(plugin=plugin.strip(), text=text, raw=line, index=index)
    return Item(plugin="", text=line, raw=line, index=index)


def parse_lines(lines: Iterable[str]) -> List[Item]:
    verbose = os.environ.get("PICKER_VERBOSE") == "1"
    items: List[Item] = []
    for i, ln in enumerate(lines):
        items.append(parse_line(ln.rstrip("\r\n"), i))
        if verbose and (i + 1) % PROGRESS_EVERY_ITEMS == 0:
            log.info("[read] items=%s", f"{i + 1:,}")
    return items


def read_items(stream: TextIO) -> List[Item]:
    """Read every line of stream (blocking until EOF)."""
    items = parse_lines(stream)
    log.info("Read %d items", len(items))
    return items


def load_items(path: str) -> List[Item]:
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return read_items(f)
