from __future__ import annotations
import argparse, json, logging, os, sys
from typing import List, Optional

from .config import DEFAULT_HEIGHT_PCT, LAYOUTS, PickerConfig
from .datasets import KINDS, generate
from .engine import Engine
from .highlight import ansi
from .loader import load_items, read_items
from .models import Item


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="picker", description="Interactive fuzzy item picker (items on stdin)")
    p.add_argument("-e", "--exact", action="store_true", help="Exact substring matching")
    sort = p.add_mutually_exclusive_group()
    sort.add_argument("--rank", dest="rank", action="store_true", help="Sort matches by relevance")
    sort.add_argument("--no-sort", dest="rank", action="store_false", help="Keep input order (default)")
    p.set_defaults(rank=False)
    p.add_argument("--highlight-matches", dest="highlight", action="store_true", default=True,
                   help="Highlight matched characters (default)")
    p.add_argument("--no-highlight-matches", dest="highlight", action="store_false")
    p.add_argument("--height", type=int, default=DEFAULT_HEIGHT_PCT, help="Window height (percent of screen)")
    p.add_argument("--layout", choices=list(LAYOUTS), default="default")
    p.add_argument("--bind", action="append", default=[], help="key:action[,key:action] (repeatable)")

    p.add_argument("--input", default=None, help="Read items from this file instead of stdin")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--filter", dest="filter_query", default=None, help="Print matches for a query and exit")
    mode.add_argument("--web", action="store_true", help="Serve the web picker instead of a window")
    mode.add_argument("--generate", type=int, default=None, metavar="N", help="Print N synthetic items and exit")
    p.add_argument("--type", dest="kind", choices=list(KINDS), default="paths", help="Dataset type for --generate")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("-k", type=int, default=None, help="Limit --filter output to the first K matches")
    p.add_argument("--json", action="store_true", help="Emit JSON rows in --filter mode")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--verbose", action="store_true")
    return p


def _read(args) -> List[Item]:
    if args.input:
        return load_items(args.input)
    return read_items(sys.stdin)


def _run_filter(eng: Engine, query: str, k: Optional[int], as_json: bool) -> int:
    eng.set_query(query)
    view = eng.view
    n = len(view) if k is None else min(len(view), max(0, k))
    if as_json:
        rows = [
            {"index": it.index, "plugin": it.plugin, "text": it.text,
             "raw": it.raw, "positions": list(view.positions_at(i))}
            for i, it in enumerate(view.items[:n])
        ]
        print(json.dumps(rows, ensure_ascii=False, indent=2))
    else:
        color = eng.config.highlight_matches and sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""
        for i, it in enumerate(view.items[:n]):
            # text is a suffix of raw; shift positions onto raw
            shift = len(it.raw) - len(it.text)
            print(ansi(it.raw, [p + shift for p in view.positions_at(i)], enabled=color))
    return 0 if len(view) else 1


def main(argv: list[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)

    if args.verbose:
        os.environ["PICKER_VERBOSE"] = "1"
        logging.basicConfig(level=logging.INFO)

    if args.generate is not None:
        for line in generate(args.generate, args.kind, args.seed):
            print(line)
        return 0

    try:
        cfg = PickerConfig.from_flags(
            exact=args.exact, rank=args.rank, highlight_matches=args.highlight,
            height=args.height, layout=args.layout, bind=args.bind,
        )
    except ValueError as e:
        p.error(str(e))

    try:
        items = _read(args)
    except OSError as e:
        print(f"Error reading items: {e}", file=sys.stderr)
        return 1

    eng = Engine(cfg, verbose=args.verbose).load(items)

    if args.filter_query is not None:
        return _run_filter(eng, args.filter_query, args.k, args.json)

    if args.web:
        from picker_ui.web import serve
        serve(eng, host=args.host, port=args.port, debug=args.verbose)
        if eng.result is None:
            return 1
        print(eng.result)
        return 0

    from picker_ui.desktop import FontSet, run_window
    try:
        run_window(eng, FontSet())
    except RuntimeError as e:
        print(f"Error running window: {e}", file=sys.stderr)
        return 1

    if eng.result is None:
        return 1
    print(eng.result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
