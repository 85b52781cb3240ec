# src/e2e/test_pipeline_filter.py

from picker.loader import parse_lines
from picker.matcher import Matcher
from picker.pipeline import FilterPipeline


ITEMS = parse_lines(["retrieve.go", "tree.go", "src/tree_utils.go", "README.md"])


def test_empty_query_returns_all_items_in_order_without_positions():
    view = FilterPipeline().filter(ITEMS, "", rank_enabled=True)
    assert view.items == ITEMS
    assert view.positions == []
    assert view.positions_at(0) == ()


def test_match_order_without_ranking():
    view = FilterPipeline().filter(ITEMS, "tree", rank_enabled=False)
    assert [it.text for it in view.items] == ["retrieve.go", "tree.go", "src/tree_utils.go"]
    assert len(view.positions) == len(view.items)
    assert view.positions_at(1) == (0, 1, 2, 3)


def test_ranking_puts_tree_go_first_and_remaps_positions():
    view = FilterPipeline().filter(ITEMS[:3], "tree", rank_enabled=True)
    assert view.items[0].text == "tree.go"
    for i, it in enumerate(view.items):
        ok, pos = Matcher().match_item("tree", it)
        assert ok and view.positions_at(i) == pos


def test_empty_item_list():
    view = FilterPipeline().filter([], "anything", rank_enabled=True)
    assert view.items == [] and view.positions == []
    assert len(view) == 0


def test_no_matches():
    view = FilterPipeline().filter(ITEMS, "zzz", rank_enabled=False)
    assert len(view) == 0


def test_exact_mode_pipeline():
    view = FilterPipeline(Matcher(exact=True)).filter(ITEMS, "tree_", rank_enabled=False)
    assert [it.text for it in view.items] == ["src/tree_utils.go"]
    assert view.positions_at(0) == (4, 5, 6, 7, 8)


def test_each_call_is_independent_of_the_previous_query():
    p = FilterPipeline()
    narrow = p.filter(ITEMS, "tree_", rank_enabled=False)
    wider = p.filter(ITEMS, "tre", rank_enabled=False)
    assert len(narrow) == 1
    assert len(wider) == 3


def test_filter_does_not_mutate_input():
    items = list(ITEMS)
    FilterPipeline().filter(items, "tree", rank_enabled=True)
    assert items == ITEMS
