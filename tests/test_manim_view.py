import pytest

pytest.importorskip("manim")

from linked_list_algorithms.algorithms import reverse_list_steps  # noqa: E402
from linked_list_algorithms.manim_view import ListRow, Pointer, pointer_offset  # noqa: E402

from helpers import snapshot  # noqa: E402


def test_list_row_has_one_arrow_per_node():
    step = list(reverse_list_steps(snapshot(1, 2, 3)))[0]
    row = ListRow(step.nodes)
    assert len(row.node_views) == 3
    assert len(row.arrows) == 3
    assert row.ids == tuple(n.id for n in step.nodes)


def test_pointer_label_cache():
    row = ListRow(snapshot(1, 2))
    ptr = Pointer("prev", "#ffffff")
    ptr.place_instant(row.none_marker, "prev=None")
    ptr.place_instant(row.node_views[0], "prev")
    assert set(ptr._label_cache) == {"prev", "prev=None"}


def test_pointer_rows_are_fixed_per_name():
    rows = {}
    assert pointer_offset(rows, "prev") == 0
    current = pointer_offset(rows, "current")
    nxt = pointer_offset(rows, "next")
    # a tag that left the screen and comes back keeps its row
    assert pointer_offset(rows, "current") == current
    assert len({0, current, nxt, pointer_offset(rows, "slow")}) == 4
