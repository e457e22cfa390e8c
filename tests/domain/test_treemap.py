"""Tests for the positional bisection treemap layout."""

from itertools import combinations

import pytest

from report_explorer.domain.models import Rect, TreemapItem
from report_explorer.domain.services.treemap import (
    layout_treemap,
    split_index,
)


def _items(*weights: float) -> list[TreemapItem]:
    return [
        TreemapItem(key=f"k{index}", label=f"item {index}", weight=weight)
        for index, weight in enumerate(weights)
    ]


def _overlap(a: Rect, b: Rect, tolerance: float = 1e-9) -> bool:
    return (
        a.x < b.x + b.width - tolerance
        and b.x < a.x + a.width - tolerance
        and a.y < b.y + b.height - tolerance
        and b.y < a.y + a.height - tolerance
    )


def test_empty_items_give_no_rects() -> None:
    assert layout_treemap([], 0, 0, 100, 100) == []


def test_single_item_fills_rectangle_minus_inset() -> None:
    rects = layout_treemap(_items(5), 10, 20, 300, 200)

    assert rects == [
        Rect(
            key="k0",
            label="item 0",
            weight=5,
            x=11,
            y=21,
            width=298,
            height=198,
        )
    ]
    assert rects[0].area == pytest.approx((300 - 2) * (200 - 2))


def test_wide_rectangle_splits_side_by_side() -> None:
    rects = layout_treemap(_items(1, 1), 0, 0, 200, 100, inset=0)

    assert [(r.x, r.y, r.width, r.height) for r in rects] == [
        (0, 0, 100, 100),
        (100, 0, 100, 100),
    ]


def test_tall_or_square_rectangle_splits_top_and_bottom() -> None:
    rects = layout_treemap(_items(3, 1), 0, 0, 100, 100, inset=0)

    assert [(r.x, r.y, r.width, r.height) for r in rects] == [
        (0, 0, 100, 75),
        (0, 75, 100, 25),
    ]


def test_split_index_puts_crossing_item_in_first_group() -> None:
    assert split_index(_items(1, 1, 1, 1)) == 2
    assert split_index(_items(1, 2, 1)) == 2
    assert split_index(_items(1, 1, 1)) == 2


def test_split_index_is_clamped_to_keep_both_groups_non_empty() -> None:
    assert split_index(_items(10, 1, 1)) == 1
    assert split_index(_items(1, 1, 10)) == 2
    assert split_index(_items(1, 10)) == 1


def test_input_order_is_preserved_not_sorted_by_weight() -> None:
    """The heaviest item stays last instead of being laid out first."""
    rects = layout_treemap(_items(1, 1, 8), 0, 0, 300, 100, inset=0)

    assert [r.key for r in rects] == ["k0", "k1", "k2"]
    heavy = rects[2]
    assert heavy.x == pytest.approx(60)
    assert heavy.width == pytest.approx(240)
    assert rects[0].x == 0
    assert rects[0].y == 0


def test_area_is_conserved_without_inset() -> None:
    items = _items(5, 3, 8, 1, 2, 13, 21, 1)

    rects = layout_treemap(items, 0, 0, 640, 480, inset=0)

    assert sum(r.area for r in rects) == pytest.approx(640 * 480)
    total = sum(item.weight for item in items)
    for rect, item in zip(rects, items):
        assert rect.area == pytest.approx(640 * 480 * item.weight / total)


def test_inset_cells_fit_inside_padded_target() -> None:
    rects = layout_treemap(_items(4, 4, 2, 6, 1), 0, 0, 500, 300)

    assert len(rects) == 5
    assert sum(r.area for r in rects) <= (500 - 2) * (300 - 2)
    for rect in rects:
        assert rect.x >= 1 and rect.y >= 1
        assert rect.x + rect.width <= 499 + 1e-9
        assert rect.y + rect.height <= 299 + 1e-9


@pytest.mark.parametrize("inset", [0.0, 1.0])
def test_rects_do_not_overlap(inset: float) -> None:
    rects = layout_treemap(
        _items(7, 1, 3, 3, 9, 2, 2, 5, 4),
        0,
        0,
        900,
        400,
        inset=inset,
    )

    for a, b in combinations(rects, 2):
        assert not _overlap(a, b)


def test_layout_is_deterministic() -> None:
    items = _items(3, 9, 4, 1)
    assert layout_treemap(items, 0, 0, 300, 200) == layout_treemap(
        items, 0, 0, 300, 200
    )


def test_non_positive_weight_is_rejected() -> None:
    with pytest.raises(ValueError):
        layout_treemap(_items(3, 0), 0, 0, 100, 100)
