"""Positional bisection treemap layout.

Items are split in the order given, never re-sorted by weight, so adjacent
rows (for example the sectors of one scenario) stay adjacent on screen.
"""

from collections.abc import Iterable

from report_explorer.domain.models import Rect, TreemapItem

TREEMAP_INSET = 1.0


def layout_treemap(
    items: Iterable[TreemapItem],
    x: float,
    y: float,
    width: float,
    height: float,
    *,
    inset: float = TREEMAP_INSET,
) -> list[Rect]:
    """Lay out weighted items inside a rectangle.

    Args:
        items: Items with positive weights, in display order.
        x: Left edge of the target rectangle.
        y: Top edge of the target rectangle.
        width: Target width.
        height: Target height.
        inset: Padding removed from every side of each cell.

    Returns:
        list[Rect]: One rectangle per item, in input order.

    Raises:
        ValueError: If an item weight is not positive.
    """
    ordered = list(items)
    for item in ordered:
        if item.weight <= 0:
            raise ValueError(
                f"Treemap weight must be positive for {item.key}: "
                f"{item.weight}"
            )
    rects: list[Rect] = []
    if ordered:
        _layout(ordered, x, y, width, height, inset, rects)
    return rects


def split_index(items: list[TreemapItem]) -> int:
    """Return where the cumulative weight first reaches half the total.

    The item crossing the midpoint belongs to the first group. The index is
    clamped to ``[1, len(items) - 1]`` so neither group is empty.
    """
    half = sum(item.weight for item in items) / 2
    cumulative = 0.0
    split = len(items)
    for index, item in enumerate(items):
        cumulative += item.weight
        if cumulative >= half:
            split = index + 1
            break
    return max(1, min(split, len(items) - 1))


def _layout(
    items: list[TreemapItem],
    x: float,
    y: float,
    width: float,
    height: float,
    inset: float,
    rects: list[Rect],
) -> None:
    if len(items) == 1:
        item = items[0]
        rects.append(
            Rect(
                key=item.key,
                label=item.label,
                weight=item.weight,
                x=x + inset,
                y=y + inset,
                width=max(0.0, width - 2 * inset),
                height=max(0.0, height - 2 * inset),
            )
        )
        return

    total = sum(item.weight for item in items)
    split = split_index(items)
    first, second = items[:split], items[split:]
    share = sum(item.weight for item in first) / total

    if width > height:
        first_width = width * share
        _layout(first, x, y, first_width, height, inset, rects)
        _layout(
            second,
            x + first_width,
            y,
            width - first_width,
            height,
            inset,
            rects,
        )
    else:
        first_height = height * share
        _layout(first, x, y, width, first_height, inset, rects)
        _layout(
            second,
            x,
            y + first_height,
            width,
            height - first_height,
            inset,
            rects,
        )


__all__ = ["TREEMAP_INSET", "layout_treemap", "split_index"]
