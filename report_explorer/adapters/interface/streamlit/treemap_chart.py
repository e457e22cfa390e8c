"""Heat-map treemap presentation logic for the Streamlit UI.

Summary rows become treemap items weighted by projected valuation; the
domain layout places them and this module colours each cell by its
percentage change and renders the result as a Plotly figure.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from report_explorer.adapters.interface.streamlit.report_view import (
    format_compact_currency,
    format_pct_change,
    summary_label,
)
from report_explorer.domain.models import Rect, SummaryRow, TreemapItem
from report_explorer.domain.services.treemap import layout_treemap

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go

NEGATIVE_RGB = (214, 69, 65)
NEUTRAL_RGB = (238, 238, 238)
POSITIVE_RGB = (46, 160, 67)
HEAT_LIMIT = 20.0


@dataclass(frozen=True)
class TreemapCell:
    """Placed cell with its display attributes."""

    rect: Rect
    color: str
    hover_text: str


@dataclass(frozen=True)
class TreemapModel:
    """Cells and canvas size used to draw the heat map."""

    width: float
    height: float
    cells: list[TreemapCell]


def summary_key(row: SummaryRow) -> str:
    """Return a key unique to the group of a summary row."""
    return "|".join((row.scenario, row.metric, row.sector, row.sub_sector))


def treemap_items(rows: Sequence[SummaryRow]) -> list[TreemapItem]:
    """Convert summary rows to treemap items, keeping row order.

    Rows with no positive projected valuation cannot take up space and are
    left out.
    """
    return [
        TreemapItem(
            key=summary_key(row),
            label=summary_label(row),
            weight=float(row.projected_valuation),
        )
        for row in rows
        if row.projected_valuation > 0
    ]


def heat_color(pct_change: float, limit: float = HEAT_LIMIT) -> str:
    """Map a percentage change to a red / grey / green colour.

    Args:
        pct_change: Percentage change of the cell.
        limit: Absolute change at which the colour saturates.

    Returns:
        str: CSS ``rgb(r, g, b)`` colour.
    """
    ratio = max(-1.0, min(1.0, pct_change / limit))
    target = POSITIVE_RGB if ratio >= 0 else NEGATIVE_RGB
    weight = abs(ratio)
    channels = [
        round(neutral + (end - neutral) * weight)
        for neutral, end in zip(NEUTRAL_RGB, target)
    ]
    return f"rgb({channels[0]}, {channels[1]}, {channels[2]})"


def build_treemap_model(
    rows: Sequence[SummaryRow],
    width: float,
    height: float,
) -> TreemapModel:
    """Lay out summary rows and attach colours and hover text.

    Args:
        rows: Summary rows in display order.
        width: Canvas width.
        height: Canvas height.

    Returns:
        TreemapModel: Placed and coloured cells.
    """
    by_key = {summary_key(row): row for row in rows}
    rects = layout_treemap(treemap_items(rows), 0.0, 0.0, width, height)
    cells = []
    for rect in rects:
        row = by_key[rect.key]
        cells.append(
            TreemapCell(
                rect=rect,
                color=heat_color(row.pct_change),
                hover_text=(
                    f"{rect.label}<br>"
                    f"Projected: {format_compact_currency(row.projected_valuation)}"
                    f"<br>Change: {format_pct_change(row.pct_change)}"
                ),
            )
        )
    return TreemapModel(width=width, height=height, cells=cells)


def build_plotly_figure(model: TreemapModel) -> "go.Figure":
    """Build a Plotly figure drawing the treemap cells.

    Args:
        model: Precomputed treemap model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    fig = go.Figure()
    for cell in model.cells:
        rect = cell.rect
        fig.add_shape(
            type="rect",
            x0=rect.x,
            y0=rect.y,
            x1=rect.x + rect.width,
            y1=rect.y + rect.height,
            fillcolor=cell.color,
            line=dict(color="rgba(0,0,0,0.25)", width=0.5),
        )
    fig.add_trace(
        go.Scatter(
            x=[cell.rect.x + cell.rect.width / 2 for cell in model.cells],
            y=[cell.rect.y + cell.rect.height / 2 for cell in model.cells],
            text=[cell.rect.label for cell in model.cells],
            hovertext=[cell.hover_text for cell in model.cells],
            hoverinfo="text",
            mode="text",
            textfont=dict(size=11),
        )
    )
    fig.update_xaxes(range=[0, model.width], visible=False)
    fig.update_yaxes(range=[model.height, 0], visible=False)
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=int(model.height),
        showlegend=False,
    )
    return fig


__all__ = [
    "TreemapCell",
    "TreemapModel",
    "summary_key",
    "treemap_items",
    "heat_color",
    "build_treemap_model",
    "build_plotly_figure",
]
