"""Presentation helpers for the report explorer page.

Pure transformations from summary and detail rows to table records, chart
data and drill-down parameters. No Streamlit calls happen here.
"""

from collections.abc import Collection, Sequence

from report_explorer.domain.models import DetailRow, Grouping, SummaryRow

ALL_OPTION = "All"

GROUPING_LABELS = {
    Grouping.TOTAL: "Total",
    Grouping.SECTOR: "By Sector",
    Grouping.SUB_SECTOR: "By SubSector",
}

DETAIL_COLUMNS = [
    ("row_id", "Row ID"),
    ("sector", "Sector"),
    ("sub_sector", "SubSector"),
    ("asset", "Asset"),
    ("current_valuation", "Current Valuation"),
    ("projected_valuation", "Projected Valuation"),
    ("pct_change", "% Change"),
]


def format_currency(value: float) -> str:
    """Format a valuation as ``$1,234,567``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_compact_currency(value: float) -> str:
    """Format a valuation with a K/M/B suffix, e.g. ``$12.3M``."""
    sign = "-" if value < 0 else ""
    amount = abs(value)
    for threshold, suffix in ((1e9, "B"), (1e6, "M"), (1e3, "K")):
        if amount >= threshold:
            return f"{sign}${amount / threshold:.1f}{suffix}"
    return f"{sign}${amount:,.0f}"


def format_pct_change(value: float) -> str:
    """Format a percentage change with an explicit sign."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def summary_columns(grouping: Grouping) -> list[tuple[str, str]]:
    """Return the ``(field, header)`` columns of the summary table."""
    columns = [
        ("scenario", "Scenario"),
        ("metric", "Metric"),
        ("sector", "Sector"),
    ]
    if grouping is Grouping.SUB_SECTOR:
        columns.append(("sub_sector", "SubSector"))
    columns.extend(
        [
            ("current_valuation", "Current Valuation"),
            ("projected_valuation", "Projected Valuation"),
            ("pct_change", "% Change"),
        ]
    )
    return columns


def summary_label(row: SummaryRow) -> str:
    """Return a one-line label identifying a summary row."""
    group = f"{row.sector} / {row.sub_sector}" if row.sub_sector else row.sector
    return f"{row.scenario} | {row.metric} | {group}"


def summary_records(rows: Sequence[SummaryRow]) -> list[dict[str, object]]:
    """Return raw summary values keyed by field name."""
    return [
        {
            "scenario": row.scenario,
            "metric": row.metric,
            "sector": row.sector,
            "sub_sector": row.sub_sector,
            "current_valuation": row.current_valuation,
            "projected_valuation": row.projected_valuation,
            "pct_change": row.pct_change,
        }
        for row in rows
    ]


def detail_records(rows: Sequence[DetailRow]) -> list[dict[str, object]]:
    """Return raw detail values keyed by field name."""
    return [
        {
            "row_id": row.row_id,
            "scenario": row.scenario,
            "metric": row.metric,
            "sector": row.sector,
            "sub_sector": row.sub_sector,
            "asset": row.asset,
            "current_valuation": row.current_valuation,
            "projected_valuation": row.projected_valuation,
            "pct_change": row.pct_change,
        }
        for row in rows
    ]


def display_records(
    records: Sequence[dict[str, object]],
    columns: Sequence[tuple[str, str]],
) -> list[dict[str, object]]:
    """Return records keyed by header with formatted valuations."""
    display: list[dict[str, object]] = []
    for record in records:
        item: dict[str, object] = {}
        for field, header in columns:
            value = record.get(field)
            if field in ("current_valuation", "projected_valuation"):
                value = format_currency(value)
            elif field == "pct_change":
                value = format_pct_change(value)
            item[header] = value
        display.append(item)
    return display


def bar_chart_data(rows: Sequence[SummaryRow]) -> list[dict[str, object]]:
    """Return Altair-ready values, two bars (current, projected) per row."""
    data: list[dict[str, object]] = []
    for row in rows:
        label = summary_label(row)
        for series, value in (
            ("Current Valuation", row.current_valuation),
            ("Projected Valuation", row.projected_valuation),
        ):
            data.append(
                {
                    "group": label,
                    "series": series,
                    "value": float(value),
                    "value_label": format_compact_currency(value),
                    "pct_label": format_pct_change(row.pct_change),
                }
            )
    return data


def selected_sectors(sector: str) -> list[str] | None:
    """Translate a sector selector value into a sector filter."""
    return None if sector == ALL_OPTION else [sector]


def selected_sub_sector(sub_sector: str) -> str | None:
    """Translate a sub-sector selector value into a sub-sector filter."""
    return None if sub_sector == ALL_OPTION else sub_sector


def drilldown_filters(
    row: SummaryRow,
    grouping: Grouping,
    sectors: Collection[str] | None = None,
) -> dict[str, list[str] | None]:
    """Return run-data filters selecting the constituents of a summary row.

    Args:
        row: Summary row being drilled into.
        grouping: Grouping that produced the row.
        sectors: Sector filter active when the row was produced.

    Returns:
        dict: Keyword arguments for ``GetRunDataUseCase.execute``.
    """
    if grouping is Grouping.TOTAL:
        row_sectors = list(sectors) if sectors is not None else None
    else:
        row_sectors = [row.sector]
    return {
        "scenarios": [row.scenario],
        "metrics": [row.metric],
        "sectors": row_sectors,
        "sub_sectors": (
            [row.sub_sector] if grouping is Grouping.SUB_SECTOR else None
        ),
    }


__all__ = [
    "ALL_OPTION",
    "GROUPING_LABELS",
    "DETAIL_COLUMNS",
    "format_currency",
    "format_compact_currency",
    "format_pct_change",
    "summary_columns",
    "summary_label",
    "summary_records",
    "detail_records",
    "display_records",
    "bar_chart_data",
    "selected_sectors",
    "selected_sub_sector",
    "drilldown_filters",
]
