"""Tests for the report explorer presentation helpers."""

from report_explorer.adapters.interface.streamlit.report_view import (
    ALL_OPTION,
    DETAIL_COLUMNS,
    bar_chart_data,
    display_records,
    drilldown_filters,
    format_compact_currency,
    format_currency,
    format_pct_change,
    selected_sectors,
    selected_sub_sector,
    summary_columns,
    summary_label,
    summary_records,
)
from report_explorer.domain.models import Grouping, SummaryRow


def _summary(sector: str = "Equities", sub_sector: str = "") -> SummaryRow:
    return SummaryRow(
        scenario="Base Case",
        metric="Revenue",
        sector=sector,
        sub_sector=sub_sector,
        current_valuation=2_000_000,
        projected_valuation=2_100_000,
        pct_change=5.0,
        row_count=3,
    )


def test_currency_formats() -> None:
    assert format_currency(2_156_880) == "$2,156,880"
    assert format_currency(-1500) == "-$1,500"
    assert format_compact_currency(2_156_880) == "$2.2M"
    assert format_compact_currency(3_400_000_000) == "$3.4B"
    assert format_compact_currency(12_500) == "$12.5K"
    assert format_compact_currency(950) == "$950"


def test_pct_change_format_is_signed() -> None:
    assert format_pct_change(3.2) == "+3.20%"
    assert format_pct_change(0) == "+0.00%"
    assert format_pct_change(-12.3) == "-12.30%"


def test_summary_columns_include_sub_sector_only_when_grouped() -> None:
    headers = [header for _field, header in summary_columns(Grouping.SECTOR)]
    assert "SubSector" not in headers
    assert [h for _f, h in summary_columns(Grouping.SUB_SECTOR)][3] == (
        "SubSector"
    )


def test_display_records_format_valuations() -> None:
    records = summary_records([_summary()])

    display = display_records(records, summary_columns(Grouping.SECTOR))

    assert display == [
        {
            "Scenario": "Base Case",
            "Metric": "Revenue",
            "Sector": "Equities",
            "Current Valuation": "$2,000,000",
            "Projected Valuation": "$2,100,000",
            "% Change": "+5.00%",
        }
    ]


def test_detail_columns_start_with_row_id() -> None:
    assert DETAIL_COLUMNS[0] == ("row_id", "Row ID")


def test_summary_label_includes_sub_sector_when_present() -> None:
    assert summary_label(_summary()) == "Base Case | Revenue | Equities"
    assert summary_label(_summary(sub_sector="Emerging")) == (
        "Base Case | Revenue | Equities / Emerging"
    )


def test_bar_chart_data_emits_current_and_projected_bars() -> None:
    data = bar_chart_data([_summary(), _summary("Cash")])

    assert [item["series"] for item in data] == [
        "Current Valuation",
        "Projected Valuation",
    ] * 2
    assert data[1]["value"] == 2_100_000.0
    assert data[1]["pct_label"] == "+5.00%"
    assert data[2]["group"] == "Base Case | Revenue | Cash"


def test_selector_values_translate_to_filters() -> None:
    assert selected_sectors(ALL_OPTION) is None
    assert selected_sectors("Cash") == ["Cash"]
    assert selected_sub_sector(ALL_OPTION) is None
    assert selected_sub_sector("Liquid") == "Liquid"


def test_drilldown_filters_follow_grouping() -> None:
    total = _summary("All Sectors")
    assert drilldown_filters(total, Grouping.TOTAL) == {
        "scenarios": ["Base Case"],
        "metrics": ["Revenue"],
        "sectors": None,
        "sub_sectors": None,
    }
    assert drilldown_filters(total, Grouping.TOTAL, ["Cash"])["sectors"] == [
        "Cash"
    ]
    assert drilldown_filters(_summary(), Grouping.SECTOR)["sectors"] == [
        "Equities"
    ]
    sub = drilldown_filters(_summary(sub_sector="Emerging"), Grouping.SUB_SECTOR)
    assert sub["sectors"] == ["Equities"]
    assert sub["sub_sectors"] == ["Emerging"]
