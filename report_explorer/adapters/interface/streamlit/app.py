"""Streamlit report explorer entry point."""

from collections.abc import Sequence

import altair as alt
import streamlit as st

from report_explorer.adapters.csv_export import records_to_csv
from report_explorer.adapters.interface.streamlit.report_view import (
    ALL_OPTION,
    DETAIL_COLUMNS,
    GROUPING_LABELS,
    bar_chart_data,
    detail_records,
    display_records,
    drilldown_filters,
    selected_sectors,
    selected_sub_sector,
    summary_columns,
    summary_label,
    summary_records,
)
from report_explorer.adapters.interface.streamlit.treemap_chart import (
    build_plotly_figure,
    build_treemap_model,
)
from report_explorer.domain.errors import NotFoundError
from report_explorer.domain.models import (
    Grouping,
    Report,
    ReportFilters,
    RunDataResponse,
    SummaryResponse,
    SummaryRow,
)
from report_explorer.infrastructure.container import (
    build_list_reports_use_case,
    build_report_filters_use_case,
    build_run_data_use_case,
    build_summary_use_case,
)
from report_explorer.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from report_explorer.infrastructure.settings import ExplorerSettings

VIEWS = ("Table", "Bar chart", "Heat map")


def _fetch_reports(published: bool | None) -> list[Report]:
    """Fetch reports, published only or every report when None."""
    use_case = build_list_reports_use_case()
    return use_case.execute(published=published)


@st.cache_data(show_spinner=False)
def _load_reports(published: bool | None) -> list[Report]:
    """Cached wrapper around _fetch_reports."""
    return _fetch_reports(published)


def _fetch_filters(report_id: str) -> ReportFilters:
    """Fetch the filter options of a report."""
    use_case = build_report_filters_use_case()
    return use_case.execute(report_id)


@st.cache_data(show_spinner=False)
def _load_filters(report_id: str) -> ReportFilters:
    """Cached wrapper around _fetch_filters."""
    return _fetch_filters(report_id)


def _fetch_summary(
    report_id: str,
    scenarios: tuple[str, ...],
    metrics: tuple[str, ...],
    grouping: str,
    sectors: tuple[str, ...] | None,
    sub_sector: str | None,
) -> SummaryResponse:
    """Fetch summary rows for the current selection."""
    use_case = build_summary_use_case()
    return use_case.execute(
        report_id,
        scenarios,
        metrics,
        grouping=grouping,
        sectors=sectors,
        sub_sector=sub_sector,
    )


@st.cache_data(show_spinner=False)
def _load_summary(
    report_id: str,
    scenarios: tuple[str, ...],
    metrics: tuple[str, ...],
    grouping: str,
    sectors: tuple[str, ...] | None,
    sub_sector: str | None,
) -> SummaryResponse:
    """Cached wrapper around _fetch_summary."""
    return _fetch_summary(
        report_id,
        scenarios,
        metrics,
        grouping,
        sectors,
        sub_sector,
    )


def _fetch_run_data(report_id: str, **filters) -> RunDataResponse:
    """Fetch drill-down rows for a summary row."""
    use_case = build_run_data_use_case()
    return use_case.execute(report_id, **filters)


def _render_table(rows: Sequence[SummaryRow], grouping: Grouping) -> None:
    """Render the summary table."""
    columns = summary_columns(grouping)
    st.dataframe(
        display_records(summary_records(rows), columns),
        width="stretch",
        hide_index=True,
    )


def _render_bar_chart(rows: Sequence[SummaryRow]) -> None:
    """Render current vs projected valuations as grouped bars."""
    chart = alt.Chart(alt.Data(values=bar_chart_data(rows))).mark_bar(
        cornerRadiusTopLeft=3,
        cornerRadiusTopRight=3,
    ).encode(
        x=alt.X("group:N", sort=None, title=None),
        xOffset=alt.XOffset("series:N"),
        y=alt.Y("value:Q", title="Valuation"),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(range=["#457b9d", "#f4a261"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("group:N", title="Group"),
            alt.Tooltip("series:N", title="Series"),
            alt.Tooltip("value_label:N", title="Valuation"),
            alt.Tooltip("pct_label:N", title="% Change"),
        ],
    ).properties(height=420)
    st.altair_chart(chart, width="stretch")


def _render_heat_map(
    rows: Sequence[SummaryRow],
    settings: ExplorerSettings,
) -> None:
    """Render the treemap heat map."""
    model = build_treemap_model(
        rows,
        settings.treemap_width,
        settings.treemap_height,
    )
    st.plotly_chart(build_plotly_figure(model), width="stretch")


def _render_drilldown(
    report: Report,
    rows: Sequence[SummaryRow],
    grouping: Grouping,
    sectors: list[str] | None,
) -> None:
    """Render the detail rows behind one selected summary row."""
    st.subheader("Drill-down")
    labels = [summary_label(row) for row in rows]
    choice = st.selectbox("Summary row", labels, index=0)
    row = rows[labels.index(choice)]
    detail = _fetch_run_data(
        report.id,
        **drilldown_filters(row, grouping, sectors),
    )
    records = detail_records(detail.rows)
    st.caption(f"{len(records)} detail rows")
    st.dataframe(
        display_records(records, DETAIL_COLUMNS),
        width="stretch",
        hide_index=True,
        height=420,
    )
    st.download_button(
        "Download detail CSV",
        data=records_to_csv(records, DETAIL_COLUMNS),
        file_name="detail.csv",
        mime="text/csv",
    )


def main() -> None:
    """Render the Streamlit app."""
    logger = get_app_logger()
    settings = ExplorerSettings.from_env()
    st.set_page_config(page_title="Report Explorer", layout="wide")
    st.title("Report Explorer")

    status = st.sidebar.radio(
        "Status",
        ["Published", "Draft"],
        index=0 if settings.published_only else 1,
        horizontal=True,
    )
    reports = _load_reports(True if status == "Published" else None)
    if not reports:
        st.warning("No reports available for this status.")
        return
    report = st.sidebar.selectbox(
        "Report",
        reports,
        format_func=lambda item: item.name,
    )
    groupings = list(GROUPING_LABELS)
    grouping = st.sidebar.radio(
        "Grouping",
        groupings,
        index=groupings.index(settings.default_grouping),
        format_func=lambda item: GROUPING_LABELS[item],
    )

    try:
        filters = _load_filters(report.id)
    except NotFoundError as exc:
        logger.error(str(exc))
        st.error(str(exc))
        return

    scenarios = st.sidebar.multiselect(
        "Scenario",
        filters.scenarios,
        default=filters.scenarios[:1],
    )
    metric = st.sidebar.selectbox("Metric", filters.metrics)
    sector = ALL_OPTION
    sub_sector = ALL_OPTION
    if grouping is not Grouping.TOTAL:
        sector = st.sidebar.selectbox("Sector", [ALL_OPTION, *filters.sectors])
    if grouping is Grouping.SUB_SECTOR:
        sub_sector_options = filters.sub_sectors_for(
            None if sector == ALL_OPTION else sector
        )
        sub_sector = st.sidebar.selectbox(
            "SubSector",
            [ALL_OPTION, *sub_sector_options],
        )

    st.caption(report.description)
    if not scenarios:
        st.info("Select at least one scenario.")
        return

    sectors = selected_sectors(sector)
    summary = _load_summary(
        report.id,
        tuple(scenarios),
        (metric,),
        grouping.value,
        tuple(sectors) if sectors is not None else None,
        selected_sub_sector(sub_sector),
    )
    get_usage_logger().info(
        f"Report viewed: report={report.id}, grouping={grouping.value}, "
        f"scenarios={len(scenarios)}, metric={metric}"
    )
    st.caption(
        f"Run {summary.run.id} created {summary.run.created_at_iso}"
    )
    if not summary.rows:
        st.info("No rows match the selected filters.")
        return

    view = st.radio("View", VIEWS, horizontal=True)
    if view == "Table":
        _render_table(summary.rows, grouping)
    elif view == "Bar chart":
        _render_bar_chart(summary.rows)
    else:
        _render_heat_map(summary.rows, settings)

    st.download_button(
        "Download CSV",
        data=records_to_csv(
            summary_records(summary.rows),
            summary_columns(grouping),
        ),
        file_name=f"{report.name}.csv",
        mime="text/csv",
    )
    _render_drilldown(report, summary.rows, grouping, sectors)


if __name__ == "__main__":  # pragma: no cover
    main()
