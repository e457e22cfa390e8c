"""Composition root for wiring the report explorer."""

from report_explorer.application.ports.report_catalog import ReportCatalogPort
from report_explorer.application.use_cases import (
    GetReportFiltersUseCase,
    GetRunDataUseCase,
    GetSummaryUseCase,
    ListReportsUseCase,
)
from report_explorer.infrastructure.logging.logger import get_app_logger
from report_explorer.infrastructure.static_catalog import StaticReportCatalog


def build_report_catalog() -> ReportCatalogPort:
    """Return the report catalog instance."""
    return StaticReportCatalog()


def build_list_reports_use_case(
    catalog: ReportCatalogPort | None = None,
) -> ListReportsUseCase:
    """Return the use case listing reports."""
    return ListReportsUseCase(
        catalog or build_report_catalog(),
        logger=get_app_logger(),
    )


def build_report_filters_use_case(
    catalog: ReportCatalogPort | None = None,
) -> GetReportFiltersUseCase:
    """Return the use case listing report filters."""
    return GetReportFiltersUseCase(
        catalog or build_report_catalog(),
        logger=get_app_logger(),
    )


def build_summary_use_case(
    catalog: ReportCatalogPort | None = None,
) -> GetSummaryUseCase:
    """Return the use case summarizing report data."""
    return GetSummaryUseCase(
        catalog or build_report_catalog(),
        logger=get_app_logger(),
    )


def build_run_data_use_case(
    catalog: ReportCatalogPort | None = None,
) -> GetRunDataUseCase:
    """Return the use case loading drill-down rows."""
    return GetRunDataUseCase(
        catalog or build_report_catalog(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_report_catalog",
    "build_list_reports_use_case",
    "build_report_filters_use_case",
    "build_summary_use_case",
    "build_run_data_use_case",
]
