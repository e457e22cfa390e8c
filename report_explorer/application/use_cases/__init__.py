"""Application use cases package."""

from .get_report_filters import GetReportFiltersUseCase
from .get_run_data import GetRunDataUseCase
from .get_summary import GetSummaryUseCase
from .list_reports import ListReportsUseCase

__all__ = [
    "ListReportsUseCase",
    "GetReportFiltersUseCase",
    "GetSummaryUseCase",
    "GetRunDataUseCase",
]
