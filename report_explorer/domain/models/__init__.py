"""Domain models package."""

from .layout import Rect, TreemapItem
from .reports import AssetDef, Report, ReportRun
from .responses import ReportFilters, RunDataResponse, SummaryResponse
from .rows import DetailRow, Grouping, SummaryRow

__all__ = [
    "AssetDef",
    "Report",
    "ReportRun",
    "DetailRow",
    "SummaryRow",
    "Grouping",
    "ReportFilters",
    "SummaryResponse",
    "RunDataResponse",
    "TreemapItem",
    "Rect",
]
