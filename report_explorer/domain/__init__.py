"""Domain package for report data generation, aggregation and layout."""

from .constants import (
    ALL_SECTORS_LABEL,
    ASSET_TAXONOMY,
    METRICS,
    SCENARIO_FACTORS,
    SCENARIOS,
)
from .errors import ExplorerError, NotFoundError
from .models import (
    AssetDef,
    DetailRow,
    Grouping,
    Rect,
    Report,
    ReportFilters,
    ReportRun,
    RunDataResponse,
    SummaryResponse,
    SummaryRow,
    TreemapItem,
)
from .services import (
    generate_detail_rows,
    layout_treemap,
    make_run,
    summarize,
    summarize_pairs,
)

__all__ = [
    "ALL_SECTORS_LABEL",
    "ASSET_TAXONOMY",
    "METRICS",
    "SCENARIO_FACTORS",
    "SCENARIOS",
    "ExplorerError",
    "NotFoundError",
    "AssetDef",
    "DetailRow",
    "Grouping",
    "Rect",
    "Report",
    "ReportFilters",
    "ReportRun",
    "RunDataResponse",
    "SummaryResponse",
    "SummaryRow",
    "TreemapItem",
    "generate_detail_rows",
    "layout_treemap",
    "make_run",
    "summarize",
    "summarize_pairs",
]
