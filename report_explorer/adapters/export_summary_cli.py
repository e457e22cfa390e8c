"""CLI adapter exporting a report summary as CSV."""

import os

from report_explorer.adapters.csv_export import records_to_csv
from report_explorer.adapters.interface.streamlit.report_view import (
    summary_columns,
    summary_records,
)
from report_explorer.domain.constants import METRICS, SCENARIOS
from report_explorer.domain.errors import NotFoundError
from report_explorer.domain.models import Grouping
from report_explorer.infrastructure.container import build_summary_use_case
from report_explorer.infrastructure.logging.logger import get_app_logger


def _parse_list(value: str | None) -> list[str] | None:
    """Split a comma-separated environment value.

    Args:
        value: Raw value such as ``"Base Case,Optimistic"``.

    Returns:
        list[str] | None: Stripped items, or None when unset or blank.
    """
    if value is None or not value.strip():
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


def main() -> int:
    """Print the summary selected by EXPLORER_* environment variables.

    Returns:
        int: Process exit code.
    """
    logger = get_app_logger()
    report_id = os.getenv("EXPLORER_REPORT_ID", "rpt-001")
    scenarios = _parse_list(os.getenv("EXPLORER_SCENARIOS")) or list(SCENARIOS)
    metrics = _parse_list(os.getenv("EXPLORER_METRICS")) or list(METRICS)
    sectors = _parse_list(os.getenv("EXPLORER_SECTORS"))
    sub_sector = os.getenv("EXPLORER_SUB_SECTOR") or None

    try:
        grouping = Grouping.parse(os.getenv("EXPLORER_GROUPING", "total"))
    except ValueError as exc:
        logger.error(str(exc))
        return 2

    use_case = build_summary_use_case()
    try:
        response = use_case.execute(
            report_id,
            scenarios,
            metrics,
            grouping=grouping,
            sectors=sectors,
            sub_sector=sub_sector,
        )
    except NotFoundError as exc:
        logger.error(str(exc))
        return 1

    print(
        records_to_csv(
            summary_records(response.rows),
            summary_columns(grouping),
        )
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
