"""CLI adapter printing the available reports."""

import os

from report_explorer.infrastructure.container import (
    build_list_reports_use_case,
)
from report_explorer.infrastructure.logging.logger import get_app_logger


def _parse_published(value: str | None, logger) -> bool | None:
    """Parse the EXPLORER_STATUS value into a publication filter.

    Args:
        value: "published", "draft", "all" or empty.
        logger: Logger used for warnings.

    Returns:
        bool | None: Publication filter, None for every report.
    """
    if not value or value.strip().lower() == "all":
        return None
    normalized = value.strip().lower()
    if normalized == "published":
        return True
    if normalized == "draft":
        return False
    logger.warning(
        f"Invalid status '{value}'. Expected published, draft or all."
    )
    return None


def main() -> None:
    """List reports, optionally filtered by EXPLORER_STATUS."""
    logger = get_app_logger()
    published = _parse_published(os.getenv("EXPLORER_STATUS"), logger)
    use_case = build_list_reports_use_case()
    reports = use_case.execute(published=published)
    for report in reports:
        status = "published" if report.published else "draft"
        print(f"{report.id}\t{status}\t{report.name}")
    print(f"{len(reports)} reports.")


if __name__ == "__main__":  # pragma: no cover
    main()
