"""Use case to list the available reports."""

from report_explorer.application.ports.report_catalog import ReportCatalogPort
from report_explorer.domain.models import Report
from report_explorer.infrastructure.logging.logger import get_app_logger


class ListReportsUseCase:
    """Return reports, optionally restricted by publication status."""

    def __init__(self, catalog: ReportCatalogPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            catalog: Port providing the report reference data.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._catalog = catalog
        self._logger = logger or get_app_logger()

    def execute(self, published: bool | None = None) -> list[Report]:
        """Return the reports.

        Args:
            published: True for published reports only, False for drafts
                only, None for every report.

        Returns:
            list[Report]: Reports in catalog order.
        """
        reports = self._catalog.list_reports()
        if published is None:
            return list(reports)
        return [report for report in reports if report.published == published]


__all__ = ["ListReportsUseCase"]
