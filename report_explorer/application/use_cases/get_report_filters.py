"""Use case to list the filter options of a report."""

from report_explorer.application.ports.report_catalog import ReportCatalogPort
from report_explorer.domain.constants import METRICS, SCENARIOS
from report_explorer.domain.models import ReportFilters
from report_explorer.infrastructure.logging.logger import get_app_logger


class GetReportFiltersUseCase:
    """Derive scenarios, metrics, sectors and sub-sectors for a report."""

    def __init__(self, catalog: ReportCatalogPort, logger=None) -> None:
        self._catalog = catalog
        self._logger = logger or get_app_logger()

    def execute(self, report_id: str) -> ReportFilters:
        """Return the filters available for a report.

        Every report shares the same enumerations; the report is still
        resolved so unknown identifiers fail.

        Args:
            report_id: Report identifier.

        Returns:
            ReportFilters: Filter options in taxonomy order.

        Raises:
            NotFoundError: If the report does not exist.
        """
        self._catalog.get_report(report_id)
        sub_sectors_by_sector: dict[str, list[str]] = {}
        for asset in self._catalog.list_assets():
            names = sub_sectors_by_sector.setdefault(asset.sector, [])
            if asset.sub_sector not in names:
                names.append(asset.sub_sector)
        return ReportFilters(
            scenarios=list(SCENARIOS),
            metrics=list(METRICS),
            sectors=list(sub_sectors_by_sector),
            sub_sectors_by_sector=sub_sectors_by_sector,
        )


__all__ = ["GetReportFiltersUseCase"]
