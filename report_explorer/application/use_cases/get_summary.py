"""Use case to summarize report data by scenario, metric and group."""

from collections.abc import Collection, Sequence

from report_explorer.application.ports.report_catalog import ReportCatalogPort
from report_explorer.domain.models import Grouping, SummaryResponse
from report_explorer.domain.services import make_run, summarize_pairs
from report_explorer.infrastructure.logging.logger import get_app_logger


class GetSummaryUseCase:
    """Summarize a report at total, sector or sub-sector level."""

    def __init__(self, catalog: ReportCatalogPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            catalog: Port providing the report reference data.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._catalog = catalog
        self._logger = logger or get_app_logger()

    def execute(
        self,
        report_id: str,
        scenarios: Sequence[str],
        metrics: Sequence[str],
        grouping: Grouping | str = Grouping.TOTAL,
        sectors: Collection[str] | None = None,
        sub_sector: str | None = None,
    ) -> SummaryResponse:
        """Return summary rows for every (scenario, metric) pair.

        Args:
            report_id: Report identifier.
            scenarios: Scenarios to summarize.
            metrics: Metrics to summarize.
            grouping: Aggregation level or its name.
            sectors: Allowed sectors, or None for every sector.
            sub_sector: Required sub-sector (sub-sector grouping only).

        Returns:
            SummaryResponse: Run metadata and summary rows.

        Raises:
            NotFoundError: If the report does not exist.
            ValueError: If the grouping name is unknown.
        """
        report = self._catalog.get_report(report_id)
        resolved_grouping = Grouping.parse(grouping)
        rows = summarize_pairs(
            report,
            scenarios,
            metrics,
            resolved_grouping,
            sectors=sectors,
            sub_sector=sub_sector,
            assets=self._catalog.list_assets(),
            logger=self._logger,
        )
        self._logger.info(
            f"Summary computed: report={report.id}, "
            f"grouping={resolved_grouping.value}, rows={len(rows)}"
        )
        return SummaryResponse(run=make_run(report), rows=rows)


__all__ = ["GetSummaryUseCase"]
