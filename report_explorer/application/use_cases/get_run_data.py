"""Use case to return ungrouped detail rows for drill-down."""

from collections.abc import Collection, Sequence

from report_explorer.application.ports.report_catalog import ReportCatalogPort
from report_explorer.domain.constants import METRICS, SCENARIOS
from report_explorer.domain.models import DetailRow, RunDataResponse
from report_explorer.domain.services import generate_detail_rows, make_run
from report_explorer.infrastructure.logging.logger import get_app_logger


class GetRunDataUseCase:
    """Return detail rows of a report filtered by any dimension."""

    def __init__(self, catalog: ReportCatalogPort, logger=None) -> None:
        self._catalog = catalog
        self._logger = logger or get_app_logger()

    def execute(
        self,
        report_id: str,
        scenarios: Sequence[str] | None = None,
        metrics: Sequence[str] | None = None,
        sectors: Collection[str] | None = None,
        sub_sectors: Collection[str] | None = None,
        assets: Collection[str] | None = None,
    ) -> RunDataResponse:
        """Return detail rows for the requested slice.

        ``None`` disables a filter; an empty collection matches nothing.

        Args:
            report_id: Report identifier.
            scenarios: Scenarios to generate, defaults to all scenarios.
            metrics: Metrics to generate, defaults to all metrics.
            sectors: Allowed sectors.
            sub_sectors: Allowed sub-sectors.
            assets: Allowed asset names.

        Returns:
            RunDataResponse: Run metadata and detail rows.

        Raises:
            NotFoundError: If the report does not exist.
        """
        report = self._catalog.get_report(report_id)
        taxonomy = self._catalog.list_assets()
        rows: list[DetailRow] = []
        for scenario in SCENARIOS if scenarios is None else scenarios:
            for metric in METRICS if metrics is None else metrics:
                rows.extend(
                    generate_detail_rows(report, scenario, metric, taxonomy)
                )

        if sectors is not None:
            rows = [row for row in rows if row.sector in sectors]
        if sub_sectors is not None:
            rows = [row for row in rows if row.sub_sector in sub_sectors]
        if assets is not None:
            rows = [row for row in rows if row.asset in assets]

        self._logger.info(
            f"Run data loaded: report={report.id}, rows={len(rows)}"
        )
        return RunDataResponse(run=make_run(report), rows=rows)


__all__ = ["GetRunDataUseCase"]
