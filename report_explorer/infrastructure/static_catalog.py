"""In-memory report catalog backed by static reference data."""

from collections.abc import Sequence

from report_explorer.application.ports.report_catalog import ReportCatalogPort
from report_explorer.domain.constants import ASSET_TAXONOMY
from report_explorer.domain.errors import NotFoundError
from report_explorer.domain.models import AssetDef, Report

REPORTS = (
    Report(
        id="rpt-001",
        name="Q4 2025 Revenue",
        description=(
            "Final quarter revenue actuals across all business lines and "
            "geographies."
        ),
        published=True,
        run_id="run-a1b2c3d4",
    ),
    Report(
        id="rpt-002",
        name="Annual Performance",
        description=(
            "Year-end performance review covering profitability, growth, "
            "and key operational metrics."
        ),
        published=True,
        run_id="run-e5f6a7b8",
    ),
    Report(
        id="rpt-003",
        name="Market Analysis 2025",
        description=(
            "Competitive landscape and market-share analysis for FY2025."
        ),
        published=True,
        run_id="run-c9d0e1f2",
    ),
    Report(
        id="rpt-004",
        name="Q1 2026 Forecast",
        description=(
            "Forward-looking projections for Q1 2026 using latest macro "
            "assumptions."
        ),
        published=False,
        run_id="run-a3b4c5d6",
    ),
    Report(
        id="rpt-005",
        name="Budget Proposal",
        description=(
            "Draft departmental budget allocations for the upcoming fiscal "
            "year."
        ),
        published=False,
        run_id="run-e7f8a9b0",
    ),
    Report(
        id="rpt-006",
        name="Headcount Plan",
        description=(
            "Workforce planning model with hiring targets and attrition "
            "estimates."
        ),
        published=False,
        run_id="run-c1d2e3f4",
    ),
    Report(
        id="rpt-007",
        name="Customer Churn Analysis",
        description="Cohort-level churn rates and retention driver analysis.",
        published=False,
        run_id="run-a5b6c7d8",
    ),
    Report(
        id="rpt-008",
        name="New Market Entry Study",
        description=(
            "Feasibility assessment for expansion into three target markets."
        ),
        published=False,
        run_id="run-e9f0a1b2",
    ),
    Report(
        id="rpt-009",
        name="Cost Optimisation Draft",
        description=(
            "Preliminary cost-reduction scenarios across supply chain and "
            "G&A."
        ),
        published=False,
        run_id="run-c3d4e5f6",
    ),
)


class StaticReportCatalog(ReportCatalogPort):
    """Catalog serving the bundled reports and asset taxonomy."""

    def __init__(
        self,
        reports: Sequence[Report] = REPORTS,
        assets: Sequence[AssetDef] = ASSET_TAXONOMY,
    ) -> None:
        self._reports = tuple(reports)
        self._assets = tuple(assets)
        self._by_id = {report.id: report for report in self._reports}

    def list_reports(self) -> list[Report]:
        return list(self._reports)

    def get_report(self, report_id: str) -> Report:
        report = self._by_id.get(report_id)
        if report is None:
            raise NotFoundError(report_id)
        return report

    def list_assets(self) -> Sequence[AssetDef]:
        return self._assets


__all__ = ["REPORTS", "StaticReportCatalog"]
