"""Port for the static report reference data."""

from collections.abc import Sequence
from typing import Protocol

from report_explorer.domain.models import AssetDef, Report


class ReportCatalogPort(Protocol):
    """Port exposing reports and the asset taxonomy."""

    def list_reports(self) -> list[Report]:
        """Return every report in display order."""

    def get_report(self, report_id: str) -> Report:
        """Return a report by identifier.

        Raises:
            NotFoundError: If no report has this identifier.
        """

    def list_assets(self) -> Sequence[AssetDef]:
        """Return the asset taxonomy in display order."""


__all__ = ["ReportCatalogPort"]
