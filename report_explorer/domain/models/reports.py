"""Domain models for reports, runs and the asset taxonomy."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AssetDef:
    """One entry of the asset taxonomy.

    Attributes:
        sector: Top-level classification (e.g. "Equities").
        sub_sector: Classification within the sector. Only unique when
            paired with its sector.
        asset: Asset display name.
    """

    sector: str
    sub_sector: str
    asset: str


@dataclass(frozen=True)
class Report:
    """Static report definition."""

    id: str
    name: str
    description: str
    published: bool
    run_id: str


@dataclass(frozen=True)
class ReportRun:
    """Run metadata attached to every report response."""

    id: str
    report_id: str
    created_at: datetime

    @property
    def created_at_iso(self) -> str:
        """Return the creation timestamp as ``YYYY-MM-DDTHH:MM:SS.000Z``."""
        return self.created_at.strftime("%Y-%m-%dT%H:%M:%S.000Z")


__all__ = ["AssetDef", "Report", "ReportRun"]
