"""Response models returned by the report explorer use cases."""

from dataclasses import dataclass, field

from .reports import ReportRun
from .rows import DetailRow, SummaryRow


@dataclass(frozen=True)
class ReportFilters:
    """Filter options available for a report."""

    scenarios: list[str]
    metrics: list[str]
    sectors: list[str]
    sub_sectors_by_sector: dict[str, list[str]] = field(default_factory=dict)

    def sub_sectors_for(self, sector: str | None = None) -> list[str]:
        """Return the sub-sectors of a sector, or all distinct ones.

        Args:
            sector: Sector name, or None for every sector.

        Returns:
            list[str]: Sub-sector names in taxonomy order.
        """
        if sector is not None:
            return list(self.sub_sectors_by_sector.get(sector, []))
        seen: list[str] = []
        for names in self.sub_sectors_by_sector.values():
            for name in names:
                if name not in seen:
                    seen.append(name)
        return seen


@dataclass(frozen=True)
class SummaryResponse:
    """Run metadata with summary rows."""

    run: ReportRun
    rows: list[SummaryRow]


@dataclass(frozen=True)
class RunDataResponse:
    """Run metadata with detail rows."""

    run: ReportRun
    rows: list[DetailRow]


__all__ = ["ReportFilters", "SummaryResponse", "RunDataResponse"]
