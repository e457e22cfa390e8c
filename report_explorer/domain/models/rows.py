"""Domain models for detail and summary rows."""

from dataclasses import dataclass
from enum import Enum


class Grouping(str, Enum):
    """Aggregation level for summary rows."""

    TOTAL = "total"
    SECTOR = "sector"
    SUB_SECTOR = "subSector"

    @classmethod
    def parse(cls, value: "str | Grouping") -> "Grouping":
        """Parse a grouping from its value or member name.

        Args:
            value: Grouping instance, value ("subSector") or name
                ("SUB_SECTOR"), case-insensitive.

        Returns:
            Grouping: Matching member.

        Raises:
            ValueError: If the value matches no grouping.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if normalized in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown grouping: {value}")


@dataclass(frozen=True)
class DetailRow:
    """Synthetic valuation row for one asset of a (scenario, metric) pair."""

    row_id: str
    run_id: str
    scenario: str
    metric: str
    sector: str
    sub_sector: str
    asset: str
    current_valuation: int
    projected_valuation: int
    pct_change: float


@dataclass(frozen=True)
class SummaryRow:
    """Aggregated valuations for one group.

    Attributes:
        scenario: Scenario of the constituent rows.
        metric: Metric of the constituent rows.
        sector: Sector label, "All Sectors" under total grouping.
        sub_sector: Sub-sector label, empty unless grouping by sub-sector.
        current_valuation: Sum of constituent current valuations.
        projected_valuation: Sum of constituent projected valuations.
        pct_change: Change computed from the summed valuations.
        row_count: Number of constituent detail rows.
    """

    scenario: str
    metric: str
    sector: str
    sub_sector: str
    current_valuation: int
    projected_valuation: int
    pct_change: float
    row_count: int = 0


__all__ = ["Grouping", "DetailRow", "SummaryRow"]
