"""Domain services for grouping detail rows into summary rows."""

from collections.abc import Collection, Iterable, Sequence
from logging import Logger

from report_explorer.domain.constants import ALL_SECTORS_LABEL, ASSET_TAXONOMY
from report_explorer.domain.models import (
    AssetDef,
    DetailRow,
    Grouping,
    Report,
    SummaryRow,
)
from report_explorer.domain.services.generator import generate_detail_rows
from report_explorer.utils.rounding import pct_change

GroupKey = tuple[str, ...]


def filter_rows(
    rows: Iterable[DetailRow],
    grouping: Grouping,
    *,
    sectors: Collection[str] | None = None,
    sub_sector: str | None = None,
) -> list[DetailRow]:
    """Drop rows outside the requested sectors and sub-sector.

    Args:
        rows: Detail rows to filter.
        grouping: Requested grouping; the sub-sector filter only applies
            when grouping by sub-sector.
        sectors: Allowed sectors, or None for every sector.
        sub_sector: Required sub-sector, or None.

    Returns:
        list[DetailRow]: Surviving rows in input order.
    """
    filtered = list(rows)
    if sectors is not None:
        allowed = set(sectors)
        filtered = [row for row in filtered if row.sector in allowed]
    if grouping is Grouping.SUB_SECTOR and sub_sector:
        filtered = [row for row in filtered if row.sub_sector == sub_sector]
    return filtered


def group_key(row: DetailRow, grouping: Grouping) -> GroupKey:
    """Return the key identifying the summary group of a row."""
    if grouping is Grouping.SUB_SECTOR:
        return (row.scenario, row.metric, row.sector, row.sub_sector)
    if grouping is Grouping.SECTOR:
        return (row.scenario, row.metric, row.sector)
    return (row.scenario, row.metric)


def group_rows(
    rows: Iterable[DetailRow],
    grouping: Grouping,
) -> dict[GroupKey, list[DetailRow]]:
    """Partition rows by group key, keeping first-encounter order."""
    groups: dict[GroupKey, list[DetailRow]] = {}
    for row in rows:
        groups.setdefault(group_key(row, grouping), []).append(row)
    return groups


def summarize(
    rows: Iterable[DetailRow],
    grouping: Grouping,
    *,
    sectors: Collection[str] | None = None,
    sub_sector: str | None = None,
    logger: Logger | None = None,
) -> list[SummaryRow]:
    """Reduce detail rows into one summary row per group.

    Groups are emitted in the order their key is first seen. A group whose
    current valuations sum to zero has no defined change and is skipped, so
    an empty input yields no rows in every grouping mode.

    Args:
        rows: Detail rows, possibly spanning several scenarios and metrics.
        grouping: Aggregation level.
        sectors: Allowed sectors, or None for every sector.
        sub_sector: Required sub-sector (sub-sector grouping only).
        logger: Optional logger used for skipped-group warnings.

    Returns:
        list[SummaryRow]: Summary rows, one per non-empty group.
    """
    filtered = filter_rows(
        rows,
        grouping,
        sectors=sectors,
        sub_sector=sub_sector,
    )
    summaries: list[SummaryRow] = []
    for key, children in group_rows(filtered, grouping).items():
        current = sum(row.current_valuation for row in children)
        projected = sum(row.projected_valuation for row in children)
        if current == 0:
            if logger is not None:
                logger.warning(
                    f"Skipping summary group {key}: current valuation is zero"
                )
            continue
        first = children[0]
        summaries.append(
            SummaryRow(
                scenario=first.scenario,
                metric=first.metric,
                sector=(
                    ALL_SECTORS_LABEL
                    if grouping is Grouping.TOTAL
                    else first.sector
                ),
                sub_sector=(
                    first.sub_sector
                    if grouping is Grouping.SUB_SECTOR
                    else ""
                ),
                current_valuation=current,
                projected_valuation=projected,
                pct_change=pct_change(current, projected),
                row_count=len(children),
            )
        )
    return summaries


def summarize_pairs(
    report: Report,
    scenarios: Sequence[str],
    metrics: Sequence[str],
    grouping: Grouping,
    *,
    sectors: Collection[str] | None = None,
    sub_sector: str | None = None,
    assets: Sequence[AssetDef] = ASSET_TAXONOMY,
    logger: Logger | None = None,
) -> list[SummaryRow]:
    """Summarize every (scenario, metric) pair of a report separately.

    Args:
        report: Report whose synthetic rows are generated.
        scenarios: Scenarios to include, outer loop.
        metrics: Metrics to include, inner loop.
        grouping: Aggregation level.
        sectors: Allowed sectors, or None for every sector.
        sub_sector: Required sub-sector (sub-sector grouping only).
        assets: Asset taxonomy used by the generator.
        logger: Optional logger used for skipped-group warnings.

    Returns:
        list[SummaryRow]: Rows for each pair, scenario-major.
    """
    summaries: list[SummaryRow] = []
    for scenario in scenarios:
        for metric in metrics:
            detail_rows = generate_detail_rows(
                report,
                scenario,
                metric,
                assets,
            )
            summaries.extend(
                summarize(
                    detail_rows,
                    grouping,
                    sectors=sectors,
                    sub_sector=sub_sector,
                    logger=logger,
                )
            )
    return summaries


__all__ = [
    "filter_rows",
    "group_key",
    "group_rows",
    "summarize",
    "summarize_pairs",
]
