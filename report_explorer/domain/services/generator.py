"""Deterministic synthetic data for report runs.

Every number produced here is a pure function of the report, scenario,
metric and the asset's position in the taxonomy, so repeated calls return
identical rows.
"""

from array import array
import sys
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from report_explorer.domain.constants import (
    ASSET_TAXONOMY,
    DEFAULT_SCENARIO_FACTOR,
    SCENARIO_FACTORS,
)
from report_explorer.domain.models import AssetDef, DetailRow, Report, ReportRun
from report_explorer.utils.rounding import pct_change, round_half_up

RUN_EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)
_UTF16_NATIVE = "utf-16-le" if sys.byteorder == "little" else "utf-16-be"


def _code_units(text: str) -> array:
    """Return the UTF-16 code units of ``text``."""
    units = array("H")
    units.frombytes(text.encode(_UTF16_NATIVE))
    return units


def compute_seed(*parts: str) -> int:
    """Return the generator seed for the concatenated parts.

    Args:
        *parts: Strings concatenated before hashing (report id, scenario,
            metric).

    Returns:
        int: Sum of the UTF-16 code units, modulo 100.
    """
    return sum(_code_units("".join(parts))) % 100


def scenario_factor(scenario: str) -> float:
    """Return the projection multiplier for a scenario."""
    return SCENARIO_FACTORS.get(scenario, DEFAULT_SCENARIO_FACTOR)


def make_row_id(report_id: str, label: str, asset: str, index: int) -> str:
    """Build a deterministic GUID-like identifier for a detail row.

    Args:
        report_id: Owning report identifier.
        label: Scenario and metric concatenated.
        asset: Asset name.
        index: Position of the asset in the taxonomy.

    Returns:
        str: Identifier shaped like ``xxxxxxxx-xxxx-4xxx-axxx-xxxxxxxxxxxx``.
    """
    value = 0
    for unit in _code_units(f"{report_id}{label}{asset}{index}"):
        value = (value * 31 + unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    digits = format(abs(value), "x").rjust(8, "0")
    return (
        f"{digits[:8]}-{digits[:4]}-4{digits[1:4]}-a{digits[2:5]}-"
        f"{digits.ljust(12, '0')[:12]}"
    )


def make_run(report: Report) -> ReportRun:
    """Return the run metadata for a report."""
    seed = compute_seed(report.id)
    return ReportRun(
        id=report.run_id,
        report_id=report.id,
        created_at=RUN_EPOCH + timedelta(days=seed),
    )


def generate_detail_rows(
    report: Report,
    scenario: str,
    metric: str,
    assets: Sequence[AssetDef] = ASSET_TAXONOMY,
) -> list[DetailRow]:
    """Generate one detail row per asset for a scenario and metric.

    Scenario and metric are not validated; unknown values still seed the
    generator and project at the base factor.

    Args:
        report: Report owning the run.
        scenario: Scenario name.
        metric: Metric name.
        assets: Asset taxonomy, in display order.

    Returns:
        list[DetailRow]: Rows in taxonomy order.
    """
    seed = compute_seed(report.id, scenario, metric)
    factor = scenario_factor(scenario)
    drift = (seed % 7) * 0.008

    rows: list[DetailRow] = []
    for index, asset in enumerate(assets):
        asset_factor = 1 - index * 0.02
        base = (500 + seed * 30 + index * 80) * 1000
        current = round_half_up(base * asset_factor)
        projected = round_half_up(
            current * factor * (1 + drift - index * 0.003)
        )
        rows.append(
            DetailRow(
                row_id=make_row_id(
                    report.id,
                    scenario + metric,
                    asset.asset,
                    index,
                ),
                run_id=report.run_id,
                scenario=scenario,
                metric=metric,
                sector=asset.sector,
                sub_sector=asset.sub_sector,
                asset=asset.asset,
                current_valuation=current,
                projected_valuation=projected,
                pct_change=pct_change(current, projected),
            )
        )
    return rows


__all__ = [
    "RUN_EPOCH",
    "compute_seed",
    "scenario_factor",
    "make_row_id",
    "make_run",
    "generate_detail_rows",
]
