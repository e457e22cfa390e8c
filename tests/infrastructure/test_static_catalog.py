"""Tests for the static report catalog."""

import pytest

from report_explorer.domain.constants import ASSET_TAXONOMY
from report_explorer.domain.errors import ExplorerError, NotFoundError
from report_explorer.infrastructure.static_catalog import (
    REPORTS,
    StaticReportCatalog,
)


def test_catalog_lists_bundled_reports() -> None:
    catalog = StaticReportCatalog()

    reports = catalog.list_reports()

    assert len(reports) == 9
    assert [r.id for r in reports if r.published] == [
        "rpt-001",
        "rpt-002",
        "rpt-003",
    ]
    assert len({r.run_id for r in reports}) == 9


def test_catalog_returns_copies_of_report_list() -> None:
    catalog = StaticReportCatalog()
    catalog.list_reports().clear()
    assert len(catalog.list_reports()) == len(REPORTS)


def test_get_report_resolves_by_id() -> None:
    report = StaticReportCatalog().get_report("rpt-009")
    assert report.name == "Cost Optimisation Draft"
    assert report.published is False


def test_get_report_raises_not_found() -> None:
    with pytest.raises(NotFoundError) as excinfo:
        StaticReportCatalog().get_report("rpt-010")
    assert isinstance(excinfo.value, ExplorerError)
    assert str(excinfo.value) == "Report not found: rpt-010"


def test_catalog_exposes_taxonomy() -> None:
    assets = StaticReportCatalog().list_assets()
    assert tuple(assets) == ASSET_TAXONOMY
    assert len({asset.asset for asset in assets}) == len(assets)
