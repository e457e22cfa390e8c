"""Tests for the report listing CLI."""

from unittest.mock import MagicMock

import pytest

from report_explorer.adapters import list_reports_cli
from report_explorer.infrastructure import container


@pytest.fixture
def logger(monkeypatch):
    monkeypatch.delenv("EXPLORER_STATUS", raising=False)
    fake_logger = MagicMock()
    monkeypatch.setattr(list_reports_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    return fake_logger


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, None),
        ("", None),
        ("all", None),
        ("Published", True),
        (" draft ", False),
    ],
)
def test_parse_published(value, expected):
    assert list_reports_cli._parse_published(value, MagicMock()) is expected


def test_parse_published_warns_on_invalid_value():
    logger = MagicMock()

    assert list_reports_cli._parse_published("archived", logger) is None
    logger.warning.assert_called_once()


def test_main_lists_every_report(capsys, logger):
    list_reports_cli.main()

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "rpt-001\tpublished\tQ4 2025 Revenue"
    assert lines[-1] == "9 reports."


def test_main_filters_drafts(monkeypatch, capsys, logger):
    monkeypatch.setenv("EXPLORER_STATUS", "draft")

    list_reports_cli.main()

    lines = capsys.readouterr().out.splitlines()
    assert all("\tdraft\t" in line for line in lines[:-1])
    assert lines[-1] == f"{len(lines) - 1} reports."
