"""Application ports package."""

from .report_catalog import ReportCatalogPort

__all__ = ["ReportCatalogPort"]
