"""Domain errors."""


class ExplorerError(Exception):
    """Base class for report explorer errors."""


class NotFoundError(ExplorerError):
    """Raised when a requested report does not exist."""

    def __init__(self, report_id: str) -> None:
        super().__init__(f"Report not found: {report_id}")
        self.report_id = report_id


__all__ = ["ExplorerError", "NotFoundError"]
