"""Settings helpers for the report explorer adapters."""

from dataclasses import dataclass
import os

from report_explorer.domain.models import Grouping
from report_explorer.infrastructure.logging.logger import get_app_logger

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ExplorerSettings:
    """Settings for the report explorer.

    Attributes:
        default_grouping: Grouping selected when the explorer opens.
        published_only: Whether the explorer starts on published reports.
        treemap_width: Treemap canvas width in layout units.
        treemap_height: Treemap canvas height in layout units.
    """

    default_grouping: Grouping = Grouping.SUB_SECTOR
    published_only: bool = True
    treemap_width: float = 1000.0
    treemap_height: float = 600.0

    @classmethod
    def from_env(cls) -> "ExplorerSettings":
        """Build settings from environment variables.

        Invalid values are logged and replaced by the defaults.

        Returns:
            ExplorerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        defaults = cls()
        return cls(
            default_grouping=cls._parse_grouping(
                os.getenv("REPORT_EXPLORER_DEFAULT_GROUPING"),
                defaults.default_grouping,
                logger,
            ),
            published_only=cls._parse_bool(
                "REPORT_EXPLORER_PUBLISHED_ONLY",
                defaults.published_only,
                logger,
            ),
            treemap_width=cls._parse_dimension(
                "REPORT_EXPLORER_TREEMAP_WIDTH",
                defaults.treemap_width,
                logger,
            ),
            treemap_height=cls._parse_dimension(
                "REPORT_EXPLORER_TREEMAP_HEIGHT",
                defaults.treemap_height,
                logger,
            ),
        )

    @staticmethod
    def _parse_grouping(raw: str | None, default: Grouping, logger) -> Grouping:
        if not raw:
            return default
        try:
            return Grouping.parse(raw)
        except ValueError:
            logger.warning(
                f"Invalid REPORT_EXPLORER_DEFAULT_GROUPING '{raw}'. "
                f"Using {default.value}."
            )
            return default

    @staticmethod
    def _parse_bool(name: str, default: bool, logger) -> bool:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        logger.warning(f"Invalid boolean for {name}: '{raw}'. Using {default}.")
        return default

    @staticmethod
    def _parse_dimension(name: str, default: float, logger) -> float:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"Invalid number for {name}: '{raw}'. Using {default}.")
            return default
        if value <= 2:
            logger.warning(
                f"{name} must be greater than 2, got {value}. Using {default}."
            )
            return default
        return value


__all__ = ["ExplorerSettings"]
