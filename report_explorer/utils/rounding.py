"""Rounding helpers matching the dashboard's display conventions."""

import math
from decimal import ROUND_HALF_UP, Decimal

_TWO_PLACES = Decimal("0.01")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def round_pct(value: float) -> float:
    """Round a percentage to two decimals, ties away from zero.

    The exact binary value of ``value`` is quantized, so results match a
    fixed two-decimal rendering of the same float.

    Args:
        value: Raw percentage.

    Returns:
        float: Percentage rounded to two decimal places.
    """
    return float(Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def pct_change(current: int, projected: int) -> float:
    """Return the rounded percentage change from current to projected.

    Raises:
        ZeroDivisionError: If ``current`` is zero.
    """
    return round_pct(((projected - current) / current) * 100)


__all__ = ["round_half_up", "round_pct", "pct_change"]
