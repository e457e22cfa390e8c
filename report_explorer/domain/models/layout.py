"""Geometry models for the treemap layout."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TreemapItem:
    """Weighted item to place in a treemap."""

    key: str
    label: str
    weight: float


@dataclass(frozen=True)
class Rect:
    """Placed treemap cell."""

    key: str
    label: str
    weight: float
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


__all__ = ["TreemapItem", "Rect"]
