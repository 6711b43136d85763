from __future__ import annotations

from .models import Bounds


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_range(value: float, bounds_range: tuple[float, float]) -> float:
    low, high = bounds_range
    return clamp(value, low, high)


def horizontal_overlap(a: Bounds, b: Bounds) -> bool:
    """Open-interval overlap of ``[x, x + w]``; touching edges do not overlap."""
    return a.x < b.right and a.right > b.x


def horizontal_gap(a: Bounds, b: Bounds) -> float:
    """Distance between the nearest vertical edges, zero when they overlap."""
    if horizontal_overlap(a, b):
        return 0.0
    return min(abs(a.x - b.right), abs(b.x - a.right))


def vertical_gap(lower: Bounds, upper: Bounds) -> float:
    """How far ``upper`` sits above ``lower`` (positive when it is higher)."""
    return lower.y - upper.y


def midpoint_left_edge(a: Bounds, b: Bounds, width: float) -> float:
    """Left edge of a ``width``-wide span centred between two rect centres."""
    return (a.center_x + b.center_x) / 2 - width / 2


def clamp_unit(bounds: Bounds) -> Bounds:
    return Bounds(
        x=clamp(bounds.x, 0.0, 1.0),
        y=clamp(bounds.y, 0.0, 1.0),
        w=clamp(bounds.w, 0.0, 1.0),
        h=clamp(bounds.h, 0.0, 1.0),
    )


__all__ = [
    "clamp",
    "clamp_range",
    "horizontal_overlap",
    "horizontal_gap",
    "vertical_gap",
    "midpoint_left_edge",
    "clamp_unit",
]
