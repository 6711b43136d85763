"""Detection classification and ground synthesis."""

from __future__ import annotations

from typing import Iterable

from .geometry import clamp_range
from .level_constants import (
    GROUND_CONFIDENCE,
    GROUND_Y,
    MIN_PLATFORM_WIDTH,
    PLATFORM_THICKNESS,
    PLATFORM_W_RANGE,
    PLATFORM_X_RANGE,
    PLATFORM_Y_RANGE,
)
from .models import (
    Bounds,
    Category,
    Detection,
    ExtractedObjects,
    PlatformCandidate,
)

GROUND_KEY = "ground"


def surface_bounds(detection: Detection) -> Bounds:
    """Thin walkable slab along the top edge of a detection, clamped."""
    raw = detection.bounds
    return Bounds(
        x=clamp_range(raw.x, PLATFORM_X_RANGE),
        y=clamp_range(raw.y, PLATFORM_Y_RANGE),
        w=clamp_range(raw.w, PLATFORM_W_RANGE),
        h=PLATFORM_THICKNESS,
    )


def extract_candidates(detections: Iterable[Detection]) -> ExtractedObjects:
    """Route every detection to platforms, obstacles or collectibles.

    Food never becomes a platform. Everything else is clamped first and then
    judged on the clamped width, so the narrow-platform rejection sees the
    same geometry the later stages use.
    """
    extracted = ExtractedObjects()
    for index, detection in enumerate(detections):
        if detection.category == Category.FOOD:
            extracted.collectibles.append(detection)
            continue

        bounds = surface_bounds(detection)
        if bounds.w < MIN_PLATFORM_WIDTH:
            extracted.obstacles.append(detection)
            continue

        extracted.platforms.append(
            PlatformCandidate(
                key=f"det_{index}",
                label=detection.label,
                category=detection.category,
                confidence=detection.confidence,
                bounds=bounds,
                enemy_anchor=detection.category.is_hazardous,
            )
        )
    return extracted


def make_ground_candidate() -> PlatformCandidate:
    return PlatformCandidate(
        key=GROUND_KEY,
        label="ground",
        category=Category.FURNITURE,
        confidence=GROUND_CONFIDENCE,
        bounds=Bounds(x=0.0, y=GROUND_Y, w=1.0, h=PLATFORM_THICKNESS),
        is_ground=True,
    )


def add_ground(candidates: list[PlatformCandidate]) -> list[PlatformCandidate]:
    """Return ``candidates`` with the full-width ground appended."""
    return [*candidates, make_ground_candidate()]


__all__ = [
    "GROUND_KEY",
    "surface_bounds",
    "extract_candidates",
    "make_ground_candidate",
    "add_ground",
]
