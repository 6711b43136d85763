from __future__ import annotations

from typing import Sequence

from .geometry import horizontal_overlap
from .level_constants import DEDUP_Y_TOLERANCE, MAX_PLATFORMS
from .models import PlatformCandidate


def sort_bottom_up(candidates: Sequence[PlatformCandidate]) -> list[PlatformCandidate]:
    """Descending ``y`` (lowest on screen first); ties keep their input order."""
    return sorted(candidates, key=lambda cand: -cand.bounds.y)


def _too_close(a: PlatformCandidate, b: PlatformCandidate, y_tolerance: float) -> bool:
    return abs(a.bounds.y - b.bounds.y) < y_tolerance and horizontal_overlap(
        a.bounds, b.bounds
    )


def deduplicate_platforms(
    candidates: Sequence[PlatformCandidate],
    *,
    y_tolerance: float = DEDUP_Y_TOLERANCE,
    max_platforms: int = MAX_PLATFORMS,
) -> list[PlatformCandidate]:
    """Drop candidates shadowed by an earlier one at nearly the same height.

    The scan runs bottom-up and the first accepted candidate wins, so the
    ground (always the lowest) is never dropped.
    """
    kept: list[PlatformCandidate] = []
    for cand in sort_bottom_up(candidates):
        if any(_too_close(existing, cand, y_tolerance) for existing in kept):
            continue
        kept.append(cand)
    return kept[:max_platforms]


__all__ = ["sort_bottom_up", "deduplicate_platforms"]
