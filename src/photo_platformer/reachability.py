"""Reachability repair for height-ordered platforms.

Platforms are checked in bottom-to-top order. Each consecutive pair must be
within the jump limits: ``lower.y - upper.y`` no more than the jump height,
and the edge-to-edge horizontal distance no more than the running reach.
This is a geometric stand-in for the runtime physics, not a path search.

The repair loop is a bounded fixpoint: find the first violating pair, insert
one synthetic platform between them, re-sort, and scan again from the
bottom. Hitting the iteration cap leaves the remaining gaps in place; they
are reported on the result rather than raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

from .dedupe import sort_bottom_up
from .geometry import clamp_range, horizontal_gap, midpoint_left_edge, vertical_gap
from .level_constants import (
    BRIDGE_WIDTH,
    BRIDGE_X_RANGE,
    MAX_HORIZONTAL_REACH,
    MAX_JUMP_HEIGHT,
    MAX_REPAIR_ITERATIONS,
    MAX_TOTAL_PLATFORMS,
    PLATFORM_THICKNESS,
)
from .models import Bounds, Category, PlatformCandidate

logger = logging.getLogger(__name__)


class GapKind(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class TraversalLimits:
    max_jump_height: float = MAX_JUMP_HEIGHT
    max_horizontal_reach: float = MAX_HORIZONTAL_REACH


DEFAULT_LIMITS = TraversalLimits()


@dataclass(frozen=True)
class GapViolation:
    """A consecutive pair the player cannot cross; ``index`` is the lower one."""

    index: int
    lower: PlatformCandidate
    upper: PlatformCandidate
    kind: GapKind
    gap: float


@dataclass(frozen=True)
class RepairResult:
    platforms: tuple[PlatformCandidate, ...]
    iterations: int
    inserted: tuple[PlatformCandidate, ...]
    residual: tuple[GapViolation, ...]
    dropped: int = 0

    @property
    def converged(self) -> bool:
        return not self.residual


def check_pair(
    index: int,
    lower: PlatformCandidate,
    upper: PlatformCandidate,
    limits: TraversalLimits = DEFAULT_LIMITS,
) -> GapViolation | None:
    # Vertical takes precedence; horizontal is only looked at when it passes.
    v_gap = vertical_gap(lower.bounds, upper.bounds)
    if v_gap > limits.max_jump_height:
        return GapViolation(index, lower, upper, GapKind.VERTICAL, v_gap)
    h_gap = horizontal_gap(lower.bounds, upper.bounds)
    if h_gap > limits.max_horizontal_reach:
        return GapViolation(index, lower, upper, GapKind.HORIZONTAL, h_gap)
    return None


def iter_violations(
    ordered: Sequence[PlatformCandidate],
    limits: TraversalLimits = DEFAULT_LIMITS,
) -> Iterator[GapViolation]:
    """Yield violations of an already bottom-up ordered sequence, in order."""
    for index in range(len(ordered) - 1):
        violation = check_pair(index, ordered[index], ordered[index + 1], limits)
        if violation is not None:
            yield violation


def find_first_violation(
    ordered: Sequence[PlatformCandidate],
    limits: TraversalLimits = DEFAULT_LIMITS,
) -> GapViolation | None:
    return next(iter_violations(ordered, limits), None)


def find_violations(
    platforms: Sequence[PlatformCandidate],
    limits: TraversalLimits = DEFAULT_LIMITS,
) -> list[GapViolation]:
    """Check any platform collection after the fact, sorting it by height first."""
    return list(iter_violations(sort_bottom_up(platforms), limits))


def synthesize_platform(violation: GapViolation, key: str) -> PlatformCandidate:
    """Bridge (vertical gap) or stepping stone (horizontal gap) for a pair."""
    lower = violation.lower.bounds
    upper = violation.upper.bounds
    x = clamp_range(midpoint_left_edge(lower, upper, BRIDGE_WIDTH), BRIDGE_X_RANGE)
    y = (lower.y + upper.y) / 2
    label = "bridge" if violation.kind == GapKind.VERTICAL else "stepping stone"
    return PlatformCandidate(
        key=key,
        label=label,
        category=Category.OTHER,
        confidence=1.0,
        bounds=Bounds(x=x, y=y, w=BRIDGE_WIDTH, h=PLATFORM_THICKNESS),
        is_bridge=True,
    )


def repair_reachability(
    platforms: Sequence[PlatformCandidate],
    *,
    limits: TraversalLimits = DEFAULT_LIMITS,
    max_iterations: int = MAX_REPAIR_ITERATIONS,
    max_total: int = MAX_TOTAL_PLATFORMS,
) -> RepairResult:
    ordered = sort_bottom_up(platforms)
    inserted: list[PlatformCandidate] = []
    iterations = 0

    while iterations < max_iterations:
        iterations += 1
        violation = find_first_violation(ordered, limits)
        if violation is None:
            break
        stone = synthesize_platform(violation, key=f"synth_{len(inserted)}")
        logger.debug(
            "Inserted %s at y=%.3f for %s gap %.3f (%s -> %s)",
            stone.label,
            stone.bounds.y,
            violation.kind.value,
            violation.gap,
            violation.lower.key,
            violation.upper.key,
        )
        inserted.append(stone)
        split = violation.index + 1
        ordered = sort_bottom_up([*ordered[:split], stone, *ordered[split:]])

    dropped = max(0, len(ordered) - max_total)
    ordered = ordered[:max_total]
    return RepairResult(
        platforms=tuple(ordered),
        iterations=iterations,
        inserted=tuple(inserted),
        residual=tuple(iter_violations(ordered, limits)),
        dropped=dropped,
    )


class ReachabilityError(RuntimeError):
    """Raised by callers that refuse a level with unresolved gaps."""

    def __init__(self, residual: Sequence[GapViolation]) -> None:
        self.residual = tuple(residual)
        gaps = ", ".join(
            f"{v.lower.key}->{v.upper.key} {v.kind.value} {v.gap:.3f}"
            for v in self.residual
        )
        super().__init__(f"Unresolved reachability gaps: {gaps}")


__all__ = [
    "GapKind",
    "TraversalLimits",
    "DEFAULT_LIMITS",
    "GapViolation",
    "RepairResult",
    "check_pair",
    "iter_violations",
    "find_first_violation",
    "find_violations",
    "synthesize_platform",
    "repair_reachability",
    "ReachabilityError",
]
