"""Build a playable scene from a detection response.

Stages run strictly forward: extract candidates, add the ground, dedupe,
repair reachability, place entities, assemble. Only the repair step adds
platforms after extraction. Ids come from a counter owned by a single build,
so two builds of the same input produce identical scenes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .candidates import add_ground, extract_candidates
from .config import BuildSettings
from .dedupe import deduplicate_platforms
from .geometry import clamp_unit
from .level_constants import MAX_COLLECTIBLES, MAX_OBSTACLES
from .models import (
    Category,
    Detection,
    DetectionResponse,
    ImageSize,
    PlatformCandidate,
    Scene,
    SceneObject,
    Spawns,
)
from .placement import Placement, place_entities
from .reachability import RepairResult, repair_reachability

logger = logging.getLogger(__name__)


class IdAllocator:
    """Hands out ``<prefix>_<n>`` ids from one counter shared by all prefixes."""

    def __init__(self) -> None:
        self._next = 0

    def __call__(self, prefix: str) -> str:
        object_id = f"{prefix}_{self._next}"
        self._next += 1
        return object_id


@dataclass(frozen=True)
class BuildReport:
    repair: RepairResult
    detections: int
    platform_candidates: int
    platforms_after_dedupe: int
    obstacles: int
    collectibles: int

    @property
    def converged(self) -> bool:
        return self.repair.converged

    def summary(self) -> str:
        status = "converged" if self.converged else "NOT converged"
        return (
            f"{self.detections} detections -> {len(self.repair.platforms)} platforms "
            f"({len(self.repair.inserted)} synthesized, "
            f"{self.repair.iterations} repair iterations, {status})"
        )


def _platform_objects(
    platforms: Sequence[PlatformCandidate],
    enemy_platform_keys: Sequence[str],
    next_id: IdAllocator,
) -> list[SceneObject]:
    anchored = set(enemy_platform_keys)
    return [
        SceneObject(
            id=next_id(platform.id_prefix),
            type="platform",
            label=platform.label,
            confidence=platform.confidence,
            bounds=platform.bounds,
            surface_type="solid",
            category=platform.category,
            enemy_spawn_anchor=platform.enemy_anchor or platform.key in anchored,
        )
        for platform in platforms
    ]


def _obstacle_objects(
    obstacles: Sequence[Detection], next_id: IdAllocator
) -> list[SceneObject]:
    return [
        SceneObject(
            id=next_id("obs"),
            type="obstacle",
            label=det.label,
            confidence=det.confidence,
            bounds=clamp_unit(det.bounds),
            category=det.category,
            enemy_spawn_anchor=det.category.is_hazardous,
        )
        for det in obstacles[:MAX_OBSTACLES]
    ]


def _collectible_objects(
    collectibles: Sequence[Detection], next_id: IdAllocator
) -> list[SceneObject]:
    return [
        SceneObject(
            id=next_id("col"),
            type="collectible",
            label=det.label,
            confidence=det.confidence,
            bounds=clamp_unit(det.bounds),
            category=Category.FOOD,
        )
        for det in collectibles[:MAX_COLLECTIBLES]
    ]


def assemble_scene(
    image: ImageSize,
    platforms: Sequence[PlatformCandidate],
    obstacles: Sequence[Detection],
    collectibles: Sequence[Detection],
    placement: Placement,
) -> Scene:
    next_id = IdAllocator()
    objects = [
        *_platform_objects(platforms, placement.enemy_platform_keys, next_id),
        *_obstacle_objects(obstacles, next_id),
        *_collectible_objects(collectibles, next_id),
    ]
    return Scene(
        image=ImageSize(w=image.w, h=image.h),
        objects=tuple(objects),
        spawns=Spawns(
            player=placement.player,
            exit=placement.exit,
            enemies=placement.enemies,
            pickups=placement.pickups,
        ),
        rules=(),
    )


def build_level_with_report(
    response: DetectionResponse, settings: BuildSettings | None = None
) -> tuple[Scene, BuildReport]:
    settings = settings or BuildSettings()
    extracted = extract_candidates(response.detections)
    candidates = add_ground(extracted.platforms)
    deduped = deduplicate_platforms(candidates)
    repair = repair_reachability(
        deduped,
        limits=settings.limits,
        max_iterations=settings.max_repair_iterations,
    )
    placement = place_entities(repair.platforms)
    scene = assemble_scene(
        response.image,
        repair.platforms,
        extracted.obstacles,
        extracted.collectibles,
        placement,
    )
    report = BuildReport(
        repair=repair,
        detections=len(response.detections),
        platform_candidates=len(candidates),
        platforms_after_dedupe=len(deduped),
        obstacles=len(extracted.obstacles),
        collectibles=len(extracted.collectibles),
    )
    logger.debug("Built level: %s", report.summary())
    if not report.converged:
        logger.warning(
            "Reachability repair left %d gap(s) after %d iterations",
            len(repair.residual),
            repair.iterations,
        )
    return scene, report


def build_level(
    response: DetectionResponse, settings: BuildSettings | None = None
) -> Scene:
    scene, _ = build_level_with_report(response, settings)
    return scene


__all__ = [
    "IdAllocator",
    "BuildReport",
    "assemble_scene",
    "build_level_with_report",
    "build_level",
]
