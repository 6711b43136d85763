"""Deterministic player, exit, pickup and enemy placement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .geometry import clamp_range
from .level_constants import (
    ENTITY_OFFSET_Y,
    ENTITY_X_RANGE,
    EXIT_EDGE_INSET,
    EXIT_X_RANGE,
    FALLBACK_PICKUP_XS,
    MAX_ENEMIES,
    MAX_PICKUPS,
    MAX_PICKUPS_WITH_BRIDGES,
    MIN_ENEMY_PLATFORM_WIDTH,
    MIN_PICKUPS,
    PLAYER_SPAWN_X,
)
from .models import EnemySpawn, PickupSpawn, PlatformCandidate, SpawnPoint


@dataclass(frozen=True)
class Placement:
    player: SpawnPoint
    exit: SpawnPoint
    pickups: tuple[PickupSpawn, ...]
    enemies: tuple[EnemySpawn, ...]
    # Keys of the platforms chosen for enemies, in enemy order.
    enemy_platform_keys: tuple[str, ...]


def _standing_y(platform: PlatformCandidate) -> float:
    return platform.bounds.y - ENTITY_OFFSET_Y


def _center_x(platform: PlatformCandidate) -> float:
    return clamp_range(platform.bounds.center_x, ENTITY_X_RANGE)


def _is_detected(platform: PlatformCandidate) -> bool:
    return not platform.is_ground and not platform.is_bridge


def find_ground(platforms: Sequence[PlatformCandidate]) -> PlatformCandidate:
    """The ground platform, or the first platform if the ground is missing."""
    for platform in platforms:
        if platform.is_ground:
            return platform
    return platforms[0]


def find_highest(platforms: Sequence[PlatformCandidate]) -> PlatformCandidate:
    return min(platforms, key=lambda platform: platform.bounds.y)


def place_player(ground: PlatformCandidate) -> SpawnPoint:
    return SpawnPoint(x=PLAYER_SPAWN_X, y=_standing_y(ground))


def place_exit(platforms: Sequence[PlatformCandidate]) -> SpawnPoint:
    highest = find_highest(platforms)
    return SpawnPoint(
        x=clamp_range(highest.bounds.right - EXIT_EDGE_INSET, EXIT_X_RANGE),
        y=_standing_y(highest),
    )


def place_pickups(
    platforms: Sequence[PlatformCandidate], ground: PlatformCandidate
) -> list[PickupSpawn]:
    pickups: list[PickupSpawn] = []
    for platform in [p for p in platforms if _is_detected(p)][:MAX_PICKUPS]:
        pickups.append(
            PickupSpawn(
                x=_center_x(platform),
                y=_standing_y(platform),
                type="coin" if pickups else "health",
            )
        )

    if len(pickups) < MIN_PICKUPS:
        for platform in platforms:
            if len(pickups) >= MAX_PICKUPS_WITH_BRIDGES:
                break
            if platform.is_bridge:
                pickups.append(
                    PickupSpawn(x=_center_x(platform), y=_standing_y(platform))
                )

    if len(pickups) < MIN_PICKUPS:
        for x in FALLBACK_PICKUP_XS:
            pickups.append(PickupSpawn(x=x, y=_standing_y(ground)))
    return pickups


def choose_enemy_platforms(
    platforms: Sequence[PlatformCandidate],
) -> list[PlatformCandidate]:
    wide = [
        platform
        for platform in platforms
        if _is_detected(platform) and platform.bounds.w > MIN_ENEMY_PLATFORM_WIDTH
    ]
    return wide[:MAX_ENEMIES]


def place_entities(platforms: Sequence[PlatformCandidate]) -> Placement:
    """Place everything on the final, repaired and capped platform list."""
    if not platforms:
        raise ValueError("place_entities needs at least one platform")
    ground = find_ground(platforms)
    enemy_platforms = choose_enemy_platforms(platforms)
    return Placement(
        player=place_player(ground),
        exit=place_exit(platforms),
        pickups=tuple(place_pickups(platforms, ground)),
        enemies=tuple(
            EnemySpawn(x=_center_x(platform), y=_standing_y(platform), type="walker")
            for platform in enemy_platforms
        ),
        enemy_platform_keys=tuple(platform.key for platform in enemy_platforms),
    )


__all__ = [
    "Placement",
    "find_ground",
    "find_highest",
    "place_player",
    "place_exit",
    "place_pickups",
    "choose_enemy_platforms",
    "place_entities",
]
