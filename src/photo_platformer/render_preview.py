"""Static debug picture of a built scene.

This is not the game renderer: it flattens the normalized scene onto a
pygame surface so a level can be eyeballed or attached to a bug report.
"""

from __future__ import annotations

from pathlib import Path

import pygame

from .colors import (
    ANCHOR_OUTLINE_COLOR,
    BACKGROUND_COLOR,
    BLACK,
    BRIDGE_COLOR,
    COIN_COLOR,
    COLLECTIBLE_COLOR,
    ENEMY_COLOR,
    EXIT_COLOR,
    GROUND_COLOR,
    HEALTH_COLOR,
    OBSTACLE_COLOR,
    PLATFORM_COLOR,
    PLAYER_COLOR,
)
from .models import Bounds, Scene, SceneObject, SpawnPoint

DEFAULT_PREVIEW_SIZE = (960, 540)

__all__ = ["DEFAULT_PREVIEW_SIZE", "render_scene_preview", "export_scene_preview"]


def _ensure_pygame_ready() -> None:
    if not pygame.get_init():
        pygame.init()


def _to_rect(bounds: Bounds, size: tuple[int, int]) -> pygame.Rect:
    width, height = size
    return pygame.Rect(
        int(round(bounds.x * width)),
        int(round(bounds.y * height)),
        max(1, int(round(bounds.w * width))),
        max(1, int(round(bounds.h * height))),
    )


def _to_point(spawn: SpawnPoint, size: tuple[int, int]) -> tuple[int, int]:
    width, height = size
    return int(round(spawn.x * width)), int(round(spawn.y * height))


def _platform_color(obj: SceneObject) -> tuple[int, int, int]:
    prefix = obj.id.split("_", 1)[0]
    if prefix == "ground":
        return GROUND_COLOR
    if prefix == "bridge":
        return BRIDGE_COLOR
    return PLATFORM_COLOR


def render_scene_preview(
    scene: Scene, size: tuple[int, int] = DEFAULT_PREVIEW_SIZE
) -> pygame.Surface:
    surface = pygame.Surface(size)
    surface.fill(BACKGROUND_COLOR)
    marker = max(3, min(size) // 60)

    for obj in scene.objects_of_type("obstacle"):
        pygame.draw.rect(surface, OBSTACLE_COLOR, _to_rect(obj.bounds, size))
    for obj in scene.objects_of_type("collectible"):
        pygame.draw.rect(surface, COLLECTIBLE_COLOR, _to_rect(obj.bounds, size), width=2)
    for obj in scene.platforms:
        rect = _to_rect(obj.bounds, size)
        pygame.draw.rect(surface, _platform_color(obj), rect)
        if obj.enemy_spawn_anchor:
            pygame.draw.rect(surface, ANCHOR_OUTLINE_COLOR, rect, width=2)

    spawns = scene.spawns
    for pickup in spawns.pickups:
        color = HEALTH_COLOR if pickup.type == "health" else COIN_COLOR
        pygame.draw.circle(surface, color, _to_point(pickup, size), marker)
    for enemy in spawns.enemies:
        pygame.draw.circle(surface, ENEMY_COLOR, _to_point(enemy, size), marker + 2)

    exit_rect = pygame.Rect(0, 0, marker * 3, marker * 4)
    exit_rect.midbottom = _to_point(spawns.exit, size)
    pygame.draw.rect(surface, EXIT_COLOR, exit_rect)
    pygame.draw.rect(surface, BLACK, exit_rect, width=1)

    pygame.draw.circle(surface, PLAYER_COLOR, _to_point(spawns.player, size), marker + 2)
    return surface


def _save_surface(surface: pygame.Surface, path: Path, *, scale: int = 1) -> None:
    if scale != 1:
        width, height = surface.get_size()
        surface = pygame.transform.scale(surface, (width * scale, height * scale))
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(surface, str(path))


def export_scene_preview(
    scene: Scene,
    path: Path,
    *,
    size: tuple[int, int] = DEFAULT_PREVIEW_SIZE,
    scale: int = 1,
) -> Path:
    _ensure_pygame_ready()
    _save_surface(render_scene_preview(scene, size), path, scale=scale)
    return path
