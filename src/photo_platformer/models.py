"""Dataclasses for detection input, platform candidates and the output scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Mapping

try:
    from typing import Self
except ImportError:  # pragma: no cover - Python 3.10 fallback
    from typing_extensions import Self

from .level_constants import SCENE_VERSION


class Category(str, Enum):
    FURNITURE = "furniture"
    FOOD = "food"
    PLANT = "plant"
    ELECTRIC = "electric"
    OTHER = "other"

    @property
    def is_hazardous(self) -> bool:
        """Plants and electrics count as hazardous terrain for enemy anchors."""
        return self in (Category.PLANT, Category.ELECTRIC)


ObjectType = Literal["platform", "obstacle", "collectible", "hazard"]


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle in normalized image coordinates (y grows down)."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            w=float(data["w"]),
            h=float(data["h"]),
        )


@dataclass(frozen=True)
class ImageSize:
    w: float
    h: float

    def to_dict(self) -> dict[str, float]:
        return {"w": self.w, "h": self.h}


@dataclass(frozen=True)
class Detection:
    """One labeled box reported by the perception service."""

    label: str
    category: Category
    confidence: float
    bounds: Bounds

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            label=str(data["label"]),
            category=Category(data["category"]),
            confidence=float(data["confidence"]),
            bounds=Bounds.from_dict(data["bounds_normalized"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "category": self.category.value,
            "confidence": self.confidence,
            "bounds_normalized": self.bounds.to_dict(),
        }


@dataclass(frozen=True)
class DetectionResponse:
    image: ImageSize
    detections: tuple[Detection, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        image = data["image"]
        return cls(
            image=ImageSize(w=image["w"], h=image["h"]),
            detections=tuple(Detection.from_dict(item) for item in data["detections"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "image": self.image.to_dict(),
            "detections": [det.to_dict() for det in self.detections],
        }


@dataclass(frozen=True)
class PlatformCandidate:
    """A provisional walkable surface.

    ``key`` is assigned when the candidate is created and never changes; it is
    the only thing later stages use to refer back to a candidate.
    """

    key: str
    label: str
    category: Category
    confidence: float
    bounds: Bounds
    is_bridge: bool = False
    is_ground: bool = False
    enemy_anchor: bool = False

    @property
    def id_prefix(self) -> str:
        if self.is_ground:
            return "ground"
        if self.is_bridge:
            return "bridge"
        return "plat"


@dataclass(frozen=True)
class SceneObject:
    id: str
    type: ObjectType
    label: str
    confidence: float
    bounds: Bounds
    surface_type: str | None = None
    category: Category | None = None
    enemy_spawn_anchor: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "label": self.label,
            "confidence": self.confidence,
            "bounds_normalized": self.bounds.to_dict(),
        }
        if self.surface_type is not None:
            payload["surface_type"] = self.surface_type
        if self.category is not None:
            payload["category"] = self.category.value
        if self.enemy_spawn_anchor is not None:
            payload["enemy_spawn_anchor"] = self.enemy_spawn_anchor
        return payload


@dataclass(frozen=True)
class SpawnPoint:
    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class EnemySpawn(SpawnPoint):
    type: str = "walker"

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "type": self.type}


@dataclass(frozen=True)
class PickupSpawn(SpawnPoint):
    type: str = "coin"

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "type": self.type}


@dataclass(frozen=True)
class Spawns:
    player: SpawnPoint
    exit: SpawnPoint
    enemies: tuple[EnemySpawn, ...] = ()
    pickups: tuple[PickupSpawn, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "player": self.player.to_dict(),
            "exit": self.exit.to_dict(),
            "enemies": [enemy.to_dict() for enemy in self.enemies],
            "pickups": [pickup.to_dict() for pickup in self.pickups],
        }


@dataclass(frozen=True)
class Scene:
    """Versioned level document handed to the runtime as a snapshot."""

    image: ImageSize
    objects: tuple[SceneObject, ...]
    spawns: Spawns
    rules: tuple[Any, ...] = ()
    version: int = SCENE_VERSION

    def objects_of_type(self, object_type: ObjectType) -> list[SceneObject]:
        return [obj for obj in self.objects if obj.type == object_type]

    @property
    def platforms(self) -> list[SceneObject]:
        return self.objects_of_type("platform")

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "image": self.image.to_dict(),
            "objects": [obj.to_dict() for obj in self.objects],
            "spawns": self.spawns.to_dict(),
            "rules": list(self.rules),
        }


@dataclass
class ExtractedObjects:
    """Extractor output: platform candidates plus the routed-away detections."""

    platforms: list[PlatformCandidate] = field(default_factory=list)
    obstacles: list[Detection] = field(default_factory=list)
    collectibles: list[Detection] = field(default_factory=list)


__all__ = [
    "Category",
    "ObjectType",
    "Bounds",
    "ImageSize",
    "Detection",
    "DetectionResponse",
    "PlatformCandidate",
    "SceneObject",
    "SpawnPoint",
    "EnemySpawn",
    "PickupSpawn",
    "Spawns",
    "Scene",
    "ExtractedObjects",
]
