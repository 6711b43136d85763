"""JSON boundary: detection responses in, scene documents out."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from .models import DetectionResponse, Scene


class SceneInputError(ValueError):
    """The detection payload cannot be turned into a ``DetectionResponse``."""


def parse_detection_response(payload: Any) -> DetectionResponse:
    if not isinstance(payload, dict):
        raise SceneInputError("Detection payload must be a JSON object")
    try:
        return DetectionResponse.from_dict(payload)
    except KeyError as exc:
        raise SceneInputError(f"Missing field in detection payload: {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise SceneInputError(f"Invalid detection payload: {exc}") from exc


def read_detection_response(source: str | Path) -> DetectionResponse:
    """Read a detection response from a file path, or stdin for ``-``."""
    try:
        if str(source) == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SceneInputError(f"Detection payload is not valid UTF-8: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SceneInputError(f"Detection payload is not valid JSON: {exc}") from exc
    return parse_detection_response(payload)


def scene_to_json(scene: Scene, *, indent: int | None = 2) -> str:
    return json.dumps(scene.to_dict(), indent=indent)


def write_scene(scene: Scene, path: Path, *, indent: int | None = 2) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(scene_to_json(scene, indent=indent) + "\n", encoding="utf-8")


__all__ = [
    "SceneInputError",
    "parse_detection_response",
    "read_detection_response",
    "scene_to_json",
    "write_scene",
]
