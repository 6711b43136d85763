from __future__ import annotations

import json
import logging
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

from platformdirs import user_config_dir

try:
    from typing import Self
except ImportError:  # pragma: no cover - Python 3.10 fallback
    from typing_extensions import Self

from .level_constants import (
    MAX_HORIZONTAL_REACH,
    MAX_JUMP_HEIGHT,
    MAX_REPAIR_ITERATIONS,
)
from .reachability import TraversalLimits

APP_NAME = "PhotoPlatformer"

logger = logging.getLogger(__name__)

# Defaults for all configurable options
DEFAULT_CONFIG: Dict[str, Any] = {
    "physics": {
        "max_jump_height": MAX_JUMP_HEIGHT,
        "max_horizontal_reach": MAX_HORIZONTAL_REACH,
    },
    "repair": {"max_iterations": MAX_REPAIR_ITERATIONS, "strict": False},
    "preview": {"width": 960, "height": 540},
}


def user_config_path() -> Path:
    """Return the platform-specific config file path."""
    return Path(user_config_dir(APP_NAME, APP_NAME)) / "config.json"


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge dictionaries, with override winning on conflicts."""
    merged: Dict[str, Any] = deepcopy(base)
    for key, val in override.items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


def load_config(path: Path | None = None) -> Tuple[Dict[str, Any], Path]:
    """Load config from disk, falling back to defaults on errors."""
    config_path = path or user_config_path()
    config: Dict[str, Any] = deepcopy(DEFAULT_CONFIG)

    try:
        if config_path.exists():
            loaded = json.loads(config_path.read_text(encoding="utf-8"))
            if isinstance(loaded, dict):
                config = _deep_merge(config, loaded)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load config (%s): %s", config_path, exc)

    return config, config_path


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk, creating parent dirs as needed."""
    config_path = path or user_config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to save config (%s): %s", config_path, exc)


def _section(config: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = config.get(name, {})
    return section if isinstance(section, Mapping) else {}


def _positive_float(value: Any, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default



def _flag(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


@dataclass(frozen=True)
class BuildSettings:
    limits: TraversalLimits = field(default_factory=TraversalLimits)
    max_repair_iterations: int = MAX_REPAIR_ITERATIONS
    strict: bool = False

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Self:
        physics = _section(config, "physics")
        repair = _section(config, "repair")
        return cls(
            limits=TraversalLimits(
                max_jump_height=_positive_float(
                    physics.get("max_jump_height"), MAX_JUMP_HEIGHT
                ),
                max_horizontal_reach=_positive_float(
                    physics.get("max_horizontal_reach"), MAX_HORIZONTAL_REACH
                ),
            ),
            max_repair_iterations=_positive_int(
                repair.get("max_iterations"), MAX_REPAIR_ITERATIONS
            ),
            strict=_flag(repair.get("strict"), False),
        )


def preview_size(config: Mapping[str, Any]) -> tuple[int, int]:
    preview = _section(config, "preview")
    defaults = DEFAULT_CONFIG["preview"]
    return (
        _positive_int(preview.get("width"), defaults["width"]),
        _positive_int(preview.get("height"), defaults["height"]),
    )


__all__ = [
    "APP_NAME",
    "DEFAULT_CONFIG",
    "BuildSettings",
    "user_config_path",
    "load_config",
    "save_config",
    "preview_size",
]
