"""Level synthesis constants (all values are normalized image fractions)."""

from __future__ import annotations

# --- Traversal limits, calibrated against the runtime physics ---
MAX_JUMP_HEIGHT = 0.25  # runtime jump height fraction is 0.35
MAX_HORIZONTAL_REACH = 0.40
MAX_REPAIR_ITERATIONS = 10

# --- Platform surface extraction ---
PLATFORM_X_RANGE = (0.0, 0.95)
PLATFORM_Y_RANGE = (0.05, 0.90)
PLATFORM_W_RANGE = (0.05, 0.90)
PLATFORM_THICKNESS = 0.03
MIN_PLATFORM_WIDTH = 0.08

# --- Ground ---
GROUND_Y = 0.92
GROUND_CONFIDENCE = 1.0

# --- Dedup and caps ---
DEDUP_Y_TOLERANCE = 0.05
MAX_PLATFORMS = 10
MAX_TOTAL_PLATFORMS = 12
MAX_OBSTACLES = 4
MAX_COLLECTIBLES = 5

# --- Synthesized platforms ---
BRIDGE_WIDTH = 0.15
BRIDGE_X_RANGE = (0.02, 0.85)

# --- Entity placement ---
ENTITY_OFFSET_Y = 0.06
PLAYER_SPAWN_X = 0.08
EXIT_X_RANGE = (0.7, 0.95)
EXIT_EDGE_INSET = 0.05
ENTITY_X_RANGE = (0.05, 0.95)
MAX_PICKUPS = 5
MAX_PICKUPS_WITH_BRIDGES = 4
MIN_PICKUPS = 3
FALLBACK_PICKUP_XS = (0.3, 0.5)
MAX_ENEMIES = 2
MIN_ENEMY_PLATFORM_WIDTH = 0.15

SCENE_VERSION = 1

__all__ = [
    "MAX_JUMP_HEIGHT",
    "MAX_HORIZONTAL_REACH",
    "MAX_REPAIR_ITERATIONS",
    "PLATFORM_X_RANGE",
    "PLATFORM_Y_RANGE",
    "PLATFORM_W_RANGE",
    "PLATFORM_THICKNESS",
    "MIN_PLATFORM_WIDTH",
    "GROUND_Y",
    "GROUND_CONFIDENCE",
    "DEDUP_Y_TOLERANCE",
    "MAX_PLATFORMS",
    "MAX_TOTAL_PLATFORMS",
    "MAX_OBSTACLES",
    "MAX_COLLECTIBLES",
    "BRIDGE_WIDTH",
    "BRIDGE_X_RANGE",
    "ENTITY_OFFSET_Y",
    "PLAYER_SPAWN_X",
    "EXIT_X_RANGE",
    "EXIT_EDGE_INSET",
    "ENTITY_X_RANGE",
    "MAX_PICKUPS",
    "MAX_PICKUPS_WITH_BRIDGES",
    "MIN_PICKUPS",
    "FALLBACK_PICKUP_XS",
    "MAX_ENEMIES",
    "MIN_ENEMY_PLATFORM_WIDTH",
    "SCENE_VERSION",
]
