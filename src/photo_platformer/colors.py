from __future__ import annotations

# Basic palette
WHITE: tuple[int, int, int] = (255, 255, 255)
BLACK: tuple[int, int, int] = (0, 0, 0)
BLUE: tuple[int, int, int] = (0, 0, 255)
YELLOW: tuple[int, int, int] = (255, 255, 0)

# Preview colors
BACKGROUND_COLOR: tuple[int, int, int] = (44, 60, 75)
GROUND_COLOR: tuple[int, int, int] = (140, 140, 134)
PLATFORM_COLOR: tuple[int, int, int] = (132, 104, 80)
BRIDGE_COLOR: tuple[int, int, int] = (110, 200, 255)
ANCHOR_OUTLINE_COLOR: tuple[int, int, int] = (220, 60, 60)
OBSTACLE_COLOR: tuple[int, int, int] = (110, 50, 50)
COLLECTIBLE_COLOR: tuple[int, int, int] = (32, 160, 72)
PLAYER_COLOR: tuple[int, int, int] = BLUE
EXIT_COLOR: tuple[int, int, int] = WHITE
ENEMY_COLOR: tuple[int, int, int] = (200, 80, 80)
COIN_COLOR: tuple[int, int, int] = YELLOW
HEALTH_COLOR: tuple[int, int, int] = (255, 110, 180)
