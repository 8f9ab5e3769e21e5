# entities.py

# re‑export the runner and everything obstacle related

from entities_player import Player

from entities_obstacles import (
    Glyph,
    Tint,
    Obstacle,
    ObstacleGenerator,
    ObstacleField,
    partition_passed
)
