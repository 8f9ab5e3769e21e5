# entities_obstacles.py

from __future__ import annotations

import math
from enum import Enum
from typing import Iterator, List, Optional, Tuple

import numpy as np

from config import (
    FLOOR, GREEN, MAX_OBSTACLE_RISE, MIN_OBSTACLE_SPEED, PLAYER_COLUMN, RED,
    RETIRE_DISTANCE, SCREEN_WIDTH, SPAWN_LOOKAHEAD, SPEED_PER_POINT
)
from entities_player import Player
from logging_utils import log_debug
from ui import Color, SetCell


class Glyph(Enum):
    TALL = "{"
    LOW = "f"


class Tint(Enum):
    HAZARD = RED
    SAFE = GREEN


class Obstacle:
    def __init__(self, x, y, velocity):
        self.x = x                     # world column
        self.y = y
        self.velocity = max(0.0, velocity)
        if self.velocity > 0:
            self.glyph, self.tint = Glyph.TALL, Tint.HAZARD
        else:
            self.glyph, self.tint = Glyph.LOW, Tint.SAFE

    def advance(self):
        self.x -= math.floor(self.velocity)

    def screen_column(self, player_x):
        return self.x - player_x

    def draw(self, player_x, bg):
        return SetCell(self.screen_column(player_x), self.y, self.tint.value, bg, self.glyph.value)

    def hits(self, player):
        """Exact alignment with the player's fixed column and row."""
        return player.x == self.x - PLAYER_COLUMN and player.y == self.y

    def __repr__(self):
        return (f"Obstacle(x={self.x}, y={self.y}, velocity={self.velocity:.2f}, "
                f"glyph={self.glyph.name})")


class ObstacleGenerator:
    """Spawn obstacles with random offset, height and approach speed.

    The upper bound of the speed draw grows with the score; a negative draw
    yields a stationary obstacle sitting on the floor.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def spawn(self, spawn_x: int, current_score: int) -> Obstacle:
        x_diff = int(self.rng.integers(0, SCREEN_WIDTH // 2))
        height = int(self.rng.integers(FLOOR - MAX_OBSTACLE_RISE, FLOOR + 1))
        velocity = float(self.rng.uniform(MIN_OBSTACLE_SPEED, current_score * SPEED_PER_POINT))
        if velocity < 0.0:
            velocity = 0.0
            height = FLOOR
        obstacle = Obstacle(spawn_x + x_diff, height, velocity)
        log_debug(f"ObstacleGenerator.spawn score={current_score} {obstacle!r}")
        return obstacle


def partition_passed(obstacles: List[Obstacle], player_x: int) -> Tuple[List[Obstacle], List[Obstacle]]:
    """Split into (kept, retired); retired ones lie RETIRE_DISTANCE or more behind."""
    limit = player_x - RETIRE_DISTANCE
    kept = [o for o in obstacles if o.x > limit]
    retired = [o for o in obstacles if o.x <= limit]
    return kept, retired


class ObstacleField:
    """Ordered obstacles, oldest first."""

    def __init__(self, generator: Optional[ObstacleGenerator] = None) -> None:
        self.generator = generator if generator is not None else ObstacleGenerator()
        self.obstacles: List[Obstacle] = []

    def __len__(self) -> int:
        return len(self.obstacles)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self.obstacles)

    def reset(self) -> None:
        self.obstacles = [self.generator.spawn(SCREEN_WIDTH, 0)]

    def advance(self, player: Player, bg: Color) -> List[SetCell]:
        """Move every obstacle toward the player and return their draw commands."""
        commands = []
        for o in self.obstacles:
            o.advance()
            commands.append(o.draw(player.x, bg))
        return commands

    def collides_with(self, player: Player) -> bool:
        hit = False
        for o in self.obstacles:
            if o.hits(player):
                log_debug(f"ObstacleField.collides_with {player!r} {o!r}")
                hit = True
        return hit

    def retire_passed(self, player: Player) -> int:
        self.obstacles, retired = partition_passed(self.obstacles, player.x)
        if retired:
            log_debug(f"ObstacleField.retire_passed count={len(retired)}")
        return len(retired)

    def replenish(self, player: Player, score: int) -> Optional[Obstacle]:
        """Append one obstacle when the newest one is inside the lookahead."""
        assert self.obstacles, "obstacle field ran dry"
        if self.obstacles[-1].x - player.x < SPAWN_LOOKAHEAD:
            obstacle = self.generator.spawn(player.x + SCREEN_WIDTH, score)
            self.obstacles.append(obstacle)
            return obstacle
        return None
