# entities_player.py
#
# The runner: moves one column per physics step and falls under gravity
# until it lands on the floor row.
# ------------------------------------------------------

from config import (
    FLOOR, JUMP_VELOCITY, MAX_FALL_VELOCITY, ORANGE1, PLAYER_COLUMN, PLAYER_GLYPH
)
from ui import SetCell


class Player:
    def __init__(self, x=PLAYER_COLUMN, y=FLOOR):
        self.x = x               # world column, grows with distance run
        self.y = y               # row, larger is lower on screen
        self.velocity = 0

    @property
    def on_floor(self):
        return self.y == FLOOR

    # ──────────────────────────────────────────────────────
    # Movement / physics
    # ──────────────────────────────────────────────────────
    def advance(self):
        """One physics step: gravity, vertical move, one column forward."""
        if self.velocity < MAX_FALL_VELOCITY and self.y < FLOOR:
            self.velocity += 1
        self.y += self.velocity
        self.x += 1
        if self.y > FLOOR:
            self.y = FLOOR
            self.velocity = 0

    def jump(self):
        # Only call while on the floor; airborne jumps are refused by the game.
        self.velocity = JUMP_VELOCITY

    # ──────────────────────────────────────────────────────
    # Draw
    # ──────────────────────────────────────────────────────
    def draw(self, bg):
        return SetCell(PLAYER_COLUMN, self.y, ORANGE1, bg, PLAYER_GLYPH)

    def __repr__(self):
        return f"Player(x={self.x}, y={self.y}, velocity={self.velocity})"
