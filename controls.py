"""Semantic key events delivered to the game, independent of physical keys."""

from enum import Enum


class GameKey(Enum):
    PAUSE = "pause"
    JUMP = "jump"
    JUMP_ALT = "jump_alt"
    QUIT = "quit"
    QUIT_ALT = "quit_alt"
    RESTART = "restart"


JUMP_KEYS = frozenset({GameKey.JUMP, GameKey.JUMP_ALT})
QUIT_KEYS = frozenset({GameKey.QUIT, GameKey.QUIT_ALT})

# P and Space double as start keys on the menu and end screens.
START_KEYS = frozenset({GameKey.RESTART, GameKey.PAUSE, GameKey.JUMP})
