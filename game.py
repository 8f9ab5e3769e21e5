# game.py
# ──────────────────────────────────────────────────────────────
# Game state machine
# • Menu → Playing → Paused / Ended, one handler per mode
# • Handlers read one optional key and the frame time, mutate the
#   session and return the draw commands for this tick
# ──────────────────────────────────────────────────────────────

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from config import (
    BLACK, DARK_GREEN, FLOOR, FLOOR_GLYPH, ORANGE1, PLAYER_COLUMN, SCREEN_WIDTH,
    WINDOW_TITLE
)
from controls import GameKey, JUMP_KEYS, QUIT_KEYS, START_KEYS
from entities import ObstacleField, ObstacleGenerator, Player
from logging_utils import log_debug
from managers import FrameClock
from ui import ClearScreen, DrawCommand, PrintCentered, PrintText, SetCell, sky_color


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    ENDED = "ended"


@dataclass
class TickResult:
    commands: List[DrawCommand] = field(default_factory=list)
    quit: bool = False


class GameSession:
    """Everything one playthrough owns; overwritten on every (re)start."""

    def __init__(self, generator: Optional[ObstacleGenerator] = None) -> None:
        self.player = Player()
        self.field = ObstacleField(generator)
        self.clock = FrameClock()
        self.mode = GameMode.MENU
        self.score = 0
        self.field.reset()

    @property
    def obstacles(self):
        return self.field.obstacles

    @property
    def frame_accumulator(self) -> float:
        return self.clock.accumulator

    def set_mode(self, mode: GameMode) -> None:
        if mode is not self.mode:
            log_debug(f"GameSession.set_mode {self.mode.value} -> {mode.value} score={self.score}")
        self.mode = mode

    def restart(self) -> None:
        """Start and restart: fresh player, one obstacle, zero score."""
        log_debug("GameSession.restart")
        self.player = Player(PLAYER_COLUMN, FLOOR)
        self.clock.reset()
        self.field.reset()
        self.score = 0
        self.set_mode(GameMode.PLAYING)


# ──────────────────────────────────────────────────────────────
# Mode handlers
# ──────────────────────────────────────────────────────────────
def main_menu(session: GameSession, key: Optional[GameKey], elapsed_ms: float) -> TickResult:
    result = TickResult([
        ClearScreen(BLACK),
        PrintCentered(5, f"Welcome to {WINDOW_TITLE}"),
        PrintCentered(8, "( P || Space ) Play Game"),
        PrintCentered(10, "( Q || Esc ) Quit Game"),
    ])
    if key in START_KEYS:
        session.restart()
    elif key in QUIT_KEYS:
        result.quit = True
    return result


def play(session: GameSession, key: Optional[GameKey], elapsed_ms: float) -> TickResult:
    player = session.player
    bg = sky_color(session.score)
    result = TickResult([ClearScreen(bg)])
    result.commands.extend(
        SetCell(i, FLOOR + 1, DARK_GREEN, bg, FLOOR_GLYPH) for i in range(SCREEN_WIDTH)
    )

    if session.clock.tick(elapsed_ms):
        player.advance()

    if key is GameKey.PAUSE:
        session.set_mode(GameMode.PAUSED)
    elif key in JUMP_KEYS:
        if player.on_floor:
            player.jump()
    elif key in QUIT_KEYS:
        result.quit = True

    result.commands.append(player.draw(bg))

    # All obstacles move and draw before any collision or retirement.
    result.commands.extend(session.field.advance(player, bg))
    if session.field.collides_with(player):
        session.set_mode(GameMode.ENDED)

    session.score += session.field.retire_passed(player)
    live = len(session.field)
    session.field.replenish(player, session.score)

    result.commands.append(PrintText(0, 1, f"Score: {session.score}", ORANGE1, bg))
    result.commands.append(PrintText(0, 2, f"Obstacles: {live}", ORANGE1, bg))
    return result


def _halted_screen(session: GameSession, key: Optional[GameKey], title: str, summary: str,
                   resume_label: str) -> TickResult:
    result = TickResult([
        ClearScreen(BLACK),
        PrintCentered(3, title),
        PrintCentered(6, summary),
        PrintCentered(8, f"( P || Space ) {resume_label}"),
        PrintCentered(10, "( Q || Esc ) Quit Game"),
    ])
    if key in START_KEYS:
        session.restart()
    elif key in QUIT_KEYS:
        result.quit = True
    return result


def dead(session: GameSession, key: Optional[GameKey], elapsed_ms: float) -> TickResult:
    return _halted_screen(session, key, "DEAD", f"You earned {session.score} points", "Play Again")


def pause(session: GameSession, key: Optional[GameKey], elapsed_ms: float) -> TickResult:
    # Pausing ends the run: any start key begins a fresh session.
    return _halted_screen(session, key, "PAUSED", f"Score: {session.score}", "New Game")


Handler = Callable[[GameSession, Optional[GameKey], float], TickResult]

HANDLERS: Dict[GameMode, Handler] = {
    GameMode.MENU: main_menu,
    GameMode.PLAYING: play,
    GameMode.PAUSED: pause,
    GameMode.ENDED: dead,
}


# ──────────────────────────────────────────────────────────────
# Main Game class
# ──────────────────────────────────────────────────────────────
class Game:
    def __init__(self, generator: Optional[ObstacleGenerator] = None) -> None:
        log_debug("Game.__init__")
        self.session = GameSession(generator)
        self.quitting = False

    @property
    def mode(self) -> GameMode:
        return self.session.mode

    def tick(self, key: Optional[GameKey], elapsed_ms: float) -> TickResult:
        result = HANDLERS[self.session.mode](self.session, key, elapsed_ms)
        if result.quit:
            log_debug(f"Game.tick quit requested in {self.session.mode.value}")
            self.quitting = True
        return result
