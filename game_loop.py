# game_loop.py

from collections import deque

import numpy as np
import pygame

from config import (
    BLACK, CELL_SIZE, FULLSCREEN, GUTTER, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE,
    settings_data
)
from console import Console
from controls import GameKey
from game import Game
from logging_utils import log_debug

KEY_BINDINGS = {
    pygame.K_p: GameKey.PAUSE,
    pygame.K_SPACE: GameKey.JUMP,
    pygame.K_UP: GameKey.JUMP_ALT,
    pygame.K_ESCAPE: GameKey.QUIT,
    pygame.K_q: GameKey.QUIT_ALT,
    pygame.K_c: GameKey.QUIT_ALT,
    pygame.K_r: GameKey.RESTART,
    pygame.K_RETURN: GameKey.RESTART,
}

CONSOLE_SIZE = (SCREEN_WIDTH * CELL_SIZE, SCREEN_HEIGHT * CELL_SIZE)


def translate_key(key):
    return KEY_BINDINGS.get(key)


def process_events(pending):
    """Queue bound key presses; return False once the window is closed."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            game_key = translate_key(event.key)
            if game_key is not None:
                pending.append(game_key)
    return True


def update_game(game, console, pending, elapsed_ms):
    # The game sees at most one key per tick; the rest wait their turn.
    key = pending.popleft() if pending else None
    result = game.tick(key, elapsed_ms)
    console.apply(result.commands)
    return not result.quit


def render_console(console, surf, font, glyph_cache):
    bg = np.repeat(np.repeat(console.bg, CELL_SIZE, axis=0), CELL_SIZE, axis=1)
    surf.blit(pygame.surfarray.make_surface(bg.swapaxes(0, 1)), (0, 0))
    for x, y, glyph, fg in console.occupied_cells():
        image = glyph_cache.get((glyph, fg))
        if image is None:
            image = font.render(glyph, True, fg)
            glyph_cache[(glyph, fg)] = image
        surf.blit(image, (x * CELL_SIZE + (CELL_SIZE - image.get_width()) // 2,
                          y * CELL_SIZE + (CELL_SIZE - image.get_height()) // 2))


def fit_to_window(window_size):
    """Scale factor and offset that fit the console inside the window gutter."""
    w, h = window_size
    scale = min((w - 2 * GUTTER) / CONSOLE_SIZE[0], (h - 2 * GUTTER) / CONSOLE_SIZE[1])
    scale = max(scale, 0.1)
    size = (int(CONSOLE_SIZE[0] * scale), int(CONSOLE_SIZE[1] * scale))
    return size, ((w - size[0]) // 2, (h - size[1]) // 2)


def render_game(console, screen, console_surface, font, glyph_cache):
    render_console(console, console_surface, font, glyph_cache)
    size, offset = fit_to_window(screen.get_size())
    screen.fill(BLACK)
    if size == CONSOLE_SIZE:
        screen.blit(console_surface, offset)
    else:
        screen.blit(pygame.transform.smoothscale(console_surface, size), offset)
    pygame.display.flip()


def open_window():
    try:
        if FULLSCREEN:
            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            screen = pygame.display.set_mode(
                (CONSOLE_SIZE[0] + 2 * GUTTER, CONSOLE_SIZE[1] + 2 * GUTTER),
                pygame.RESIZABLE,
            )
    except pygame.error as exc:
        log_debug(f"open_window failed: {exc}")
        raise
    pygame.display.set_caption(WINDOW_TITLE)
    return screen


def run_game():
    pygame.init()
    try:
        screen = open_window()
        font = pygame.font.SysFont("couriernew,dejavusansmono,monospace", CELL_SIZE, bold=True)
        clock = pygame.time.Clock()
        console_surface = pygame.Surface(CONSOLE_SIZE)
        console = Console()
        game = Game()
        pending = deque()
        glyph_cache = {}
        running = True

        while running:
            # Re-read FPS each frame
            elapsed_ms = clock.tick(settings_data["FPS"])
            running = process_events(pending)
            if running:
                running = update_game(game, console, pending, elapsed_ms)
            render_game(console, screen, console_surface, font, glyph_cache)
    finally:
        pygame.quit()


if __name__ == "__main__":
    run_game()
