"""Cell grid the game draws into; the pygame loop blits it every frame."""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

import numpy as np

from config import BLACK, SCREEN_HEIGHT, SCREEN_WIDTH, WHITE
from ui import ClearScreen, Color, DrawCommand, PrintCentered, PrintText, SetCell

BLANK = ord(" ")


class Console:
    """Glyph codes plus foreground and background RGB planes, row major."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.glyphs = np.full((height, width), BLANK, dtype=np.int32)
        self.fg = np.zeros((height, width, 3), dtype=np.uint8)
        self.bg = np.zeros((height, width, 3), dtype=np.uint8)
        self.cls(BLACK)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cls(self, bg: Color = BLACK) -> None:
        self.glyphs.fill(BLANK)
        self.fg[:] = WHITE
        self.bg[:] = bg

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str) -> None:
        # Off-grid cells (obstacles still far ahead) are dropped.
        if not self.in_bounds(x, y):
            return
        self.glyphs[y, x] = ord(glyph)
        self.fg[y, x] = fg
        self.bg[y, x] = bg

    def print(self, x: int, y: int, text: str, fg: Color = WHITE, bg: Color = BLACK) -> None:
        for offset, char in enumerate(text):
            self.set(x + offset, y, fg, bg, char)

    def print_centered(self, y: int, text: str, fg: Color = WHITE, bg: Color = BLACK) -> None:
        self.print(self.width // 2 - len(text) // 2, y, text, fg, bg)

    def apply(self, commands: Iterable[DrawCommand]) -> None:
        for command in commands:
            if isinstance(command, ClearScreen):
                self.cls(command.bg)
            elif isinstance(command, SetCell):
                self.set(command.x, command.y, command.fg, command.bg, command.glyph)
            elif isinstance(command, PrintText):
                self.print(command.x, command.y, command.text, command.fg, command.bg)
            elif isinstance(command, PrintCentered):
                self.print_centered(command.y, command.text, command.fg, command.bg)
            else:
                raise TypeError(f"Unknown draw command: {command!r}")

    def glyph_at(self, x: int, y: int) -> str:
        return chr(self.glyphs[y, x])

    def row_text(self, y: int) -> str:
        return "".join(chr(code) for code in self.glyphs[y])

    def occupied_cells(self) -> Iterator[Tuple[int, int, str, Color]]:
        """Yield (x, y, glyph, fg) for every non-blank cell."""
        ys, xs = np.nonzero(self.glyphs != BLANK)
        for y, x in zip(ys.tolist(), xs.tolist()):
            yield x, y, chr(self.glyphs[y, x]), tuple(int(c) for c in self.fg[y, x])
