# ui.py
# Draw commands the game emits each tick; the console applies them.

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from config import BLACK, SKY_BAND_SIZE, SKY_COLORS, SKY_CYCLE, WHITE

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class ClearScreen:
    """Fill every cell with a blank glyph on ``bg``."""

    bg: Color = BLACK


@dataclass(frozen=True)
class SetCell:
    x: int
    y: int
    fg: Color
    bg: Color
    glyph: str


@dataclass(frozen=True)
class PrintText:
    x: int
    y: int
    text: str
    fg: Color = WHITE
    bg: Color = BLACK


@dataclass(frozen=True)
class PrintCentered:
    y: int
    text: str
    fg: Color = WHITE
    bg: Color = BLACK


DrawCommand = Union[ClearScreen, SetCell, PrintText, PrintCentered]


def sky_color(score: int) -> Color:
    """Background for the playing screen, darkening as the score climbs.

    Bands are [0,10], [11,20], [21,30], [31,40] and [41,49] of ``score % 50``.
    """
    modscore = score % SKY_CYCLE
    if modscore == 0:
        return SKY_COLORS[0]
    band = (modscore - 1) // SKY_BAND_SIZE
    return SKY_COLORS[min(band, len(SKY_COLORS) - 1)]
