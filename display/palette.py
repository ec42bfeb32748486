"""
Colour palettes for each display theme.
"""

from typing import Dict
from dataclasses import dataclass

from preferences.theme import Theme


@dataclass(frozen=True)
class Palette:
    """Colours used to draw the board and window for one theme."""
    background: str
    board: str
    grid: str
    x_color: str
    o_color: str
    highlight: str
    text: str


PALETTES: Dict[Theme, Palette] = {
    Theme.DARK: Palette(
        background='#1a1a2e',
        board='#16213e',
        grid='#0f3460',
        x_color='#f87171',
        o_color='#00d4ff',
        highlight='#ffd700',
        text='#ffffff',
    ),
    Theme.LIGHT: Palette(
        background='#f5f5f5',
        board='#ffffff',
        grid='#cbd5e1',
        x_color='#dc2626',
        o_color='#2563eb',
        highlight='#fde68a',
        text='#111827',
    ),
    Theme.RETRO: Palette(
        background='#000000',
        board='#001100',
        grid='#00aa00',
        x_color='#33ff33',
        o_color='#ffb000',
        highlight='#005500',
        text='#33ff33',
    ),
    Theme.OCEAN: Palette(
        background='#023e8a',
        board='#0077b6',
        grid='#90e0ef',
        x_color='#caf0f8',
        o_color='#ffd166',
        highlight='#00b4d8',
        text='#caf0f8',
    ),
    Theme.SUNSET: Palette(
        background='#3d1c4f',
        board='#6a2c70',
        grid='#f08a5d',
        x_color='#f9ed69',
        o_color='#ff6f91',
        highlight='#b83b5e',
        text='#f9ed69',
    ),
    Theme.FOREST: Palette(
        background='#1b2d1b',
        board='#2d4a2d',
        grid='#6b8f47',
        x_color='#e9c46a',
        o_color='#a7c957',
        highlight='#386641',
        text='#f2e8cf',
    ),
}


def palette_for(theme: Theme) -> Palette:
    return PALETTES[theme]
