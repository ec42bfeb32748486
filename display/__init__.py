"""
Display module for TicTacToe.
Handles theme palettes, board drawing, and status text.
"""

from .palette import Palette, PALETTES, palette_for
from .board_renderer import BoardRenderer
from .messages import turn_message
