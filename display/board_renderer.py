"""
Board renderer for TicTacToe.
Draws a GameState onto a PIL image and maps clicks back to cells.
"""

from typing import Optional, Tuple

from PIL import Image, ImageDraw

from logic.game_state import GameState, Marker
from preferences.theme import Theme
from .palette import Palette, palette_for


class BoardRenderer:
    """
    Draws the 3x3 board.

    The image is square: `size` pixels, with `padding` pixels of background
    around the grid. Cells are laid out row-major, index 0 top-left.
    """

    GRID_WIDTH = 4
    MARKER_WIDTH = 10

    def __init__(self, theme: Theme = Theme.DARK, size: int = 360, padding: int = 20):
        self.size = size
        self.padding = padding
        self.cell_size = (size - 2 * padding) / 3
        self.palette: Palette = palette_for(theme)

    def set_theme(self, theme: Theme):
        self.palette = palette_for(theme)

    def cell_bounds(self, index: int) -> Tuple[int, int, int, int]:
        """(left, top, right, bottom) pixel box of a cell."""
        row, col = divmod(index, 3)
        left = self.padding + col * self.cell_size
        top = self.padding + row * self.cell_size
        return (
            int(left),
            int(top),
            int(left + self.cell_size),
            int(top + self.cell_size),
        )

    def cell_at(self, x: float, y: float) -> Optional[int]:
        """
        Cell index under a pixel position.

        Returns:
            0-8, or None if the point is outside the grid.
        """
        grid_end = self.size - self.padding
        if not (self.padding <= x < grid_end and self.padding <= y < grid_end):
            return None

        col = min(int((x - self.padding) // self.cell_size), 2)
        row = min(int((y - self.padding) // self.cell_size), 2)
        return row * 3 + col

    def render(self, state: GameState) -> Image.Image:
        """Draw the board for the given state."""
        image = Image.new("RGB", (self.size, self.size), self.palette.background)
        draw = ImageDraw.Draw(image)

        grid_start = self.padding
        grid_end = self.size - self.padding
        draw.rectangle([grid_start, grid_start, grid_end, grid_end], fill=self.palette.board)

        # Winning cells go under the grid lines and markers
        if state.winning_line:
            for index in state.winning_line:
                draw.rectangle(self.cell_bounds(index), fill=self.palette.highlight)

        for i in range(1, 3):
            offset = int(self.padding + i * self.cell_size)
            draw.line([offset, grid_start, offset, grid_end],
                      fill=self.palette.grid, width=self.GRID_WIDTH)
            draw.line([grid_start, offset, grid_end, offset],
                      fill=self.palette.grid, width=self.GRID_WIDTH)

        for index, marker in enumerate(state.board):
            if marker is not None:
                self._draw_marker(draw, index, marker)

        return image

    def _draw_marker(self, draw: ImageDraw.ImageDraw, index: int, marker: Marker):
        left, top, right, bottom = self.cell_bounds(index)
        inset = int(self.cell_size * 0.22)
        box = (left + inset, top + inset, right - inset, bottom - inset)

        if marker == Marker.X:
            draw.line([box[0], box[1], box[2], box[3]],
                      fill=self.palette.x_color, width=self.MARKER_WIDTH)
            draw.line([box[0], box[3], box[2], box[1]],
                      fill=self.palette.x_color, width=self.MARKER_WIDTH)
        else:
            draw.ellipse(box, outline=self.palette.o_color, width=self.MARKER_WIDTH)
