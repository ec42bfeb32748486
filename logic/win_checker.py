"""
Win checker for TicTacToe.
Checks if a player has completed a line or if the game is a draw.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

import numpy as np

from .game_state import GameState, Marker


# All possible winning lines, as cell indices.
# The order matters: the first completed line is the one reported.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

_LINE_INDEX = np.array(WIN_LINES, dtype=np.intp)

# Cell encoding for the vectorised scan; 0 is empty
_CODES = {None: 0, Marker.X: 1, Marker.O: 2}
_MARKERS = {1: Marker.X, 2: Marker.O}


@dataclass(frozen=True)
class WinResult:
    """A completed line and who owns it."""
    winner: Marker
    line: Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same marker in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, game_state: GameState) -> Optional[WinResult]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            WinResult for the first completed line in WIN_LINES order,
            or None if no line is complete.
        """
        codes = np.array([_CODES[cell] for cell in game_state.board], dtype=np.int8)
        lines = codes[_LINE_INDEX]

        complete = (lines[:, 0] != 0) & (lines == lines[:, :1]).all(axis=1)
        matches = np.flatnonzero(complete)
        if matches.size == 0:
            return None

        first = int(matches[0])
        return WinResult(
            winner=_MARKERS[int(lines[first, 0])],
            line=WIN_LINES[first],
        )

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if every cell is occupied.

        This does not look for a winner: callers check for a win first,
        so a full board with a completed line resolves as a win.
        """
        return all(cell is not None for cell in game_state.board)

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        result = self.check_winner(game_state)
        return result.line if result else None
