"""
Game state for TicTacToe.
Tracks the board, current player, and the game result.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


BOARD_CELLS = 9


class Marker(Enum):
    """The two player markers."""
    X = "X"
    O = "O"

    def opposite(self) -> "Marker":
        """Get the opposite marker."""
        return Marker.O if self == Marker.X else Marker.X


# X always moves first
STARTING_PLAYER = Marker.X


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 9 cells, row-major (None means empty)
    - Current player
    - Game result (over / winner / winning line)
    """

    board: List[Optional[Marker]] = field(
        default_factory=lambda: [None] * BOARD_CELLS
    )

    current_player: Marker = STARTING_PLAYER

    game_over: bool = False
    winner: Optional[Marker] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def status(self) -> GameStatus:
        if self.winner is not None:
            return GameStatus.WON
        if self.game_over:
            return GameStatus.DRAWN
        return GameStatus.IN_PROGRESS

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            game_over=self.game_over,
            winner=self.winner,
            winning_line=self.winning_line,
        )

    def render_text(self) -> str:
        """Plain-text board with cell numbers 1-9 shown in empty cells."""
        rows = []
        for row in range(3):
            cells = []
            for col in range(3):
                index = row * 3 + col
                marker = self.board[index]
                cells.append(marker.value if marker else str(index + 1))
            rows.append(" " + " | ".join(cells))
        return "\n---+---+---\n".join(rows)
