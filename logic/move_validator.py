"""
Move validator for TicTacToe.
Decides whether a move may be applied, without touching the state.
"""

from enum import Enum
from dataclasses import dataclass

from .game_state import GameState, BOARD_CELLS


class MoveOutcome(Enum):
    """What happened to a requested move."""
    ACCEPTED = "accepted"
    GAME_OVER = "game_over"
    OCCUPIED = "occupied"
    OUT_OF_RANGE = "out_of_range"


@dataclass
class ValidationResult:
    """Result of move validation."""
    outcome: MoveOutcome

    @property
    def is_valid(self) -> bool:
        return self.outcome is MoveOutcome.ACCEPTED


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in order:
    1. Game must not be over
    2. Index must be a cell on the board (0-8)
    3. Cell must be empty
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the current player's marker in (0-8).

        Returns:
            ValidationResult carrying the outcome.
        """
        if game_state.game_over:
            return ValidationResult(MoveOutcome.GAME_OVER)

        if not 0 <= index < BOARD_CELLS:
            return ValidationResult(MoveOutcome.OUT_OF_RANGE)

        if game_state.board[index] is not None:
            return ValidationResult(MoveOutcome.OCCUPIED)

        return ValidationResult(MoveOutcome.ACCEPTED)

