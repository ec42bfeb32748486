"""
Game engine for TicTacToe.
Owns one GameState and applies the rules to it.
"""

from typing import Optional
from dataclasses import dataclass

from .game_state import GameState
from .move_validator import MoveValidator, MoveOutcome
from .win_checker import WinChecker, WinResult


@dataclass
class MoveResult:
    """Result of apply_move: the outcome and the state after the call."""
    outcome: MoveOutcome
    state: GameState

    @property
    def accepted(self) -> bool:
        return self.outcome is MoveOutcome.ACCEPTED


class GameEngine:
    """
    Runs a single TicTacToe game.

    Illegal moves (game already over, occupied cell, index off the board)
    are ignored: the state is left untouched and the returned MoveResult
    says why. Nothing is raised for them.

    Game flow:
    1. X moves first
    2. Each accepted move is checked for a win, then for a draw
    3. The turn passes to the other player only if the game continues
    4. Once won or drawn, only reset() starts a new game
    """

    def __init__(self):
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self._state = GameState()

    @property
    def state(self) -> GameState:
        """The live game state. Treat as read-only."""
        return self._state

    def snapshot(self) -> GameState:
        """An independent copy of the current state."""
        return self._state.copy()

    def apply_move(self, index: int) -> MoveResult:
        """
        Place the current player's marker at the given cell.

        Args:
            index: Cell index (0-8, row-major).

        Returns:
            MoveResult; outcome is ACCEPTED only if the board changed.
        """
        validation = self.validator.validate_move(self._state, index)
        if not validation.is_valid:
            return MoveResult(validation.outcome, self._state)

        state = self._state
        state.board[index] = state.current_player

        result = self.win_checker.check_winner(state)
        if result is not None:
            # The winner keeps the turn
            state.game_over = True
            state.winner = result.winner
            state.winning_line = result.line
        elif self.win_checker.check_draw(state):
            state.game_over = True
        else:
            state.current_player = state.current_player.opposite()

        return MoveResult(MoveOutcome.ACCEPTED, state)

    def reset(self) -> GameState:
        """Start a new game, discarding the current one."""
        self._state = GameState()
        return self._state

    def check_winner(self) -> Optional[WinResult]:
        return self.win_checker.check_winner(self._state)

    def is_draw(self) -> bool:
        return self.win_checker.check_draw(self._state)
