"""
Tests for win/draw detection and move validation.
"""

import pytest

from logic.game_state import GameState, Marker
from logic.move_validator import MoveValidator, MoveOutcome
from logic.win_checker import WinChecker, WinResult, WIN_LINES

X, O = Marker.X, Marker.O


def board_from(text: str):
    """Build a board from 9 characters of X, O or '.'."""
    cells = {"X": X, "O": O, ".": None}
    return [cells[ch] for ch in text]


def test_win_lines_are_rows_columns_diagonals_in_order():
    assert WIN_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


@pytest.mark.parametrize("line", WIN_LINES)
def test_every_line_is_detected(line):
    board = [None] * 9
    for index in line:
        board[index] = O

    result = WinChecker().check_winner(GameState(board=board))

    assert result == WinResult(winner=O, line=line)


def test_empty_board_has_no_winner():
    assert WinChecker().check_winner(GameState()) is None


def test_mixed_line_is_not_a_win():
    state = GameState(board=board_from("XXO......"))
    assert WinChecker().check_winner(state) is None


def test_first_line_in_order_is_reported():
    # Top row and left column both complete
    state = GameState(board=board_from("XXXX..X.."))
    assert WinChecker().get_winning_line(state) == (0, 1, 2)


def test_check_draw_only_looks_at_fullness():
    checker = WinChecker()
    assert checker.check_draw(GameState(board=board_from("XOXXOOOXX")))
    assert not checker.check_draw(GameState(board=board_from("XOXXOOOX.")))


def test_validator_reports_game_over_first():
    state = GameState(board=board_from("XXXOO...."), game_over=True)
    result = MoveValidator().validate_move(state, 0)

    assert result.outcome is MoveOutcome.GAME_OVER
    assert not result.is_valid


def test_validator_outcomes():
    validator = MoveValidator()
    state = GameState(board=board_from("X........"))

    assert validator.validate_move(state, 0).outcome is MoveOutcome.OCCUPIED
    assert validator.validate_move(state, 9).outcome is MoveOutcome.OUT_OF_RANGE
    assert validator.validate_move(state, 1).is_valid


def test_render_text():
    state = GameState(board=board_from("X...O...."))
    assert state.render_text() == (
        " X | 2 | 3\n"
        "---+---+---\n"
        " 4 | O | 6\n"
        "---+---+---\n"
        " 7 | 8 | 9"
    )
