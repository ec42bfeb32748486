"""
Tests for the TicTacToe game engine.
"""

from typing import List, Optional

from hypothesis import given, strategies as st

from logic.game_engine import GameEngine
from logic.game_state import GameStatus, Marker
from logic.move_validator import MoveOutcome
from logic.win_checker import WIN_LINES


def play(moves: List[int]) -> GameEngine:
    engine = GameEngine()
    for index in moves:
        engine.apply_move(index)
    return engine


def count(board, marker: Marker) -> int:
    return sum(1 for cell in board if cell == marker)


def line_owner(board) -> Optional[Marker]:
    for a, b, c in WIN_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
    return None


def test_new_engine_starts_empty_with_x():
    engine = GameEngine()
    state = engine.state

    assert state.board == [None] * 9
    assert state.current_player == Marker.X
    assert state.game_over is False
    assert state.winner is None
    assert state.winning_line is None
    assert state.status is GameStatus.IN_PROGRESS


def test_accepted_move_places_marker_and_passes_turn():
    engine = GameEngine()

    result = engine.apply_move(4)

    assert result.accepted
    assert result.outcome is MoveOutcome.ACCEPTED
    assert engine.state.board[4] == Marker.X
    assert engine.state.current_player == Marker.O


def test_top_row_win():
    engine = play([0, 3, 1, 4, 2])
    state = engine.state

    assert state.game_over is True
    assert state.winner == Marker.X
    assert state.winning_line == (0, 1, 2)
    assert state.status is GameStatus.WON


def test_winning_move_keeps_turn():
    engine = play([0, 3, 1, 4, 2])
    assert engine.state.current_player == Marker.X


def test_o_can_win():
    # O completes the middle column
    engine = play([0, 1, 2, 4, 3, 7])
    state = engine.state

    assert state.winner == Marker.O
    assert state.winning_line == (1, 4, 7)
    assert state.current_player == Marker.O


def test_full_board_without_line_is_draw():
    engine = play([0, 1, 2, 4, 3, 5, 7, 6, 8])
    state = engine.state

    assert state.game_over is True
    assert state.winner is None
    assert state.winning_line is None
    assert state.status is GameStatus.DRAWN
    assert engine.is_draw()
    assert engine.check_winner() is None


def test_win_on_last_cell_is_not_a_draw():
    # X fills the ninth cell and completes the 2-4-6 diagonal
    engine = play([0, 1, 2, 3, 4, 8, 5, 7, 6])
    state = engine.state

    assert all(cell is not None for cell in state.board)
    assert state.winner == Marker.X
    assert state.winning_line == (2, 4, 6)
    assert state.status is GameStatus.WON


def test_same_cell_twice_is_ignored():
    engine = GameEngine()
    engine.apply_move(0)
    before = engine.snapshot()

    result = engine.apply_move(0)

    assert not result.accepted
    assert result.outcome is MoveOutcome.OCCUPIED
    assert engine.state == before


def test_moves_after_win_are_ignored():
    engine = play([0, 3, 1, 4, 2])
    before = engine.snapshot()

    result = engine.apply_move(8)

    assert result.outcome is MoveOutcome.GAME_OVER
    assert engine.state == before


def test_out_of_range_index_is_ignored():
    engine = GameEngine()

    for index in (-1, 9, 100):
        result = engine.apply_move(index)
        assert result.outcome is MoveOutcome.OUT_OF_RANGE

    assert engine.state.board == [None] * 9
    assert engine.state.current_player == Marker.X


def test_reset_after_win():
    engine = play([0, 3, 1, 4, 2])

    state = engine.reset()

    assert state is engine.state
    assert state.board == [None] * 9
    assert state.current_player == Marker.X
    assert state.game_over is False
    assert state.winner is None
    assert state.winning_line is None


def test_reset_replaces_state_object():
    engine = play([4])
    old_state = engine.state

    engine.reset()

    assert engine.state is not old_state
    assert old_state.board[4] == Marker.X


def test_engines_are_independent():
    first = GameEngine()
    second = GameEngine()

    first.apply_move(0)

    assert second.state.board == [None] * 9
    assert second.state.current_player == Marker.X


def test_snapshot_is_a_copy():
    engine = play([0])
    snapshot = engine.snapshot()

    engine.apply_move(1)

    assert snapshot.board[1] is None
    assert engine.state.board[1] == Marker.O


@given(st.permutations(list(range(9))))
def test_markers_alternate_until_game_ends(order):
    engine = GameEngine()
    expected = Marker.X

    for index in order:
        was_over = engine.state.game_over
        result = engine.apply_move(index)

        if was_over:
            assert not result.accepted
            continue

        assert result.accepted
        assert engine.state.board[index] == expected
        if not engine.state.game_over:
            expected = expected.opposite()
        assert engine.state.current_player == expected


@given(st.permutations(list(range(9))))
def test_result_matches_board(order):
    engine = play(order)
    state = engine.state

    assert state.game_over is True

    owner = line_owner(state.board)
    if owner is None:
        assert state.status is GameStatus.DRAWN
        assert state.winner is None
        assert all(cell is not None for cell in state.board)
    else:
        assert state.winner == owner
        assert state.winning_line in WIN_LINES
        assert all(state.board[i] == owner for i in state.winning_line)


@given(st.permutations(list(range(9))), st.lists(st.integers(min_value=0, max_value=8)))
def test_game_over_freezes_board(order, extra_moves):
    engine = play(order)
    before = engine.snapshot()

    for index in extra_moves:
        assert not engine.apply_move(index).accepted

    assert engine.state == before


@given(st.permutations(list(range(9))))
def test_marker_counts_stay_balanced(order):
    engine = GameEngine()
    for index in order:
        engine.apply_move(index)
        x_count = count(engine.state.board, Marker.X)
        o_count = count(engine.state.board, Marker.O)
        assert x_count - o_count in (0, 1)
