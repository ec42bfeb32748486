"""Status text shown next to the board."""

from logic.game_state import GameState, GameStatus


def turn_message(state: GameState) -> str:
    """Current-player line, or the result once the game is over."""
    if state.status is GameStatus.WON:
        return f"Player {state.winner.value} wins!"
    if state.status is GameStatus.DRAWN:
        return "It's a draw!"
    return f"Player {state.current_player.value}'s turn"
