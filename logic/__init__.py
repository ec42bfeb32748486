"""
Logic module for TicTacToe.
Handles game state, rules, and turn progression.
"""

from .game_state import GameState, GameStatus, Marker
from .move_validator import MoveValidator, MoveOutcome
from .win_checker import WinChecker, WinResult, WIN_LINES
from .game_engine import GameEngine, MoveResult
