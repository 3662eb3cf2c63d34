"""
TicTacToe engine.
Handles game state, move history, rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .board import Cell, Position, EMPTY_BOARD
from .errors import (
    GameError,
    IllegalMoveError,
    IndexOutOfRangeError,
    InvalidStateError,
    NoLegalMovesError,
)
from .win_checker import GameStatus, Outcome, WinChecker, outcome
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameMode, GameSession, apply_move, jump_to, new_session, record_move
from .ai_player import AIPlayer, select_move
from .config import GameConfig
from .controller import GameController, PendingMove
