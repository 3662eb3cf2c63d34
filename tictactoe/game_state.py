"""
Game state management for TicTacToe.
Tracks the move history, the cursor into it and the game mode.

Positions are immutable tuples and every transition returns a new
value, so a caller can hold on to an old session (for example an AI
move computed for it) and compare it with the current one.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .board import EMPTY_BOARD, Cell, Position, mark_for_ply, mark_to_move, place
from .errors import IllegalMoveError, IndexOutOfRangeError, InvalidStateError
from .move_validator import MoveValidator
from .win_checker import Outcome, outcome


History = Tuple[Position, ...]

_VALIDATOR = MoveValidator()


class GameMode(Enum):
    """Who controls the O mark."""
    HUMAN_VS_HUMAN = "human"
    HUMAN_VS_AI = "ai"


def apply_move(position: Position, index: int, mark: Optional[Cell] = None) -> Position:
    """
    Play a move and return the resulting position.

    Args:
        position: Position to play on (not modified).
        index: Cell to mark (0-8).
        mark: Mark to place. Must be the player to move, derived
            from the number of marks already on the board.

    Raises:
        IllegalMoveError: the game is over, the cell is taken, or
            mark is not the player to move.
        IndexOutOfRangeError: index is not 0-8.
    """
    _VALIDATOR.validate_move(position, index).raise_if_invalid()
    expected = mark_to_move(position)
    if mark is not None and mark is not expected:
        raise IllegalMoveError(
            f"It's {expected.value}'s turn, cannot place {mark.value}"
        )
    return place(position, index, expected)


def jump_to(history: History, move_index: int) -> int:
    """Return the cursor for a past ply. History itself is left alone."""
    if not 0 <= move_index < len(history):
        raise IndexOutOfRangeError(
            f"Move {move_index} out of range. History has {len(history)} positions."
        )
    return move_index


def record_move(
    history: History,
    cursor: int,
    new_position: Position
) -> Tuple[History, int]:
    """
    Append a position after the cursor.

    Anything after the cursor (a redo branch left by a jump) is dropped
    first, so the new position always lands at cursor + 1.

    Raises:
        IndexOutOfRangeError: cursor is not in history.
        IllegalMoveError, InvalidStateError: new_position is not the
            position at the cursor plus one move by the player to move.
    """
    jump_to(history, cursor)
    _VALIDATOR.validate_transition(history[cursor], new_position, cursor).raise_if_invalid()
    new_history = tuple(history[:cursor + 1]) + (new_position,)
    return new_history, cursor + 1


@dataclass(frozen=True)
class GameSession:
    """
    The complete state of one game.

    Tracks:
    - History of positions (index 0 is the empty board)
    - Cursor: the ply currently shown and played on
    - Game mode and the mark the AI plays in HUMAN_VS_AI

    Turn ownership is derived from the cursor, never stored.
    """

    history: History = (EMPTY_BOARD,)
    cursor: int = 0
    mode: GameMode = GameMode.HUMAN_VS_HUMAN
    ai_mark: Cell = field(default=Cell.O)

    def __post_init__(self):
        if not self.history:
            raise InvalidStateError("History must hold at least the starting position")
        jump_to(self.history, self.cursor)

    @property
    def position(self) -> Position:
        """The position at the cursor."""
        return self.history[self.cursor]

    @property
    def mark_to_move(self) -> Cell:
        return mark_for_ply(self.cursor)

    @property
    def outcome(self) -> Outcome:
        return outcome(self.position)

    @property
    def ai_to_move(self) -> bool:
        """True when the AI owns the current turn of an unfinished game."""
        return (
            self.mode is GameMode.HUMAN_VS_AI
            and self.mark_to_move is self.ai_mark
            and not self.outcome.is_terminal
        )

    def play(self, index: int) -> "GameSession":
        """Play for whoever is to move at the cursor."""
        new_position = apply_move(self.position, index, self.mark_to_move)
        history, cursor = record_move(self.history, self.cursor, new_position)
        return GameSession(history, cursor, self.mode, self.ai_mark)

    def jump_to(self, move_index: int) -> "GameSession":
        cursor = jump_to(self.history, move_index)
        return GameSession(self.history, cursor, self.mode, self.ai_mark)

    def reset(self) -> "GameSession":
        return new_session(self.mode, self.ai_mark)

    def with_mode(self, mode: GameMode) -> "GameSession":
        """Switching mode always starts a new game."""
        return new_session(mode, self.ai_mark)


def new_session(
    mode: GameMode = GameMode.HUMAN_VS_HUMAN,
    ai_mark: Cell = Cell.O
) -> GameSession:
    """A fresh game: history holds only the empty board, cursor 0."""
    if not ai_mark.is_mark:
        raise ValueError("The AI must play X or O")
    return GameSession(history=(EMPTY_BOARD,), cursor=0, mode=mode, ai_mark=ai_mark)
