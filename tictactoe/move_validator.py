"""
Move validator for TicTacToe.
Validates that moves and recorded transitions follow the rules.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Type

from .board import CELL_COUNT, Cell, Position, empty_cells, mark_for_ply
from .errors import GameError, IllegalMoveError, IndexOutOfRangeError, InvalidStateError
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    error_type: Optional[Type[GameError]] = None

    def raise_if_invalid(self) -> None:
        if not self.is_valid:
            raise self.error_type(self.error_message)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be a cell on the board (0-8)
    3. Can only place on empty cells
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, position: Position, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            position: Position the move is played on.
            index: Cell to mark (0-8).

        Returns:
            ValidationResult with is_valid, error_message and error_type.
        """
        if self.win_checker.outcome(position).is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!",
                error_type=IllegalMoveError,
            )

        if not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{CELL_COUNT - 1}.",
                error_type=IndexOutOfRangeError,
            )

        if position[index] is not Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {position[index].value}",
                error_type=IllegalMoveError,
            )

        return ValidationResult(is_valid=True)

    def validate_transition(
        self,
        before: Position,
        after: Position,
        ply: int
    ) -> ValidationResult:
        """
        Validate that `after` is `before` plus the move made at `ply`.

        Exactly one cell may change, from EMPTY to the mark whose turn
        it is at that ply.
        """
        basic = self._check_length(before)
        if basic.is_valid:
            basic = self._check_length(after)
        if not basic.is_valid:
            return basic

        changed = [i for i in range(CELL_COUNT) if before[i] != after[i]]
        if len(changed) != 1:
            return ValidationResult(
                is_valid=False,
                error_message=f"Ply {ply} changes {len(changed)} cells, expected 1",
                error_type=InvalidStateError,
            )

        index = changed[0]
        move_check = self.validate_move(before, index)
        if not move_check.is_valid:
            return move_check

        expected = mark_for_ply(ply)
        if after[index] is not expected:
            return ValidationResult(
                is_valid=False,
                error_message=f"Ply {ply} must place {expected.value}, got {after[index].value}",
                error_type=InvalidStateError,
            )

        return ValidationResult(is_valid=True)

    def validate_history(self, history: Sequence[Position]) -> ValidationResult:
        """Check every adjacent pair of a history, starting from ply 0."""
        if not history:
            return ValidationResult(
                is_valid=False,
                error_message="History is empty",
                error_type=InvalidStateError,
            )
        if any(cell is not Cell.EMPTY for cell in history[0]):
            return ValidationResult(
                is_valid=False,
                error_message="History must start from the empty board",
                error_type=InvalidStateError,
            )

        for ply in range(len(history) - 1):
            result = self.validate_transition(history[ply], history[ply + 1], ply)
            if not result.is_valid:
                return result

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, position: Position) -> List[int]:
        """All legal cells for the player to move, or [] if the game is over."""
        if self.win_checker.outcome(position).is_terminal:
            return []
        return empty_cells(position)

    def _check_length(self, position: Position) -> ValidationResult:
        if len(position) != CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"A position has {CELL_COUNT} cells, got {len(position)}",
                error_type=InvalidStateError,
            )
        return ValidationResult(is_valid=True)
