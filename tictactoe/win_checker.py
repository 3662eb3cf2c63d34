"""
Win checker for TicTacToe.
Checks if a mark has completed a line or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .board import Cell, Position


Line = Tuple[int, int, int]


class GameStatus(Enum):
    """States of the per-game state machine."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class Outcome:
    """
    Result of looking at a position.

    Derived from the cells every time, never stored on a session.
    """
    status: GameStatus
    winner: Optional[Cell] = None
    line: Optional[Line] = None

    @property
    def is_terminal(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status is GameStatus.DRAWN


IN_PROGRESS = Outcome(GameStatus.IN_PROGRESS)
DRAW = Outcome(GameStatus.DRAWN)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 equal marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines as cell indices, in scan order
    WINNING_LINES = np.array([
        # Rows
        [0, 1, 2],
        [3, 4, 5],
        [6, 7, 8],
        # Columns
        [0, 3, 6],
        [1, 4, 7],
        [2, 5, 8],
        # Diagonals
        [0, 4, 8],
        [2, 4, 6],
    ])

    def _completed_lines(self, position: Position) -> np.ndarray:
        """Indices into WINNING_LINES of every line holding 3 equal marks."""
        cells = np.array([cell.value for cell in position])
        marks = cells[self.WINNING_LINES]

        complete = (
            (marks[:, 0] != Cell.EMPTY.value)
            & (marks[:, 0] == marks[:, 1])
            & (marks[:, 1] == marks[:, 2])
        )
        return np.flatnonzero(complete)

    def check_winner(self, position: Position) -> Optional[Cell]:
        """
        Check if there's a winner.

        Returns:
            The winning mark, or None if no line is complete.
        """
        line = self.get_winning_line(position)
        if line is None:
            return None
        return position[line[0]]

    def get_winning_line(self, position: Position) -> Optional[Line]:
        """
        Get the first completed line (rows, then columns, then diagonals).

        A legal position has at most one, but the scan order keeps the
        answer deterministic for hand-built boards too.
        """
        hits = self._completed_lines(position)
        if hits.size == 0:
            return None
        return tuple(int(i) for i in self.WINNING_LINES[hits[0]])

    def check_draw(self, position: Position) -> bool:
        """A draw is a full board with no completed line."""
        if self.get_winning_line(position) is not None:
            return False
        return Cell.EMPTY not in position

    def outcome(self, position: Position) -> Outcome:
        line = self.get_winning_line(position)
        if line is not None:
            return Outcome(GameStatus.WON, winner=position[line[0]], line=line)
        if Cell.EMPTY not in position:
            return DRAW
        return IN_PROGRESS


_CHECKER = WinChecker()


def outcome(position: Position) -> Outcome:
    """Outcome of a position: IN_PROGRESS, WON(mark, line) or DRAWN."""
    return _CHECKER.outcome(position)
