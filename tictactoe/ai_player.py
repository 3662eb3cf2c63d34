"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from typing import Dict, Optional, Type

from .board import Cell, Position, empty_cells, mark_to_move, place
from .config import GameConfig
from .errors import InvalidStateError, NoLegalMovesError
from .win_checker import GameStatus, WinChecker

LOGGER = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    The whole game tree is searched; no depth limit, no pruning.
    """

    def __init__(self, player: Cell = Cell.O, config: Type[GameConfig] = GameConfig):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI maximizes for (default: O)
            config: Scores and search switches.
        """
        if not player.is_mark:
            raise ValueError("The AI must play X or O")
        self.player = player
        self.config = config
        self.win_checker = WinChecker()

        # Minimax value of every position searched so far, from our side.
        # The value of a position never depends on how it was reached.
        self._values: Dict[Position, int] = {}

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def select_move(self, position: Position) -> int:
        """
        Get the best move for the current position.

        Ties between equally good moves go to the lowest cell index.

        Raises:
            NoLegalMovesError: the game is already over.
            InvalidStateError: it is not this player's turn.
        """
        scores = self.evaluate_moves(position)

        best_move: Optional[int] = None
        best_score = None
        for index in sorted(scores):
            if best_score is None or scores[index] > best_score:
                best_score = scores[index]
                best_move = index

        LOGGER.debug(
            "AI %s evaluated %d positions. Best move: %d (score: %d)",
            self.player.value, self.positions_evaluated, best_move, best_score,
        )
        return best_move

    def evaluate_moves(self, position: Position) -> Dict[int, int]:
        """
        Minimax value of every legal move from position.

        Returns:
            {cell index: value}, +1 win, 0 draw, -1 loss for this player.
        """
        self.positions_evaluated = 0

        if self.win_checker.outcome(position).is_terminal:
            raise NoLegalMovesError("Game is already over!")

        mover = mark_to_move(position)
        if mover is not self.player:
            raise InvalidStateError(
                f"It's {mover.value}'s turn, not {self.player.value}'s!"
            )

        return {
            index: self._minimax(place(position, index, mover), mover.opposite())
            for index in empty_cells(position)
        }

    def _minimax(self, position: Position, to_move: Cell) -> int:
        """
        Value of position with to_move about to play.

        Maximizes on our turns, minimizes on the opponent's.
        """
        if self.config.USE_TRANSPOSITION and position in self._values:
            return self._values[position]

        self.positions_evaluated += 1

        result = self.win_checker.outcome(position)
        if result.status is GameStatus.WON:
            if result.winner is self.player:
                value = self.config.WIN_SCORE
            else:
                value = self.config.LOSS_SCORE
        elif result.status is GameStatus.DRAWN:
            value = self.config.DRAW_SCORE
        else:
            child_values = [
                self._minimax(place(position, index, to_move), to_move.opposite())
                for index in empty_cells(position)
            ]
            if to_move is self.player:
                value = max(child_values)
            else:
                value = min(child_values)

        if self.config.USE_TRANSPOSITION:
            self._values[position] = value
        return value


def select_move(position: Position) -> int:
    """Best move for whichever mark is to move in position."""
    if WinChecker().outcome(position).is_terminal:
        raise NoLegalMovesError("Game is already over!")
    return AIPlayer(mark_to_move(position)).select_move(position)
