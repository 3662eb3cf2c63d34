"""
Errors raised by the TicTacToe engine.
All of them are recoverable: a front-end may log and ignore them.
"""


class GameError(Exception):
    """Base class for every engine error."""


class IllegalMoveError(GameError):
    """The target cell is occupied or the game is already over."""


class IndexOutOfRangeError(GameError, IndexError):
    """A cell index or history index is outside its bounds."""


class InvalidStateError(GameError):
    """The position cannot be acted on (bad mark counts, wrong mover...)."""


class NoLegalMovesError(InvalidStateError):
    """The search was asked to move on a finished or full board."""
