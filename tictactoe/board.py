"""
Board primitives for TicTacToe.
Cells, immutable positions and the turn rule derived from ply parity.
"""

from enum import Enum
from typing import Iterable, List, Tuple

from .errors import IndexOutOfRangeError, InvalidStateError


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Cell(Enum):
    """Contents of one square."""
    EMPTY = " "
    X = "X"     # moves first
    O = "O"

    @property
    def is_mark(self) -> bool:
        return self is not Cell.EMPTY

    def opposite(self) -> "Cell":
        """Get the other player's mark."""
        if self is Cell.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Cell.O if self is Cell.X else Cell.X


# Nine cells in row-major order. Never mutated: moves build a new tuple.
Position = Tuple[Cell, ...]

EMPTY_BOARD: Position = (Cell.EMPTY,) * CELL_COUNT


def make_position(cells: Iterable[Cell]) -> Position:
    """
    Build a Position from any iterable of cells.

    Raises:
        InvalidStateError: wrong number of cells or a non-Cell value.
    """
    position = tuple(cells)
    if len(position) != CELL_COUNT:
        raise InvalidStateError(
            f"A position has {CELL_COUNT} cells, got {len(position)}"
        )
    for cell in position:
        if not isinstance(cell, Cell):
            raise InvalidStateError(f"Not a cell: {cell!r}")
    return position


def check_index(index: int) -> None:
    if not 0 <= index < CELL_COUNT:
        raise IndexOutOfRangeError(
            f"Cell index {index} out of range. Must be 0-{CELL_COUNT - 1}."
        )


def empty_cells(position: Position) -> List[int]:
    """Indices of all empty cells, ascending."""
    return [index for index, cell in enumerate(position) if cell is Cell.EMPTY]


def mark_for_ply(ply: int) -> Cell:
    """X moves on even plies, O on odd plies."""
    return Cell.X if ply % 2 == 0 else Cell.O


def mark_to_move(position: Position) -> Cell:
    """
    Work out whose turn it is from the marks on the board.

    On a legal position the number of marks equals the ply, so this
    agrees with mark_for_ply(cursor) for any position in a history.

    Raises:
        InvalidStateError: if the mark counts cannot come from legal play.
    """
    x_count = position.count(Cell.X)
    o_count = position.count(Cell.O)
    if x_count - o_count not in (0, 1):
        raise InvalidStateError(
            f"Impossible position: {x_count} X marks and {o_count} O marks"
        )
    return mark_for_ply(x_count + o_count)


def place(position: Position, index: int, mark: Cell) -> Position:
    """Return a copy of position with mark at index. No rule checks."""
    cells = list(position)
    cells[index] = mark
    return tuple(cells)
