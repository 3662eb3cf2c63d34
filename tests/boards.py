from tictactoe.board import Cell, make_position

_ = Cell.EMPTY
X = Cell.X
O = Cell.O


def board(*cells):
    """Build a position from 9 cells."""
    return make_position(cells)
