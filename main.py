"""
Console front-end for TicTacToe.

Plays through the GameController:
- a cell number (0-8) plays there
- jump <k> goes back to move k
- reset, mode <human|ai>, quit

Cells are numbered left to right, top to bottom.
"""

import argparse
import logging

import numpy as np

from tictactoe.board import BOARD_SIZE
from tictactoe.config import GameConfig
from tictactoe.controller import GameController
from tictactoe.game_state import GameMode


MODES = {mode.value: mode for mode in GameMode}


def format_board(position, outcome) -> str:
    """
    Draw the board as text. Cells of a winning line are shown in brackets.
    """
    symbols = np.array([GameConfig.CELL_SYMBOLS[cell] for cell in position], dtype=object)
    if outcome.line is not None:
        line = list(outcome.line)
        symbols[line] = [f"[{s}]" for s in symbols[line]]
    grid = symbols.reshape(BOARD_SIZE, BOARD_SIZE)

    rows = [" ".join(f"{cell:^3}" for cell in row) for row in grid]
    return "\n".join(rows)


def print_board(position, outcome):
    print()
    print(format_board(position, outcome))


def print_moves(controller: GameController):
    for move, label in enumerate(controller.move_labels()):
        marker = ">" if move == controller.session.cursor else " "
        print(f" {marker} {move}: {label}")


def handle_command(controller: GameController, command: str) -> bool:
    """
    Run one line of input.

    Returns:
        False when the player wants to quit.
    """
    parts = command.strip().lower().split()
    if not parts:
        return True

    op = parts[0]
    if op in ("q", "quit", "exit"):
        return False
    if op == "reset":
        controller.reset()
    elif op == "moves":
        print_moves(controller)
    elif op == "jump" and len(parts) == 2 and parts[1].isdigit():
        if not controller.jump_to(int(parts[1])):
            print("No such move.")
    elif op == "mode" and len(parts) == 2 and parts[1] in MODES:
        controller.set_mode(MODES[parts[1]])
    elif op.isdigit() and len(parts) == 1:
        if not controller.click(int(op)):
            print("Illegal move.")
    else:
        print("Commands: <cell 0-8> | jump <k> | moves | reset | mode <human|ai> | quit")
    return True


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe with move history")
    parser.add_argument(
        "--mode",
        choices=sorted(MODES),
        default=GameConfig.DEFAULT_MODE.value,
        help="human: two players on one terminal, ai: play X against the computer"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=logging.getLevelName(GameConfig.LOG_LEVEL),
        help="Python logging level"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), GameConfig.LOG_LEVEL),
        format=GameConfig.LOG_FORMAT,
    )

    controller = GameController(mode=MODES[args.mode], render=print_board)
    print(controller.status())

    try:
        while True:
            command = input("> ")
            if not handle_command(controller, command):
                break
            print(controller.status())
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
