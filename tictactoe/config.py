"""
Game configuration for TicTacToe.
Settings for players, search scores, the controller and logging.
"""

import logging

from .board import BOARD_SIZE, Cell
from .game_state import GameMode


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to adjust the defaults.
    """

    # ==================== BOARD SETTINGS ====================
    # Only 3x3 is supported
    BOARD_SIZE = BOARD_SIZE

    # ==================== PLAYER SETTINGS ====================
    AI_MARK = Cell.O       # the human plays X and moves first
    DEFAULT_MODE = GameMode.HUMAN_VS_HUMAN

    # ==================== SEARCH SETTINGS ====================
    # Terminal values from the AI's point of view
    WIN_SCORE = 1
    LOSS_SCORE = -1
    DRAW_SCORE = 0

    # Reuse values of positions already searched
    USE_TRANSPOSITION = True

    # ==================== CONTROLLER SETTINGS ====================
    # Apply the AI reply right after the human move.
    # Set False to get a PendingMove and apply it later.
    AUTO_PLAY_AI = True

    # ==================== DISPLAY SETTINGS ====================
    CELL_SYMBOLS = {
        Cell.EMPTY: ".",
        Cell.X: "X",
        Cell.O: "O",
    }

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
