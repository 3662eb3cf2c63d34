"""
Game controller for TicTacToe.
Drives a GameSession from front-end events: clicks, jumps, resets,
mode changes and the AI reply.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Type

from .ai_player import AIPlayer
from .board import Position
from .config import GameConfig
from .errors import GameError
from .game_state import GameMode, GameSession, new_session
from .win_checker import GameStatus, Outcome

LOGGER = logging.getLogger(__name__)

RenderCallback = Callable[[Position, Outcome], None]


@dataclass(frozen=True)
class PendingMove:
    """An AI move, the session it was computed for and its generation."""
    index: int
    session: GameSession
    generation: int


class GameController:
    """
    Owns the current GameSession and reacts to front-end input.

    Game flow in HUMAN_VS_AI:
    1. Human clicks a cell, the move is recorded
    2. If the AI is now to move, its reply is computed for that session
    3. The reply is applied, unless the session changed in the meantime

    Every session change bumps a generation counter, so a reply stays
    stale even if a reset and replay rebuild an equal session.
    """

    def __init__(
        self,
        mode: Optional[GameMode] = None,
        render: Optional[RenderCallback] = None,
        auto_play: Optional[bool] = None,
        config: Type[GameConfig] = GameConfig,
    ):
        """
        Args:
            mode: Starting mode (default: config.DEFAULT_MODE).
            render: Called with (position, outcome) on every change.
            auto_play: Apply AI replies immediately (default: config.AUTO_PLAY_AI).
            config: Game settings.
        """
        self.config = config
        self.render = render
        self.auto_play = config.AUTO_PLAY_AI if auto_play is None else auto_play
        self.ai = AIPlayer(config.AI_MARK, config)

        self.session = new_session(mode or config.DEFAULT_MODE, config.AI_MARK)
        self.pending_ai_move: Optional[PendingMove] = None
        self.generation = 0

        self._notify()

    def click(self, index: int) -> bool:
        """
        Handle a human click on a cell.

        Returns:
            True if the move was played. Clicks on taken cells, finished
            games or bad indices are ignored.
        """
        try:
            session = self.session.play(index)
        except GameError as e:
            LOGGER.debug("Ignoring click on %s: %s", index, e)
            return False

        self._set_session(session)

        if self.session.ai_to_move:
            pending = self.request_ai_move()
            if self.auto_play:
                self.apply_ai_move(pending)

        return True

    def request_ai_move(self) -> Optional[PendingMove]:
        """Compute the AI reply for the current session, if the AI is due."""
        if not self.session.ai_to_move:
            return None

        index = self.ai.select_move(self.session.position)
        self.pending_ai_move = PendingMove(
            index=index, session=self.session, generation=self.generation
        )
        return self.pending_ai_move

    def apply_ai_move(self, pending: Optional[PendingMove]) -> bool:
        """
        Play a previously computed AI move.

        A move computed for another session (the player jumped, reset or
        switched mode since) is discarded.
        """
        if pending is None:
            return False

        if pending.generation != self.generation or pending.session != self.session:
            LOGGER.debug("Discarding stale AI move %d", pending.index)
            if self.pending_ai_move is pending:
                self.pending_ai_move = None
            return False

        self._set_session(self.session.play(pending.index))
        return True

    def jump_to(self, move: int) -> bool:
        """Show an earlier (or later) ply. The next move branches from it."""
        try:
            session = self.session.jump_to(move)
        except GameError as e:
            LOGGER.debug("Ignoring jump to %s: %s", move, e)
            return False

        self._set_session(session)
        return True

    def reset(self):
        """Start a new game in the same mode."""
        LOGGER.info("Resetting game")
        self._set_session(self.session.reset())

    def set_mode(self, mode: GameMode):
        """Switch mode. This always starts a new game."""
        LOGGER.info("Switching mode to %s", mode.value)
        self._set_session(self.session.with_mode(mode))

    def status(self) -> str:
        """Status line: winner, draw, or who moves next."""
        result = self.session.outcome
        if result.status is GameStatus.WON:
            return f"Winner: {result.winner.value}"
        if result.status is GameStatus.DRAWN:
            return "Draw"
        return f"Next player: {self.session.mark_to_move.value}"

    def move_labels(self) -> List[str]:
        """One label per history entry, for a jump-to-move list."""
        return [
            f"Go to move #{move}" if move else "Go to game start"
            for move in range(len(self.session.history))
        ]

    def _set_session(self, session: GameSession):
        self.session = session
        self.generation += 1
        self.pending_ai_move = None
        self._notify()

    def _notify(self):
        if self.render is not None:
            self.render(self.session.position, self.session.outcome)
