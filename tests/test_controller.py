"""Tests for GameController."""

from tictactoe.board import EMPTY_BOARD, Cell
from tictactoe.controller import GameController, PendingMove
from tictactoe.game_state import GameMode
from tictactoe.win_checker import GameStatus


class Recorder:
    """Render callback that remembers every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, position, outcome):
        self.calls.append((position, outcome))


def test_human_vs_human_alternates_marks():
    controller = GameController(GameMode.HUMAN_VS_HUMAN)
    assert controller.click(4)
    assert controller.click(0)
    assert controller.session.position[4] is Cell.X
    assert controller.session.position[0] is Cell.O
    assert controller.status() == "Next player: X"


def test_illegal_clicks_are_ignored():
    controller = GameController(GameMode.HUMAN_VS_HUMAN)
    controller.click(4)
    session = controller.session

    assert not controller.click(4)
    assert not controller.click(9)
    assert controller.session is session


def test_ai_replies_after_human_move():
    controller = GameController(GameMode.HUMAN_VS_AI)
    controller.click(4)

    assert controller.session.cursor == 2
    assert controller.session.position[0] is Cell.O
    assert controller.pending_ai_move is None
    assert controller.status() == "Next player: X"


def test_ai_does_not_move_in_human_mode():
    controller = GameController(GameMode.HUMAN_VS_HUMAN)
    controller.click(4)
    assert controller.session.cursor == 1
    assert controller.request_ai_move() is None


def test_deferred_ai_move_is_applied_later():
    controller = GameController(GameMode.HUMAN_VS_AI, auto_play=False)
    controller.click(4)

    pending = controller.pending_ai_move
    assert isinstance(pending, PendingMove)
    assert controller.session.cursor == 1

    assert controller.apply_ai_move(pending)
    assert controller.session.cursor == 2
    assert controller.session.position[pending.index] is Cell.O


def test_stale_ai_move_is_discarded_after_jump():
    controller = GameController(GameMode.HUMAN_VS_AI, auto_play=False)
    controller.click(4)
    pending = controller.pending_ai_move

    controller.jump_to(0)

    assert controller.pending_ai_move is None
    assert not controller.apply_ai_move(pending)
    assert controller.session.position == EMPTY_BOARD
    assert len(controller.session.history) == 2


def test_stale_ai_move_is_discarded_after_branching():
    controller = GameController(GameMode.HUMAN_VS_AI, auto_play=False)
    controller.click(4)
    pending = controller.pending_ai_move

    controller.jump_to(0)
    controller.click(8)

    assert not controller.apply_ai_move(pending)
    assert controller.pending_ai_move is not pending
    assert controller.session.cursor == 1


def test_stale_ai_move_is_discarded_after_reset_and_mode_change():
    controller = GameController(GameMode.HUMAN_VS_AI, auto_play=False)
    controller.click(4)
    pending = controller.pending_ai_move
    controller.reset()
    assert not controller.apply_ai_move(pending)

    controller.click(4)
    pending = controller.pending_ai_move
    controller.set_mode(GameMode.HUMAN_VS_HUMAN)
    assert not controller.apply_ai_move(pending)
    assert controller.session.history == (EMPTY_BOARD,)


def test_stale_ai_move_is_discarded_after_reset_and_replay():
    controller = GameController(GameMode.HUMAN_VS_AI, auto_play=False)
    controller.click(4)
    pending = controller.pending_ai_move

    controller.reset()
    controller.click(4)
    assert controller.session == pending.session

    assert not controller.apply_ai_move(pending)
    assert controller.session.cursor == 1
    assert controller.apply_ai_move(controller.pending_ai_move)
    assert controller.session.cursor == 2


def test_jump_then_click_branches():
    controller = GameController(GameMode.HUMAN_VS_HUMAN)
    for index in (0, 1, 2, 3):
        controller.click(index)

    assert controller.jump_to(2)
    assert controller.move_labels() == [
        "Go to game start",
        "Go to move #1",
        "Go to move #2",
        "Go to move #3",
        "Go to move #4",
    ]
    controller.click(8)

    assert len(controller.session.history) == 4
    assert controller.session.position[8] is Cell.X
    assert controller.session.position[2] is Cell.EMPTY


def test_jump_out_of_range_is_ignored():
    controller = GameController()
    assert not controller.jump_to(3)
    assert controller.session.cursor == 0


def test_jump_to_ai_turn_does_not_trigger_ai():
    controller = GameController(GameMode.HUMAN_VS_AI)
    controller.click(4)
    controller.jump_to(1)

    assert controller.session.cursor == 1
    assert controller.pending_ai_move is None


def test_status_winner_and_draw():
    controller = GameController(GameMode.HUMAN_VS_HUMAN)
    for index in (0, 3, 1, 4, 2):
        controller.click(index)
    assert controller.status() == "Winner: X"
    assert controller.session.outcome.line == (0, 1, 2)

    controller.reset()
    for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        controller.click(index)
    assert controller.status() == "Draw"


def test_human_cannot_beat_ai():
    controller = GameController(GameMode.HUMAN_VS_AI)
    for index in (0, 8, 2, 6, 1, 3, 5, 7, 4):
        controller.click(index)
    assert controller.session.outcome.winner is not Cell.X


def test_render_called_on_every_change():
    recorder = Recorder()
    controller = GameController(GameMode.HUMAN_VS_AI, render=recorder)
    assert len(recorder.calls) == 1

    controller.click(4)
    # human move, then AI move
    assert len(recorder.calls) == 3
    position, outcome = recorder.calls[-1]
    assert position == controller.session.position
    assert outcome.status is GameStatus.IN_PROGRESS

    controller.jump_to(0)
    controller.reset()
    controller.set_mode(GameMode.HUMAN_VS_HUMAN)
    assert len(recorder.calls) == 6

    controller.click(4)
    controller.click(4)
    assert len(recorder.calls) == 7
