import random

import pytest

from game.board import Board, GameStatus
from game.errors import DuplicateDigitError, GameStateError, NonDigitError


@pytest.fixture
def board():
    return Board(secret="6437")


def test_new_board_awaits_a_guess(board):
    assert board.status is GameStatus.AWAITING_GUESS
    assert board.current_attempt == 0
    assert not board.is_over


def test_submit_guess_moves_to_reporting(board):
    guess = board.submit_guess("1234")
    assert board.status is GameStatus.REPORTING
    assert guess.feedback == (1, 1)
    assert board.current_attempt == 1


def test_resolve_without_win_waits_for_next_guess(board):
    board.submit_guess("1234")
    assert board.resolve() is GameStatus.AWAITING_GUESS


def test_invalid_guess_does_not_cost_a_turn(board):
    with pytest.raises(DuplicateDigitError):
        board.submit_guess("1123")
    with pytest.raises(NonDigitError):
        board.submit_guess("12a3")
    assert board.status is GameStatus.AWAITING_GUESS
    assert board.current_attempt == 0
    assert board.guesses == []


def test_correct_guess_wins(board):
    board.make_guess("1234")
    guess = board.make_guess("6437")
    assert guess.feedback == (4, 0)
    assert board.status is GameStatus.WON
    assert board.is_won and board.is_over
    assert board.current_attempt == 2


def test_no_guesses_after_win(board):
    board.make_guess("6437")
    with pytest.raises(GameStateError):
        board.submit_guess("1234")
    assert board.abort() is GameStatus.WON


def test_abort_from_awaiting_guess(board):
    assert board.abort() is GameStatus.ABORTED
    assert board.is_over and not board.is_won
    with pytest.raises(GameStateError):
        board.submit_guess("1234")


def test_abort_from_reporting(board):
    board.submit_guess("1234")
    assert board.abort() is GameStatus.ABORTED


def test_resolve_requires_a_submitted_guess(board):
    with pytest.raises(GameStateError):
        board.resolve()


def test_history_and_reveal(board):
    board.make_guess("1234")
    board.make_guess("1290")
    assert board.get_feedback_history() == [("1234", (1, 1)), ("1290", (0, 0))]
    assert board.reveal_code() == "6437"


def test_secret_comes_from_injected_rng():
    a = Board(rng=random.Random(9))
    b = Board(rng=random.Random(9))
    assert a.reveal_code() == b.reveal_code()


def test_reset_starts_a_fresh_game():
    b = Board(rng=random.Random(1), secret="6437")
    b.make_guess("6437")
    b.reset()
    assert b.status is GameStatus.AWAITING_GUESS
    assert b.guesses == []
    assert b.current_attempt == 0


def test_state_snapshot_hides_secret_until_over(board):
    board.make_guess("1234")
    data = board.get_current_state().to_dict()
    assert data["secret_code"] is None
    assert data["status"] == "awaiting_guess"
    assert data["guesses"] == [{"guess": "1234", "feedback": [1, 1]}]

    board.make_guess("6437")
    data = board.get_current_state().to_dict()
    assert data["secret_code"] == "6437"
    assert data["is_won"] is True


def test_render_lists_guesses(board, capsys):
    board.make_guess("1234")
    board.render()
    out = capsys.readouterr().out
    assert "| Try | Guess | Bulls | Cows |" in out
    assert "1234" in out
