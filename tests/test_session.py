"""Tests for the GameSession entry point used by shells."""

import pytest

from connect4_rules.errors import (GameAlreadyOverError, IllegalMoveError,
                                   OutOfRangeError)
from connect4_rules.game.session import GameSession
from connect4_rules.utils import GameStatus, Player


class TestAttemptMove:
    """Tests for attempt_move outcomes."""

    def test_returns_row_and_status(self):
        session = GameSession()
        result = session.attempt_move(4)
        assert (result.row, result.status) == (5, GameStatus.IN_PROGRESS)
        assert session.moves_accepted == 1
        assert session.current_player == Player.TWO

    def test_out_of_range_on_default_board(self):
        session = GameSession()
        with pytest.raises(OutOfRangeError):
            session.attempt_move(7)
        assert session.moves_accepted == 0

    def test_full_column_rejected(self):
        session = GameSession(height=4, width=4)
        for _ in range(4):
            session.attempt_move(2)
        with pytest.raises(IllegalMoveError):
            session.attempt_move(2)
        assert session.moves_accepted == 4

    def test_stops_accepting_after_win(self):
        session = GameSession()
        for column in [0, 1, 0, 1, 0, 1]:
            session.attempt_move(column)
        result = session.attempt_move(0)
        assert result.status == GameStatus.PLAYER_ONE_WIN
        assert session.is_game_over()
        with pytest.raises(GameAlreadyOverError):
            session.attempt_move(3)
        assert session.moves_accepted == 7


class TestSessionQueries:
    """Tests for the read-only helpers."""

    def test_in_progress(self):
        session = GameSession()
        assert session.get_winner() is None
        assert session.winning_line() == []
        assert session.end_message() is None
        assert session.get_valid_moves() == list(range(7))

    def test_win_reports_line_and_message(self):
        session = GameSession()
        for column in [0, 1, 0, 1, 0, 1, 0]:
            session.attempt_move(column)
        assert session.get_winner() == Player.ONE
        assert session.winning_line() == [(2, 0), (3, 0), (4, 0), (5, 0)]
        assert session.end_message() == "Player 1 won!"

    def test_draw_message(self):
        session = GameSession(4, 4)
        for column in [1, 0, 3, 2, 1, 0, 3, 2, 0, 1, 2, 3, 0, 1, 2, 3]:
            session.attempt_move(column)
        assert session.status == GameStatus.DRAW
        assert session.end_message() == "It's a tie!"
        assert session.winning_line() == []

    def test_reset_starts_new_game(self):
        session = GameSession(5, 8)
        for column in [0, 1, 0, 1, 0, 1, 0]:
            session.attempt_move(column)
        session.reset()
        assert session.status == GameStatus.IN_PROGRESS
        assert session.moves_accepted == 0
        assert session.state.grid.shape == (5, 8)
        assert not session.state.grid.any()
