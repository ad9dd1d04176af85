"""Tests for the terminal interface."""

import pytest

from connect4_rules.interfaces.cli import SimpleCLI, main


def feed_input(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


class TestReplay:
    """Tests for the replay command."""

    def test_vertical_win(self, capsys):
        assert main(["replay", "--moves", "0,1,0,1,0,1,0"]) == 0
        out = capsys.readouterr().out
        assert "Player 1 won!" in out

    def test_in_progress(self, capsys):
        assert main(["replay", "--moves", "3,3"]) == 0
        out = capsys.readouterr().out
        assert "Player 1 to move" in out

    def test_out_of_range_move(self, capsys):
        assert main(["replay", "--moves", "7"]) == 1
        assert "Move 1 rejected" in capsys.readouterr().out

    def test_move_after_game_over(self, capsys):
        assert main(["replay", "--moves", "0,1,0,1,0,1,0,2"]) == 1
        assert "Move 8 rejected" in capsys.readouterr().out

    def test_unparseable_moves(self, capsys):
        assert main(["replay", "--moves", "a,b"]) == 2

    def test_custom_board(self, capsys):
        assert main(["replay", "--height", "4", "--width", "4",
                     "--moves", "1,0,3,2,1,0,3,2,0,1,2,3,0,1,2,3"]) == 0
        assert "It's a tie!" in capsys.readouterr().out

    def test_bad_dimensions(self, capsys):
        assert main(["replay", "--height", "3", "--moves", "0"]) == 2
        assert "Error" in capsys.readouterr().out


class TestPlay:
    """Tests for the interactive play command."""

    def test_game_to_win_with_bad_input(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["0", "1", "0", "1", "x", "9", "0", "1", "0"])
        assert main(["play"]) == 0
        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "Column must be between 0 and 6." in out
        assert "Player 1 won!" in out

    def test_negative_column_asks_again(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["-1", "0", "q"])
        assert main(["play"]) == 0
        out = capsys.readouterr().out
        assert "Column must be between 0 and 6." in out
        assert "|X            |" in out
        assert "Quitting game." in out

    def test_full_column_notice(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["2", "2", "2", "2", "2", "2", "2", "q"])
        assert main(["play"]) == 0
        out = capsys.readouterr().out
        assert "Column 2 is full" in out
        assert "Quitting game." in out

    def test_end_of_input_quits(self, monkeypatch, capsys):
        feed_input(monkeypatch, [])
        assert main(["play"]) == 0
        assert "Quitting game." in capsys.readouterr().out


class TestArguments:
    """Tests for argument handling."""

    def test_no_command(self, capsys):
        assert SimpleCLI().run([]) == 1

    def test_debug_level_choice(self):
        cli = SimpleCLI()
        cli.parse_args(["replay", "--moves", "0", "--debug_level", "info"])
        assert cli.args.debug_level == "info"

    def test_unknown_debug_level_rejected(self):
        with pytest.raises(SystemExit):
            SimpleCLI().parse_args(["play", "--debug_level", "loud"])
