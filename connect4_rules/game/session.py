"""
session.py - Turn and result orchestration for a hosting shell

A GameSession owns one GameState and exposes attempt_move, the only way a
shell feeds user actions into the engine.
"""

from typing import List, Optional

from connect4_rules.debug import debug
from connect4_rules.errors import Connect4Error
from connect4_rules.game.rules import winning_window
from connect4_rules.game.state import MoveResult, create_game
from connect4_rules.utils import HEIGHT, WIDTH, Coord, GameStatus, Player


class GameSession:
    """
    Connect Four session manager used by the CLI and the Gymnasium environment.
    """

    def __init__(self, height: int = HEIGHT, width: int = WIDTH):
        debug.debug(f"Initializing GameSession ({height}x{width})", "session")
        self.height = height
        self.width = width
        self.state = create_game(height, width)
        self.moves_accepted = 0

    def reset(self) -> None:
        """Start a fresh game with the same dimensions."""
        debug.debug("Resetting session", "session")
        self.state = create_game(self.height, self.width)
        self.moves_accepted = 0

    def attempt_move(self, column: int) -> MoveResult:
        """
        Apply one user action.

        Args:
            column: Column the user chose (0-indexed)

        Returns:
            MoveResult with the landing row and the resulting status

        Raises:
            OutOfRangeError, IllegalMoveError, GameAlreadyOverError
        """
        try:
            result = self.state.apply_move(column)
        except Connect4Error as e:
            debug.debug(f"Rejected move {column!r}: {e}", "session")
            raise

        self.moves_accepted += 1
        if result.status.is_game_over():
            debug.info(f"Game over after {self.moves_accepted} moves: {result.status.name}", "session")
        return result

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    def is_game_over(self) -> bool:
        return self.state.is_game_over()

    def get_winner(self) -> Optional[Player]:
        return self.state.status.winner

    def get_valid_moves(self) -> List[int]:
        return self.state.valid_moves()

    def winning_line(self) -> List[Coord]:
        """Positions of the winning line, or an empty list if nobody has won."""
        winner = self.get_winner()
        if winner is None:
            return []
        return winning_window(self.state.grid, winner) or []

    def end_message(self) -> Optional[str]:
        """End-of-game notice for the shell to show, or None while in progress."""
        winner = self.get_winner()
        if winner is not None:
            return f"Player {winner.value} won!"
        if self.state.status == GameStatus.DRAW:
            return "It's a tie!"
        return None

    def render(self) -> str:
        return self.state.render()
