"""
state.py - Game state for a single Connect Four session

This module implements GameState, which owns the grid, the player to move and
the game status. apply_move is the only operation that mutates it, and it
either completes fully or raises before changing anything.
"""

import operator
from typing import List, NamedTuple, Optional

import numpy as np

from connect4_rules.debug import debug, DebugLevel
from connect4_rules.errors import (ConfigurationError, GameAlreadyOverError,
                                   IllegalMoveError, OutOfRangeError)
from connect4_rules.game.rules import check_gravity, has_win, is_draw
from connect4_rules.utils import (HEIGHT, MIN_DIMENSION, WIDTH, Coord,
                                  GameStatus, Player, render_board_ascii)


class MoveResult(NamedTuple):
    """Outcome of an accepted move."""
    row: int
    column: int
    player: Player
    status: GameStatus


def _validate_dimension(value) -> bool:
    return (isinstance(value, (int, np.integer))
            and not isinstance(value, bool)
            and value >= MIN_DIMENSION)


class GameState:
    """
    Represents the grid, the player to move and the status of one game.

    The grid is exposed read-only; moves go through apply_move.
    """

    def __init__(self, height: int = HEIGHT, width: int = WIDTH):
        """
        Create an empty game.

        Args:
            height: Number of rows (at least 4)
            width: Number of columns (at least 4)

        Raises:
            ConfigurationError: If either dimension is unusable
        """
        if not (_validate_dimension(height) and _validate_dimension(width)):
            debug.error(f"Rejected board dimensions {height!r}x{width!r}", "state")
            raise ConfigurationError(height, width, MIN_DIMENSION)

        self._grid = np.zeros((int(height), int(width)), dtype=int)
        self._current_player = Player.ONE
        self._status = GameStatus.IN_PROGRESS
        self._last_move: Optional[Coord] = None
        debug.debug(f"Created {height}x{width} game", "state")

    @property
    def height(self) -> int:
        return self._grid.shape[0]

    @property
    def width(self) -> int:
        return self._grid.shape[1]

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the grid."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def last_move(self) -> Optional[Coord]:
        return self._last_move

    def is_game_over(self) -> bool:
        return self._status.is_game_over()

    def copy(self) -> 'GameState':
        """
        Create an independent copy of this state.

        Returns:
            A new GameState with the same grid, player and status
        """
        new_state = GameState(self.height, self.width)
        new_state._grid = self._grid.copy()
        new_state._current_player = self._current_player
        new_state._status = self._status
        new_state._last_move = self._last_move
        return new_state

    def _check_column(self, column) -> int:
        if isinstance(column, bool):
            raise OutOfRangeError(column, self.width)
        try:
            index = operator.index(column)
        except TypeError:
            raise OutOfRangeError(column, self.width) from None
        if not 0 <= index < self.width:
            raise OutOfRangeError(column, self.width)
        return index

    def legal_drop_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into a column would land on.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The lowest empty row, or None if the column is full

        Raises:
            OutOfRangeError: If the column is not on the board
        """
        col = self._check_column(column)
        for row in range(self.height - 1, -1, -1):
            if self._grid[row, col] == Player.EMPTY.value:
                return row
        return None

    def valid_moves(self) -> List[int]:
        """Columns that can still take a piece; empty once the game is over."""
        if self.is_game_over():
            return []
        return [col for col in range(self.width)
                if self._grid[0, col] == Player.EMPTY.value]

    def apply_move(self, column: int) -> MoveResult:
        """
        Drop the current player's piece into a column and settle the outcome.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            MoveResult with the landing row and the resulting status

        Raises:
            GameAlreadyOverError: If the game has already ended
            OutOfRangeError: If the column is not on the board
            IllegalMoveError: If the column is full
        """
        if self.is_game_over():
            debug.warning(f"Move in column {column} after game over ({self._status.name})", "state")
            raise GameAlreadyOverError(self._status)

        row = self.legal_drop_row(column)
        if row is None:
            debug.debug(f"Column {column} is full", "state")
            raise IllegalMoveError(column)

        col = operator.index(column)
        mover = self._current_player
        self._grid[row, col] = mover.value
        self._last_move = (row, col)
        debug.debug(f"Player {mover.name} placed at ({row}, {col})", "state")

        if has_win(self._grid, mover, row, col):
            self._status = GameStatus.won_by(mover)
            debug.info(f"Player {mover.name} wins after move at {self._last_move}", "state")
        elif is_draw(self._grid):
            self._status = GameStatus.DRAW
            debug.info("Game ends in a draw", "state")
        else:
            self._current_player = mover.other()

        if debug.level == DebugLevel.TRACE:
            debug.trace(f"Gravity holds: {check_gravity(self._grid)}", "state")
        return MoveResult(row, col, mover, self._status)

    def render(self) -> str:
        return render_board_ascii(self._grid)

    def __str__(self) -> str:
        return self.render()


def create_game(height: int = HEIGHT, width: int = WIDTH) -> GameState:
    """Start a new game on an empty height x width grid."""
    return GameState(height, width)


def legal_drop_row(state: GameState, column: int) -> Optional[int]:
    return state.legal_drop_row(column)


def apply_move(state: GameState, column: int) -> MoveResult:
    return state.apply_move(column)
