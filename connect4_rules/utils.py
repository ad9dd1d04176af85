"""
utils.py - Constants, enumerations and helpers for the Connect Four rules engine

Board dimensions here are defaults only; every function that touches a grid
reads the real dimensions from the grid's shape.
"""

from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import numpy as np

# Default board configuration
HEIGHT = 6
WIDTH = 7
CONNECT_N = 4  # Number of pieces in a row to win
MIN_DIMENSION = CONNECT_N

Coord = Tuple[int, int]  # (row, col)


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameStatus(Enum):
    """Enumeration representing the status of a game session."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    @classmethod
    def won_by(cls, player: Player) -> 'GameStatus':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win status for {player!r}")

    @property
    def winner(self) -> Optional[Player]:
        if self == GameStatus.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameStatus.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    def is_game_over(self) -> bool:
        """Check if the status is terminal."""
        return self != GameStatus.IN_PROGRESS


class Direction(Enum):
    """Axes along which four-in-a-row windows are laid out."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Step (row, col) from a window's start cell, rows growing downward
DIRECTION_VECTORS: Dict[Direction, Coord] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check if a position is within the grid boundaries.

    Args:
        grid: The game grid
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    height, width = grid.shape
    return 0 <= row < height and 0 <= col < width


def window_cells(row: int, col: int, direction: Direction) -> List[Coord]:
    """Coordinates of the CONNECT_N-long window starting at (row, col)."""
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + k * dr, col + k * dc) for k in range(CONNECT_N)]


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art.

    Args:
        grid: The game grid

    Returns:
        ASCII representation of the grid, with column numbers underneath
    """
    height, width = grid.shape
    border = "|" + "-" * (width * 2 - 1) + "|"

    result = [border]
    for row in range(height):
        cells = [str(Player(int(grid[row, col]))) for col in range(width)]
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Columns past 9 only show their last digit
    result.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(result)
