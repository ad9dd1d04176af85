"""
rules.py - Win and draw detection for Connect Four

Every function here is pure: it reads a grid snapshot and never mutates it.
The win check scans every cell of the grid as a potential line start rather
than only the lines through the last piece. Restricting the scan to windows
through the last move would give the same answers and is a valid speedup.
"""

from typing import Iterator, List, Optional

import numpy as np

from connect4_rules.debug import debug
from connect4_rules.utils import (Coord, Direction, Player, is_valid_position,
                                  window_cells)


def iter_windows(height: int, width: int) -> Iterator[List[Coord]]:
    """
    Yield every candidate window, starting from each cell along each axis.

    Windows that run off the grid are yielded as well; callers skip them.
    """
    for row in range(height):
        for col in range(width):
            for direction in Direction:
                yield window_cells(row, col, direction)


def _window_owned_by(grid: np.ndarray, cells: List[Coord], player_value: int) -> bool:
    return all(
        is_valid_position(grid, row, col) and grid[row, col] == player_value
        for row, col in cells
    )


def winning_window(grid: np.ndarray, player: Player) -> Optional[List[Coord]]:
    """
    Find the first window of four cells all held by a player.

    Args:
        grid: The game grid
        player: The player to check for

    Returns:
        List of (row, col) positions forming the line, or None
    """
    height, width = grid.shape
    for cells in iter_windows(height, width):
        if _window_owned_by(grid, cells, player.value):
            debug.trace(f"Winning window for {player.name}: {cells}", "rules")
            return cells
    return None


def has_win(grid: np.ndarray, player: Player,
            last_row: Optional[int] = None, last_col: Optional[int] = None) -> bool:
    """
    Check whether a player holds four in a row anywhere on the grid.

    Args:
        grid: The game grid
        player: The player who just moved
        last_row: Row of the piece just placed (not used to narrow the scan)
        last_col: Column of the piece just placed (not used to narrow the scan)

    Returns:
        True if the player has a winning line
    """
    debug.start_timer("win_check")
    found = winning_window(grid, player) is not None
    debug.end_timer("win_check", "rules")
    debug.trace(f"has_win({player.name}) after ({last_row}, {last_col}) -> {found}", "rules")
    return found


def is_draw(grid: np.ndarray) -> bool:
    """
    Check whether every cell of the grid is occupied.

    Only meaningful once has_win has come back False for the mover;
    a move that both fills the grid and completes a line is a win.
    """
    return bool(np.all(grid != Player.EMPTY.value))


def check_gravity(grid: np.ndarray) -> bool:
    """
    Verify that no piece sits above an empty cell in its column.

    Returns:
        True if every column's pieces form a block anchored at the bottom row
    """
    occupied = grid != Player.EMPTY.value
    for col in range(grid.shape[1]):
        filled = np.flatnonzero(occupied[:, col])
        if filled.size and not occupied[filled[0]:, col].all():
            debug.debug(f"Floating piece in column {col}", "rules")
            return False
    return True
