"""
errors.py - Exception hierarchy for the Connect Four rules engine

Every failed operation raises one of these before touching the game state,
so a caught error always means nothing changed.
"""

from typing import Any


class Connect4Error(Exception):
    """Base exception for all rules engine errors."""
    pass


class ConfigurationError(Connect4Error):
    """Raised when a game is created with unusable board dimensions."""

    def __init__(self, height: Any, width: Any, minimum: int):
        self.height = height
        self.width = width
        self.minimum = minimum
        super().__init__(
            f"Board must be at least {minimum}x{minimum} integers, got {height!r}x{width!r}"
        )


class OutOfRangeError(Connect4Error):
    """Raised when a column index falls outside the board."""

    def __init__(self, column: Any, width: int):
        self.column = column
        self.width = width
        super().__init__(f"Column {column!r} is not in range [0, {width})")


class IllegalMoveError(Connect4Error):
    """Raised when a piece is dropped into a full column."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class GameAlreadyOverError(Connect4Error):
    """Raised when a move is attempted after the game has ended."""

    def __init__(self, status):
        self.status = status
        super().__init__(f"Game is already over ({status.name})")
