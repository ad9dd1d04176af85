"""Shared fixtures for the Connect Four rules engine tests."""

import numpy as np
import pytest

from connect4_rules.debug import debug, DebugLevel
from connect4_rules.utils import Player


@pytest.fixture(autouse=True)
def reset_debug():
    """Restore the shared debug manager after each test."""
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def empty_grid():
    return np.zeros((6, 7), dtype=int)


@pytest.fixture
def drawn_grid():
    """Full 6x7 grid with no four-in-a-row for either player."""
    grid = np.zeros((6, 7), dtype=int)
    for y in range(6):
        for x in range(7):
            grid[y, x] = Player.ONE.value if (x + y // 2) % 2 == 0 else Player.TWO.value
    return grid
