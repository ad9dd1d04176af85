"""
connect4_rules.game - Core game mechanics for Connect Four

This package contains the game state, the win/draw rules, the session
orchestration used by shells, and the Gymnasium environment.
"""

from connect4_rules.game.state import (GameState, MoveResult, apply_move,
                                       create_game, legal_drop_row)
from connect4_rules.game.rules import has_win, is_draw, winning_window
from connect4_rules.game.session import GameSession

__all__ = ['GameState', 'MoveResult', 'create_game', 'legal_drop_row', 'apply_move',
           'has_win', 'is_draw', 'winning_window', 'GameSession']
