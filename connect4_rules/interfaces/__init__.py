"""
connect4_rules.interfaces - User interfaces for Connect Four

This package contains the terminal interface for playing a game.
"""

# Don't import anything here to avoid circular imports
__all__ = []
