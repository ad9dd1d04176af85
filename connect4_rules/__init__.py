"""
connect4_rules - Rules engine for two-player Connect Four

This package provides the game state model, win and draw detection, a session
object that hosting shells drive one move at a time, a Gymnasium environment
and a terminal interface.
"""

# Version number
__version__ = '0.1.0'
