"""
connectfour - Two-player Connect Four game engine

This package provides the game-state engine (grid, gravity placement,
turn alternation, win and tie detection) together with a terminal
front end that plays games against it.
"""

# Version number
__version__ = '0.1.0'
