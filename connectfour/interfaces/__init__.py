"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the terminal front end that collects player
names and colors, renders the board and feeds column choices to the
engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
