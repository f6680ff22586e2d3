"""
errors.py - Exceptions raised by the Connect Four engine

Every error here is recoverable: the engine raises before touching any state,
so a caller can report the problem and try again.
"""

from connectfour.utils import GameStatus


class ConnectFourError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(ConnectFourError):
    """The grid is too small for four in a row, or the players are not distinct."""


class InvalidColumn(ConnectFourError):
    def __init__(self, column, width: int):
        self.column = column
        self.width = width
        super().__init__(f"Column {column!r} is out of range (0-{width - 1})")


class ColumnFull(ConnectFourError):
    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class GameAlreadyOver(ConnectFourError):
    def __init__(self, status: GameStatus):
        self.status = status
        super().__init__(f"The game is already over ({status.name})")
