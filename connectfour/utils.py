"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module holds the values shared by the board, the engine and the
terminal front end: default grid size, the direction vectors scanned for a
win, the status/outcome enumerations and the ASCII renderer.
"""

from enum import Enum, auto
from typing import Dict, List, Optional, Sequence, Tuple

# Game constants
DEFAULT_ROWS = 6
DEFAULT_COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
MIN_SIZE = CONNECT_N  # Smallest grid side on which a line of four fits in every direction

# Slot values stored in the board grid
EMPTY = 0
FIRST = 1
SECOND = 2

DEFAULT_NAMES = ("Player1", "Player2")
DEFAULT_COLORS = ("red", "yellow")
SYMBOLS = {FIRST: "X", SECOND: "O"}

Coord = Tuple[int, int]  # (row, col)


class GameStatus(Enum):
    """Lifecycle of a single game."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        return self != GameStatus.IN_PROGRESS


class Outcome(Enum):
    """What a successful drop led to."""
    CONTINUE = auto()
    WIN = auto()
    TIE = auto()


class Direction(Enum):
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col); every line is scanned starting from its top/left end
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}

# ANSI foreground codes for the colors players can pick
ANSI_COLORS = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
}
ANSI_RESET = "\033[0m"


def line_from(row: int, col: int, vector: Tuple[int, int], length: int = CONNECT_N) -> List[Coord]:
    """Return ``length`` coordinates starting at (row, col) stepping by ``vector``."""
    dr, dc = vector
    return [(row + k * dr, col + k * dc) for k in range(length)]


def colorize(text: str, color: Optional[str]) -> str:
    """Wrap ``text`` in the ANSI code for ``color``; unknown colors are left plain."""
    code = ANSI_COLORS.get((color or "").lower())
    if code is None:
        return text
    return f"{code}{text}{ANSI_RESET}"


def render_board_ascii(grid: Sequence[Sequence[int]],
                       colors: Optional[Dict[int, str]] = None) -> str:
    """
    Render a grid of slot values as ASCII art.

    Args:
        grid: Rows of slot values (EMPTY, FIRST or SECOND), row 0 on top
        colors: Optional slot -> color name mapping used to color the pieces

    Returns:
        Multi-line string with borders and column numbers underneath
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    width = cols * 2 - 1
    border = "|" + "-" * width + "|"

    result = [border]
    for row in range(rows):
        cells = []
        for col in range(cols):
            slot = int(grid[row][col])
            if slot == EMPTY:
                cells.append(" ")
            else:
                symbol = SYMBOLS.get(slot, "?")
                cells.append(colorize(symbol, colors.get(slot)) if colors else symbol)
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Column numbers wrap past 9 so wide boards keep their alignment
    result.append("|" + " ".join(str(col % 10) for col in range(cols)) + "|")

    return "\n".join(result)
