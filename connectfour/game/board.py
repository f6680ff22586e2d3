"""
board.py - Grid representation and placement rules for Connect Four

The Board stores slot values (EMPTY, FIRST, SECOND) in a numpy array indexed
``[row, col]`` with row 0 at the top. It knows nothing about turns or players;
the GameEngine maps its two players onto the slots.
"""

import numpy as np
from typing import List, Optional

from connectfour.debug import debug
from connectfour.game.errors import ColumnFull, InvalidColumn
from connectfour.utils import (CONNECT_N, DEFAULT_COLS, DEFAULT_ROWS, DIRECTION_VECTORS,
                               EMPTY, Coord, line_from, render_board_ascii)


def is_column_index(column) -> bool:
    """True for ints and numpy integers, but not for bools."""
    return isinstance(column, (int, np.integer)) and not isinstance(column, (bool, np.bool_))


class Board:
    """
    A fixed-size Connect Four grid.

    Cells are only ever filled, never cleared, so the number of occupied
    cells grows by exactly one with every successful ``place``.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        debug.trace(f"Initializing {rows}x{cols} board", "board")
        self.rows = rows
        self.cols = cols
        self.grid = np.full((rows, cols), EMPTY, dtype=np.int8)

    def copy(self) -> 'Board':
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        return new_board

    def find_spot_for_col(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into ``column`` would land in.

        Returns:
            The lowest empty row of the column, or None if the column is full
        """
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == EMPTY:
                return row
        return None

    def is_valid_move(self, column) -> bool:
        return (is_column_index(column) and 0 <= column < self.cols
                and self.grid[0, column] == EMPTY)

    def valid_columns(self) -> List[int]:
        return [col for col in range(self.cols) if self.grid[0, col] == EMPTY]

    def place(self, column, slot: int) -> int:
        """
        Drop a piece for ``slot`` into ``column``.

        Args:
            column: Column index, 0-indexed
            slot: FIRST or SECOND

        Returns:
            The row the piece landed in

        Raises:
            InvalidColumn: column is not an integer in [0, cols)
            ColumnFull: the column has no empty cell
        """
        if not is_column_index(column) or not (0 <= column < self.cols):
            debug.debug(f"Invalid move: column {column!r} out of bounds", "board")
            raise InvalidColumn(column, self.cols)

        column = int(column)
        row = self.find_spot_for_col(column)
        if row is None:
            debug.debug(f"Invalid move: column {column} is full", "board")
            raise ColumnFull(column)

        debug.trace(f"Placing slot {slot} at position ({row}, {column})", "board")
        self.grid[row, column] = slot
        return row

    def _line_starts(self, mask: np.ndarray, vector) -> np.ndarray:
        """
        Return start coordinates of every in-bounds line of CONNECT_N cells
        along ``vector`` whose cells are all set in ``mask``.
        """
        dr, dc = vector
        span_r, span_c = (CONNECT_N - 1) * dr, (CONNECT_N - 1) * dc
        r_lo, r_hi = max(0, -span_r), self.rows - max(0, span_r)
        c_lo, c_hi = max(0, -span_c), self.cols - max(0, span_c)
        if r_hi <= r_lo or c_hi <= c_lo:
            return np.empty((0, 2), dtype=int)

        hits = np.ones((r_hi - r_lo, c_hi - c_lo), dtype=bool)
        for k in range(CONNECT_N):
            hits &= mask[r_lo + k * dr:r_hi + k * dr, c_lo + k * dc:c_hi + k * dc]

        return np.argwhere(hits) + (r_lo, c_lo)

    def winning_line(self, slot: int) -> List[Coord]:
        """
        Scan the whole grid for four aligned cells owned by ``slot``.

        Every cell is tried as the start of a horizontal, vertical,
        down-right and down-left line. The first line found is returned;
        which one is unspecified when there are several.

        Returns:
            Four (row, col) coordinates, or an empty list if there is no line
        """
        if slot == EMPTY:
            return []

        mask = self.grid == slot
        for direction, vector in DIRECTION_VECTORS.items():
            starts = self._line_starts(mask, vector)
            if len(starts):
                row, col = (int(v) for v in starts[0])
                debug.trace(f"{direction.name} line for slot {slot} at ({row}, {col})", "board")
                return line_from(row, col, vector)

        return []

    def check_win(self, slot: int) -> bool:
        return bool(self.winning_line(slot))

    def is_full(self) -> bool:
        return bool(np.all(self.grid != EMPTY))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def get_state(self) -> np.ndarray:
        """Return a copy of the grid so callers cannot mutate the board."""
        return self.grid.copy()

    def render(self, colors=None) -> str:
        return render_board_ascii(self.grid, colors)

    def __str__(self) -> str:
        return self.render()
