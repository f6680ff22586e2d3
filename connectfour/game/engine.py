"""
engine.py - Game state management for Connect Four

The GameEngine owns one Board, the two players, whose turn it is and the
game status. ``drop`` is the only operation that changes any of them, and it
either applies a move completely or raises without changing anything.
"""

import itertools
from dataclasses import dataclass
from typing import Optional, Tuple

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.errors import GameAlreadyOver, InvalidConfiguration
from connectfour.game.player import Player, default_players
from connectfour.utils import (DEFAULT_COLS, DEFAULT_ROWS, EMPTY, FIRST, MIN_SIZE, SECOND,
                               Coord, GameStatus, Outcome)

Cells = Tuple[Tuple[Optional[Player], ...], ...]


class GameCounter:
    """Numbers games in creation order for the lifetime of the process."""

    def __init__(self):
        self._numbers = itertools.count(1)
        self._created = 0

    def next_number(self) -> int:
        self._created = next(self._numbers)
        return self._created

    @property
    def created(self) -> int:
        return self._created


game_counter = GameCounter()


def games_created() -> int:
    """Total number of engines created so far in this process."""
    return game_counter.created


@dataclass(frozen=True)
class PlacementResult:
    outcome: Outcome
    player: Player
    row: int
    column: int
    winning_line: Tuple[Coord, ...] = ()


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of an engine."""
    grid: Cells
    current_player: Player
    status: GameStatus
    winner: Optional[Player] = None
    game_number: int = 0


class GameEngine:
    """
    Connect Four rules on a ``height`` x ``width`` grid.

    The first player moves first. After every successful drop the mover is
    checked for four in a row, then the grid for being full; only if neither
    ends the game does the turn pass to the other player.
    """

    def __init__(self, height: int = DEFAULT_ROWS, width: int = DEFAULT_COLS,
                 player1: Player = None, player2: Player = None):
        """
        Start a new game.

        Args:
            height: Number of rows, at least 4
            width: Number of columns, at least 4
            player1: Player who moves first
            player2: Player who moves second

        Raises:
            InvalidConfiguration: grid too small, or the players are equal
        """
        if player1 is None and player2 is None:
            player1, player2 = default_players()

        for name, value in (("height", height), ("width", width)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
            if value < MIN_SIZE:
                raise InvalidConfiguration(
                    f"{name} must be at least {MIN_SIZE} for four in a row, got {value}")

        if player1 is None or player2 is None:
            raise InvalidConfiguration("Two players are required")
        if player1 == player2:
            raise InvalidConfiguration(f"Players must be distinct, got {player1!r} twice")

        self.height = height
        self.width = width
        self.players = (player1, player2)
        self._board = Board(height, width)
        self._turn = 0  # index into self.players
        self._status = GameStatus.IN_PROGRESS
        self._winner: Optional[Player] = None
        self.game_number = game_counter.next_number()

        debug.info(f"Game {self.game_number} created: {height}x{width}, "
                   f"{player1.name} vs {player2.name}", "engine")

    @property
    def current_player(self) -> Player:
        return self.players[self._turn]

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def board(self) -> Board:
        """A copy of the board; changing it does not affect the game."""
        return self._board.copy()

    def is_over(self) -> bool:
        return self._status.is_game_over()

    def _slot_of(self, player: Player) -> int:
        if player == self.players[0]:
            return FIRST
        if player == self.players[1]:
            return SECOND
        raise ValueError(f"{player!r} is not playing in game {self.game_number}")

    def _player_at(self, slot: int) -> Optional[Player]:
        if slot == EMPTY:
            return None
        return self.players[slot - 1]

    def drop(self, column: int) -> PlacementResult:
        """
        Drop the current player's piece into ``column``.

        Returns:
            PlacementResult with outcome CONTINUE, WIN or TIE

        Raises:
            GameAlreadyOver: the game has already been won or tied
            InvalidColumn: column is not an integer in [0, width)
            ColumnFull: the column has no empty cell
        """
        if self._status.is_game_over():
            debug.debug(f"Rejected drop into {column!r}: game {self.game_number} "
                        f"is {self._status.name}", "engine")
            raise GameAlreadyOver(self._status)

        player = self.current_player
        slot = self._slot_of(player)
        row = self._board.place(column, slot)
        column = int(column)
        debug.debug(f"{player.name} dropped into column {column}, landed on row {row}", "engine")

        debug.start_timer("win_check")
        line = self._board.winning_line(slot)
        debug.end_timer("win_check", "engine")

        if line:
            self._status = GameStatus.WON
            self._winner = player
            debug.info(f"{player.name} won game {self.game_number} with {line}", "engine")
            return PlacementResult(Outcome.WIN, player, row, column, tuple(line))

        if self._board.is_full():
            self._status = GameStatus.TIED
            debug.info(f"Game {self.game_number} ends in a tie", "engine")
            return PlacementResult(Outcome.TIE, player, row, column)

        self._turn = 1 - self._turn
        debug.debug(f"Switching to {self.current_player.name}", "engine")
        return PlacementResult(Outcome.CONTINUE, player, row, column)

    def has_won(self, player: Player) -> bool:
        """Check the whole grid for four in a row owned by ``player``."""
        return self._board.check_win(self._slot_of(player))

    def is_tied(self) -> bool:
        """True if the grid is full and neither player has four in a row."""
        return self._board.is_full() and not any(self.has_won(p) for p in self.players)

    def valid_columns(self):
        if self.is_over():
            return []
        return self._board.valid_columns()

    def cell(self, row: int, col: int) -> Optional[Player]:
        return self._player_at(int(self._board.grid[row, col]))

    def cells(self) -> Cells:
        """Grid contents as rows of Player or None, row 0 on top."""
        return tuple(tuple(self._player_at(int(slot)) for slot in row)
                     for row in self._board.grid)

    def state(self) -> GameState:
        return GameState(self.cells(), self.current_player, self._status,
                         self._winner, self.game_number)

    def render(self, color: bool = True) -> str:
        colors = None
        if color:
            colors = {FIRST: self.players[0].color, SECOND: self.players[1].color}
        return self._board.render(colors)

    def __str__(self) -> str:
        return self.render(color=False)
