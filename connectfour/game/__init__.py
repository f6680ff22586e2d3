"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the players, the
engine state machine and the errors it raises.
"""

from connectfour.game.board import Board
from connectfour.game.engine import (GameEngine, GameState, PlacementResult,
                                     games_created)
from connectfour.game.errors import (ColumnFull, ConnectFourError, GameAlreadyOver,
                                     InvalidColumn, InvalidConfiguration)
from connectfour.game.player import Player

__all__ = ['Board', 'GameEngine', 'GameState', 'PlacementResult', 'games_created',
           'Player', 'ConnectFourError', 'InvalidConfiguration', 'InvalidColumn',
           'ColumnFull', 'GameAlreadyOver']
