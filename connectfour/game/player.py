"""
player.py - Player identity for Connect Four

A player is a name plus a display color. The engine only ever compares
players for equality; the color matters to the front end alone.
"""

from dataclasses import dataclass

from connectfour.utils import DEFAULT_COLORS, DEFAULT_NAMES


@dataclass(frozen=True)
class Player:
    name: str
    color: str = ""

    def __str__(self) -> str:
        return self.name


def default_players():
    """Return the two players used when the front end is given no names or colors."""
    return (Player(DEFAULT_NAMES[0], DEFAULT_COLORS[0]),
            Player(DEFAULT_NAMES[1], DEFAULT_COLORS[1]))
