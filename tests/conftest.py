import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.game import GameEngine, Player


@pytest.fixture(autouse=True)
def quiet_debug():
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")


@pytest.fixture
def alice():
    return Player("Alice", "red")


@pytest.fixture
def bob():
    return Player("Bob", "yellow")


@pytest.fixture
def engine(alice, bob):
    return GameEngine(6, 7, alice, bob)
