"""Shared fixtures for the Connect Four test suite."""

import sys
from pathlib import Path

import pytest

# Make run.py importable when the package is not installed
sys.path.insert(0, str(Path(__file__).parent.parent))

from connectfour.debug import debug, DebugLevel
from connectfour.game import GameSession, Player


# 42 drops that fill a 6x7 board without any four-in-a-row
TIE_MOVES = (
    [2] + [0] * 6 + [2]
    + [2] + [1] * 6 + [2]
    + [2] + [4] * 6 + [2]
    + [3] + [5] * 6 + [3]
    + [3] * 4
    + [6] * 6
)


@pytest.fixture(autouse=True)
def reset_debug():
    """Leave the shared debug manager the way each test found it."""
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def player_a():
    return Player("#ff0000", name="A")


@pytest.fixture
def player_b():
    return Player("#ffff00", name="B")


@pytest.fixture
def session(player_a, player_b):
    return GameSession(player_a, player_b)


def play(session, moves):
    """Drop each column in turn and return the list of outcomes."""
    return [session.drop_piece(column) for column in moves]
