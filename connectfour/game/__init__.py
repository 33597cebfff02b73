"""
connectfour.game - Core game mechanics for Connect Four

This package contains the player identity, the board representation and
the game session that drives turns and detects the end of a game.
"""

from connectfour.game.player import Player
from connectfour.game.board import Board
from connectfour.game.session import GameSession, MoveOutcome

__all__ = ['Player', 'Board', 'GameSession', 'MoveOutcome']
