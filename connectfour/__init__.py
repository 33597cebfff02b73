"""
connectfour - Two-player Connect Four engine

This package provides the board representation, win detection and game
session management for Connect Four, plus a small terminal interface for
playing hot-seat games.
"""

# Version number
__version__ = '0.1.0'

from connectfour.game import Board, GameSession, MoveOutcome, Player
from connectfour.utils import GameState, MoveStatus, RejectReason

__all__ = ['Board', 'GameSession', 'MoveOutcome', 'Player',
           'GameState', 'MoveStatus', 'RejectReason']
