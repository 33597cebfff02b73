"""
utils.py - Constants, enumerations and helpers shared by the engine

This module holds the board defaults, the game state and move outcome
enumerations, the direction vectors used for win detection and the ASCII
renderer used by the terminal interface.
"""

from enum import Enum, auto
from typing import Dict, Hashable, Optional, Tuple

import numpy as np

# Game constants
DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 7
CONNECT_N = 4  # Number of pieces in a row to win

DEFAULT_PLAYER_ONE_COLOR = "#ff0000"
DEFAULT_PLAYER_TWO_COLOR = "#ffff00"

EMPTY_SYMBOL = "."


class GameState(Enum):
    """Lifecycle of a game session."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameState.IN_PROGRESS


class MoveStatus(Enum):
    """Result of a drop command."""
    CONTINUE = auto()   # placed, game goes on
    WON = auto()        # placed, mover won
    TIED = auto()       # placed, board full without a winner
    REJECTED = auto()   # nothing changed


class RejectReason(Enum):
    """Why a drop command was rejected."""
    COLUMN_FULL = auto()
    GAME_OVER = auto()
    INVALID_COLUMN = auto()


class Direction(Enum):
    """Line orientations checked for a four-in-a-row."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# (delta_row, delta_col) for each direction; rows grow downward
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """Check if a position is within the board boundaries."""
    return 0 <= row < height and 0 <= col < width


def render_board_ascii(grid: np.ndarray, symbols: Optional[Dict[Hashable, str]] = None) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of cell occupants, ``None`` for empty cells
        symbols: Mapping from occupant to a one-character symbol; occupants
            missing from the mapping are drawn as ``?``

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    symbols = symbols or {}
    height, width = grid.shape
    border = "|" + "-" * (width * 2 - 1) + "|"

    lines = [border]
    for row in range(height):
        cells = []
        for col in range(width):
            occupant = grid[row, col]
            cells.append(EMPTY_SYMBOL if occupant is None else symbols.get(occupant, "?"))
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)

    # Column numbers wrap after 9 so wide boards stay aligned
    lines.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(lines)
