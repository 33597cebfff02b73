"""
board.py - Board representation for Connect Four

This module implements the Board class, which owns the grid of cells,
resolves where a dropped piece lands and detects four-in-a-row lines.
Turn order and game lifecycle live in ``connectfour.game.session``.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import CellOccupiedError, InvalidColumnError, InvalidPositionError
from connectfour.game.player import Player
from connectfour.utils import (CONNECT_N, DEFAULT_HEIGHT, DEFAULT_WIDTH, DIRECTION_VECTORS,
                               is_valid_position, render_board_ascii)

Coord = Tuple[int, int]  # (row, col)


def _is_index(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class Board:
    """
    A ``height`` x ``width`` Connect Four grid.

    Row 0 is the top row and row ``height - 1`` the bottom one, so pieces
    fall toward increasing row indices. A cell is either ``None`` or the
    Player occupying it, and an occupied cell is never emptied again.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Initialize an empty board.

        Args:
            height: Number of rows (positive)
            width: Number of columns (positive)

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        if not _is_index(height) or not _is_index(width) or height < 1 or width < 1:
            raise ValueError(f"Board dimensions must be positive integers, got {height!r}x{width!r}")

        self.height = int(height)
        self.width = int(width)
        self.grid = np.empty((self.height, self.width), dtype=object)
        self.moves_made: List[Coord] = []
        debug.debug(f"Initialized {self.height}x{self.width} board", "board")

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.height, self.width

    def _check_column(self, column) -> int:
        if not _is_index(column) or not 0 <= column < self.width:
            debug.debug(f"Column {column!r} out of bounds", "board")
            raise InvalidColumnError(column, self.width)
        return int(column)

    def _check_position(self, row, column) -> Coord:
        if not (_is_index(row) and _is_index(column)
                and is_valid_position(row, column, self.height, self.width)):
            raise InvalidPositionError(row, column, self.height, self.width)
        return int(row), int(column)

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Find the row where a piece dropped into ``column`` would come to rest.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The lowest empty row index, or None if the column is full

        Raises:
            InvalidColumnError: If the column is outside the board
        """
        column = self._check_column(column)
        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] is None:
                return row
        debug.debug(f"Column {column} is full", "board")
        return None

    def place(self, row: int, column: int, player: Player) -> None:
        """
        Put ``player``'s piece into an empty cell.

        Raises:
            InvalidPositionError: If the cell is outside the board
            CellOccupiedError: If the cell already holds a piece
        """
        row, column = self._check_position(row, column)
        if self.grid[row, column] is not None:
            raise CellOccupiedError(row, column)

        debug.trace(f"Placing {player!r} at ({row}, {column})", "board")
        self.grid[row, column] = player
        self.moves_made.append((row, column))

    def is_full(self) -> bool:
        """True when every cell is occupied."""
        return len(self.moves_made) == self.height * self.width

    def get_cell(self, row: int, column: int) -> Optional[Player]:
        row, column = self._check_position(row, column)
        return self.grid[row, column]

    def valid_columns(self) -> List[int]:
        """Columns that still have room for a piece."""
        return [col for col in range(self.width) if self.grid[0, col] is None]

    def _line_from(self, row: int, column: int, dr: int, dc: int, player: Player) -> Optional[List[Coord]]:
        line = [(row + k * dr, column + k * dc) for k in range(CONNECT_N)]
        for r, c in line:
            if not is_valid_position(r, c, self.height, self.width) or self.grid[r, c] is not player:
                return None
        return line

    def has_win_from(self, row: int, column: int, player: Player) -> bool:
        """
        Check whether ``player`` owns four consecutive cells starting at
        (row, column) in any of the four directions.

        Cells past the edge of the board never count, so boards narrower or
        shorter than four simply cannot produce a win in that direction.
        """
        return any(self._line_from(row, column, dr, dc, player) is not None
                   for dr, dc in DIRECTION_VECTORS.values())

    def winning_line_through(self, row: int, column: int, player: Player) -> List[Coord]:
        """
        Get the run of ``player`` pieces through (row, column) that is at
        least four long, checking each direction both ways.

        Returns:
            The run's coordinates ordered along the line, or an empty list
        """
        if not is_valid_position(row, column, self.height, self.width):
            return []
        if self.grid[row, column] is not player:
            return []

        for dr, dc in DIRECTION_VECTORS.values():
            positions = [(row, column)]

            r, c = row + dr, column + dc
            while is_valid_position(r, c, self.height, self.width) and self.grid[r, c] is player:
                positions.append((r, c))
                r += dr
                c += dc

            r, c = row - dr, column - dc
            while is_valid_position(r, c, self.height, self.width) and self.grid[r, c] is player:
                positions.insert(0, (r, c))
                r -= dr
                c -= dc

            if len(positions) >= CONNECT_N:
                return positions

        return []

    def find_winning_line(self, player: Player) -> List[Coord]:
        """Scan every cell for a four-in-a-row of ``player``; first hit wins."""
        for row in range(self.height):
            for col in range(self.width):
                if self.grid[row, col] is not player:
                    continue
                for dr, dc in DIRECTION_VECTORS.values():
                    line = self._line_from(row, col, dr, dc, player)
                    if line is not None:
                        return line
        return []

    def get_state(self) -> np.ndarray:
        """Copy of the grid (occupants are shared, the array is not)."""
        return self.grid.copy()

    def encode(self, players: Sequence[Player]) -> np.ndarray:
        """
        Encode the grid as integers.

        Args:
            players: Players in order; the i-th player is encoded as i + 1

        Returns:
            int8 array with 0 for empty cells
        """
        encoded = np.zeros((self.height, self.width), dtype=np.int8)
        for index, player in enumerate(players, start=1):
            for row, col in self.moves_made:
                if self.grid[row, col] is player:
                    encoded[row, col] = index
        return encoded

    def render(self, symbols=None) -> str:
        return render_board_ascii(self.grid, symbols)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(height={self.height}, width={self.width}, pieces={len(self.moves_made)})"
