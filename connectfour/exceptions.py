"""
exceptions.py - Error types raised by the Connect Four engine
"""

from typing import Optional


class ConnectFourError(Exception):
    """Base class for all engine errors."""


class InvalidColumnError(ConnectFourError, IndexError):
    """A column index outside ``[0, width)`` was supplied."""

    def __init__(self, column, width: Optional[int] = None):
        self.column = column
        self.width = width
        if width is None:
            super().__init__(f"Column {column!r} is out of range")
        else:
            super().__init__(f"Column {column!r} is out of range 0-{width - 1}")


class InvalidPositionError(ConnectFourError, IndexError):
    """A (row, column) pair outside the board was supplied."""

    def __init__(self, row, column, height: int, width: int):
        self.row = row
        self.column = column
        super().__init__(f"Position ({row!r}, {column!r}) is outside a {height}x{width} board")


class ColumnFullError(ConnectFourError):
    """The chosen column has no empty cell left."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class CellOccupiedError(ConnectFourError, ValueError):
    """A piece was placed on a cell that already holds one."""

    def __init__(self, row: int, column: int):
        self.row = row
        self.column = column
        super().__init__(f"Cell ({row}, {column}) is already occupied")


class GameOverError(ConnectFourError):
    """A move was attempted after the game was won or tied."""
