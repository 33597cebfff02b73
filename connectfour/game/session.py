"""
session.py - Game session management for Connect Four

GameSession ties a "drop a piece in column x" command to the board: it
resolves the landing row, places the current player's piece, evaluates win
and tie, and advances the turn. It never renders anything; every command
returns a MoveOutcome the presentation layer can act on.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import ColumnFullError, GameOverError, InvalidColumnError
from connectfour.game.board import Board, Coord
from connectfour.game.player import Player
from connectfour.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, GameState, MoveStatus, RejectReason


@dataclass(frozen=True)
class MoveOutcome:
    """What a single ``drop_piece`` call did."""
    status: MoveStatus
    column: object
    player: Optional[Player] = None
    row: Optional[int] = None
    reason: Optional[RejectReason] = None
    winning_line: Tuple[Coord, ...] = field(default_factory=tuple)

    @property
    def accepted(self) -> bool:
        return self.status != MoveStatus.REJECTED

    @property
    def is_terminal(self) -> bool:
        return self.status in (MoveStatus.WON, MoveStatus.TIED)

    def raise_for_rejection(self) -> None:
        """Raise the error matching a rejected move; do nothing otherwise."""
        if self.reason == RejectReason.INVALID_COLUMN:
            raise InvalidColumnError(self.column)
        if self.reason == RejectReason.COLUMN_FULL:
            raise ColumnFullError(self.column)
        if self.reason == RejectReason.GAME_OVER:
            raise GameOverError(f"Game is already over, cannot drop in column {self.column}")


class GameSession:
    """
    A single Connect Four match between two players.

    The first player moves first. Once the game is won or tied, the board is
    frozen until ``restart`` builds a fresh one.
    """

    def __init__(self, player1: Player, player2: Player,
                 height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Start a new match.

        Args:
            player1: Player who moves first
            player2: Player who moves second
            height: Number of board rows
            width: Number of board columns

        Raises:
            ValueError: If both players are the same object or the
                dimensions are not positive integers
        """
        self._start(player1, player2, height, width)

    def _start(self, player1: Player, player2: Player, height: int, width: int) -> None:
        if player1 is None or player2 is None:
            raise ValueError("Both players are required")
        if player1 is player2:
            raise ValueError("A game needs two distinct players")

        self.board = Board(height, width)
        self._players = (player1, player2)
        self._current = player1
        self._state = GameState.IN_PROGRESS
        self._winner: Optional[Player] = None
        self._winning_line: List[Coord] = []
        debug.info(f"New {height}x{width} game: {player1!r} vs {player2!r}", "session")

    def restart(self, player1: Optional[Player] = None, player2: Optional[Player] = None,
                height: Optional[int] = None, width: Optional[int] = None) -> None:
        """
        Throw away the board and start over.

        Omitted arguments reuse the current players and dimensions.
        """
        player1 = player1 if player1 is not None else self._players[0]
        player2 = player2 if player2 is not None else self._players[1]
        height = height if height is not None else self.board.height
        width = width if width is not None else self.board.width
        debug.debug("Restarting game", "session")
        self._start(player1, player2, height, width)

    def _reject(self, column, reason: RejectReason) -> MoveOutcome:
        debug.debug(f"Rejected drop in column {column!r}: {reason.name}", "session")
        return MoveOutcome(MoveStatus.REJECTED, column, reason=reason)

    def drop_piece(self, column: int) -> MoveOutcome:
        """
        Drop the current player's piece into ``column``.

        Args:
            column: Column index (0-indexed)

        Returns:
            MoveOutcome describing the placement, or the rejection reason if
            the game is over, the column does not exist or it is full
        """
        if self._state.is_game_over():
            return self._reject(column, RejectReason.GAME_OVER)

        try:
            row = self.board.find_landing_row(column)
        except InvalidColumnError:
            return self._reject(column, RejectReason.INVALID_COLUMN)

        if row is None:
            return self._reject(column, RejectReason.COLUMN_FULL)

        player = self._current
        self.board.place(row, column, player)
        debug.debug(f"{player!r} dropped into column {column}, landed on row {row}", "session")

        debug.start_timer("win_check")
        line = self.board.winning_line_through(row, column, player)
        if not line:
            line = self.board.find_winning_line(player)
            if line:
                debug.warning(f"Found a line for {player!r} not through ({row}, {column})", "session")
        debug.end_timer("win_check", "session")

        if line:
            self._state = GameState.WON
            self._winner = player
            self._winning_line = line
            debug.info(f"{player!r} wins with {line}", "session")
            return MoveOutcome(MoveStatus.WON, column, player, row, winning_line=tuple(line))

        if self.board.is_full():
            self._state = GameState.TIED
            debug.info("Board full, game tied", "session")
            return MoveOutcome(MoveStatus.TIED, column, player, row)

        self._current = self.other_player(player)
        return MoveOutcome(MoveStatus.CONTINUE, column, player, row)

    def other_player(self, player: Player) -> Player:
        """The opponent of ``player``."""
        first, second = self._players
        if player is first:
            return second
        if player is second:
            return first
        raise ValueError(f"{player!r} is not part of this game")

    # Queries

    def get_cell_occupant(self, row: int, column: int) -> Optional[Player]:
        return self.board.get_cell(row, column)

    def get_current_player(self) -> Player:
        return self._current

    def get_state(self) -> GameState:
        return self._state

    def get_dimensions(self) -> Tuple[int, int]:
        return self.board.dimensions

    def get_board(self) -> np.ndarray:
        """Copy of the occupancy grid, for rendering."""
        return self.board.get_state()

    def encoded_board(self) -> np.ndarray:
        """Grid as int8: 0 empty, 1 first player, 2 second player."""
        return self.board.encode(self._players)

    @property
    def current_player(self) -> Player:
        return self._current

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def players(self) -> Tuple[Player, Player]:
        return self._players

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def winning_line(self) -> List[Coord]:
        return list(self._winning_line)

    @property
    def is_over(self) -> bool:
        return self._state.is_game_over()

    @property
    def move_count(self) -> int:
        return len(self.board.moves_made)

    def player_number(self, player: Player) -> int:
        """1 for the first player, 2 for the second."""
        return self._players.index(player) + 1

    def valid_columns(self) -> List[int]:
        if self.is_over:
            return []
        return self.board.valid_columns()

    def render(self) -> str:
        first, second = self._players
        return self.board.render({first: "X", second: "O"})
