"""
cli.py - Command-line interface for playing Connect Four

This module is the terminal presentation layer: it reads column numbers
from the keyboard, feeds them to a GameSession and prints the board and the
end-of-game message. It holds the only reference to the current session and
swaps in a new one on restart.
"""

from typing import List, Optional, Sequence, Union

from connectfour.debug import debug
from connectfour.game.player import Player
from connectfour.game.session import GameSession, MoveOutcome
from connectfour.utils import (DEFAULT_HEIGHT, DEFAULT_PLAYER_ONE_COLOR, DEFAULT_PLAYER_TWO_COLOR,
                               DEFAULT_WIDTH, MoveStatus, RejectReason)

QUIT = 'q'
RESTART = 'r'

Command = Union[int, str]


def parse_moves(moves: str) -> List[int]:
    """
    Parse a comma-separated list of columns such as ``"3,3,4"``.

    Raises:
        ValueError: If an entry is not an integer
    """
    return [int(part) for part in moves.split(',') if part.strip()]


class SimpleCLI:
    """Hot-seat Connect Four in the terminal."""

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH,
                 p1_color: str = DEFAULT_PLAYER_ONE_COLOR,
                 p2_color: str = DEFAULT_PLAYER_TWO_COLOR):
        self.height = height
        self.width = width
        self.p1_color = p1_color
        self.p2_color = p2_color
        self.session: Optional[GameSession] = None

    def new_session(self) -> GameSession:
        """Replace the current session with a fresh one and fresh players."""
        player1 = Player(self.p1_color)
        player2 = Player(self.p2_color)
        self.session = GameSession(player1, player2, self.height, self.width)
        debug.debug(f"CLI started session {self.height}x{self.width}", "cli")
        return self.session

    def player_label(self, player: Player) -> str:
        number = self.session.player_number(player)
        symbol = 'X' if number == 1 else 'O'
        return f"Player {number} ({symbol}, {player.color})"

    def describe(self, outcome: MoveOutcome) -> Optional[str]:
        """Message to show for an outcome, or None when there is nothing to say."""
        if outcome.status == MoveStatus.WON:
            return f"Player {self.session.player_number(outcome.player)} won!"
        if outcome.status == MoveStatus.TIED:
            return "Tie!"
        if outcome.reason == RejectReason.COLUMN_FULL:
            return f"Column {outcome.column} is full, pick another one."
        if outcome.reason == RejectReason.INVALID_COLUMN:
            return f"Column must be between 0 and {self.width - 1}."
        if outcome.reason == RejectReason.GAME_OVER:
            return "The game is over. Press 'r' to play again."
        return None

    def get_human_move(self) -> Optional[Command]:
        """
        Read one command from the keyboard.

        Returns:
            A column index, QUIT, RESTART, or None if the input was unusable
        """
        prompt = (f"{self.player_label(self.session.current_player)} "
                  f"move (columns 0-{self.width - 1}, q/r): ")
        try:
            user_input = input(prompt).strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESTART):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def play_game(self) -> Optional[GameSession]:
        """
        Play games until the user quits.

        Returns:
            The last session played, or None if the user quit before moving
        """
        print("Starting a new Connect Four game!")
        print("Commands: column number to drop a piece, 'r' to restart, 'q' to quit.")

        self.new_session()
        print(self.session.render())

        while True:
            command = self.get_human_move()
            if command is None:
                continue
            if command == QUIT:
                print("Quitting game.")
                return self.session if self.session.move_count else None
            if command == RESTART:
                self.new_session()
                print("Game restarted.")
                print(self.session.render())
                continue

            outcome = self.session.drop_piece(command)
            if outcome.accepted:
                print(self.session.render())
            message = self.describe(outcome)
            if message:
                print(message)

    def replay(self, moves: Sequence[int]) -> GameSession:
        """
        Play a fixed list of columns, printing the board after each one.

        Rejected moves are reported and skipped, as they would be in play.
        """
        self.new_session()
        print("Initial board:")
        print(self.session.render())

        for number, column in enumerate(moves, start=1):
            mover = self.session.current_player
            outcome = self.session.drop_piece(column)
            if outcome.accepted:
                print(f"\nMove {number}: {self.player_label(mover)} -> column {column}")
                print(self.session.render())
            message = self.describe(outcome)
            if message:
                print(message)

        if not self.session.is_over:
            print(f"\nGame in progress, {self.player_label(self.session.current_player)} to move.")
        return self.session
