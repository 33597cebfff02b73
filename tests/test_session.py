"""
Tests for GameSession.

Tests cover:
- Turn order and alternation
- The example games: full column, horizontal win, invalid column, tie,
  moves after the game ended
- Vertical and diagonal wins, mirrored games
- Restart and the query surface
- MoveOutcome helpers
"""

import numpy as np
import pytest

from conftest import TIE_MOVES, play
from connectfour.exceptions import ColumnFullError, GameOverError, InvalidColumnError
from connectfour.game import GameSession, MoveOutcome, Player
from connectfour.utils import GameState, MoveStatus, RejectReason

HORIZONTAL_WIN = [0, 4, 1, 5, 2, 6, 3]
VERTICAL_WIN = [0, 1, 0, 1, 0, 1, 0]
DIAGONAL_WIN = [0, 1, 1, 2, 3, 2, 2, 3, 6, 3, 3]


def occupied(session):
    return sum(cell is not None for cell in session.get_board().flat)


class TestConstruction:
    """Starting a session."""

    def test_initial_state(self, session, player_a, player_b):
        assert session.get_state() == GameState.IN_PROGRESS
        assert session.get_current_player() is player_a
        assert session.get_dimensions() == (6, 7)
        assert session.players == (player_a, player_b)
        assert session.winner is None
        assert session.winning_line == []
        assert session.move_count == 0

    def test_custom_dimensions(self, player_a, player_b):
        session = GameSession(player_a, player_b, height=4, width=5)
        assert session.get_dimensions() == (4, 5)

    def test_same_player_twice(self, player_a):
        with pytest.raises(ValueError):
            GameSession(player_a, player_a)

    def test_missing_player(self, player_a):
        with pytest.raises(ValueError):
            GameSession(player_a, None)


class TestTurns:
    """Turn order."""

    def test_alternates(self, session, player_a, player_b):
        movers = [outcome.player for outcome in play(session, [0, 1, 2, 3, 4, 5])]
        assert movers == [player_a, player_b] * 3
        assert session.get_current_player() is player_a

    def test_rejection_keeps_turn(self, session, player_a, player_b):
        session.drop_piece(0)
        assert session.get_current_player() is player_b
        session.drop_piece(9)
        assert session.get_current_player() is player_b

    def test_outcome_for_placed_piece(self, session, player_a):
        outcome = session.drop_piece(3)
        assert outcome.status == MoveStatus.CONTINUE
        assert outcome.player is player_a
        assert (outcome.row, outcome.column) == (5, 3)
        assert outcome.accepted
        assert not outcome.is_terminal
        assert session.get_cell_occupant(5, 3) is player_a

    def test_occupied_cells_match_placements(self, session):
        outcomes = play(session, [3, 3, 3, 3, 3, 3, 3, 7, 0, 1])
        placed = sum(outcome.accepted for outcome in outcomes)
        assert placed == 8
        assert occupied(session) == placed == session.move_count


class TestExampleGames:
    """The reference scenarios on a 6x7 board."""

    def test_full_column_rejected(self, session, player_a):
        outcomes = play(session, [3] * 7)
        assert all(outcome.status == MoveStatus.CONTINUE for outcome in outcomes[:6])
        assert outcomes[6].status == MoveStatus.REJECTED
        assert outcomes[6].reason == RejectReason.COLUMN_FULL
        assert session.get_current_player() is player_a
        assert session.move_count == 6

    def test_horizontal_win(self, session, player_a):
        outcomes = play(session, HORIZONTAL_WIN)
        last = outcomes[-1]
        assert last.status == MoveStatus.WON
        assert last.player is player_a
        assert last.winning_line == ((5, 0), (5, 1), (5, 2), (5, 3))
        assert session.get_state() == GameState.WON
        assert session.winner is player_a
        # Winner keeps the turn
        assert session.get_current_player() is player_a

    def test_invalid_column(self, session):
        outcome = session.drop_piece(7)
        assert outcome.status == MoveStatus.REJECTED
        assert outcome.reason == RejectReason.INVALID_COLUMN
        assert session.move_count == 0

    @pytest.mark.parametrize("column", [-1, "3", None, 1.5])
    def test_other_invalid_columns(self, session, column):
        assert session.drop_piece(column).reason == RejectReason.INVALID_COLUMN

    def test_tie(self, session):
        outcomes = play(session, TIE_MOVES)
        assert len(TIE_MOVES) == 42
        assert all(outcome.status == MoveStatus.CONTINUE for outcome in outcomes[:-1])
        assert outcomes[-1].status == MoveStatus.TIED
        assert session.get_state() == GameState.TIED
        assert session.winner is None
        assert session.board.is_full()

    def test_drop_after_win(self, session, player_a):
        play(session, HORIZONTAL_WIN)
        before = session.get_board()

        outcome = session.drop_piece(0)

        assert outcome.status == MoveStatus.REJECTED
        assert outcome.reason == RejectReason.GAME_OVER
        assert session.get_state() == GameState.WON
        assert session.get_current_player() is player_a
        assert np.array_equal(session.get_board(), before)

    def test_drop_after_tie(self, session):
        play(session, TIE_MOVES)
        assert session.drop_piece(0).reason == RejectReason.GAME_OVER
        assert session.get_state() == GameState.TIED

    def test_game_over_checked_before_column(self, session):
        play(session, HORIZONTAL_WIN)
        assert session.drop_piece(42).reason == RejectReason.GAME_OVER


class TestOtherWins:
    """Vertical and diagonal wins and mirror symmetry."""

    def test_vertical(self, session, player_a):
        outcome = play(session, VERTICAL_WIN)[-1]
        assert outcome.status == MoveStatus.WON
        assert outcome.player is player_a
        assert set(outcome.winning_line) == {(2, 0), (3, 0), (4, 0), (5, 0)}

    def test_diagonal(self, session, player_a):
        outcome = play(session, DIAGONAL_WIN)[-1]
        assert outcome.status == MoveStatus.WON
        assert outcome.player is player_a
        assert set(outcome.winning_line) == {(5, 0), (4, 1), (3, 2), (2, 3)}

    def test_second_player_can_win(self, session, player_b):
        outcome = play(session, [6, 0, 6, 1, 5, 2, 4, 3])[-1]
        assert outcome.status == MoveStatus.WON
        assert session.winner is player_b

    @pytest.mark.parametrize("moves", [HORIZONTAL_WIN, VERTICAL_WIN, DIAGONAL_WIN, TIE_MOVES])
    def test_mirrored_game(self, player_a, player_b, moves):
        original = GameSession(player_a, player_b)
        mirrored = GameSession(player_a, player_b)
        last = play(original, moves)[-1]
        mirrored_last = play(mirrored, [6 - column for column in moves])[-1]

        assert mirrored_last.status == last.status
        assert mirrored.winner is original.winner
        assert set(mirrored_last.winning_line) == {(r, 6 - c) for r, c in last.winning_line}

    def test_line_not_through_last_piece_still_wins(self, session, player_a):
        # Pieces put straight on the board bypass the session's checks
        for col in range(4):
            session.board.place(5, col, player_a)

        outcome = session.drop_piece(6)

        assert outcome.status == MoveStatus.WON
        assert outcome.winning_line == ((5, 0), (5, 1), (5, 2), (5, 3))


class TestSmallBoards:
    """Boards smaller than the win length."""

    def test_three_by_three_ties(self, player_a, player_b):
        session = GameSession(player_a, player_b, height=3, width=3)
        outcomes = play(session, [0, 0, 0, 1, 1, 1, 2, 2, 2])
        assert outcomes[-1].status == MoveStatus.TIED
        assert session.winner is None

    def test_one_by_one(self, player_a, player_b):
        session = GameSession(player_a, player_b, height=1, width=1)
        assert session.drop_piece(0).status == MoveStatus.TIED


class TestRestart:
    """restart discards the board."""

    def test_restart_same_players(self, session, player_a, player_b):
        old_board = session.board
        play(session, HORIZONTAL_WIN)

        session.restart()

        assert session.board is not old_board
        assert session.get_state() == GameState.IN_PROGRESS
        assert session.get_current_player() is player_a
        assert session.players == (player_a, player_b)
        assert session.winner is None
        assert session.move_count == 0

    def test_restart_new_players_and_size(self, session):
        play(session, [0, 1])
        red, blue = Player("red"), Player("blue")

        session.restart(red, blue, height=5, width=8)

        assert session.players == (red, blue)
        assert session.get_current_player() is red
        assert session.get_dimensions() == (5, 8)
        assert session.drop_piece(7).player is red

    def test_restart_mid_game_resets_turn(self, session, player_a):
        session.drop_piece(0)
        session.restart()
        assert session.get_current_player() is player_a


class TestQueries:
    """Read-only helpers."""

    def test_valid_columns(self, session):
        play(session, [2] * 6)
        assert session.valid_columns() == [0, 1, 3, 4, 5, 6]
        # First player owns (5, 2), so 0, 1, 3 completes the bottom row
        assert play(session, [0, 4, 1, 5, 3])[-1].status == MoveStatus.WON
        assert session.valid_columns() == []

    def test_other_player(self, session, player_a, player_b):
        assert session.other_player(player_a) is player_b
        assert session.other_player(player_b) is player_a
        with pytest.raises(ValueError):
            session.other_player(Player("green"))

    def test_player_number(self, session, player_a, player_b):
        assert session.player_number(player_a) == 1
        assert session.player_number(player_b) == 2

    def test_encoded_board(self, session):
        play(session, [0, 1])
        encoded = session.encoded_board()
        assert encoded[5, 0] == 1
        assert encoded[5, 1] == 2

    def test_render_uses_x_and_o(self, session):
        play(session, [0, 1])
        assert "|X O . . . . .|" in session.render()

    def test_player_is_immutable(self, player_a):
        with pytest.raises(AttributeError):
            player_a.color = "blue"
        assert player_a.label == "A"
        assert Player("red").label == "red"


class TestMoveOutcome:
    """Outcome helpers."""

    def test_raise_for_rejection(self):
        with pytest.raises(InvalidColumnError):
            MoveOutcome(MoveStatus.REJECTED, 9, reason=RejectReason.INVALID_COLUMN).raise_for_rejection()
        with pytest.raises(ColumnFullError):
            MoveOutcome(MoveStatus.REJECTED, 3, reason=RejectReason.COLUMN_FULL).raise_for_rejection()
        with pytest.raises(GameOverError):
            MoveOutcome(MoveStatus.REJECTED, 3, reason=RejectReason.GAME_OVER).raise_for_rejection()

    def test_accepted_outcome_does_not_raise(self, session):
        session.drop_piece(0).raise_for_rejection()

    def test_outcome_is_frozen(self, session):
        outcome = session.drop_piece(0)
        with pytest.raises(AttributeError):
            outcome.row = 0
