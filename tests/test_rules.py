"""Tests for win and draw detection."""

import pytest

from connectfour.errors import OutOfRangeError
from connectfour.game import BoardState, is_draw, winning_columns, winning_line, would_win
from connectfour.utils import Player

from tests.conftest import fill

ONE, TWO = Player.ONE, Player.TWO


class TestWouldWin:
    def test_horizontal(self, board):
        fill(board, [(0, ONE), (1, ONE), (2, ONE)])
        assert would_win(board, 3, 0, ONE, 4)
        assert not would_win(board, 3, 0, TWO, 4)

    def test_horizontal_gap_in_middle(self, board):
        fill(board, [(0, ONE), (1, ONE), (3, ONE)])
        assert would_win(board, 2, 0, ONE, 4)

    def test_vertical(self, board):
        fill(board, [(5, TWO)] * 3)
        assert would_win(board, 5, 3, TWO, 4)

    def test_diagonal_up(self, board):
        # Staircase rising to the right
        fill(board, [
            (0, ONE),
            (1, TWO), (1, ONE),
            (2, TWO), (2, TWO), (2, ONE),
            (3, TWO), (3, TWO), (3, TWO),
        ])
        assert would_win(board, 3, 3, ONE, 4)

    def test_diagonal_down(self, board):
        # Staircase falling to the right
        fill(board, [
            (3, ONE),
            (2, TWO), (2, ONE),
            (1, TWO), (1, TWO), (1, ONE),
            (0, TWO), (0, TWO), (0, TWO),
        ])
        assert would_win(board, 0, 3, ONE, 4)

    def test_one_short_is_not_a_win(self, board):
        fill(board, [(0, ONE), (1, ONE)])
        assert not would_win(board, 2, 0, ONE, 4)
        assert would_win(board, 2, 0, ONE, 3)

    def test_opponent_token_breaks_the_line(self, board):
        fill(board, [(0, ONE), (1, TWO), (2, ONE), (3, ONE)])
        assert not would_win(board, 4, 0, ONE, 4)

    def test_no_wraparound(self):
        board = BoardState(4, 2)
        # Row 0 ends with three ONE tokens; the candidate starts row 1
        fill(board, [(0, TWO), (1, ONE), (2, ONE), (3, ONE)])
        assert not would_win(board, 0, 1, ONE, 4)

    def test_threshold_one_always_wins(self, board):
        assert would_win(board, 0, 0, ONE, 1)
        assert would_win(board, 6, 0, TWO, 1)

    def test_candidate_cell_out_of_range(self, board):
        with pytest.raises(OutOfRangeError):
            would_win(board, 7, 0, ONE, 4)

    def test_large_board_scenario(self):
        board = BoardState(18, 10)
        fill(board, [(0, TWO)] * 10 + [(1, ONE)] * 9)
        assert would_win(board, 0, 9, TWO, 10)
        assert would_win(board, 0, 0, TWO, 10)
        assert not would_win(board, 1, 0, ONE, 10)
        assert would_win(board, 1, 9, ONE, 10)


class TestIsDraw:
    def test_only_checked_on_final_row(self):
        board = BoardState(2, 2)
        fill(board, [(0, ONE), (1, TWO), (0, TWO)])
        assert not is_draw(board, 0)
        assert not is_draw(board, 1)  # column 1 still open
        board.place(1, ONE)
        assert is_draw(board, 1)
        assert not is_draw(board, 0)

    def test_single_cell_board(self):
        board = BoardState(1, 1)
        board.place(0, ONE)
        assert is_draw(board, 0)


class TestWinningLine:
    def test_returns_run_through_cell(self, board):
        fill(board, [(1, TWO), (2, TWO), (3, TWO), (4, TWO), (5, ONE)])
        assert winning_line(board, 3, 0) == [(1, 0), (2, 0), (3, 0), (4, 0)]

    def test_empty_cell(self, board):
        assert winning_line(board, 0, 0) == []


class TestWinningColumns:
    def test_lists_all_winning_columns(self, board):
        fill(board, [(1, ONE), (2, ONE), (3, ONE)])
        assert winning_columns(board, ONE, 4) == [0, 4]
        assert winning_columns(board, TWO, 4) == []

    def test_skips_full_columns(self):
        board = BoardState(2, 1)
        board.place(0, ONE)
        assert winning_columns(board, TWO, 1) == [1]
