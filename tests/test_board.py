"""Tests for board, cell and player models."""

import pytest

from tictactoe_sim.models.game.board import Board, InvalidSizeError, Position
from tictactoe_sim.models.game.player import Cell, Player


def test_player_opponent():
    assert Player.A.opponent() is Player.B
    assert Player.B.opponent() is Player.A
    assert Player.A.symbol == "X"
    assert Player.B.symbol == "O"


def test_cell_for_player():
    assert Cell.for_player(Player.A) is Cell.A
    assert Cell.for_player(Player.B) is Cell.B
    assert not Cell.A.is_empty
    assert Cell.EMPTY.is_empty


def test_position_is_value_type():
    assert Position(1, 2) == (1, 2)
    assert hash(Position(1, 2)) == hash((1, 2))
    assert Position(0, 5) < Position(1, 0)
    assert str(Position(1, 0)) == "[1,0]"


class TestBoard:
    """Test board storage and queries."""

    def test_new_board_is_empty(self):
        board = Board(4)
        assert len(board) == 16
        assert board.count(Cell.EMPTY) == 16
        assert all(cell is Cell.EMPTY for row in board.snapshot() for cell in row)

    def test_place_writes_player_cell(self):
        board = Board(3)
        board.place(2, 1, Player.B)

        assert board.get(2, 1) is Cell.B
        assert board.snapshot()[2][1] is Cell.B
        assert not board.is_empty(2, 1)
        assert Position(2, 1) not in board.empty_positions()

    def test_place_on_occupied_cell_fails(self):
        board = Board(3)
        board.place(0, 0, Player.A)
        with pytest.raises(ValueError, match="already occupied"):
            board.place(0, 0, Player.B)

    def test_out_of_bounds_access_fails(self):
        board = Board(3)
        assert not board.in_bounds(-1, 0)
        assert not board.in_bounds(0, 3)
        with pytest.raises(IndexError):
            board.get(3, 0)

    def test_flat_index_is_row_major(self):
        board = Board(5)
        assert board.index(Position(0, 0)) == 0
        assert board.index(Position(2, 3)) == 13
        assert list(board.positions())[13] == Position(2, 3)

    def test_snapshot_is_detached(self):
        board = Board(2)
        snapshot = board.snapshot()
        board.place(0, 0, Player.A)
        assert snapshot[0][0] is Cell.EMPTY

    def test_is_full(self):
        board = Board(2)
        for i, pos in enumerate(board.positions()):
            assert not board.is_full()
            board.place(pos.row, pos.col, Player.A if i % 2 == 0 else Player.B)
        assert board.is_full()

    @pytest.mark.parametrize("size", [1, 0, -1, 2.5, "3", True])
    def test_invalid_size(self, size):
        with pytest.raises(InvalidSizeError):
            Board(size)
