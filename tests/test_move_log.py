"""Tests for the move log and its text format."""

import random

from tictactoe_sim.models.game.board import Position
from tictactoe_sim.models.game.move_log import MoveLog, parse_moves, serialize_moves
from tictactoe_sim.models.game.player import Player


def test_serialize_format_is_exact():
    assert serialize_moves([(1, 0), (0, 2)]) == "[1,0]\n[0,2]\n"
    assert serialize_moves([]) == ""


def test_parse_and_serialize_round_trip():
    rng = random.Random(7)
    for _ in range(20):
        moves = [Position(rng.randrange(10), rng.randrange(10)) for _ in range(rng.randrange(30))]
        assert parse_moves(serialize_moves(moves)) == moves


def test_parse_accepts_crlf_and_blank_lines():
    text = "[0,0]\r\n[1,1]\r\n\r\n[2,2]"
    assert parse_moves(text) == [Position(0, 0), Position(1, 1), Position(2, 2)]


def test_parse_tolerates_missing_brackets_and_whitespace():
    assert parse_moves("  [ 1, 2 ]  \n3,4\n") == [Position(1, 2), Position(3, 4)]


def test_parse_skips_malformed_lines():
    text = "[0,0]\nnot a move\n[1]\n[1,2,3]\n[a,b]\n[1_0,0]\n[1.5,2]\n[2,1]\n"
    assert parse_moves(text) == [Position(0, 0), Position(2, 1)]


def test_parse_keeps_negative_coordinates():
    assert parse_moves("[-1,0]\n") == [Position(-1, 0)]


class TestMoveLog:
    """Test the append-only move log."""

    def test_append_in_order(self):
        log = MoveLog()
        log.append((0, 0), Player.A)
        log.append(Position(1, 1), Player.B)

        assert len(log) == 2
        assert log.positions() == [Position(0, 0), Position(1, 1)]
        assert [record.player for record in log] == [Player.A, Player.B]
        assert log.last.row == 1 and log.last.col == 1

    def test_empty_log(self):
        log = MoveLog()
        assert log.last is None
        assert log.serialize() == ""

    def test_serialize_matches_parse(self):
        log = MoveLog()
        for i, pos in enumerate([(2, 2), (0, 1), (1, 0)]):
            log.append(pos, Player.A if i % 2 == 0 else Player.B)

        assert log.serialize() == "[2,2]\n[0,1]\n[1,0]\n"
        assert MoveLog.parse(log.serialize()) == log.positions()
