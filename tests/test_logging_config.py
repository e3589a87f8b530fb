"""Tests for logging helpers."""

import json
import logging

from tictactoe_sim.utils.logging_config import build_formatter, get_game_logger, get_logger


def test_game_logger_strips_package_prefix():
    assert get_game_logger("tictactoe_sim.engine.game_engine").name == "engine.game_engine"


def test_game_logger_keeps_other_names():
    assert get_game_logger("tests.helpers").name == "tests.helpers"


def test_get_logger_uses_full_name():
    assert get_logger("tictactoe_sim.engine").name == "tictactoe_sim.engine"


def test_json_formatter_emits_one_object_per_record():
    formatter = build_formatter("json")
    record = logging.LogRecord("engine.game_engine", logging.INFO, __file__, 1,
                               "Final board:\n[X][_]\n[_][O]\n", None, None)

    payload = json.loads(formatter.format(record))

    assert payload["logger"] == "engine.game_engine"
    assert payload["level"] == "INFO"
    assert payload["message"] == "Final board:\n[X][_]\n[_][O]\n"


def test_unknown_format_falls_back_to_simple():
    record = logging.LogRecord("engine", logging.WARNING, __file__, 1, "hello", None, None)
    assert build_formatter("fancy").format(record) == "engine - WARNING - hello"
