"""Test helper utilities for TicTacToe simulation tests."""

from .game_helpers import (
    EventRecorder,
    play_moves,
    shuffled_positions,
    board_is_draw,
    board_has_win,
    board_lines,
)

__all__ = [
    'EventRecorder',
    'play_moves',
    'shuffled_positions',
    'board_is_draw',
    'board_has_win',
    'board_lines',
]
