"""Game models for TicTacToe simulation."""

from .player import Player, Cell
from .board import Board, Position, InvalidSizeError, MIN_BOARD_SIZE
from .line_registry import Line, LineKind, LineRegistry
from .move_log import MoveLog, MoveRecord, serialize_moves, parse_moves
from .game_state import GameState, GameResult

__all__ = [
    "Player",
    "Cell",
    "Board",
    "Position",
    "InvalidSizeError",
    "MIN_BOARD_SIZE",
    "Line",
    "LineKind",
    "LineRegistry",
    "MoveLog",
    "MoveRecord",
    "serialize_moves",
    "parse_moves",
    "GameState",
    "GameResult",
]
