"""Move policies for computer-controlled players.

A policy only reads the engine's public introspection (active lines and the
board snapshot) and submits moves through ``make_move`` like any other caller.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

from ..models.game.board import Position
from ..models.game.player import Cell
from ..utils.logging_config import get_game_logger

if TYPE_CHECKING:
    from .game_engine import GameEngine

logger = get_game_logger(__name__)


class MovePolicy(ABC):
    """Chooses a move for the engine's current player."""

    @abstractmethod
    def choose_move(self, engine: "GameEngine") -> Optional[Position]:
        """Return the move to play, or None when no move should be made."""
        pass

    def play_turn(self, engine: "GameEngine") -> bool:
        """Choose a move and submit it. Returns True if the engine accepted it."""
        move = self.choose_move(engine)
        if move is None:
            return False
        return engine.make_move(move.row, move.col)


class RandomLinePolicy(MovePolicy):
    """Picks a random line that can still be won and plays its first empty cell."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def choose_move(self, engine: "GameEngine") -> Optional[Position]:
        if engine.is_terminal:
            return None

        lines = engine.active_lines
        if not lines:
            logger.error("Winning lines are unavailable but the game is still running!")
            return None

        line = self.rng.choice(lines)
        board = engine.board
        for row, col in line.positions:
            if board[row][col] is Cell.EMPTY:
                return Position(row, col)

        logger.error(f"Did not find any empty blocks in the winning line {line}!")
        return None


class RandomCellPolicy(MovePolicy):
    """Picks any empty cell uniformly at random."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def choose_move(self, engine: "GameEngine") -> Optional[Position]:
        legal_moves = engine.get_legal_moves()
        if not legal_moves:
            return None
        return self.rng.choice(legal_moves)
