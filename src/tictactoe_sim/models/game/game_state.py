"""Game state model for TicTacToe simulation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .board import Board, Position
from .line_registry import LineRegistry
from .move_log import MoveLog
from .player import Player


class GameResult(Enum):
    """Possible game results."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"  # No active line remains for either player


@dataclass
class GameState:
    """Tracks the complete state of one game session."""
    board: Board
    registry: LineRegistry
    move_log: MoveLog = field(default_factory=MoveLog)
    current_player: Player = Player.A
    result: GameResult = GameResult.IN_PROGRESS
    winner: Optional[Player] = None
    last_move: Optional[Position] = None

    def __post_init__(self) -> None:
        """Validate game state after creation."""
        if self.board.size != self.registry.size:
            raise ValueError(
                f"Board size {self.board.size} does not match line registry size {self.registry.size}"
            )

    @classmethod
    def new(cls, size: int) -> "GameState":
        """Create an empty game with player A to move."""
        return cls(board=Board(size), registry=LineRegistry.generate(size))

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def is_terminal(self) -> bool:
        return self.result is not GameResult.IN_PROGRESS

    @property
    def move_count(self) -> int:
        return len(self.move_log)
