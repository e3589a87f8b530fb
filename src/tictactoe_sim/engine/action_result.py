"""Action result system for structured game engine responses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional


MOVE_INVALID_ERR = "Invalid move."
MOVE_POSTGAME_ERR = "Game has already ended. Move not accepted."


class ActionResultType(Enum):
    """Types of action results."""
    MOVE_MADE = "move_made"
    GAME_WON = "game_won"
    GAME_DRAWN = "game_drawn"

    # Errors
    ACTION_FAILED = "action_failed"


class MoveError(Enum):
    """Reasons a move can be rejected. Both are recoverable."""
    ILLEGAL_MOVE = "illegal_move"  # Out of bounds or occupied
    GAME_OVER = "game_over"        # Game already reached a terminal state

    @property
    def message(self) -> str:
        return MOVE_POSTGAME_ERR if self is MoveError.GAME_OVER else MOVE_INVALID_ERR


@dataclass
class ActionResult:
    """Structured result from executing a move."""
    success: bool
    action_type: str
    result_type: ActionResultType
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[MoveError] = None
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success

    @property
    def position(self):
        """The (row, col) the move targeted."""
        return self.data.get("position")

    @classmethod
    def success_result(cls, action_type: str, result_type: ActionResultType, **data) -> 'ActionResult':
        """Create a successful action result."""
        return cls(
            success=True,
            action_type=action_type,
            result_type=result_type,
            data=data
        )

    @classmethod
    def failure_result(cls, action_type: str, error: MoveError, **data) -> 'ActionResult':
        """Create a failed action result."""
        return cls(
            success=False,
            action_type=action_type,
            result_type=ActionResultType.ACTION_FAILED,
            data=data,
            error=error,
            error_message=error.message
        )
