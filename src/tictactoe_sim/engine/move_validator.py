"""Move validation for TicTacToe gameplay."""

from typing import List, Optional

from ..models.game.board import Position
from ..models.game.game_state import GameState
from .action_result import MoveError


class MoveValidator:
    """Validates moves against the current game state."""

    def __init__(self, game_state: GameState):
        self.game_state = game_state

    def validate(self, row: int, col: int) -> Optional[MoveError]:
        """Return the reason a move would be rejected, or None if it is legal.

        A finished game rejects every move, even ones that would otherwise be
        out of bounds.
        """
        if self.game_state.is_terminal:
            return MoveError.GAME_OVER
        if not self.is_legal_cell(row, col):
            return MoveError.ILLEGAL_MOVE
        return None

    def is_legal_cell(self, row: int, col: int) -> bool:
        """Check that a coordinate is on the board and unoccupied."""
        board = self.game_state.board
        if isinstance(row, bool) or isinstance(col, bool):
            return False
        if not isinstance(row, int) or not isinstance(col, int):
            return False
        return board.in_bounds(row, col) and board.is_empty(row, col)

    def get_legal_moves(self) -> List[Position]:
        """Get every move the current player may make."""
        if self.game_state.is_terminal:
            return []
        return self.game_state.board.empty_positions()
