"""Game engine for executing moves and managing state transitions."""

from typing import Iterable, List, Optional, Tuple

from ..models.game.board import Position
from ..models.game.game_state import GameResult, GameState
from ..models.game.line_registry import Line
from ..models.game.move_log import parse_moves
from ..models.game.player import Cell, Player
from ..utils.logging_config import get_game_logger
from .action_result import ActionResult, ActionResultType, MoveError
from .event_system import GameEvent, GameEventManager
from .move_validator import MoveValidator

logger = get_game_logger(__name__)


class GameEngine:
    """Runs one game session on an n x n board.

    Each accepted move fires MOVE_MADE, then at most one of WIN or DRAW,
    synchronously and before the call returns. Rejected moves change nothing
    and fire nothing.
    """

    def __init__(self, size: int):
        self.game_state = GameState.new(size)
        self.validator = MoveValidator(self.game_state)
        self.event_manager = GameEventManager(self.game_state)
        logger.debug(f"Started {size}x{size} game with {len(self.game_state.registry.all_lines)} lines")

    # Introspection

    @property
    def size(self) -> int:
        return self.game_state.size

    @property
    def board(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Snapshot of the current board."""
        return self.game_state.board.snapshot()

    @property
    def current_player(self) -> Player:
        return self.game_state.current_player

    @property
    def is_terminal(self) -> bool:
        return self.game_state.is_terminal

    @property
    def result(self) -> GameResult:
        return self.game_state.result

    @property
    def winner(self) -> Optional[Player]:
        return self.game_state.winner

    @property
    def active_lines(self) -> List[Line]:
        """Lines that can still be won, for bots and debug tooling."""
        return self.game_state.registry.active_lines

    @property
    def move_history(self) -> List[Position]:
        return self.game_state.move_log.positions()

    def cell(self, row: int, col: int) -> Cell:
        return self.game_state.board.get(row, col)

    def get_legal_moves(self) -> List[Position]:
        return self.validator.get_legal_moves()

    # Commands

    def make_move(self, row: int, col: int) -> bool:
        """Place the current player's marker. Returns True if the move was accepted."""
        return self.execute_move(row, col).success

    def execute_move(self, row: int, col: int) -> ActionResult:
        """Place the current player's marker and report what happened.

        Every state change for the move is complete before any listener runs.
        """
        error = self.validator.validate(row, col)
        if error is not None:
            return self._reject(row, col, error)

        state = self.game_state
        board = state.board
        player = state.current_player
        position = Position(row, col)

        board.place(row, col, player)
        state.move_log.append(position, player)
        state.last_move = position
        invalidated = state.registry.invalidate_touching(position, board)

        winning_line = self._find_completed_line(position, player)
        if winning_line is not None:
            state.result = GameResult.WON
            state.winner = player
            result_type = ActionResultType.GAME_WON
            logger.info(f"Player {player.symbol} won with move {position}")
        # Draw as soon as no line can be completed, even with empty cells left
        elif state.registry.is_exhausted:
            state.result = GameResult.DRAW
            result_type = ActionResultType.GAME_DRAWN
            if board.is_full():
                logger.info(f"Game drawn by player {player.symbol} with move {position}")
            else:
                logger.info(
                    f"Game drawn by player {player.symbol} with move {position}; "
                    f"{board.count(Cell.EMPTY)} empty cell(s) left"
                )
        else:
            state.current_player = player.opponent()
            result_type = ActionResultType.MOVE_MADE

        self.event_manager.emit(GameEvent.MOVE_MADE, row, col, player)
        if result_type is ActionResultType.GAME_WON:
            self.event_manager.emit(GameEvent.WIN, row, col, player, line=winning_line)
            return ActionResult.success_result(
                "make_move", result_type,
                position=position, player=player, line=winning_line,
                invalidated=invalidated,
            )
        if result_type is ActionResultType.GAME_DRAWN:
            self.event_manager.emit(GameEvent.DRAW, row, col, player)

        return ActionResult.success_result(
            "make_move", result_type,
            position=position, player=player, invalidated=invalidated,
        )

    def play_moves(self, moves: Iterable) -> List[ActionResult]:
        """Submit a sequence of (row, col) moves in order."""
        return [self.execute_move(row, col) for row, col in moves]

    def replay(self, text: str) -> List[ActionResult]:
        """Submit every move in a serialized move history."""
        return self.play_moves(parse_moves(text))

    def serialize_history(self) -> str:
        return self.game_state.move_log.serialize()

    def _find_completed_line(self, position: Position, player: Player) -> Optional[Line]:
        # Lines still active here hold no opponent markers, so only the
        # current player's cells need checking.
        board = self.game_state.board
        target = Cell.for_player(player)
        for line in self.game_state.registry.lines_at(position):
            if all(board.get(r, c) is target for r, c in line.positions):
                return line
        return None

    def _reject(self, row, col, error: MoveError) -> ActionResult:
        logger.error(error.message)
        logger.debug(f"Rejected move [{row},{col}]: {error.value}")
        return ActionResult.failure_result("make_move", error, position=(row, col))
