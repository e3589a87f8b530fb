"""Session management: settings, game mode and the lifetime of one engine."""

import os
from enum import Enum
from typing import List, Optional

from ..models.game.board import InvalidSizeError
from ..models.game.line_registry import Line
from ..models.game.player import Player
from ..utils.board_printer import render_board
from ..utils.logging_config import get_game_logger
from .bot_policy import MovePolicy, RandomLinePolicy
from .event_system import EventContext, GameEvent, GameEventManager
from .game_engine import GameEngine

logger = get_game_logger(__name__)

DEFAULT_BOARD_SIZE = 3


class GameMode(Enum):
    """Who plays player B."""
    PLAYER_VS_PLAYER = "pvp"
    PLAYER_VS_BOT = "pvb"


class GameSettings:
    """Settings used when a session starts. Changes are ignored while locked."""

    def __init__(self, board_size: int = DEFAULT_BOARD_SIZE,
                 game_mode: GameMode = GameMode.PLAYER_VS_PLAYER):
        self._board_size = board_size
        self._game_mode = game_mode
        self._locked = False

    def __repr__(self) -> str:
        return f"GameSettings(board_size={self._board_size}, game_mode={self._game_mode.value})"

    @classmethod
    def from_env(cls) -> "GameSettings":
        """Build settings from TICTACTOE_BOARD_SIZE and TICTACTOE_GAME_MODE."""
        settings = cls()
        raw_size = os.getenv('TICTACTOE_BOARD_SIZE')
        if raw_size is not None:
            try:
                settings.board_size = int(raw_size)
            except ValueError:
                logger.warning(f"Ignoring non-integer TICTACTOE_BOARD_SIZE={raw_size!r}")
        raw_mode = os.getenv('TICTACTOE_GAME_MODE')
        if raw_mode is not None:
            try:
                settings.game_mode = GameMode(raw_mode.lower())
            except ValueError:
                logger.warning(f"Ignoring unknown TICTACTOE_GAME_MODE={raw_mode!r}")
        return settings

    @property
    def locked(self) -> bool:
        return self._locked

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    @property
    def board_size(self) -> int:
        return self._board_size

    @board_size.setter
    def board_size(self, value: int) -> None:
        if self._locked:
            logger.warning("Attempted to change settings mid-lock!")
            return
        self._board_size = value

    @property
    def game_mode(self) -> GameMode:
        return self._game_mode

    @game_mode.setter
    def game_mode(self, value: GameMode) -> None:
        if self._locked:
            logger.warning("Attempted to change settings mid-lock!")
            return
        self._game_mode = value


class GameSessionManager:
    """Owns the running GameEngine and re-broadcasts its events.

    In player-vs-bot mode the bot is always player B and answers each accepted
    move of player A immediately.
    """

    def __init__(self, settings: Optional[GameSettings] = None, bot_policy: Optional[MovePolicy] = None):
        self.settings = settings if settings is not None else GameSettings()
        self.bot_policy = bot_policy if bot_policy is not None else RandomLinePolicy()
        self.event_manager = GameEventManager()
        self.engine: Optional[GameEngine] = None
        self.most_recent_winner: Optional[Player] = None

    @property
    def has_session(self) -> bool:
        return self.engine is not None

    def start_session(self) -> Optional[GameEngine]:
        """Create a fresh engine from the current settings."""
        if self.engine is not None:
            self.end_session()

        try:
            engine = GameEngine(self.settings.board_size)
        except InvalidSizeError as e:
            logger.error(f"Failed to create game engine: {e}")
            return None

        for event in (GameEvent.MOVE_MADE, GameEvent.WIN, GameEvent.DRAW):
            engine.event_manager.subscribe(event, self._forward)
        engine.event_manager.subscribe(GameEvent.WIN, self._handle_win)
        engine.event_manager.subscribe(GameEvent.DRAW, self._handle_draw)

        self.engine = engine
        self.event_manager.game_state = engine.game_state
        self.settings.lock()
        logger.info(f"Session started: {engine.size}x{engine.size}, {self.settings.game_mode.value}")
        self.event_manager.emit(
            GameEvent.SESSION_STARTED,
            size=engine.size,
            player_a=Player.A,
            player_b=Player.B,
            is_player_vs_player=self.settings.game_mode is GameMode.PLAYER_VS_PLAYER,
        )
        return engine

    def end_session(self) -> None:
        """Detach from the running engine and release the settings lock."""
        if self.engine is None:
            return
        for event in (GameEvent.MOVE_MADE, GameEvent.WIN, GameEvent.DRAW):
            self.engine.event_manager.unsubscribe(event, self._forward)
        self.engine.event_manager.unsubscribe(GameEvent.WIN, self._handle_win)
        self.engine.event_manager.unsubscribe(GameEvent.DRAW, self._handle_draw)
        self.engine = None
        self.event_manager.game_state = None
        self.settings.unlock()

    def make_move(self, row: int, col: int) -> bool:
        """Submit a move for the current player. Returns True if accepted."""
        if self.engine is None:
            logger.warning("There is no game session currently running.")
            return False

        accepted = self.engine.make_move(row, col)
        if accepted and self.is_bot_turn:
            self.bot_policy.play_turn(self.engine)
        return accepted

    # Introspection

    @property
    def current_player(self) -> Optional[Player]:
        return self.engine.current_player if self.engine is not None else None

    @property
    def is_player_a_turn(self) -> bool:
        return self.current_player is Player.A

    @property
    def is_bot_turn(self) -> bool:
        return (
            self.engine is not None
            and not self.engine.is_terminal
            and self.settings.game_mode is GameMode.PLAYER_VS_BOT
            and self.engine.current_player is Player.B
        )

    @property
    def game_size(self) -> Optional[int]:
        return self.engine.size if self.engine is not None else None

    @property
    def active_lines(self) -> List[Line]:
        return self.engine.active_lines if self.engine is not None else []

    # Event handlers

    def _forward(self, context: EventContext) -> None:
        self.event_manager.trigger_event(context)

    def _handle_win(self, context: EventContext) -> None:
        self.most_recent_winner = context.player
        self._handle_game_end(context)

    def _handle_draw(self, context: EventContext) -> None:
        self.most_recent_winner = None
        self._handle_game_end(context)

    def _handle_game_end(self, context: EventContext) -> None:
        logger.info(f"Final board:\n{render_board(self.engine.game_state.board)}")
        logger.info(f"Move history:\n{self.engine.serialize_history()}")
        self.event_manager.emit(
            GameEvent.SESSION_ENDED,
            context.row,
            context.col,
            context.player,
            result=self.engine.result,
        )
