"""Engine package for game rules and logic."""

from .move_validator import MoveValidator
from .game_engine import GameEngine
from .event_system import GameEventManager, GameEvent, EventContext
from .action_result import ActionResult, ActionResultType, MoveError
from .bot_policy import MovePolicy, RandomLinePolicy, RandomCellPolicy
from .game_session import GameSessionManager, GameSettings, GameMode
__all__ = [
    'MoveValidator', 'GameEngine', 'GameEventManager', 'GameEvent', 'EventContext',
    'ActionResult', 'ActionResultType', 'MoveError',
    'MovePolicy', 'RandomLinePolicy', 'RandomCellPolicy',
    'GameSessionManager', 'GameSettings', 'GameMode',
]
