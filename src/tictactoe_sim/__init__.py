"""N x N tic-tac-toe game engine."""

__version__ = "0.1.0"

import os
from .utils.logging_config import setup_logging

# TICTACTOE_LOG_LEVEL / TICTACTOE_LOG_FORMAT override the defaults
setup_logging(
    level=os.getenv('TICTACTOE_LOG_LEVEL', 'INFO'),
    format_style=os.getenv('TICTACTOE_LOG_FORMAT', 'simple'),
)

from . import models
from . import utils
from . import engine
from .engine.game_engine import GameEngine
from .engine.game_session import GameMode, GameSessionManager, GameSettings
from .models.game import Cell, InvalidSizeError, Player, Position

__all__ = [
    "models", "utils", "engine",
    "GameEngine", "GameMode", "GameSessionManager", "GameSettings",
    "Cell", "InvalidSizeError", "Player", "Position",
]
