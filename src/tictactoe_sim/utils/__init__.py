"""Utility helpers for TicTacToe simulation."""

from .logging_config import setup_logging, get_logger, get_game_logger

__all__ = ["setup_logging", "get_logger", "get_game_logger"]
