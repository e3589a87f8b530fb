"""Logging configuration for TicTacToe Sim."""

import json
import logging
import sys
from typing import Optional, TextIO

PACKAGE_PREFIX = 'tictactoe_sim.'

FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


class JsonFormatter(logging.Formatter):
    """One JSON object per record. Multi-line messages (boards, histories) stay in one field."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def build_formatter(format_style: str) -> logging.Formatter:
    if format_style == "json":
        return JsonFormatter()
    return logging.Formatter(FORMATS.get(format_style, FORMATS["simple"]))


def setup_logging(level: str = "INFO", format_style: str = "simple",
                  stream: Optional[TextIO] = None) -> None:
    """
    Set up logging configuration for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Format style - "simple", "detailed", or "json"
        stream: Output stream for the handler (defaults to stdout)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(build_formatter(format_style))

    # basicConfig is a no-op once the root logger has handlers
    logging.basicConfig(level=numeric_level, handlers=[handler])


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger with a shortened name for game modules.

    Args:
        module_name: Full module name (e.g., 'tictactoe_sim.engine.game_engine')

    Returns:
        Logger with shortened name (e.g., 'engine.game_engine')
    """
    if module_name.startswith(PACKAGE_PREFIX):
        return logging.getLogger(module_name[len(PACKAGE_PREFIX):])
    return logging.getLogger(module_name)
