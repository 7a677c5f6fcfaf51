"""
Logging configuration for the alternate-nick tooling.

Sets up colored root logging with colorlog and provides structured error
logging for the entry point.
"""

import logging
import os
import sys
from typing import Any

import colorlog


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception = None,
    context: dict[str, Any] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with its category, exception and context on one line.

    Args:
        error_type: Category of the error (e.g., 'config', 'io')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"
    if exception:
        structured_message += f" | Exception: {type(exception).__name__}: {str(exception)}"
    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"
    logging.log(level, structured_message)


class LoggerConfigurator:
    """Configures root logging with colorlog.

    The level comes from the DEBUG environment variable.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stderr

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

    def configure(self) -> int:
        """Install the colored handler on the root logger and return the level."""
        debug_env = os.environ.get("DEBUG", "").lower()
        log_level = logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

        handler = logging.StreamHandler(self.stream)
        handler.setFormatter(self.build_formatter())

        logging.basicConfig(level=log_level, handlers=[handler], format="%(message)s")

        # basicConfig is a no-op when handlers already exist; the level still applies.
        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        return log_level
