"""
Configuration - Rule constants and environment settings.

Rule constants are fixed by the game and are not tunable.
Environment settings only affect how the process reports what it does.
"""

import logging
import os

# Rules
BOARD_SIZE = 8
WINNING_SCORE = 12
MIN_PIECE_SIZE = 1
MAX_PIECE_SIZE = 3

# Environment configuration
PYRAMIDS_ENV = os.getenv("PYRAMIDS_ENV", "development")
PYRAMIDS_LOG_LEVEL = os.getenv("PYRAMIDS_LOG_LEVEL", "WARNING")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for command-line use.

    Library code never calls this; it only creates module loggers.
    """
    logging.basicConfig(
        level=(level or PYRAMIDS_LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
