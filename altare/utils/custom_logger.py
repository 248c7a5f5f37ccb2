### Description ###
# Altare Planner - Wedding Planning API
# - Custom Logger Setup -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

# Standard Imports
import logging
from datetime import datetime
from pathlib import Path

LOGS_DIR = Path("logs")
LOG_FILE_PREFIX = "altare"


class CustomFormatter(logging.Formatter):
    """Planner log format: HH:MM:SS AM/PM - name - LEVEL: message"""

    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created).strftime("%I:%M:%S %p")
        formatted_msg = f"{timestamp} - {record.name} - {record.levelname}: {record.getMessage()}"

        if record.exc_info:
            formatted_msg += "\n" + self.formatException(record.exc_info)

        return formatted_msg


def resolve_level(level: int | str) -> int:
    """
    Turn a level name from config ("DEBUG", "info", ...) into a logging level.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def setup_logger(
    name: str,
    level: int | str = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
    logs_dir: Path | None = None,
) -> logging.Logger:
    """
    Set up a logger for the planner API

    Args:
        name: Logger name (typically __name__)
        level: Logging level or level name (default: INFO)
        log_to_file: Write to logs/altare_<date>.log (default: True)
        log_to_console: Write to stderr (default: True)
        logs_dir: Override the logs directory

    Returns:
        Configured logger instance

    Example:
        logger = setup_logger("altare")
        logger.info("Planner API starting")
    """
    level = resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers if logger already exists
    if logger.handlers:
        return logger

    formatter = CustomFormatter()

    if log_to_file:
        target_dir = logs_dir or LOGS_DIR
        target_dir.mkdir(parents=True, exist_ok=True)

        log_filename = f"{LOG_FILE_PREFIX}_{datetime.now().strftime('%Y-%m-%d')}.log"
        file_handler = logging.FileHandler(target_dir / log_filename, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
