"""
Logger Setup Module

Provides a colored console logger and optional file logging for the optimizer.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


class LevelColorFormatter(logging.Formatter):
    """
    Formatter that colors only the levelname in console logs.

    Colors:
        DEBUG    -> Gray
        INFO     -> Green
        WARNING  -> Yellow
        ERROR    -> Red
        CRITICAL -> Magenta

    Example:
        12:00:01 | INFO    | Found 12 images.
    """

    COLORS = {
        'DEBUG': '\033[90m',
        'INFO': '\033[92m',
        'WARNING': '\033[93m',
        'ERROR': '\033[91m',
        'CRITICAL': '\033[95m'
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        formatted = super().format(record)
        record.levelname = original_levelname
        return formatted


def setup_logger(
        name: str = "PublicOptimizer",
        log_file: Optional[str] = None,
        level: int = logging.INFO
) -> logging.Logger:
    """
    Create a logger with colored console output and optional file logging.

    Args:
        name (str): Name of the logger.
        log_file (str, optional): Path to a log file for persistent logging.
        level (int): Logging level applied to the logger.

    Returns:
        logging.Logger: Configured logger instance.

    Notes:
        - Handlers are only attached once per logger name, so repeated calls
          never duplicate output. A file handler is added on a later call if
          one was not configured before.
        - Console logs have colored level names; file logs are plain text.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(LevelColorFormatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(console_handler)

    if log_file and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    return logger
