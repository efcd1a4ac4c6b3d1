"""
Logging Configuration
Sets up the 'electrophoresis' logger for the application.

The level can be overridden without code changes through the
ELECTROPHORESIS_LOG_LEVEL environment variable (e.g. DEBUG to trace frames).
"""
import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAMESPACE = "electrophoresis"
LOG_LEVEL_ENV = "ELECTROPHORESIS_LOG_LEVEL"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    """Accept a numeric level or a level name; fall back to ``default``."""
    if level is None or level == "":
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else default


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger: stdout handler plus an optional file.

    Args:
        level: Logging level or level name. ``None`` reads the environment.
        log_file: Optional path to save logs to a file.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV)
    level = resolve_level(level)

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    # Avoid duplicate lines when the window is reopened in one process
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
