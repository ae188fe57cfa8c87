"""
Logging Configuration
Sets up the 'customerapp' logger once at startup.
"""
import logging
import sys
from typing import Optional, Union

from customerapp import config


def resolve_level(level: Union[int, str, None]) -> int:
    """Turn a level name ("debug", "INFO") or number into a logging level."""
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'customerapp' namespace.

    Args:
        level: Level number or name. Defaults to config.LOG_LEVEL.
        log_file: Optional path to also write logs to.

    Returns:
        The configured 'customerapp' logger.
    """
    level = resolve_level(level)
    logger = logging.getLogger("customerapp")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
