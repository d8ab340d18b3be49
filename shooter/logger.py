"""Centralized logging utility for the game."""

import logging
import os
from typing import Optional

from config.config import LOG_LEVEL, LOGS_DIR


def setup_logger(log_level: int = LOG_LEVEL, log_dir: str = LOGS_DIR) -> None:
    """Set up the root logger with file and console handlers.

    Args:
        log_level: Logging level to use (default: LOG_LEVEL from config)
        log_dir: Directory receiving application.log
    """
    os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Calling this again (e.g. after parsing --log-level) must not duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(os.path.join(log_dir, "application.log"))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger instance with the specified name.

    Args:
        name: Logger name, typically the module name.

    Returns:
        logging.Logger: Logger instance for the given name.
    """
    return logging.getLogger(name)


# Initialize logging configuration on import
setup_logger()
