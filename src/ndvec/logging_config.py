"""
Logging Configuration
Sets up the package logger. The library itself never calls this on import;
embedding applications opt in.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'ndvec' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG to see ignored out-of-range writes)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured 'ndvec' logger.
    """
    logger = logging.getLogger("ndvec")
    logger.setLevel(level)

    # Re-running setup must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
