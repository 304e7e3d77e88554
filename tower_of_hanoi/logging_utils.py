# tower_of_hanoi/logging_utils.py

import logging
import sys

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LEVEL = logging.WARNING


def setup_logger(name: str, level: int = DEFAULT_LEVEL, log_file: str = None, log_format: str = DEFAULT_FORMAT):
    """
    Configures and returns a logger instance.

    Diagnostics go to stderr so they never mix with the boards printed on stdout.

    Args:
        name (str): The name for the logger (e.g., "tower_of_hanoi" for the whole package).
        level (int): The minimum logging level to output (e.g., logging.DEBUG, logging.INFO).
        log_file (str, optional): Path to a file to output logs. If None, only console output. Defaults to None.
        log_format (str, optional): The format string for log messages. Defaults to DEFAULT_FORMAT.

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(name)
    # Calling twice for the same name must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.setLevel(level)

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug(f"Logging configured. Console level: {logging.getLevelName(level)}, File output: {log_file}")
    else:
        logger.debug(f"Logging configured. Console level: {logging.getLevelName(level)}, No file output.")

    return logger


def get_level_from_string(level_str: str) -> int:
    """Converts a log level string to a logging level constant."""
    return LOG_LEVELS.get(level_str.lower(), DEFAULT_LEVEL)
