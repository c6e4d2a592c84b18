"""
Logging Setup Module

Configures logging for the application.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOGGER_NAME = 'grater'


def setup_logging(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    console_level: str = "WARNING",
    max_log_size_mb: int = 50,
    backup_count: int = 5
) -> logging.Logger:
    """
    Set up logging for the application.

    Console output for the user goes through click; the console handler
    here only surfaces warnings unless verbose logging is requested.

    Args:
        log_file: Path to log file (optional)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_level: Level of the console handler
        max_log_size_mb: Maximum log file size in MB before rotation
        backup_count: Number of backup log files to keep

    Returns:
        Configured logger instance
    """
    log_level = str(log_level)
    console_level = str(console_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.WARNING))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler with rotation
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_log_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance under the grater namespace.

    Args:
        name: Logger name, usually the module's __name__

    Returns:
        Logger instance
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + '.'):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
