"""
Logging setup for Wayfarer.

Every module logs through loguru via get_logger(__name__). setup_logging
installs the sinks: colourised text on stderr for local runs, one JSON
record per line for production (CloudWatch), and an optional rotating file.
"""

import os
import sys

from loguru import logger

from wayfarer.config import LogLevel

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{extra[name]}:{function}:{line} - {message}"
)

# Records logged through the bare loguru logger have no bound name
logger.configure(extra={"name": "wayfarer"})


def get_logger(name: str):
    """Return the loguru logger bound to a module name."""
    return logger.bind(name=name)


def setup_logging(
    log_level: LogLevel | str = LogLevel.INFO,
    log_file: str | None = None,
    json_logs: bool = False,
):
    """
    Replace the active sinks.

    Args:
        log_level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Also write to this file, rotated at 10 MB
        json_logs: Emit serialized JSON records on stderr instead of text
    """
    level = LogLevel(log_level.upper()) if isinstance(log_level, str) else log_level

    logger.remove()
    if json_logs:
        logger.add(sys.stderr, level=level.value, serialize=True)
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.value, colorize=True)

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level=level.value,
            rotation="10 MB",
            compression="zip",
        )

    logger.debug(f"Logging initialized at {level.value}")
