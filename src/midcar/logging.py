"""Debug-file logging for midcar.

Every module logs to a child of the ``midcar`` logger. The CLI attaches a
single file handler at startup; console output goes through Rich instead.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import platformdirs

LOGGER_NAME = "midcar"
LOG_FILENAME = "debug.log"
LOG_LEVEL_ENV = "MIDCAR_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_file_path() -> Path:
    """Location of the debug log in the platform config dir."""
    return Path(platformdirs.user_config_dir(LOGGER_NAME)) / LOG_FILENAME


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "DEBUG").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.DEBUG


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """Attach the debug-file handler to the midcar logger.

    Args:
        level: Log level; defaults to $MIDCAR_LOG_LEVEL or DEBUG

    Returns:
        The configured midcar logger. Repeated calls leave it untouched.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level if level is not None else _level_from_env())

    if logger.handlers:
        return logger

    log_file = log_file_path()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        # Unwritable config dir: log nowhere rather than fail the command
        logger.addHandler(logging.NullHandler())
        return logger

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.debug("Logging to %s", log_file)
    return logger
