"""
Logging configuration for employee-pairs.
Every module logs to stdout and to a shared file under LOG_DIR.
"""

import logging
import sys
from .config import LOG_DIR, LOG_LEVEL, LOG_FORMAT

LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "employee_pairs.log"


def _with_format(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logger(name: str) -> logging.Logger:
    """
    Return the logger for a module, with a DEBUG file handler and an
    INFO console handler. Calling it twice for a name doesn't duplicate
    handlers.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    logger.handlers.clear()

    logger.addHandler(_with_format(logging.FileHandler(LOG_FILE), logging.DEBUG))
    logger.addHandler(_with_format(logging.StreamHandler(sys.stdout), logging.INFO))
    return logger


def set_console_level(level: int) -> None:
    """Change the console verbosity of every employee_pairs logger."""
    for name in list(logging.Logger.manager.loggerDict):
        if not name.startswith("employee_pairs"):
            continue
        logger = logging.getLogger(name)
        if logger.level > level:
            logger.setLevel(level)
        for handler in logger.handlers:
            # FileHandler subclasses StreamHandler, file logs stay at DEBUG
            if type(handler) is logging.StreamHandler:
                handler.setLevel(level)


def log_stage_stats(logger: logging.Logger, name: str, before: int, after: int) -> None:
    """Log how many items a pipeline stage kept."""
    if after == 0:
        logger.warning(f"{name}: no rows left (from {before})")
        return
    
    dropped = before - after
    logger.info(f"{name}: kept {after} of {before} rows ({dropped} dropped)")
