# utils/logging_config.py
import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Route log records (including the cache hit/miss messages) to the console,
    and optionally to a file.

    Args:
        level: Root logging level, e.g. logging.INFO or logging.DEBUG.
        log_file: Optional path to append log output to.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # re-running the CLI in one process must not stack handlers
    if root.hasHandlers():
        root.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Return the logger ``name``, optionally pinning its level.

    Leaving ``level`` unset lets the root configuration decide.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
