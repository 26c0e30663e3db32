"""
utils - Shared helpers for the word counter

Provides the component logger used across the program.
"""

import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name, filename=None, level="WARNING"):
    """
    Return the logger for a component.

    Args:
        name: Logger name, e.g. "COUNTER"
        filename: Optional log file; no file is touched when empty
        level: Logging level name applied to the logger

    Handlers are attached only the first time a name is requested.

    Raises:
        OSError: if the log file cannot be opened. The logger is left
            without handlers so a later call can retry.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]
    if filename:
        # Opened first; nothing is attached if this fails
        handlers.append(logging.FileHandler(filename, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
