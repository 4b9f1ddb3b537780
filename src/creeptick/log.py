"""Console logging for the creeptick logger tree."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_HANDLER_NAME = "creeptick-console"


def setup_logging(level: int | str = logging.DEBUG) -> logging.Logger:
    """Attach a stderr handler to the `creeptick` logger and set its level.

    Safe to call more than once; the handler is installed only the first time.

    Args:
        level: Logging level, as a number or a name such as "INFO".

    Returns:
        The package logger.
    """
    logger = logging.getLogger("creeptick")
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
