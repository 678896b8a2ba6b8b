"""Logging setup for particlemc.

Modules log through ``logging.getLogger(__name__)``; this helper only decides
where those records go. The library itself never configures handlers on
import, so embedding applications keep control of their own logging.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "particlemc"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling this more than once replaces the previous handler rather than
    stacking duplicates.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
