"""Simple logging utilities for widgetpipe."""

import logging
import sys
from typing import Optional

from widgetpipe.config.settings import get_log_level

PACKAGE_LOGGER = "widgetpipe"


def get_logger(name: str = PACKAGE_LOGGER, level: Optional[str] = None) -> logging.Logger:
    """Get a logger, attaching a stderr handler the first time.

    The level defaults to WIDGETPIPE_LOG_LEVEL. Module loggers created with
    logging.getLogger(__name__) propagate here, so configuring the package
    logger once covers the whole library.
    """
    logger = logging.getLogger(name)
    level_name = (level or get_log_level()).upper()

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    return logger
