"""Logging setup for flowdef. Library modules only create loggers; applications call setup_logging()."""

import logging
import sys
from typing import Optional

from .settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the ``flowdef`` logger hierarchy with a single stderr handler."""
    level = (level or get_settings().log_level).upper()

    logger = logging.getLogger("flowdef")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
