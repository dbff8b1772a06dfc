"""Logging configuration.

Environment variables:
- LEDGERBOOK_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: WARNING)
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s %(message)s"

DEFAULT_LEVEL = "WARNING"


def resolve_level(level: Optional[str] = None) -> int:
    """Resolve a level name, falling back to LEDGERBOOK_LOG_LEVEL.

    Raises:
        ValueError: If the name is not a logging level
    """
    name = (level or os.environ.get("LEDGERBOOK_LOG_LEVEL") or DEFAULT_LEVEL).upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{name}'")
    return value


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the ``ledgerbook`` logger hierarchy.

    Calling it again only changes the level; the handler is installed once.

    Args:
        level: Level name; defaults to LEDGERBOOK_LOG_LEVEL, then WARNING
    """
    logger = logging.getLogger("ledgerbook")
    logger.setLevel(resolve_level(level))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
