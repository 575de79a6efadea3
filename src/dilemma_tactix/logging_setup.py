"""Logging setup shared by the command line and dashboard front ends."""

import logging

from dilemma_tactix.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> int:
    """Configure root logging for a front end.

    Args:
        level: Level name such as "DEBUG". If None, uses TACTIX_LOG_LEVEL.

    Returns:
        The numeric level that was applied.
    """
    if level is None:
        level = get_log_level()
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger("dilemma_tactix").setLevel(numeric_level)
    return numeric_level
