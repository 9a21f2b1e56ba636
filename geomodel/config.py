"""Package settings read from the environment."""

import logging
import os


class Config:
    LOG_LEVEL = os.getenv("GEOMODEL_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Set the level of the ``geomodel`` logger.

    Args:
        level: Logging level name or number. Defaults to ``Config.LOG_LEVEL``.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("geomodel")
    logger.setLevel(level if level is not None else Config.LOG_LEVEL)
    return logger
