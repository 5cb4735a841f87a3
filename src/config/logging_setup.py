"""
Pickomino Advisor - Logging Configuration

Attaches a single stream handler to the package logger hierarchy. Engine
modules only create module loggers; applications hosting the advisor call
configure_logging() once at startup.
"""

import logging

from src.config.settings import Settings, get_settings

PACKAGE_LOGGER = "src"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Configure the package logger from settings.

    Calling it again only updates the level.

    Returns:
        The configured package logger
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {settings.log_level!r}.")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
