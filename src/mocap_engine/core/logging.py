"""Logging setup for the mocap_engine namespace."""

import logging
import sys
from pathlib import Path

from mocap_engine.core.config import LoggingSettings, get_settings

PACKAGE_LOGGER = "mocap_engine"


def _handler(handler: logging.Handler, settings: LoggingSettings, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=settings.format, datefmt=settings.date_format))
    return handler


def setup_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Attach handlers to the package logger.

    Records from every engine module (solver relaxations, synthesized
    markers, chosen sync offsets) propagate to this logger. Calling it again
    replaces the previous handlers, so settings can be reapplied.

    Args:
        settings: Logging section (uses cached engine settings if None)

    Returns:
        The configured package logger
    """
    settings = settings or get_settings().logging
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.addHandler(_handler(logging.StreamHandler(sys.stdout), settings, level))

    if settings.file:
        log_path = Path(settings.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_handler(logging.FileHandler(log_path), settings, level))

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for an engine module, placed under the package namespace.

    Args:
        name: Module name (typically __name__)
    """
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
