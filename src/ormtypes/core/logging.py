"""Logging setup for the ormtypes package."""

from __future__ import annotations

import logging

from ormtypes.core.settings import settings

PACKAGE_LOGGER = "ormtypes"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this more than once only updates the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = level if level is not None else settings.log_level
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)

    if not any(getattr(h, "_ormtypes_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._ormtypes_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
