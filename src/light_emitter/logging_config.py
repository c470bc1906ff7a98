import logging
import os
import sys
from typing import Optional, TextIO

LOG_LEVEL_ENV = "LIGHT_EMITTER_LOG_LEVEL"
PACKAGE_LOGGER = "light_emitter"


def configure_logging(default_level: int = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a stream handler to the ``light_emitter`` logger.

    The root logger is left alone, so host applications keep their own setup.
    LIGHT_EMITTER_LOG_LEVEL (e.g. ``debug``) overrides ``default_level``;
    unknown level names fall back to it. Calling this again replaces the
    handler installed by the previous call.
    """
    level = default_level
    level_name = os.getenv(LOG_LEVEL_ENV)
    if level_name:
        resolved = logging.getLevelName(level_name.strip().upper())
        if isinstance(resolved, int):
            level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        if getattr(h, "_light_emitter", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    handler._light_emitter = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
