"""stdlib logging for module loggers.

Routes, the SMTP adapter and the maintenance scripts log through
``get_logger(__name__)``; domain services use logfire instead.
"""

import logging
import sys

from wingman.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Chatty below WARNING even when wingman itself runs at DEBUG
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncio", "multipart")


def setup_logging(settings: Settings) -> None:
    """Send log records to stdout, at DEBUG when settings.debug is set.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("wingman").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging ready (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass __name__."""
    return logging.getLogger(name)
