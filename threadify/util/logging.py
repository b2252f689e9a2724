"""Logging configuration for the application.

Application code logs through logfire; this only sets up the stdlib
loggers used by uvicorn, SQLAlchemy and alembic.
"""

import logging
import sys

from threadify.config import Settings

# Noisy third-party loggers, kept at WARNING unless debugging
_QUIET_LOGGERS = ("sqlalchemy.engine", "multipart", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging with a level based on environment.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    if not settings.debug:
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
