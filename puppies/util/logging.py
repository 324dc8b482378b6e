"""Stdlib logging setup for the API process and scripts."""

import logging
import sys

from puppies.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def log_level_for(settings: Settings) -> int:
    """Pick the application log level for an environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment in ("staging", "production"):
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure root logging to stdout.

    SQL statements are logged only in debug mode, where ``echo`` is also
    turned on for the vote store engine.

    Args:
        settings: Application settings
    """
    level = log_level_for(settings)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("puppies").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s vote_store=%s",
        settings.environment,
        logging.getLevelName(level),
        settings.database.path,
    )
