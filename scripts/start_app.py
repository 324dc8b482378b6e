#!/usr/bin/env python3
"""Run the puppies API under uvicorn.

Logging and Logfire are configured here, before the app module is imported,
so failures while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from puppies.config import Settings
from puppies.util.logging import setup_logging
from puppies.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting puppies API",
        host=settings.host,
        port=settings.port,
        vote_store=settings.database.path,
        cold_start=settings.database.reset_on_start,
    )

    try:
        uvicorn.run(
            "puppies.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            reload=settings.environment == "development",
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Puppies API stopped with an error",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
