#!/usr/bin/env python3
"""Create an empty vote store, deleting any existing file."""

import sys

import logfire

from puppies.config import Settings
from puppies.persistence.database import init_store
from puppies.persistence.repository import SqliteVoteRecordRepository
from puppies.util.logging import setup_logging
from puppies.util.observability import configure_logfire


def main() -> int:
    """Reset the vote store and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Resetting vote store", path=settings.database.path)

        engine = init_store(settings, reset_existing=True)
        try:
            SqliteVoteRecordRepository(engine).create_schema()
        finally:
            engine.dispose()

        logfire.info("Vote store ready", path=settings.database.path)
        return 0

    except Exception as e:
        logfire.error(
            "Vote store reset failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so a deploy step fails instead of starting without a store
        raise


if __name__ == "__main__":
    sys.exit(main())
