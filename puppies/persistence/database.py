"""Vote store connection management.

Opens (or creates) the SQLite file backing the votes table.
"""

from pathlib import Path
from typing import Optional

import logfire
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError

from puppies.config import Settings
from puppies.persistence.error import StorageUnavailableError


def init_store(settings: Settings, reset_existing: Optional[bool] = None) -> Engine:
    """Open or create the vote store.

    Args:
        settings: Application settings with the database path
        reset_existing: Delete the existing file first. Defaults to
            settings.database.reset_on_start

    Returns:
        Engine bound to the SQLite file

    Raises:
        StorageUnavailableError: If the file cannot be removed, created or opened
    """
    if reset_existing is None:
        reset_existing = settings.database.reset_on_start

    path = Path(settings.database.path)

    try:
        if reset_existing:
            path.unlink(missing_ok=True)
            logfire.info("Vote store removed", path=str(path))
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageUnavailableError(str(path), str(e)) from e

    engine = create_engine(
        settings.database.url,
        echo=settings.debug,  # Log SQL queries in debug mode
        connect_args={"check_same_thread": False},  # Shared across request threads
    )

    # SQLite opens lazily; connect once so a bad path fails here
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        engine.dispose()
        raise StorageUnavailableError(str(path), str(e)) from e

    logfire.info("Vote store opened", path=str(path), reset=reset_existing)
    return engine
