"""SQLite implementation of the vote record repository."""

from typing import List, Sequence

import logfire
from sqlalchemy import Engine, delete, select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.exc import SQLAlchemyError

from puppies.domain.model import Image, VoteRecord
from puppies.domain.repository import VoteRecordRepository
from puppies.domain.value import ImageId
from puppies.persistence.error import StorageOperationError
from puppies.persistence.mappers import image_to_row, row_to_vote_record
from puppies.persistence.tables import metadata, votes_table


class SqliteVoteRecordRepository(VoteRecordRepository):
    """SQLite implementation of VoteRecordRepository."""

    def __init__(self, engine: Engine) -> None:
        """Initialize repository with a database engine.

        Args:
            engine: SQLAlchemy engine bound to the vote store
        """
        self.engine = engine

    def create_schema(self) -> None:
        """Create the votes table if missing and clear it."""
        try:
            with self.engine.begin() as conn:
                metadata.create_all(conn)
                conn.execute(delete(votes_table))
        except SQLAlchemyError as e:
            logfire.error("Vote schema creation failed", error=str(e))
            raise StorageOperationError("create_schema", [], str(e)) from e

        logfire.info("Vote schema created")

    def ensure_schema(self) -> None:
        """Create the votes table if missing."""
        try:
            with self.engine.begin() as conn:
                metadata.create_all(conn)
        except SQLAlchemyError as e:
            logfire.error("Vote schema check failed", error=str(e))
            raise StorageOperationError("ensure_schema", [], str(e)) from e

    def bulk_insert(self, images: Sequence[Image]) -> int:
        """Upsert one row per image in a single transaction."""
        if not images:
            return 0

        image_ids = [image.id for image in images]
        rows = [image_to_row(image) for image in images]

        stmt = insert(votes_table)
        stmt = stmt.on_conflict_do_update(
            index_elements=[votes_table.c.puppy_id],
            set_={
                "up_votes": stmt.excluded.up_votes,
                "down_votes": stmt.excluded.down_votes,
            },
        )

        with logfire.span("bulk_insert_votes", rows=len(rows)):
            try:
                with self.engine.begin() as conn:
                    conn.execute(stmt, rows)
            except SQLAlchemyError as e:
                logfire.error(
                    "Bulk insert rolled back", error=str(e), rows=len(rows)
                )
                raise StorageOperationError("bulk_insert", image_ids, str(e)) from e

        return len(rows)

    def load_by_ids(self, image_ids: Sequence[ImageId]) -> List[VoteRecord]:
        """Load stored tallies for the given image ids."""
        if not image_ids:
            return []

        stmt = (
            select(votes_table)
            .where(votes_table.c.puppy_id.in_(list(image_ids)))
            .order_by(votes_table.c.id)
        )
        try:
            with self.engine.connect() as conn:
                result = conn.execute(stmt)
                return [row_to_vote_record(row._asdict()) for row in result]
        except SQLAlchemyError as e:
            logfire.error("Vote lookup failed", error=str(e), ids=len(image_ids))
            raise StorageOperationError("load_by_ids", image_ids, str(e)) from e
