"""SQLite repository implementations."""

from puppies.persistence.repository.vote_record import SqliteVoteRecordRepository

__all__ = [
    "SqliteVoteRecordRepository",
]
