"""In-memory repository implementations."""

from .image import InMemoryImageRepository
from .vote_record import InMemoryVoteRecordRepository

__all__ = [
    "InMemoryImageRepository",
    "InMemoryVoteRecordRepository",
]
