"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from puppies.domain.repository.image import ImageRepository
from puppies.domain.repository.vote_record import VoteRecordRepository

__all__ = [
    "ImageRepository",
    "VoteRecordRepository",
]
