"""Domain value objects."""

from puppies.domain.value.identifiers import ImageId, VoteRecordId
from puppies.domain.value.types import (
    MAX_VOTES,
    PhotoSize,
    SaveResult,
    Tally,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "ImageId",
    "VoteRecordId",
    # Types
    "MAX_VOTES",
    "PhotoSize",
    "SaveResult",
    "Tally",
    "VoteDirection",
]
