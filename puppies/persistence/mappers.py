"""Mappers for converting between database rows and domain models."""

from typing import Any, Dict

from puppies.domain.model import Image, VoteRecord
from puppies.domain.value import ImageId, VoteRecordId


def row_to_vote_record(row: Dict[str, Any]) -> VoteRecord:
    """Convert a votes row to a VoteRecord."""
    return VoteRecord(
        id=VoteRecordId(row["id"]),
        image_id=ImageId(str(row["puppy_id"])),
        up_votes=row["up_votes"],
        down_votes=row["down_votes"],
    )


def image_to_row(image: Image) -> Dict[str, Any]:
    """Convert an Image to the values of a votes row."""
    return {
        "puppy_id": image.id,
        "up_votes": image.up_votes,
        "down_votes": image.down_votes,
    }
