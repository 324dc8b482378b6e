"""Persisted vote record.

One row of the votes table, one-to-one with an image by id.
"""

from pydantic import Field

from puppies.domain.model.common import DomainModel
from puppies.domain.value import MAX_VOTES, ImageId, Tally, VoteRecordId


class VoteRecord(DomainModel):
    """Durable tally of one image."""

    id: VoteRecordId
    image_id: ImageId
    up_votes: int = Field(default=0, ge=0, le=MAX_VOTES)
    down_votes: int = Field(default=0, ge=0, le=MAX_VOTES)

    @property
    def tally(self) -> Tally:
        return Tally(up_votes=self.up_votes, down_votes=self.down_votes)
