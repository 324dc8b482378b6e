"""Vote event.

A vote is transient: it is the input to the tally engine and is never
stored as its own entity.
"""

from puppies.domain.model.common import DomainModel
from puppies.domain.value import ImageId, VoteDirection


class Vote(DomainModel):
    """One up or down vote on an image."""

    image_id: ImageId
    direction: VoteDirection
