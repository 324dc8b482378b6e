"""Image entity.

An image is a Flickr photo augmented with its vote tally. Images are owned
by the image registry; because they are immutable, every vote replaces the
registry entry with a new instance.
"""

from pydantic import Field

from puppies.domain.model.common import DomainModel
from puppies.domain.value import MAX_VOTES, ImageId, Tally


class Image(DomainModel):
    """Vote-augmented image record."""

    id: ImageId
    title: str = ""
    thumbnail: str = ""
    large: str = ""
    up_votes: int = Field(default=0, ge=0, le=MAX_VOTES, serialization_alias="upvotes")
    down_votes: int = Field(
        default=0, ge=0, le=MAX_VOTES, serialization_alias="downvotes"
    )

    @property
    def tally(self) -> Tally:
        return Tally(up_votes=self.up_votes, down_votes=self.down_votes)

    def with_tally(self, tally: Tally) -> "Image":
        """Return a copy of this image carrying the given tally."""
        return self.model_copy(
            update={"up_votes": tally.up_votes, "down_votes": tally.down_votes}
        )
