"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from puppies.domain.error import VoteLimitError
from puppies.domain.value.common import ValueObject

# Largest value a SQLite INTEGER column can hold
MAX_VOTES = 2**63 - 1


class PhotoSize(str, Enum):
    """Flickr image size suffixes.

    See https://www.flickr.com/services/api/misc.urls.html
    """

    SMALL_SQUARE = "s"
    THUMBNAIL = "t"
    SMALL = "m"
    MEDIUM_500 = "-"
    MEDIUM_640 = "z"
    LARGE = "b"
    ORIGINAL = "o"


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def from_flag(cls, is_upvote: bool) -> "VoteDirection":
        """Map a boolean up/down flag to a direction."""
        return cls.UP if is_upvote else cls.DOWN


class SaveResult(str, Enum):
    """Outcome of saving an image into the registry."""

    CREATED = "created"
    EXISTS = "exists"


class Tally(ValueObject):
    """Up/down vote counts of one image."""

    up_votes: int = Field(default=0, ge=0, le=MAX_VOTES)
    down_votes: int = Field(default=0, ge=0, le=MAX_VOTES)

    def apply(self, direction: VoteDirection) -> "Tally":
        """Return the tally with one more vote in the given direction.

        Raises:
            VoteLimitError: If that counter is already at MAX_VOTES
        """
        if direction == VoteDirection.UP:
            if self.up_votes >= MAX_VOTES:
                raise VoteLimitError(direction.value, MAX_VOTES)
            return Tally(up_votes=self.up_votes + 1, down_votes=self.down_votes)

        if self.down_votes >= MAX_VOTES:
            raise VoteLimitError(direction.value, MAX_VOTES)
        return Tally(up_votes=self.up_votes, down_votes=self.down_votes + 1)

    def as_tuple(self) -> tuple[int, int]:
        return self.up_votes, self.down_votes
