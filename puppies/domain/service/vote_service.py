"""Vote tally domain service."""

import logfire

from puppies.domain.model import Vote
from puppies.domain.repository import ImageRepository
from puppies.domain.value import ImageId, Tally, VoteDirection

from .base import Service


class VoteService(Service):
    """Applies vote events to the image registry.

    Every call contributes exactly one vote. Up and down votes each
    increment their own counter.
    """

    def __init__(self, image_repository: ImageRepository) -> None:
        """Initialize vote service.

        Args:
            image_repository: Image registry
        """
        self.image_repository = image_repository

    def cast_vote(self, vote: Vote) -> Tally:
        """Apply one vote.

        Args:
            vote: The vote event

        Returns:
            The image's tally after the vote

        Raises:
            NotFoundError: If the image is not registered
            VoteLimitError: If the counter is already at MAX_VOTES
        """
        with logfire.span(
            "cast_vote", image_id=vote.image_id, direction=vote.direction.value
        ):
            tally = self.image_repository.update_tally(vote.image_id, vote.direction)
            logfire.info(
                "Vote cast",
                image_id=vote.image_id,
                up_votes=tally.up_votes,
                down_votes=tally.down_votes,
            )
            return tally

    def upvote(self, image_id: ImageId) -> Tally:
        return self.cast_vote(Vote(image_id=image_id, direction=VoteDirection.UP))

    def downvote(self, image_id: ImageId) -> Tally:
        return self.cast_vote(Vote(image_id=image_id, direction=VoteDirection.DOWN))

    def update(self, image_id: ImageId, is_upvote: bool) -> tuple[int, int]:
        """Apply a vote given as an up/down flag.

        Returns:
            (up_votes, down_votes) after the vote
        """
        direction = VoteDirection.from_flag(is_upvote)
        return self.cast_vote(Vote(image_id=image_id, direction=direction)).as_tuple()
