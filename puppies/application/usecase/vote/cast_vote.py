"""Cast vote use case."""

from pydantic import BaseModel, Field

from puppies.domain.model import Vote
from puppies.domain.service import VoteService
from puppies.domain.value import ImageId, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    image_id: str
    direction: VoteDirection


class CastVoteResponse(BaseModel):
    """Tally of the image after the vote."""

    id: str
    up_votes: int = Field(serialization_alias="upvotes")
    down_votes: int = Field(serialization_alias="downvotes")


class CastVoteUseCase:
    """Use case for voting on an image."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the image is not registered
            VoteLimitError: If the counter is already at MAX_VOTES
        """
        vote = Vote(image_id=ImageId(request.image_id), direction=request.direction)
        tally = self.vote_service.cast_vote(vote)

        return CastVoteResponse(
            id=request.image_id,
            up_votes=tally.up_votes,
            down_votes=tally.down_votes,
        )
