"""Domain model entities."""

from puppies.domain.model.image import Image
from puppies.domain.model.photo import Photo
from puppies.domain.model.search import PuppiesSummary, SearchResponse
from puppies.domain.model.vote import Vote
from puppies.domain.model.vote_record import VoteRecord

__all__ = [
    "Image",
    "Photo",
    "PuppiesSummary",
    "SearchResponse",
    "Vote",
    "VoteRecord",
]
