"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .flush_votes import FlushVotesResponse, FlushVotesUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "FlushVotesResponse",
    "FlushVotesUseCase",
]
