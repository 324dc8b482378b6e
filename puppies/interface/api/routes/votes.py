"""Vote store routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from puppies.application.usecase.vote import FlushVotesResponse, FlushVotesUseCase
from puppies.persistence.error import PersistenceError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


@router.post("/flush", response_model=FlushVotesResponse)
async def flush_votes(
    flush_use_case: FromDishka[FlushVotesUseCase],
) -> FlushVotesResponse:
    """Write every image's tally to the vote store.

    Raises:
        HTTPException: 503 if the transaction fails; nothing is written
    """
    try:
        return await flush_use_case.execute()
    except PersistenceError as e:
        logger.error(f"Vote flush failed: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
