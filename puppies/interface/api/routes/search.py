"""Puppy search routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from puppies.adapter.error import ProviderError
from puppies.application.usecase.image import (
    SearchPuppiesRequest,
    SearchPuppiesUseCase,
)
from puppies.domain.model import PuppiesSummary
from puppies.persistence.error import PersistenceError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["puppies"], route_class=DishkaRoute)


@router.get("/puppies", response_model=PuppiesSummary)
async def search_puppies(
    search_use_case: FromDishka[SearchPuppiesUseCase],
    page: int = Query(default=1, ge=1),
) -> PuppiesSummary:
    """Fetch a page of puppy photos from Flickr and register them.

    Args:
        search_use_case: Search use case from DI
        page: Flickr result page

    Returns:
        Search pagination plus every registered image with its tally

    Raises:
        HTTPException: 502 if Flickr fails or its response is unusable,
            503 if stored tallies cannot be read
    """
    try:
        return await search_use_case.execute(SearchPuppiesRequest(page=page))
    except ProviderError as e:
        logger.error(f"Flickr search failed for page {page}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
    except PersistenceError as e:
        logger.error(f"Stored tallies could not be loaded: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
