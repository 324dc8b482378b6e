"""Image and vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from puppies.application.usecase.image import GetImageUseCase, ListImagesUseCase
from puppies.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from puppies.domain.error import NotFoundError, VoteLimitError
from puppies.domain.model import Image
from puppies.domain.value import VoteDirection

router = APIRouter(prefix="/images", tags=["images"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Vote request body."""

    direction: VoteDirection


@router.get("", response_model=list[Image])
async def list_images(
    list_use_case: FromDishka[ListImagesUseCase],
) -> list[Image]:
    """List every registered image in the order it was first seen."""
    return await list_use_case.execute()


@router.get("/{image_id}", response_model=Image)
async def get_image(
    image_id: str,
    get_use_case: FromDishka[GetImageUseCase],
) -> Image:
    """Get one registered image.

    Raises:
        HTTPException: 404 if the image is not registered
    """
    try:
        return await get_use_case.execute(image_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post("/{image_id}/vote", response_model=CastVoteResponse)
async def vote_on_image(
    image_id: str,
    body: VoteBody,
    vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Cast one up or down vote on an image.

    Args:
        image_id: Flickr photo id
        body: Vote direction
        vote_use_case: Cast vote use case from DI

    Returns:
        The image's tally after the vote

    Raises:
        HTTPException: 404 if the image is not registered, 409 if the
            counter is already at its limit
    """
    try:
        request = CastVoteRequest(image_id=image_id, direction=body.direction)
        return await vote_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except VoteLimitError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
