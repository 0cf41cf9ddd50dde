from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookmarker_api.dependencies.auth import require_route_owner
from bookmarker_api.dependencies.library import get_rating_service
from bookmarker_api.schemas.rating import RatingDeletedResponse, RatingResponse, RatingWrite
from bookmarker_api.services.rating_service import RatingService

router = APIRouter(
    prefix="/ratings",
    tags=["ratings"],
    dependencies=[Depends(require_route_owner)],
    responses={401: {"description": "Not the owner"}},
)

RatingSvc = Annotated[RatingService, Depends(get_rating_service)]


@router.post(
    "/volume/{volume_id}/user/{username}",
    status_code=status.HTTP_201_CREATED,
    response_model=RatingResponse,
    responses={
        400: {"description": "Rating outside 1-5"},
        404: {"description": "User or saved book not found"},
        409: {"description": "Book already rated"},
    },
)
def add_rating(
    volume_id: str, username: str, payload: RatingWrite, svc: RatingSvc
) -> RatingResponse:
    """Give the single rating allowed for a saved book."""
    return RatingResponse(rating=svc.add_rating(username, volume_id, payload.rating))


@router.get(
    "/volume/{volume_id}/user/{username}",
    response_model=RatingResponse,
    responses={404: {"description": "User or saved book not found"}},
)
def get_rating(volume_id: str, username: str, svc: RatingSvc) -> RatingResponse:
    """Get the rating for a saved book; ``rating`` is null when none was given."""
    return RatingResponse(rating=svc.get_rating(username, volume_id))


@router.patch(
    "/{rating_id}/user/{username}",
    response_model=RatingResponse,
    responses={404: {"description": "Rating not found"}},
)
def update_rating(
    rating_id: int, username: str, payload: RatingWrite, svc: RatingSvc
) -> RatingResponse:
    """Change one of the user's ratings."""
    return RatingResponse(rating=svc.update_rating(username, rating_id, payload.rating))


@router.delete(
    "/{rating_id}/user/{username}",
    response_model=RatingDeletedResponse,
    responses={404: {"description": "Rating not found"}},
)
def delete_rating(rating_id: int, username: str, svc: RatingSvc) -> RatingDeletedResponse:
    """Delete one of the user's ratings."""
    return RatingDeletedResponse(deleted=svc.delete_rating(username, rating_id))
