from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookmarker_api.dependencies.auth import require_route_owner
from bookmarker_api.dependencies.library import get_review_service
from bookmarker_api.schemas.review import (
    ReviewDeletedResponse,
    ReviewResponse,
    ReviewWrite,
    VolumeReviewsResponse,
)
from bookmarker_api.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["reviews"])

ReviewSvc = Annotated[ReviewService, Depends(get_review_service)]
OWNER_ONLY = [Depends(require_route_owner)]


@router.post(
    "/volume/{volume_id}/user/{username}",
    status_code=status.HTTP_201_CREATED,
    response_model=ReviewResponse,
    dependencies=OWNER_ONLY,
    responses={
        400: {"description": "Empty review"},
        401: {"description": "Not the owner"},
        404: {"description": "User or saved book not found"},
        409: {"description": "Book already reviewed"},
    },
)
def add_review(
    volume_id: str, username: str, payload: ReviewWrite, svc: ReviewSvc
) -> ReviewResponse:
    """Write the single review allowed for a saved book."""
    return ReviewResponse(review=svc.add_review(username, volume_id, payload.comment))


@router.patch(
    "/{review_id}/user/{username}",
    response_model=ReviewResponse,
    dependencies=OWNER_ONLY,
    responses={401: {"description": "Not the owner"}, 404: {"description": "Review not found"}},
)
def update_review(
    review_id: int, username: str, payload: ReviewWrite, svc: ReviewSvc
) -> ReviewResponse:
    """Replace the text of one of the user's reviews."""
    return ReviewResponse(review=svc.update_review(username, review_id, payload.comment))


@router.delete(
    "/{review_id}/user/{username}",
    response_model=ReviewDeletedResponse,
    dependencies=OWNER_ONLY,
    responses={401: {"description": "Not the owner"}, 404: {"description": "Review not found"}},
)
def delete_review(review_id: int, username: str, svc: ReviewSvc) -> ReviewDeletedResponse:
    """Delete one of the user's reviews."""
    return ReviewDeletedResponse(deleted=svc.delete_review(username, review_id))


@router.get("/{volume_id}", response_model=VolumeReviewsResponse)
def list_volume_reviews(volume_id: str, svc: ReviewSvc) -> VolumeReviewsResponse:
    """Public list of every user's review for a catalog volume, oldest first."""
    return VolumeReviewsResponse(reviews=svc.list_reviews_for_volume(volume_id))
