from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookmarker_api.dependencies.auth import require_route_owner
from bookmarker_api.dependencies.library import get_saved_book_service
from bookmarker_api.errors import BadRequestError
from bookmarker_api.schemas.saved_book import (
    ReadStatusUpdate,
    SavedBookAggregateResponse,
    SavedBookCreate,
    SavedBookDeletedResponse,
    SavedBookListResponse,
    SavedBookResponse,
)
from bookmarker_api.services.saved_book_service import SavedBookService

router = APIRouter(
    prefix="/savedbooks",
    tags=["saved books"],
    dependencies=[Depends(require_route_owner)],
    responses={401: {"description": "Not the owner"}},
)

SavedBookSvc = Annotated[SavedBookService, Depends(get_saved_book_service)]


# Status listings are declared before /{volume_id}/... so "read" and "wish"
# are never captured as volume ids.
@router.get("/read/user/{username}", response_model=SavedBookListResponse)
def list_read_books(username: str, svc: SavedBookSvc) -> SavedBookListResponse:
    """List saved books marked as read."""
    return SavedBookListResponse(saved_books=svc.list_by_status(username, has_read=True))


@router.get("/wish/user/{username}", response_model=SavedBookListResponse)
def list_wish_books(username: str, svc: SavedBookSvc) -> SavedBookListResponse:
    """List saved books on the wish-to-read shelf."""
    return SavedBookListResponse(saved_books=svc.list_by_status(username, has_read=False))


@router.post(
    "/{volume_id}/user/{username}",
    status_code=status.HTTP_201_CREATED,
    response_model=SavedBookResponse,
    responses={
        400: {"description": "Invalid payload or volume id mismatch"},
        404: {"description": "User not found"},
        409: {"description": "Volume already saved"},
    },
)
def add_saved_book(
    volume_id: str,
    username: str,
    payload: SavedBookCreate,
    svc: SavedBookSvc,
) -> SavedBookResponse:
    """Save a catalog volume to the user's library."""
    if payload.volume_id != volume_id:
        raise BadRequestError(
            f"Volume Id in path: {volume_id}, does not equal Volume Id in body: "
            f"{payload.volume_id}"
        )
    return SavedBookResponse(saved_book=svc.add_saved_book(username, payload))


@router.patch(
    "/{volume_id}/user/{username}",
    response_model=SavedBookResponse,
    responses={404: {"description": "User or saved book not found"}},
)
def set_read_status(
    volume_id: str,
    username: str,
    payload: ReadStatusUpdate,
    svc: SavedBookSvc,
) -> SavedBookResponse:
    """Move a saved book between Read and Wish To Read."""
    return SavedBookResponse(
        saved_book=svc.set_read_status(username, volume_id, payload.has_read)
    )


@router.get(
    "/{volume_id}/user/{username}",
    response_model=SavedBookAggregateResponse,
    responses={404: {"description": "User or saved book not found"}},
)
def get_saved_book(volume_id: str, username: str, svc: SavedBookSvc) -> SavedBookAggregateResponse:
    """Get a saved book with its review and rating (null when absent)."""
    return SavedBookAggregateResponse(saved_book=svc.get_aggregate(username, volume_id))


@router.delete(
    "/{volume_id}/user/{username}",
    response_model=SavedBookDeletedResponse,
    responses={404: {"description": "User or saved book not found"}},
)
def delete_saved_book(
    volume_id: str, username: str, svc: SavedBookSvc
) -> SavedBookDeletedResponse:
    """Remove a saved book together with its review and rating."""
    return SavedBookDeletedResponse(deleted=svc.delete_saved_book(username, volume_id))
