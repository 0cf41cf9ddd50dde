import logging

from bookmarker_api.errors import BadRequestError, ConflictError, NotFoundError
from bookmarker_api.repositories.reviews_repository import ReviewsRepository
from bookmarker_api.repositories.saved_books_repository import SavedBooksRepository
from bookmarker_api.repositories.users_repository import UsersRepository
from bookmarker_api.schemas.review import ReviewRead, VolumeReview
from bookmarker_api.services.base import OwnerScopedService

logger = logging.getLogger(__name__)


def _require_comment(comment: str) -> str:
    if not comment or not comment.strip():
        raise BadRequestError("Empty review. Please write a review")
    return comment


class ReviewService(OwnerScopedService):
    def __init__(
        self,
        users_repo: UsersRepository,
        saved_books_repo: SavedBooksRepository,
        reviews_repo: ReviewsRepository,
    ) -> None:
        super().__init__(users_repo=users_repo, saved_books_repo=saved_books_repo)
        self.reviews_repo = reviews_repo

    def add_review(self, username: str, volume_id: str, comment: str) -> ReviewRead:
        owner = self._get_owner(username)
        self._get_saved_book(owner, volume_id)

        if self.reviews_repo.get_for_volume(owner.id, volume_id) is not None:
            raise ConflictError("Only one review per book is allowed")

        _require_comment(comment)

        review = self.reviews_repo.create(user_id=owner.id, volume_id=volume_id, comment=comment)
        logger.info("review_added", extra={"username": username, "volume_id": volume_id})
        return ReviewRead.model_validate(review)

    def update_review(self, username: str, review_id: int, comment: str) -> ReviewRead:
        owner = self._get_owner(username)
        _require_comment(comment)

        review = self.reviews_repo.get_owned(review_id, owner.id)
        if review is None:
            raise NotFoundError(f"No review found. Review Id: {review_id}")

        updated = self.reviews_repo.update_comment(review, comment)
        logger.info("review_updated", extra={"username": username, "review_id": review_id})
        return ReviewRead.model_validate(updated)

    def list_reviews_for_volume(self, volume_id: str) -> list[VolumeReview]:
        rows = self.reviews_repo.list_for_volume(volume_id)
        return [
            VolumeReview(**ReviewRead.model_validate(review).model_dump(), username=username)
            for review, username in rows
        ]

    def delete_review(self, username: str, review_id: int) -> int:
        owner = self._get_owner(username)

        review = self.reviews_repo.get_owned(review_id, owner.id)
        if review is None:
            raise NotFoundError(f"No review found. Review Id: {review_id}")

        self.reviews_repo.delete(review)
        logger.info("review_deleted", extra={"username": username, "review_id": review_id})
        return review_id
