import logging

from bookmarker_api.domain import MAX_RATING, MIN_RATING
from bookmarker_api.errors import BadRequestError, ConflictError, NotFoundError
from bookmarker_api.repositories.ratings_repository import RatingsRepository
from bookmarker_api.repositories.saved_books_repository import SavedBooksRepository
from bookmarker_api.repositories.users_repository import UsersRepository
from bookmarker_api.schemas.rating import RatingRead
from bookmarker_api.services.base import OwnerScopedService

logger = logging.getLogger(__name__)


def _require_in_range(rating: int) -> int:
    if isinstance(rating, bool) or not MIN_RATING <= rating <= MAX_RATING:
        raise BadRequestError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    return rating


class RatingService(OwnerScopedService):
    def __init__(
        self,
        users_repo: UsersRepository,
        saved_books_repo: SavedBooksRepository,
        ratings_repo: RatingsRepository,
    ) -> None:
        super().__init__(users_repo=users_repo, saved_books_repo=saved_books_repo)
        self.ratings_repo = ratings_repo

    def add_rating(self, username: str, volume_id: str, rating: int) -> RatingRead:
        owner = self._get_owner(username)
        self._get_saved_book(owner, volume_id)

        if self.ratings_repo.get_for_volume(owner.id, volume_id) is not None:
            raise ConflictError("Only one rating per book is allowed")

        _require_in_range(rating)

        rating_model = self.ratings_repo.create(
            user_id=owner.id, volume_id=volume_id, rating=rating
        )
        logger.info(
            "rating_added",
            extra={"username": username, "volume_id": volume_id, "rating": rating},
        )
        return RatingRead.model_validate(rating_model)

    def update_rating(self, username: str, rating_id: int, rating: int) -> RatingRead:
        owner = self._get_owner(username)
        _require_in_range(rating)

        rating_model = self.ratings_repo.get_owned(rating_id, owner.id)
        if rating_model is None:
            raise NotFoundError(f"No rating found. Rating Id: {rating_id}")

        updated = self.ratings_repo.update_value(rating_model, rating)
        logger.info(
            "rating_updated",
            extra={"username": username, "rating_id": rating_id, "rating": rating},
        )
        return RatingRead.model_validate(updated)

    def get_rating(self, username: str, volume_id: str) -> RatingRead | None:
        owner = self._get_owner(username)
        self._get_saved_book(owner, volume_id)

        rating_model = self.ratings_repo.get_for_volume(owner.id, volume_id)
        if rating_model is None:
            return None
        return RatingRead.model_validate(rating_model)

    def delete_rating(self, username: str, rating_id: int) -> int:
        owner = self._get_owner(username)

        rating_model = self.ratings_repo.get_owned(rating_id, owner.id)
        if rating_model is None:
            raise NotFoundError(f"No rating found. Rating Id: {rating_id}")

        self.ratings_repo.delete(rating_model)
        logger.info("rating_deleted", extra={"username": username, "rating_id": rating_id})
        return rating_id
