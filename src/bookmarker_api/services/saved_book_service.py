import logging

from bookmarker_api.errors import ConflictError
from bookmarker_api.repositories.ratings_repository import RatingsRepository
from bookmarker_api.repositories.reviews_repository import ReviewsRepository
from bookmarker_api.repositories.saved_books_repository import SavedBooksRepository
from bookmarker_api.repositories.users_repository import UsersRepository
from bookmarker_api.schemas.rating import RatingRead
from bookmarker_api.schemas.review import ReviewRead
from bookmarker_api.schemas.saved_book import SavedBookAggregate, SavedBookCreate, SavedBookRead
from bookmarker_api.services.base import OwnerScopedService

logger = logging.getLogger(__name__)


class SavedBookService(OwnerScopedService):
    """
    Owns the saved-book aggregate: a saved book plus at most one review and one
    rating, all keyed by (user, volume).
    """

    def __init__(
        self,
        users_repo: UsersRepository,
        saved_books_repo: SavedBooksRepository,
        reviews_repo: ReviewsRepository,
        ratings_repo: RatingsRepository,
    ) -> None:
        super().__init__(users_repo=users_repo, saved_books_repo=saved_books_repo)
        self.reviews_repo = reviews_repo
        self.ratings_repo = ratings_repo

    def add_saved_book(self, username: str, data: SavedBookCreate) -> SavedBookRead:
        owner = self._get_owner(username)

        if self.saved_books_repo.get(owner.id, data.volume_id) is not None:
            raise ConflictError(f"Book already saved. Volume Id: {data.volume_id}")

        saved_book = self.saved_books_repo.create(user_id=owner.id, data=data)
        logger.info(
            "saved_book_added",
            extra={"username": username, "volume_id": data.volume_id, "has_read": data.has_read},
        )
        return SavedBookRead.model_validate(saved_book)

    def set_read_status(self, username: str, volume_id: str, has_read: bool) -> SavedBookRead:
        owner = self._get_owner(username)
        saved_book = self._get_saved_book(owner, volume_id)

        updated = self.saved_books_repo.set_read_status(saved_book, has_read)
        logger.info(
            "saved_book_status_set",
            extra={"username": username, "volume_id": volume_id, "has_read": has_read},
        )
        return SavedBookRead.model_validate(updated)

    def list_by_status(self, username: str, has_read: bool) -> list[SavedBookRead]:
        owner = self._get_owner(username)
        books = self.saved_books_repo.list_by_status(owner.id, has_read)
        return [SavedBookRead.model_validate(book) for book in books]

    def get_aggregate(self, username: str, volume_id: str) -> SavedBookAggregate:
        owner = self._get_owner(username)
        saved_book = self._get_saved_book(owner, volume_id)

        # A missing review or rating is a normal state, rendered as null.
        review = self.reviews_repo.get_for_volume(owner.id, volume_id)
        rating = self.ratings_repo.get_for_volume(owner.id, volume_id)

        return SavedBookAggregate(
            **SavedBookRead.model_validate(saved_book).model_dump(),
            review=ReviewRead.model_validate(review) if review else None,
            rating=RatingRead.model_validate(rating) if rating else None,
        )

    def delete_saved_book(self, username: str, volume_id: str) -> str:
        owner = self._get_owner(username)
        saved_book = self._get_saved_book(owner, volume_id)

        self.saved_books_repo.delete(saved_book)
        logger.info("saved_book_deleted", extra={"username": username, "volume_id": volume_id})
        return volume_id
