from bookmarker_api.errors import NotFoundError
from bookmarker_api.models import SavedBook
from bookmarker_api.models import User as UserModel
from bookmarker_api.repositories.saved_books_repository import SavedBooksRepository
from bookmarker_api.repositories.users_repository import UsersRepository


class OwnerScopedService:
    """Shared owner and saved-book lookups for services acting on one user's library."""

    def __init__(self, users_repo: UsersRepository, saved_books_repo: SavedBooksRepository) -> None:
        self.users_repo = users_repo
        self.saved_books_repo = saved_books_repo

    def _get_owner(self, username: str) -> UserModel:
        owner = self.users_repo.get_by_username(username)
        if owner is None:
            raise NotFoundError(f"No user: {username}")
        return owner

    def _get_saved_book(self, owner: UserModel, volume_id: str) -> SavedBook:
        saved_book = self.saved_books_repo.get(owner.id, volume_id)
        if saved_book is None:
            raise NotFoundError(f"No saved book. Volume Id: {volume_id}")
        return saved_book
