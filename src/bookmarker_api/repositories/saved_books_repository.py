import logging
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookmarker_api.errors import ConflictError
from bookmarker_api.models import Rating, Review, SavedBook
from bookmarker_api.schemas.saved_book import SavedBookCreate

logger = logging.getLogger(__name__)


class SavedBooksRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int, volume_id: str) -> SavedBook | None:
        stmt = select(SavedBook).where(
            SavedBook.user_id == user_id, SavedBook.volume_id == volume_id
        )
        return self.session.scalars(stmt).first()

    def list_by_status(self, user_id: int, has_read: bool) -> Sequence[SavedBook]:
        """
        Returns the user's saved books with the given status in insertion order.
        """
        stmt = (
            select(SavedBook)
            .where(SavedBook.user_id == user_id, SavedBook.has_read == has_read)
            .order_by(SavedBook.id.asc())
        )
        return self.session.scalars(stmt).all()

    def create(self, user_id: int, data: SavedBookCreate) -> SavedBook:
        saved_book = SavedBook(user_id=user_id, **data.model_dump())
        self.session.add(saved_book)
        try:
            self.session.commit()
        except IntegrityError as exc:
            # The unique (user_id, volume_id) constraint settles concurrent saves.
            self.session.rollback()
            logger.warning(
                "Saved book insert rejected by storage",
                extra={"user_id": user_id, "volume_id": data.volume_id},
            )
            raise ConflictError(f"Book already saved. Volume Id: {data.volume_id}") from exc
        self.session.refresh(saved_book)

        return saved_book

    def set_read_status(self, saved_book: SavedBook, has_read: bool) -> SavedBook:
        if saved_book.has_read == has_read:
            return saved_book

        saved_book.has_read = has_read
        self.session.commit()
        self.session.refresh(saved_book)

        return saved_book

    def delete(self, saved_book: SavedBook) -> None:
        """
        Removes the saved book together with its review and rating in one commit.

        The composite foreign keys cascade as well; the explicit deletes keep the
        aggregate consistent on engines that do not enforce them.
        """
        for model in (Review, Rating):
            self.session.execute(
                delete(model).where(
                    model.user_id == saved_book.user_id,
                    model.volume_id == saved_book.volume_id,
                )
            )
        self.session.delete(saved_book)
        self.session.commit()
