import logging
from collections.abc import Sequence

from sqlalchemy import Row, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookmarker_api.errors import ConflictError
from bookmarker_api.models import Review, SavedBook, User

logger = logging.getLogger(__name__)


class ReviewsRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_for_volume(self, user_id: int, volume_id: str) -> Review | None:
        stmt = select(Review).where(Review.user_id == user_id, Review.volume_id == volume_id)
        return self.session.scalars(stmt).first()

    def get_owned(self, review_id: int, user_id: int) -> Review | None:
        stmt = select(Review).where(Review.id == review_id, Review.user_id == user_id)
        return self.session.scalars(stmt).first()

    def create(self, user_id: int, volume_id: str, comment: str) -> Review:
        review = Review(user_id=user_id, volume_id=volume_id, comment=comment)
        self.session.add(review)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning(
                "Review insert rejected by storage",
                extra={"user_id": user_id, "volume_id": volume_id},
            )
            raise ConflictError("Only one review per book is allowed") from exc
        self.session.refresh(review)

        return review

    def update_comment(self, review: Review, comment: str) -> Review:
        review.comment = comment
        self.session.commit()
        self.session.refresh(review)

        return review

    def delete(self, review: Review) -> None:
        self.session.delete(review)
        self.session.commit()

    def list_for_volume(self, volume_id: str) -> Sequence[Row[tuple[Review, str]]]:
        """
        Returns (review, username) pairs for a volume, oldest first.

        Joining through saved_books hides any review whose saved book is gone.
        """
        stmt = (
            select(Review, User.username)
            .join(User, User.id == Review.user_id)
            .join(
                SavedBook,
                (SavedBook.user_id == Review.user_id) & (SavedBook.volume_id == Review.volume_id),
            )
            .where(Review.volume_id == volume_id)
            .order_by(Review.created_at.asc(), Review.id.asc())
        )
        return self.session.execute(stmt).all()
