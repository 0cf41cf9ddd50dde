import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookmarker_api.errors import ConflictError
from bookmarker_api.models import Rating

logger = logging.getLogger(__name__)


class RatingsRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_for_volume(self, user_id: int, volume_id: str) -> Rating | None:
        stmt = select(Rating).where(Rating.user_id == user_id, Rating.volume_id == volume_id)
        return self.session.scalars(stmt).first()

    def get_owned(self, rating_id: int, user_id: int) -> Rating | None:
        stmt = select(Rating).where(Rating.id == rating_id, Rating.user_id == user_id)
        return self.session.scalars(stmt).first()

    def create(self, user_id: int, volume_id: str, rating: int) -> Rating:
        rating_model = Rating(user_id=user_id, volume_id=volume_id, rating=rating)
        self.session.add(rating_model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning(
                "Rating insert rejected by storage",
                extra={"user_id": user_id, "volume_id": volume_id},
            )
            raise ConflictError("Only one rating per book is allowed") from exc
        self.session.refresh(rating_model)

        return rating_model

    def update_value(self, rating_model: Rating, rating: int) -> Rating:
        rating_model.rating = rating
        self.session.commit()
        self.session.refresh(rating_model)

        return rating_model

    def delete(self, rating_model: Rating) -> None:
        self.session.delete(rating_model)
        self.session.commit()
