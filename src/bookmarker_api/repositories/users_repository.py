import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookmarker_api.errors import BadRequestError
from bookmarker_api.models import SavedBook
from bookmarker_api.models import User as UserModel

logger = logging.getLogger(__name__)


class UsersRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_username(self, username: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.username == username)
        return self.session.scalars(stmt).first()

    def create(self, username: str, password_hash: str, email: str) -> UserModel:
        user_model = UserModel(username=username, password_hash=password_hash, email=email)
        self.session.add(user_model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning("Username insert rejected by storage", extra={"username": username})
            raise BadRequestError(
                f"Please sign up with another username. {username} has already been taken."
            ) from exc
        self.session.refresh(user_model)

        return user_model

    def update_email(self, user_model: UserModel, email: str) -> UserModel:
        user_model.email = email
        self.session.commit()
        self.session.refresh(user_model)

        return user_model

    def delete(self, user_model: UserModel) -> None:
        self.session.delete(user_model)
        self.session.commit()

    def list_saved_volume_ids(self, user_id: int) -> Sequence[str]:
        stmt = (
            select(SavedBook.volume_id)
            .where(SavedBook.user_id == user_id)
            .order_by(SavedBook.id.asc())
        )
        return self.session.scalars(stmt).all()
