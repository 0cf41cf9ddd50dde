import logging

from bookmarker_api.errors import BadRequestError, NotFoundError, UnauthorizedError
from bookmarker_api.models import User as UserModel
from bookmarker_api.repositories.users_repository import UsersRepository
from bookmarker_api.schemas.user import UserProfile, UserRead, UserRegister, UserUpdate
from bookmarker_api.security.passwords import PasswordHasher

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repo: UsersRepository, hasher: PasswordHasher) -> None:
        self.repo = repo
        self.hasher = hasher

    def _get_user(self, username: str) -> UserModel:
        user = self.repo.get_by_username(username)
        if user is None:
            raise NotFoundError(f"No user: {username}")
        return user

    def register(self, data: UserRegister) -> UserRead:
        if self.repo.get_by_username(data.username) is not None:
            raise BadRequestError(
                f"Please sign up with another username. {data.username} has already been taken."
            )

        user = self.repo.create(
            username=data.username,
            password_hash=self.hasher.hash(data.password),
            email=data.email,
        )
        logger.info("user_registered", extra={"username": user.username})
        return UserRead.model_validate(user)

    def authenticate(self, username: str, password: str) -> UserRead:
        user = self.repo.get_by_username(username)
        if user is not None and self.hasher.verify(password, user.password_hash):
            return UserRead.model_validate(user)

        logger.info("login_rejected", extra={"username": username})
        raise UnauthorizedError("Invalid username/password")

    def get_profile(self, username: str) -> UserProfile:
        user = self._get_user(username)
        volume_ids = self.repo.list_saved_volume_ids(user.id)
        return UserProfile(
            **UserRead.model_validate(user).model_dump(), saved_volume_ids=list(volume_ids)
        )

    def update(self, username: str, patch: UserUpdate) -> UserRead:
        user = self._get_user(username)
        updated = self.repo.update_email(user, patch.email)
        logger.info("user_updated", extra={"username": username})
        return UserRead.model_validate(updated)

    def delete(self, username: str) -> str:
        user = self._get_user(username)
        self.repo.delete(user)
        logger.info("user_deleted", extra={"username": username})
        return username
