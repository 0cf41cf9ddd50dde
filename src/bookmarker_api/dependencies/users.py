from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookmarker_api.config import Settings, get_settings
from bookmarker_api.database import SessionLocal
from bookmarker_api.repositories.users_repository import UsersRepository
from bookmarker_api.security.passwords import PasswordHasher
from bookmarker_api.services.user_service import UserService


def get_db_session() -> Iterator[Session]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def get_users_repository(session: Annotated[Session, Depends(get_db_session)]) -> UsersRepository:
    return UsersRepository(session=session)


def get_password_hasher(settings: Annotated[Settings, Depends(get_settings)]) -> PasswordHasher:
    return PasswordHasher(iterations=settings.password_hash_iterations)


def get_user_service(
    repo: Annotated[UsersRepository, Depends(get_users_repository)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    return UserService(repo=repo, hasher=hasher)
