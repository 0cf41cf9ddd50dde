from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import bookmarker_api.models  # noqa: F401
from bookmarker_api.database import Base
from bookmarker_api.dependencies.auth import get_token_service
from bookmarker_api.dependencies.users import get_db_session, get_password_hasher
from bookmarker_api.main import app
from bookmarker_api.repositories.ratings_repository import RatingsRepository
from bookmarker_api.repositories.reviews_repository import ReviewsRepository
from bookmarker_api.repositories.saved_books_repository import SavedBooksRepository
from bookmarker_api.repositories.users_repository import UsersRepository
from bookmarker_api.security.passwords import PasswordHasher
from bookmarker_api.security.tokens import TokenService
from bookmarker_api.services.rating_service import RatingService
from bookmarker_api.services.review_service import ReviewService
from bookmarker_api.services.saved_book_service import SavedBookService
from bookmarker_api.services.user_service import UserService


@pytest.fixture(autouse=True)
def clear_dependency_overrides() -> Iterator[None]:
    app.dependency_overrides.clear()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def db_engine() -> Iterator[Engine]:
    # A fresh in-memory database per test keeps rollbacks after IntegrityError isolated.
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=db_engine, autoflush=False)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def password_hasher() -> PasswordHasher:
    return PasswordHasher(iterations=1)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret_key="test-secret", algorithm="HS256", expire_minutes=5)


@pytest.fixture
def users_repo(db_session: Session) -> UsersRepository:
    return UsersRepository(session=db_session)


@pytest.fixture
def saved_books_repo(db_session: Session) -> SavedBooksRepository:
    return SavedBooksRepository(session=db_session)


@pytest.fixture
def reviews_repo(db_session: Session) -> ReviewsRepository:
    return ReviewsRepository(session=db_session)


@pytest.fixture
def ratings_repo(db_session: Session) -> RatingsRepository:
    return RatingsRepository(session=db_session)


@pytest.fixture
def user_service(users_repo: UsersRepository, password_hasher: PasswordHasher) -> UserService:
    return UserService(repo=users_repo, hasher=password_hasher)


@pytest.fixture
def saved_book_service(
    users_repo: UsersRepository,
    saved_books_repo: SavedBooksRepository,
    reviews_repo: ReviewsRepository,
    ratings_repo: RatingsRepository,
) -> SavedBookService:
    return SavedBookService(
        users_repo=users_repo,
        saved_books_repo=saved_books_repo,
        reviews_repo=reviews_repo,
        ratings_repo=ratings_repo,
    )


@pytest.fixture
def review_service(
    users_repo: UsersRepository,
    saved_books_repo: SavedBooksRepository,
    reviews_repo: ReviewsRepository,
) -> ReviewService:
    return ReviewService(
        users_repo=users_repo, saved_books_repo=saved_books_repo, reviews_repo=reviews_repo
    )


@pytest.fixture
def rating_service(
    users_repo: UsersRepository,
    saved_books_repo: SavedBooksRepository,
    ratings_repo: RatingsRepository,
) -> RatingService:
    return RatingService(
        users_repo=users_repo, saved_books_repo=saved_books_repo, ratings_repo=ratings_repo
    )


@pytest.fixture
def client(
    db_session: Session, password_hasher: PasswordHasher, token_service: TokenService
) -> Iterator[TestClient]:
    def override_get_db_session() -> Iterator[Session]:
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    app.dependency_overrides[get_token_service] = lambda: token_service

    with TestClient(app) as test_client:
        yield test_client
