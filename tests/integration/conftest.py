import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from bookmarker_api.models import Rating, Review, SavedBook, User
from bookmarker_api.security.passwords import PasswordHasher
from bookmarker_api.security.tokens import TokenService


class DataFactory:
    def __init__(self, session: Session, hasher: PasswordHasher, tokens: TokenService):
        self.session = session
        self.hasher = hasher
        self.tokens = tokens

    def create_user(
        self, username: str, password: str = "password", email: str | None = None
    ) -> User:
        u = User(
            username=username,
            password_hash=self.hasher.hash(password),
            email=email or f"{username}@email.com",
        )
        self.session.add(u)
        self.session.flush()
        return u

    def create_saved_book(
        self, user: User, volume_id: str, has_read: bool = False, **kwargs
    ) -> SavedBook:
        kwargs.setdefault("title", f"title-{volume_id}")
        b = SavedBook(user_id=user.id, volume_id=volume_id, has_read=has_read, **kwargs)
        self.session.add(b)
        self.session.flush()
        return b

    def create_review(self, user: User, volume_id: str, comment: str = "comment") -> Review:
        r = Review(user_id=user.id, volume_id=volume_id, comment=comment)
        self.session.add(r)
        self.session.flush()
        return r

    def create_rating(self, user: User, volume_id: str, rating: int = 4) -> Rating:
        r = Rating(user_id=user.id, volume_id=volume_id, rating=rating)
        self.session.add(r)
        self.session.flush()
        return r

    def auth_headers(self, username: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.tokens.create_token(username)}"}

    def get_saved_books(self) -> list[SavedBook]:
        return self.session.execute(select(SavedBook)).scalars().all()

    def get_reviews(self) -> list[Review]:
        return self.session.execute(select(Review)).scalars().all()

    def get_ratings(self) -> list[Rating]:
        return self.session.execute(select(Rating)).scalars().all()

    def commit(self):
        self.session.commit()


@pytest.fixture
def test_data(
    db_session: Session, password_hasher: PasswordHasher, token_service: TokenService
) -> DataFactory:
    return DataFactory(db_session, password_hasher, token_service)


@pytest.fixture
def library(test_data: DataFactory) -> dict[str, User]:
    """Three users; u1 and u2 each have one saved book, u1's book is reviewed and rated."""
    u1 = test_data.create_user("u1", password="password1")
    u2 = test_data.create_user("u2", password="password2")
    u3 = test_data.create_user("u3", password="password3")
    test_data.create_saved_book(u1, "11", has_read=True, author="author1")
    test_data.create_saved_book(u2, "22", has_read=False, author="author2")
    test_data.create_review(u1, "11", comment="comment1")
    test_data.create_rating(u1, "11", rating=5)
    test_data.commit()
    return {"u1": u1, "u2": u2, "u3": u3}
