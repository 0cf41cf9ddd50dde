from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookmarker_api.dependencies.users import get_db_session, get_users_repository
from bookmarker_api.repositories.ratings_repository import RatingsRepository
from bookmarker_api.repositories.reviews_repository import ReviewsRepository
from bookmarker_api.repositories.saved_books_repository import SavedBooksRepository
from bookmarker_api.repositories.users_repository import UsersRepository
from bookmarker_api.services.rating_service import RatingService
from bookmarker_api.services.review_service import ReviewService
from bookmarker_api.services.saved_book_service import SavedBookService


def get_saved_books_repository(
    session: Annotated[Session, Depends(get_db_session)],
) -> SavedBooksRepository:
    return SavedBooksRepository(session=session)


def get_reviews_repository(
    session: Annotated[Session, Depends(get_db_session)],
) -> ReviewsRepository:
    return ReviewsRepository(session=session)


def get_ratings_repository(
    session: Annotated[Session, Depends(get_db_session)],
) -> RatingsRepository:
    return RatingsRepository(session=session)


def get_saved_book_service(
    users_repo: Annotated[UsersRepository, Depends(get_users_repository)],
    saved_books_repo: Annotated[SavedBooksRepository, Depends(get_saved_books_repository)],
    reviews_repo: Annotated[ReviewsRepository, Depends(get_reviews_repository)],
    ratings_repo: Annotated[RatingsRepository, Depends(get_ratings_repository)],
) -> SavedBookService:
    return SavedBookService(
        users_repo=users_repo,
        saved_books_repo=saved_books_repo,
        reviews_repo=reviews_repo,
        ratings_repo=ratings_repo,
    )


def get_review_service(
    users_repo: Annotated[UsersRepository, Depends(get_users_repository)],
    saved_books_repo: Annotated[SavedBooksRepository, Depends(get_saved_books_repository)],
    reviews_repo: Annotated[ReviewsRepository, Depends(get_reviews_repository)],
) -> ReviewService:
    return ReviewService(
        users_repo=users_repo, saved_books_repo=saved_books_repo, reviews_repo=reviews_repo
    )


def get_rating_service(
    users_repo: Annotated[UsersRepository, Depends(get_users_repository)],
    saved_books_repo: Annotated[SavedBooksRepository, Depends(get_saved_books_repository)],
    ratings_repo: Annotated[RatingsRepository, Depends(get_ratings_repository)],
) -> RatingService:
    return RatingService(
        users_repo=users_repo, saved_books_repo=saved_books_repo, ratings_repo=ratings_repo
    )
