import pytest

from bookmarker_api.errors import ConflictError, NotFoundError
from bookmarker_api.schemas.saved_book import SavedBookCreate
from bookmarker_api.schemas.user import UserRegister
from bookmarker_api.services.rating_service import RatingService
from bookmarker_api.services.review_service import ReviewService
from bookmarker_api.services.saved_book_service import SavedBookService
from bookmarker_api.services.user_service import UserService


@pytest.fixture(autouse=True)
def reader(user_service: UserService) -> None:
    user_service.register(UserRegister(username="u1", password="pw1", email="u1@x.com"))


def _book(volume_id: str = "v1", has_read: bool = False) -> SavedBookCreate:
    return SavedBookCreate(volume_id=volume_id, title="Dune", author="Herbert", has_read=has_read)


def test_new_saved_book_aggregate_has_no_review_or_rating(
    saved_book_service: SavedBookService,
) -> None:
    saved_book_service.add_saved_book("u1", _book())

    aggregate = saved_book_service.get_aggregate("u1", "v1")

    assert aggregate.title == "Dune"
    assert aggregate.has_read is False
    assert aggregate.review is None
    assert aggregate.rating is None


def test_aggregate_carries_review_and_rating(
    saved_book_service: SavedBookService,
    review_service: ReviewService,
    rating_service: RatingService,
) -> None:
    saved_book_service.add_saved_book("u1", _book())
    review_service.add_review("u1", "v1", "great")
    rating_service.add_rating("u1", "v1", 4)

    aggregate = saved_book_service.get_aggregate("u1", "v1")

    assert aggregate.review.comment == "great"
    assert aggregate.rating.rating == 4


def test_saving_same_volume_twice_conflicts(saved_book_service: SavedBookService) -> None:
    saved_book_service.add_saved_book("u1", _book())

    with pytest.raises(ConflictError):
        saved_book_service.add_saved_book("u1", _book(has_read=True))


def test_set_read_status_is_idempotent(saved_book_service: SavedBookService) -> None:
    saved_book_service.add_saved_book("u1", _book())

    first = saved_book_service.set_read_status("u1", "v1", True)
    second = saved_book_service.set_read_status("u1", "v1", True)

    assert first.has_read is second.has_read is True
    assert [b.volume_id for b in saved_book_service.list_by_status("u1", True)] == ["v1"]
    assert saved_book_service.list_by_status("u1", False) == []


def test_unknown_user_is_not_found_but_empty_library_is_empty(
    saved_book_service: SavedBookService,
) -> None:
    assert saved_book_service.list_by_status("u1", True) == []

    with pytest.raises(NotFoundError):
        saved_book_service.list_by_status("ghost", True)


@pytest.mark.parametrize("operation", ["get_aggregate", "delete_saved_book"])
def test_missing_saved_book_is_not_found(
    saved_book_service: SavedBookService, operation: str
) -> None:
    with pytest.raises(NotFoundError):
        getattr(saved_book_service, operation)("u1", "missing")


def test_delete_saved_book_removes_review_and_rating(
    saved_book_service: SavedBookService,
    review_service: ReviewService,
    rating_service: RatingService,
) -> None:
    saved_book_service.add_saved_book("u1", _book())
    review_service.add_review("u1", "v1", "great")
    rating_service.add_rating("u1", "v1", 4)

    assert saved_book_service.delete_saved_book("u1", "v1") == "v1"

    assert review_service.list_reviews_for_volume("v1") == []
    # Saving it again starts a clean aggregate.
    saved_book_service.add_saved_book("u1", _book())
    aggregate = saved_book_service.get_aggregate("u1", "v1")
    assert aggregate.review is None
    assert aggregate.rating is None
