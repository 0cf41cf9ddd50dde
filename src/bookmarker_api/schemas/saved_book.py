from pydantic import BaseModel, ConfigDict, Field

from bookmarker_api.domain import VolumeId
from bookmarker_api.schemas.rating import RatingRead
from bookmarker_api.schemas.review import ReviewRead


class SavedBookBase(BaseModel):
    volume_id: VolumeId = Field(description="Catalog volume identifier", examples=["sY7NE_F8yB0C"])
    title: str = Field(min_length=1, description="Title of the book", examples=["Airframe"])
    author: str | None = Field(default=None, examples=["Michael Crichton"])
    publisher: str | None = Field(default=None, examples=["Ballantine Books"])
    category: str | None = Field(default=None, examples=["Fiction"])
    description: str | None = None
    image: str | None = Field(default=None, description="Cover thumbnail URL")


class SavedBookCreate(SavedBookBase):
    has_read: bool = Field(description="True for Read, False for Wish To Read")

    model_config = ConfigDict(extra="forbid")


class ReadStatusUpdate(BaseModel):
    has_read: bool = Field(description="True for Read, False for Wish To Read")

    model_config = ConfigDict(extra="forbid")


class SavedBookRead(SavedBookBase):
    id: int
    user_id: int
    has_read: bool

    model_config = ConfigDict(from_attributes=True)


class SavedBookAggregate(SavedBookRead):
    review: ReviewRead | None = Field(description="The owner's review, or null when not written")
    rating: RatingRead | None = Field(description="The owner's rating, or null when not given")


class SavedBookResponse(BaseModel):
    saved_book: SavedBookRead


class SavedBookAggregateResponse(BaseModel):
    saved_book: SavedBookAggregate


class SavedBookListResponse(BaseModel):
    saved_books: list[SavedBookRead]


class SavedBookDeletedResponse(BaseModel):
    deleted: str = Field(description="Volume id of the removed saved book")
