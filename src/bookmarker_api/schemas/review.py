from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from bookmarker_api.domain import ReviewComment


class ReviewWrite(BaseModel):
    comment: ReviewComment = Field(description="Review text", examples=["Gripping to the end."])

    model_config = ConfigDict(extra="forbid")


class ReviewRead(BaseModel):
    id: int
    user_id: int
    volume_id: str
    comment: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class VolumeReview(ReviewRead):
    username: str = Field(description="Username of the reviewer")


class ReviewResponse(BaseModel):
    review: ReviewRead


class VolumeReviewsResponse(BaseModel):
    reviews: list[VolumeReview]


class ReviewDeletedResponse(BaseModel):
    deleted: int = Field(description="Id of the removed review")
