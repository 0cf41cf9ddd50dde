from pydantic import BaseModel, ConfigDict, Field

from bookmarker_api.domain import RatingValue


class RatingWrite(BaseModel):
    rating: RatingValue = Field(description="Whole-star rating from 1 to 5", examples=[4])

    model_config = ConfigDict(extra="forbid")


class RatingRead(BaseModel):
    id: int
    user_id: int
    volume_id: str
    rating: int

    model_config = ConfigDict(from_attributes=True)


class RatingResponse(BaseModel):
    rating: RatingRead | None


class RatingDeletedResponse(BaseModel):
    deleted: int = Field(description="Id of the removed rating")
