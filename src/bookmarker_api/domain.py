import typing
from typing import Annotated

from pydantic import Field

MIN_RATING = 1
MAX_RATING = 5

if typing.TYPE_CHECKING:
    Username = typing.NewType("Username", str)
    VolumeId = typing.NewType("VolumeId", str)
    RatingValue = typing.NewType("RatingValue", int)
    ReviewComment = typing.NewType("ReviewComment", str)
else:
    _UsernameStr = Annotated[str, Field(min_length=1, max_length=30)]
    Username = typing.NewType("Username", _UsernameStr)

    _VolumeIdStr = Annotated[str, Field(min_length=1, max_length=64)]
    VolumeId = typing.NewType("VolumeId", _VolumeIdStr)

    _RatingInt = Annotated[int, Field(ge=MIN_RATING, le=MAX_RATING)]
    RatingValue = typing.NewType("RatingValue", _RatingInt)

    _ReviewCommentStr = Annotated[str, Field(min_length=1)]
    ReviewComment = typing.NewType("ReviewComment", _ReviewCommentStr)
