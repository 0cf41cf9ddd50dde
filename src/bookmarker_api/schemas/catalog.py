from typing import Any

from pydantic import BaseModel, Field


class CatalogBook(BaseModel):
    """Simplified catalog entry; Google volumes carry ``volume_id``, NYT entries ``isbn``."""

    volume_id: str | None = None
    isbn: str | None = None
    title: str | None = None
    author: list[str] | str | None = Field(
        default=None, description="Google returns a list of authors, NYT a single string"
    )
    description: str | None = None
    image: str | None = None


class CatalogBookList(BaseModel):
    books: list[CatalogBook]


CatalogVolume = dict[str, Any]
