import logging
from typing import Any
from urllib.parse import quote

import httpx

from bookmarker_api.errors import CatalogUnavailableError, NotFoundError
from bookmarker_api.schemas.catalog import CatalogBook, CatalogVolume

logger = logging.getLogger(__name__)

SEARCH_MAX_RESULTS = 40


def simplify_books(items: list[dict[str, Any]]) -> list[CatalogBook]:
    """
    Flattens Google volumes and NYT bestseller entries into ``CatalogBook``.

    Google volumes are recognised by their ``volumeInfo`` block; anything else
    is treated as an NYT list entry.
    """
    books: list[CatalogBook] = []
    for item in items:
        info = item.get("volumeInfo")
        if info is not None:
            books.append(
                CatalogBook(
                    volume_id=item.get("id"),
                    title=info.get("title"),
                    author=info.get("authors"),
                    description=info.get("description"),
                    image=(info.get("imageLinks") or {}).get("thumbnail"),
                )
            )
        else:
            isbns = item.get("isbns") or []
            books.append(
                CatalogBook(
                    isbn=isbns[0].get("isbn13") if isbns else item.get("primary_isbn13"),
                    title=item.get("title"),
                    author=item.get("author"),
                    description=item.get("description"),
                    image=item.get("book_image"),
                )
            )
    return books


class CatalogGateway:
    """Read-only access to the Google Books and NYT Books APIs."""

    def __init__(
        self,
        client: httpx.Client,
        google_base_url: str,
        google_api_key: str,
        nyt_base_url: str,
        nyt_api_key: str,
        nyt_list_name: str,
    ) -> None:
        self.client = client
        self.google_base_url = google_base_url.rstrip("/")
        self.google_api_key = google_api_key
        self.nyt_base_url = nyt_base_url.rstrip("/")
        self.nyt_api_key = nyt_api_key
        self.nyt_list_name = nyt_list_name

    def _get_json(self, url: str, params: dict[str, Any]) -> dict[str, Any]:
        try:
            response = self.client.get(url, params=params)
        except httpx.RequestError as exc:
            logger.error("Catalog request failed url=%s error=%s", url, exc)
            raise CatalogUnavailableError("Book catalog is unavailable") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError("Book not found in catalog")
        if response.is_error:
            logger.error(
                "Catalog returned an error url=%s status_code=%s", url, response.status_code
            )
            raise CatalogUnavailableError("Book catalog is unavailable")
        return response.json()

    def _google_params(self, **params: Any) -> dict[str, Any]:
        if self.google_api_key:
            params["key"] = self.google_api_key
        return params

    def search(self, term: str) -> list[CatalogBook]:
        data = self._get_json(
            f"{self.google_base_url}/volumes",
            self._google_params(q=term, maxResults=SEARCH_MAX_RESULTS),
        )
        return simplify_books(data.get("items") or [])

    def get_volume(self, volume_id: str) -> CatalogVolume:
        # volume_id arrives decoded from the route path.
        segment = quote(volume_id, safe="")
        url = f"{self.google_base_url}/volumes/{segment}"
        return self._get_json(url, self._google_params())

    def bestsellers(self) -> list[CatalogBook]:
        data = self._get_json(
            f"{self.nyt_base_url}/lists/current/{self.nyt_list_name}.json",
            {"api-key": self.nyt_api_key},
        )
        return simplify_books((data.get("results") or {}).get("books") or [])

    def bestseller_details(self, isbn: str) -> CatalogVolume:
        data = self._get_json(
            f"{self.google_base_url}/volumes",
            self._google_params(q=f"isbn:{isbn}", maxResults=SEARCH_MAX_RESULTS),
        )
        items = data.get("items") or []
        volume_id = items[0].get("id") if items else None
        if not volume_id:
            raise NotFoundError(f"No catalog volume for ISBN: {isbn}")
        return self.get_volume(volume_id)
