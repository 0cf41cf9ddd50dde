from collections.abc import Iterator
from typing import Annotated

import httpx
from fastapi import Depends

from bookmarker_api.clients.catalog_client import CatalogGateway
from bookmarker_api.config import Settings, get_settings


def get_catalog_gateway(
    settings: Annotated[Settings, Depends(get_settings)],
) -> Iterator[CatalogGateway]:
    with httpx.Client(timeout=settings.catalog_timeout_seconds) as client:
        yield CatalogGateway(
            client=client,
            google_base_url=settings.google_books_base_url,
            google_api_key=settings.google_api_key,
            nyt_base_url=settings.nyt_books_base_url,
            nyt_api_key=settings.nyt_api_key,
            nyt_list_name=settings.nyt_list_name,
        )
