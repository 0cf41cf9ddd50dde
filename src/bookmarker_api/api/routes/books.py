from typing import Annotated

from fastapi import APIRouter, Depends, Query

from bookmarker_api.clients.catalog_client import CatalogGateway
from bookmarker_api.dependencies.books import get_catalog_gateway
from bookmarker_api.schemas.catalog import CatalogBookList, CatalogVolume

router = APIRouter(
    prefix="/books",
    tags=["catalog"],
    responses={502: {"description": "Upstream catalog unavailable"}},
)

Catalog = Annotated[CatalogGateway, Depends(get_catalog_gateway)]


@router.get("", response_model=CatalogBookList)
def search_books(
    catalog: Catalog,
    term: str = Query(min_length=1, description="Google Books query, e.g. 'intitle:airframe'"),
) -> CatalogBookList:
    """Search the Google Books catalog."""
    return CatalogBookList(books=catalog.search(term))


@router.get("/bestsellers", response_model=CatalogBookList)
def list_bestsellers(catalog: Catalog) -> CatalogBookList:
    """Current NYT combined print and e-book fiction bestsellers."""
    return CatalogBookList(books=catalog.bestsellers())


@router.get("/bestsellers/details/{isbn}")
def get_bestseller_details(isbn: str, catalog: Catalog) -> CatalogVolume:
    """Resolve a bestseller ISBN to its full Google Books volume."""
    return catalog.bestseller_details(isbn)


@router.get("/details/{volume_id}")
def get_volume_details(volume_id: str, catalog: Catalog) -> CatalogVolume:
    """Full Google Books volume for a catalog id."""
    return catalog.get_volume(volume_id)
