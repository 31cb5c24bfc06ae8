"""Author Routes: CRUD over /books/{book_id}/authors.

Invariants:
    - Every route answers 404 when book_id does not resolve
    - PUT takes the author id from the path and replaces the record wholesale
"""

from fastapi import APIRouter, Depends, status

from bookstore.api.dependencies import get_catalog_store
from bookstore.core.records import Author
from bookstore.schemas.catalog import AuthorWrite
from bookstore.services.catalog_store import CatalogStore

router = APIRouter(prefix="/books/{book_id}/authors", tags=["authors"])


@router.post("", response_model=Author, status_code=status.HTTP_201_CREATED)
async def create_author(
    book_id: str,
    body: AuthorWrite,
    store: CatalogStore = Depends(get_catalog_store),
):
    """Add an author; 400 if the same first/last pair is already on this book."""
    return await store.create_author(book_id, body.first, body.last)


@router.get("", response_model=list[Author])
async def list_authors(book_id: str, store: CatalogStore = Depends(get_catalog_store)):
    return await store.list_authors(book_id)


@router.get("/{author_id}", response_model=Author)
async def get_author(
    book_id: str, author_id: str, store: CatalogStore = Depends(get_catalog_store),
):
    return await store.get_author(book_id, author_id)


@router.put(
    "/{author_id}", response_model=Author, status_code=status.HTTP_201_CREATED,
)
async def update_author(
    book_id: str,
    author_id: str,
    body: AuthorWrite,
    store: CatalogStore = Depends(get_catalog_store),
):
    author = Author(id=author_id, first=body.first, last=body.last)
    return await store.update_author(book_id, author)


@router.delete("/{author_id}", response_model=Author)
async def delete_author(
    book_id: str, author_id: str, store: CatalogStore = Depends(get_catalog_store),
):
    return await store.delete_author(book_id, author_id)
