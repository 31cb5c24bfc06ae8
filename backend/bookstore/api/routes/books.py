"""Book Routes: CRUD over /books.

Invariants:
    - Bodies are validated by BookCreate / BookUpdate before the store is called
    - PUT takes the id from the path; any id or authors in the body is ignored
    - POST and PUT answer 201 with the stored record; DELETE answers 200 with the removed one
"""

from fastapi import APIRouter, Depends, status

from bookstore.api.dependencies import get_catalog_store
from bookstore.core.records import Book
from bookstore.schemas.catalog import BookCreate, BookUpdate
from bookstore.services.catalog_store import CatalogStore

router = APIRouter(prefix="/books", tags=["books"])


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
async def create_book(
    body: BookCreate, store: CatalogStore = Depends(get_catalog_store),
):
    """Add a book; 400 if another book already has this title (any case)."""
    return await store.create_book(body.title, body.desc)


@router.get("", response_model=list[Book])
async def list_books(store: CatalogStore = Depends(get_catalog_store)):
    return await store.list_books()


@router.get("/{book_id}", response_model=Book)
async def get_book(book_id: str, store: CatalogStore = Depends(get_catalog_store)):
    return await store.get_book(book_id)


@router.put("/{book_id}", response_model=Book, status_code=status.HTTP_201_CREATED)
async def update_book(
    book_id: str,
    body: BookUpdate,
    store: CatalogStore = Depends(get_catalog_store),
):
    """Replace title, borrowed and desc; the author list is left as stored."""
    update = Book(
        id=book_id, title=body.title, borrowed=body.borrowed, desc=body.desc,
        authors=[],
    )
    return await store.update_book(update)


@router.delete("/{book_id}", response_model=Book)
async def delete_book(book_id: str, store: CatalogStore = Depends(get_catalog_store)):
    return await store.delete_book(book_id)
