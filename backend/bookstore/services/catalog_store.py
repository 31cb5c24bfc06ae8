"""Catalog Store: load-mutate-save around the pure catalog operations.

Invariants:
    - Every operation starts from a fresh load(); nothing is cached between calls
    - A mutation runs load -> mutate -> save as one call in one worker thread,
      under one threading.Lock, so no two mutations interleave within this process
    - Cancelling the awaiting request does not release the lock early: the worker
      finishes its save before the next mutation loads
    - A mutation that raises is never saved: the stored catalog stays as it was
    - Reads do not take the lock; save() is an atomic rename, so a read always
      sees a complete catalog
    - Failures surface as BookstoreError subclasses; nothing is retried

Design Decisions:
    - Storage calls run in asyncio.to_thread
    - The writer lock is stricter than a lock-free read-modify-write, where two
      overlapping requests can each save and the later save drops the earlier change
"""

import asyncio
import logging
import threading
from collections.abc import Callable
from typing import TypeVar

from bookstore.core import catalog
from bookstore.core.records import Author, Book
from bookstore.core.repository_protocols import CatalogStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CatalogStore:
    """Book and author CRUD over a whole-catalog storage backend."""

    def __init__(self, storage: CatalogStorage):
        self._storage = storage
        self._write_lock = threading.Lock()

    async def _load(self) -> list[Book]:
        return await asyncio.to_thread(self._storage.load)

    def _apply(self, edit: Callable[[list[Book]], T]) -> T:
        """Load, edit and save under the writer lock; save only if edit succeeds."""
        with self._write_lock:
            books = self._storage.load()
            result = edit(books)
            self._storage.save(books)
            return result

    async def _mutate(self, edit: Callable[[list[Book]], T]) -> T:
        return await asyncio.to_thread(self._apply, edit)

    # ─── Books ───────────────────────────────────────────────────

    async def create_book(self, title: str, desc: str) -> Book:
        book = await self._mutate(lambda books: catalog.add_book(books, title, desc))
        logger.info(f"Created book '{title}'", extra={"book_id": book.id})
        return book

    async def list_books(self) -> list[Book]:
        return await self._load()

    async def get_book(self, book_id: str) -> Book:
        return catalog.find_book(await self._load(), book_id)

    async def update_book(self, book: Book) -> Book:
        """Replace title, borrowed and desc of ``book.id``; its authors are kept."""
        merged = await self._mutate(lambda books: catalog.replace_book(books, book))
        logger.info("Updated book", extra={"book_id": merged.id})
        return merged

    async def delete_book(self, book_id: str) -> Book:
        removed = await self._mutate(lambda books: catalog.remove_book(books, book_id))
        logger.info(
            f"Deleted book with {len(removed.authors)} author(s)",
            extra={"book_id": book_id},
        )
        return removed

    # ─── Authors ─────────────────────────────────────────────────

    async def create_author(self, book_id: str, first: str, last: str) -> Author:
        author = await self._mutate(
            lambda books: catalog.add_author(catalog.find_book(books, book_id), first, last),
        )
        logger.info(
            f"Added author '{first} {last}'",
            extra={"book_id": book_id, "author_id": author.id},
        )
        return author

    async def list_authors(self, book_id: str) -> list[Author]:
        return catalog.find_book(await self._load(), book_id).authors

    async def get_author(self, book_id: str, author_id: str) -> Author:
        book = catalog.find_book(await self._load(), book_id)
        return catalog.find_author(book, author_id)

    async def update_author(self, book_id: str, author: Author) -> Author:
        updated = await self._mutate(
            lambda books: catalog.replace_author(catalog.find_book(books, book_id), author),
        )
        logger.info(
            "Updated author", extra={"book_id": book_id, "author_id": author.id},
        )
        return updated

    async def delete_author(self, book_id: str, author_id: str) -> Author:
        removed = await self._mutate(
            lambda books: catalog.remove_author(catalog.find_book(books, book_id), author_id),
        )
        logger.info(
            "Deleted author", extra={"book_id": book_id, "author_id": author_id},
        )
        return removed
