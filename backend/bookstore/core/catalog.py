"""Catalog Operations: pure lookups, uniqueness checks and mutations on a loaded catalog.

Invariants:
    - Every function works on an in-memory list[Book] handed in by the caller
    - Failed checks raise before anything is mutated (no partial edits)
    - Book titles are unique case-insensitively; author (first, last) pairs are
      unique exactly within one book
    - A book update never touches the stored authors list
    - Ids are assigned here and never reassigned

Design Decisions:
    - Title uniqueness is checked on create only; replace_book keeps whatever
      title it is given, even one that clashes with another book
"""

from bookstore.core.domain_types import new_id
from bookstore.core.errors import (
    AuthorAlreadyExistsError,
    AuthorNotFoundError,
    BookAlreadyExistsError,
    BookNotFoundError,
)
from bookstore.core.records import Author, Book


def _fold(title: str) -> str:
    return title.casefold()


# ─── Books ───────────────────────────────────────────────────────

def book_index(books: list[Book], book_id: str) -> int:
    """Position of the book with ``book_id``, or BookNotFoundError."""
    for i, book in enumerate(books):
        if book.id == book_id:
            return i
    raise BookNotFoundError(book_id)


def find_book(books: list[Book], book_id: str) -> Book:
    return books[book_index(books, book_id)]


def title_taken(books: list[Book], title: str) -> bool:
    folded = _fold(title)
    return any(_fold(book.title) == folded for book in books)


def add_book(books: list[Book], title: str, desc: str) -> Book:
    """Append a new, unborrowed book with no authors."""
    if title_taken(books, title):
        raise BookAlreadyExistsError(title)
    book = Book(
        id=new_id({b.id for b in books}),
        title=title,
        borrowed=False,
        desc=desc,
        authors=[],
    )
    books.append(book)
    return book


def replace_book(books: list[Book], update: Book) -> Book:
    """Overwrite the stored book matching ``update.id``, keeping its authors."""
    i = book_index(books, update.id)
    merged = update.model_copy(update={"authors": books[i].authors})
    books[i] = merged
    return merged


def remove_book(books: list[Book], book_id: str) -> Book:
    return books.pop(book_index(books, book_id))


# ─── Authors ─────────────────────────────────────────────────────

def author_index(book: Book, author_id: str) -> int:
    for i, author in enumerate(book.authors):
        if author.id == author_id:
            return i
    raise AuthorNotFoundError(book.id, author_id)


def find_author(book: Book, author_id: str) -> Author:
    return book.authors[author_index(book, author_id)]


def add_author(book: Book, first: str, last: str) -> Author:
    """Append a new author unless the same (first, last) pair is already listed."""
    if any(a.first == first and a.last == last for a in book.authors):
        raise AuthorAlreadyExistsError(book.id, first, last)
    author = Author(
        id=new_id({a.id for a in book.authors}), first=first, last=last,
    )
    book.authors.append(author)
    return author


def replace_author(book: Book, author: Author) -> Author:
    """Swap in ``author`` for the listed author with the same id."""
    book.authors[author_index(book, author.id)] = author
    return author


def remove_author(book: Book, author_id: str) -> Author:
    return book.authors.pop(author_index(book, author_id))
