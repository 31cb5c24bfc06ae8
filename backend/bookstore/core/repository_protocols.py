"""Boundary Protocols: the contract between the catalog store and its storage.

Invariants:
    - Core never imports from infrastructure; implementations are injected
    - load() returns the whole catalog; save() replaces it wholesale
    - Both raise StorageError subclasses (core/errors.py), never raw OSError

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any object with load/save
    - Synchronous methods: the store runs them in a worker thread
"""

from typing import Protocol

from bookstore.core.records import Book


class CatalogStorage(Protocol):
    """Contract for whole-catalog persistence."""
    def load(self) -> list[Book]: ...
    def save(self, books: list[Book]) -> None: ...
