"""Catalog Records: the Book and Author shapes that are persisted and returned.

Invariants:
    - A Book owns its authors list; Author records never exist outside a Book
    - Field names match the on-disk JSON layout (id, title, borrowed, desc, authors)
    - Every field is required and unknown keys are rejected, so a stored record
      either matches this shape exactly or fails to load
    - Records are plain pydantic models: no IO, no lookups
"""

from pydantic import BaseModel, ConfigDict


class Author(BaseModel):
    """An author nested under exactly one book."""
    model_config = ConfigDict(extra="forbid")

    id: str
    first: str
    last: str


class Book(BaseModel):
    """A catalog entry with its ordered author list."""
    model_config = ConfigDict(extra="forbid")

    id: str
    title: str
    borrowed: bool
    desc: str
    authors: list[Author]
