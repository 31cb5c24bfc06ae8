"""Catalog Schemas: strict request body shapes, one per write endpoint.

Invariants:
    - strict=True: a field must be present and of the exact JSON kind (no "true" -> True)
    - title is non-empty after stripping whitespace
    - Unknown body fields (id, authors, ...) are ignored, never applied
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookCreate(BaseModel):
    """POST /books body."""
    model_config = ConfigDict(strict=True)

    title: str = Field(min_length=1)
    desc: str

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class BookUpdate(BookCreate):
    """PUT /books/{id} body."""
    borrowed: bool


class AuthorWrite(BaseModel):
    """POST and PUT body for authors."""
    model_config = ConfigDict(strict=True)

    first: str
    last: str
