"""Domain Types: id generation for catalog records.

Invariants:
    - Ids are opaque strings; callers never parse them
    - new_id() returns a fresh 128-bit random token on every call
"""

from uuid import uuid4


def new_id(taken: set[str] | None = None) -> str:
    """Draw a uuid4 string, re-drawing while it clashes with ``taken``."""
    candidate = str(uuid4())
    while taken and candidate in taken:
        candidate = str(uuid4())
    return candidate
