"""Error Hierarchy: typed, categorized exceptions for every catalog failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (NotFound, AlreadyExists, Validation) are 400-level; storage errors are 500
    - to_response() produces the {"error": {...}} envelope shared by every endpoint
    - Stack traces only appear in a response when the caller passes one in

Design Decisions:
    - Single hierarchy with BookstoreError base: one FastAPI handler catches all
    - Store operations raise these instead of returning error values
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    book_id: str | None = None
    author_id: str | None = None


class BookstoreError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self, stack: str | None = None) -> dict:
        """Convert to the REST error envelope."""
        body: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "status": self.http_status,
        }
        if stack:
            body["stack"] = stack
        return {"error": body}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(BookstoreError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class BookNotFoundError(ResourceNotFoundError):
    def __init__(self, book_id: str):
        super().__init__("book", book_id, ErrorContext(book_id=book_id))


class AuthorNotFoundError(ResourceNotFoundError):
    def __init__(self, book_id: str, author_id: str):
        super().__init__(
            "author", author_id, ErrorContext(book_id=book_id, author_id=author_id),
        )


class AlreadyExistsError(BookstoreError):
    """A record with the same identifying value is already stored."""
    def __init__(
        self, resource_type: str, key: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} already exists: {key}",
            "ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.resource_type = resource_type
        self.key = key


class BookAlreadyExistsError(AlreadyExistsError):
    def __init__(self, title: str):
        super().__init__("book", title)


class AuthorAlreadyExistsError(AlreadyExistsError):
    def __init__(self, book_id: str, first: str, last: str):
        super().__init__("author", f"{first} {last}", ErrorContext(book_id=book_id))


class InvalidRequestError(BookstoreError):
    """Request body is missing fields or carries fields of the wrong kind."""
    def __init__(self, message: str, details: list[dict[str, str]]):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, None, 400,
        )
        self.details = details

    @property
    def fields(self) -> list[str]:
        return list(dict.fromkeys(d["field"] for d in self.details))

    def to_response(self, stack: str | None = None) -> dict:
        response = super().to_response(stack)
        response["error"]["details"] = self.details
        return response


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(BookstoreError):
    """Catalog file could not be read, decoded or written."""
    def __init__(
        self,
        message: str,
        operation: str,
        code: str = "STORAGE_ERROR",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Catalog {operation} failed: {message}",
            code, ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class StorageIOError(StorageError):
    """Transient I/O failure: missing file, permissions, disk full."""
    def __init__(self, message: str, operation: str):
        super().__init__(message, operation, "STORAGE_IO_ERROR")


class StorageFormatError(StorageError):
    """Catalog content is not a JSON array of books."""
    def __init__(self, message: str):
        super().__init__(message, "decode", "STORAGE_FORMAT_ERROR")
