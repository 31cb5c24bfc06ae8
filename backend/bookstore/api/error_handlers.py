"""Error Handlers: global exception handlers for the catalog API.

Invariants:
    - BookstoreError → its own http_status and {"error": {code, message, status}} body
    - RequestValidationError → 400 naming every missing or mismatched field
    - Starlette HTTPException (unknown route, wrong method) → same envelope, "Page not found" for 404
    - Exception (catch-all) → 500 with a generic message; details only in server logs
    - Tracebacks reach the client only when expose_error_stack is set
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore.core.errors import BookstoreError, StorageError
from bookstore.core.request_validation import invalid_request

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI, expose_stack: bool = False) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bookstore_error_handler(app, expose_stack)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app, expose_stack)


def _stack(exc: BaseException, expose_stack: bool) -> str | None:
    if not expose_stack:
        return None
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def _register_bookstore_error_handler(app: FastAPI, expose_stack: bool) -> None:
    """Register catalog domain/storage error handler."""

    @app.exception_handler(BookstoreError)
    async def bookstore_error_handler(request: Request, exc: BookstoreError):
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "book_id": exc.context.book_id,
            "author_id": exc.context.author_id,
        }
        if isinstance(exc, StorageError):
            logger.error(f"StorageError: {exc.message}", extra=extra)
        else:
            logger.warning(f"{type(exc).__name__}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(_stack(exc, expose_stack)),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request body validation handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        error = invalid_request(exc.errors())
        logger.warning(
            f"Validation error on {request.url.path}: {error.message}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing-level HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            code, message = "NOT_FOUND", "Page not found"
        else:
            code, message = "HTTP_ERROR", str(exc.detail)
        logger.info(
            f"{request.method} {request.url.path}: {exc.status_code}",
            extra={"error_code": code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": code,
                    "message": message,
                    "status": exc.status_code,
                },
            },
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI, expose_stack: bool) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        body = {
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
        }
        stack = _stack(exc, expose_stack)
        if stack:
            body["stack"] = stack
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": body},
        )
