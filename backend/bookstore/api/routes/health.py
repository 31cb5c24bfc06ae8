"""Health & Readiness Probes: liveness and catalog-file readiness.

Invariants:
    - GET /health always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the catalog file cannot be loaded (readiness)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from bookstore.api.dependencies import get_catalog_store
from bookstore.core.errors import StorageError
from bookstore.services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "bookstore-api"}


@router.get("/ready")
async def readiness_check(store: CatalogStore = Depends(get_catalog_store)):
    """Readiness probe: the catalog file must load."""
    try:
        books = await store.list_books()
    except StorageError as e:
        logger.warning(f"Readiness check failed: {e.message}", extra={"error_code": e.code})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": e.code.lower()},
        )
    return {"status": "ready", "checks": {"catalog": "healthy", "books": len(books)}}
