"""Route Dependencies: hand the app's CatalogStore to route handlers."""

from fastapi import Request

from bookstore.services.catalog_store import CatalogStore


def get_catalog_store(request: Request) -> CatalogStore:
    """The store built by create_app() and kept on app.state."""
    return request.app.state.catalog_store
