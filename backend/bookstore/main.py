"""Bookstore API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BookstoreError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One CatalogStore per app, built from settings.data_file and kept on app.state
    - Logging configured and the catalog file created (if enabled) on startup via lifespan

Design Decisions:
    - create_app(settings) factory so tests build an app against a temporary catalog file
    - The store is built in create_app, not in lifespan: it does no IO until first use
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookstore.api.error_handlers import register_error_handlers
from bookstore.api.request_logging import RequestLoggingMiddleware
from bookstore.api.routes import authors, books, health
from bookstore.config import Settings, get_settings
from bookstore.infrastructure.catalog_file import CatalogFile
from bookstore.infrastructure.observability import setup_logging
from bookstore.services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the catalog API for the given settings (defaults to the environment)."""
    settings = settings or get_settings()
    catalog_file = CatalogFile(settings.data_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        if settings.create_missing_data_file:
            catalog_file.ensure_exists()
        logger.info(f"Bookstore API started, catalog at {catalog_file.path}")
        yield
        logger.info("Bookstore API shutting down")

    app = FastAPI(title="Bookstore API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.catalog_store = CatalogStore(catalog_file)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(books.router)
    app.include_router(authors.router)

    register_error_handlers(app, expose_stack=settings.expose_error_stack)
    return app


app = create_app()
