"""Catalog facade main application module.

This module builds the FastAPI application and configures middleware,
routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from catalog_facade.api.errors import error_response
from catalog_facade.api.health import router as health_router
from catalog_facade.api.middleware import setup_middleware
from catalog_facade.api.products import router as products_router
from catalog_facade.api.remote_products import router as remote_products_router
from catalog_facade.catalog.store import CatalogStore
from catalog_facade.domain.exceptions import (
    CatalogNotInitializedError,
    ClientClosedError,
    RemoteUnavailableError,
)
from catalog_facade.infrastructure.config import Settings, get_settings
from catalog_facade.infrastructure.grpc_client import RemoteCatalogClient
from catalog_facade.infrastructure.logging import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    A failed remote connection aborts startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    settings: Settings = app.state.settings
    store: CatalogStore = app.state.catalog_store
    client: RemoteCatalogClient = app.state.remote_client

    logger.info(
        "Starting catalog facade",
        version=settings.api_version,
        debug=settings.debug,
    )

    if not store.initialized:
        store.initialize()

    await client.connect(settings.grpc_host, settings.grpc_port)

    try:
        yield
    finally:
        await client.close()
        logger.info("Shutting down catalog facade")


def create_app(
    settings: Settings | None = None,
    catalog_store: CatalogStore | None = None,
    remote_client: RemoteCatalogClient | None = None,
) -> FastAPI:
    """Build the catalog facade application.

    Args:
        settings: Settings to use; defaults to the environment settings.
        catalog_store: Pre-built store; one is created from settings if omitted.
        remote_client: Pre-built client; one is created from settings if omitted.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, json_logs=settings.log_json)

    app = FastAPI(
        title="Catalog Facade",
        description="Product catalog over a local in-memory store and a remote gRPC service",
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.catalog_store = catalog_store or CatalogStore(
        seed=settings.catalog_seed,
        size=settings.catalog_size,
    )
    app.state.remote_client = remote_client or RemoteCatalogClient(
        connect_timeout=settings.grpc_connect_timeout,
        call_timeout=settings.grpc_call_timeout,
        shutdown_grace=settings.grpc_shutdown_grace,
    )

    setup_middleware(app)

    app.include_router(health_router, tags=["Health"])
    app.include_router(products_router)
    app.include_router(remote_products_router)

    _register_exception_handlers(app)

    return app


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        """Handle HTTP exceptions with consistent format."""
        detail = exc.detail
        if isinstance(detail, dict):
            error_code = detail.get("error_code", "ERROR")
            message = detail.get("message", str(detail))
        else:
            error_code = "ERROR"
            message = str(detail)

        return error_response(request, exc.status_code, error_code, message)

    @app.exception_handler(RemoteUnavailableError)
    async def remote_unavailable_handler(
        request: Request, exc: RemoteUnavailableError
    ) -> JSONResponse:
        """Surface remote transport failures as 503."""
        logger.error(
            "Remote catalog unavailable",
            path=request.url.path,
            operation=exc.operation,
            status_code=exc.status_code,
        )
        return error_response(
            request, status.HTTP_503_SERVICE_UNAVAILABLE, "REMOTE_UNAVAILABLE", exc.message
        )

    @app.exception_handler(ClientClosedError)
    async def client_closed_handler(request: Request, exc: ClientClosedError) -> JSONResponse:
        """Surface queries on a closed client as 503."""
        logger.warning("Remote catalog client closed", path=request.url.path)
        return error_response(
            request, status.HTTP_503_SERVICE_UNAVAILABLE, "CLIENT_CLOSED", exc.message
        )

    @app.exception_handler(CatalogNotInitializedError)
    async def not_initialized_handler(
        request: Request, exc: CatalogNotInitializedError
    ) -> JSONResponse:
        return error_response(
            request, status.HTTP_503_SERVICE_UNAVAILABLE, "CATALOG_NOT_READY", exc.message
        )


app = create_app()
