"""FastAPI dependencies.

The store and the remote client are created once per application and
kept on ``app.state``; handlers receive them through ``Depends``.
"""

from fastapi import Request

from catalog_facade.catalog.store import CatalogStore
from catalog_facade.infrastructure.grpc_client import RemoteCatalogClient


def get_catalog_store(request: Request) -> CatalogStore:
    """Get the application's catalog store."""
    return request.app.state.catalog_store


def get_remote_client(request: Request) -> RemoteCatalogClient:
    """Get the application's remote catalog client."""
    return request.app.state.remote_client
