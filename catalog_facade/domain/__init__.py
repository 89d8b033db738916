"""Domain layer - catalog error taxonomy."""

from catalog_facade.domain.exceptions import (
    CatalogAlreadyInitializedError,
    CatalogError,
    CatalogNotInitializedError,
    ClientClosedError,
    InitializationFailureError,
    RemoteCatalogError,
    RemoteUnavailableError,
)

__all__ = [
    "CatalogError",
    "CatalogNotInitializedError",
    "CatalogAlreadyInitializedError",
    "RemoteCatalogError",
    "RemoteUnavailableError",
    "ClientClosedError",
    "InitializationFailureError",
]
