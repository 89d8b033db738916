"""Domain exceptions.

All catalog-level errors raised by the in-memory store and the remote
catalog client. The HTTP layer maps these to error responses; the
remote health check maps the remote ones to ``DOWN``.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog exceptions.

    All catalog errors should inherit from this class to allow
    catching them at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Local Store Errors
# ============================================================================


class CatalogNotInitializedError(CatalogError):
    """Raised when the store is read before it has been seeded."""

    def __init__(self) -> None:
        super().__init__("Catalog store has not been initialized")


class CatalogAlreadyInitializedError(CatalogError):
    """Raised when the store is seeded a second time."""

    def __init__(self, product_count: int) -> None:
        super().__init__(
            f"Catalog store already holds {product_count} products",
            details={"product_count": product_count},
        )


# ============================================================================
# Remote Catalog Errors
# ============================================================================


class RemoteCatalogError(CatalogError):
    """Base class for remote catalog client errors."""

    pass


class RemoteUnavailableError(RemoteCatalogError):
    """Raised when a remote query fails at the transport level.

    A remote ``NOT_FOUND`` status ends up here too: the remote contract
    does not distinguish a missing id from an unreachable service.
    """

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: str | None = None,
    ) -> None:
        """Initialize remote unavailable error.

        Args:
            operation: Remote operation that failed (e.g. "GetProduct").
            message: Failure description from the transport.
            status_code: gRPC status code name, if one was received.
        """
        super().__init__(
            f"Remote catalog call {operation} failed: {message}",
            details={"operation": operation, "status_code": status_code},
        )
        self.operation = operation
        self.status_code = status_code


class ClientClosedError(RemoteCatalogError):
    """Raised when a remote query is attempted after the client was closed."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Remote catalog client is closed; cannot run {operation}",
            details={"operation": operation},
        )
        self.operation = operation


class InitializationFailureError(RemoteCatalogError):
    """Raised when the remote connection cannot be established at startup.

    Fatal: the application must not start serving the remote path.
    """

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(
            f"Could not connect to remote catalog at {target}: {reason}",
            details={"target": target, "reason": reason},
        )
        self.target = target
