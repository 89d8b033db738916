"""gRPC client for the remote product catalog.

Owns one long-lived plaintext channel to the remote ``product.Product``
service and provides a unified interface for point and bulk queries
with error normalization.
"""

import asyncio
from enum import Enum
from typing import Any

import grpc
import structlog
from pydantic import BaseModel

from catalog_facade.domain.exceptions import (
    ClientClosedError,
    InitializationFailureError,
    RemoteUnavailableError,
)
from catalog_facade.protos import product_pb2, product_pb2_grpc

logger = structlog.get_logger()


# ============================================================================
# Local Representation
# ============================================================================


class LocalRemoteProduct(BaseModel):
    """Locally exposed shape of a remote catalog product."""

    id: int
    name: str
    price: float
    description: str


def translate_to_local(remote_product: Any) -> LocalRemoteProduct:
    """Map a decoded remote ``ProductResponse`` to the local representation.

    Args:
        remote_product: Decoded wire record.

    Returns:
        LocalRemoteProduct with the same field values.
    """
    return LocalRemoteProduct(
        id=remote_product.id,
        name=remote_product.name,
        price=remote_product.price,
        description=remote_product.description,
    )


# ============================================================================
# Remote Catalog Client
# ============================================================================


class ConnectionState(str, Enum):
    """Lifecycle of the client's channel."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    CLOSED = "closed"


class RemoteCatalogClient:
    """Client for the remote catalog gRPC service.

    State moves ``UNINITIALIZED -> READY`` on ``connect()`` and
    ``READY -> CLOSED`` on ``close()``; there is no reconnect. Queries
    may run concurrently over the shared channel.
    """

    def __init__(
        self,
        connect_timeout: float = 5.0,
        call_timeout: float | None = 30.0,
        shutdown_grace: float | None = 1.0,
    ) -> None:
        """Initialize an unconnected client.

        Args:
            connect_timeout: Seconds to wait for the channel to become ready.
            call_timeout: Per-call deadline in seconds, or None for no deadline.
            shutdown_grace: Seconds in-flight calls get to finish on close.
        """
        self.connect_timeout = connect_timeout
        self.call_timeout = call_timeout
        self.shutdown_grace = shutdown_grace
        self._state = ConnectionState.UNINITIALIZED
        self._channel: grpc.aio.Channel | None = None
        self._stub: product_pb2_grpc.ProductStub | None = None
        self._target: str | None = None

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def target(self) -> str | None:
        return self._target

    async def connect(self, host: str, port: int) -> None:
        """Open the channel and wait until it is ready.

        Args:
            host: Remote host name.
            port: Remote port.

        Raises:
            InitializationFailureError: If the channel does not become ready.
            ClientClosedError: If the client was already closed.
        """
        if self._state is ConnectionState.READY:
            return
        if self._state is ConnectionState.CLOSED:
            raise ClientClosedError("connect")

        target = f"{host}:{port}"
        channel = grpc.aio.insecure_channel(target)
        try:
            await asyncio.wait_for(channel.channel_ready(), timeout=self.connect_timeout)
        except asyncio.TimeoutError:
            await channel.close()
            logger.error(
                "Remote catalog connection failed",
                target=target,
                timeout=self.connect_timeout,
            )
            raise InitializationFailureError(
                target, f"channel not ready after {self.connect_timeout}s"
            ) from None

        self._channel = channel
        self._stub = product_pb2_grpc.ProductStub(channel)
        self._target = target
        self._state = ConnectionState.READY

        logger.info("Connected to remote catalog", target=target)

    async def close(self) -> None:
        """Close the channel. Safe to call more than once."""
        if self._state is ConnectionState.CLOSED:
            return

        self._state = ConnectionState.CLOSED
        channel, self._channel, self._stub = self._channel, None, None

        if channel is not None:
            await channel.close(grace=self.shutdown_grace)

        logger.info("Remote catalog client closed", target=self._target)

    async def get_product_by_id(self, product_id: int) -> Any:
        """Get product by ID from the remote catalog.

        Args:
            product_id: Remote product identifier.

        Returns:
            Decoded ``ProductResponse``.

        Raises:
            RemoteUnavailableError: On any transport failure.
            ClientClosedError: If the client is closed.
        """
        logger.info("Calling remote GetProduct", product_id=product_id)
        request = product_pb2.ProductRequest(id=product_id)
        response = await self._invoke("GetProduct", request)
        logger.info("Received remote product", product_id=response.id, name=response.name)
        return response

    async def get_all_products(self) -> list[Any]:
        """Get every product from the remote catalog.

        Returns:
            List of decoded ``ProductResponse`` records.

        Raises:
            RemoteUnavailableError: On any transport failure.
            ClientClosedError: If the client is closed.
        """
        logger.info("Calling remote GetProducts")
        response = await self._invoke("GetProducts", product_pb2.Empty())
        products = list(response.products)
        logger.info("Received remote products", product_count=len(products))
        return products

    async def _invoke(self, operation: str, request: Any) -> Any:
        """Run one unary call and normalize its failures."""
        stub = self._require_stub(operation)
        method = getattr(stub, operation)

        try:
            return await method(request, timeout=self.call_timeout)
        except grpc.RpcError as e:
            if self._state is ConnectionState.CLOSED:
                raise ClientClosedError(operation) from e
            code = e.code() if hasattr(e, "code") else None
            details = e.details() if hasattr(e, "details") else str(e)
            logger.error(
                "Remote catalog call failed",
                operation=operation,
                status_code=code.name if code else None,
                details=details,
            )
            raise RemoteUnavailableError(
                operation, details or "unknown error", code.name if code else None
            ) from e
        except asyncio.CancelledError:
            # Channel shutdown cancels in-flight calls; only a cancel aimed at
            # this task itself is re-raised.
            task = asyncio.current_task()
            if self._state is ConnectionState.CLOSED and not (task and task.cancelling()):
                raise ClientClosedError(operation) from None
            raise

    def _require_stub(self, operation: str) -> product_pb2_grpc.ProductStub:
        if self._state is ConnectionState.CLOSED:
            raise ClientClosedError(operation)
        if self._stub is None:
            raise RemoteUnavailableError(operation, "client is not connected")
        return self._stub
