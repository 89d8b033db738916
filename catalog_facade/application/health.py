"""Liveness checks for the two catalog paths.

The remote check turns the outcome of a bulk query into ``UP`` or
``DOWN`` and never raises for a remote failure.
"""

from enum import Enum
from typing import Any

import structlog

from catalog_facade.domain.exceptions import ClientClosedError, RemoteUnavailableError
from catalog_facade.infrastructure.grpc_client import RemoteCatalogClient

logger = structlog.get_logger()


class HealthStatus(str, Enum):
    """Coarse liveness states."""

    UP = "UP"
    DOWN = "DOWN"


RemoteCheckOutcome = list[Any] | None | RemoteUnavailableError | ClientClosedError


def remote_health_status(outcome: RemoteCheckOutcome) -> HealthStatus:
    """Map a bulk query outcome to a health status.

    Args:
        outcome: The decoded product list (possibly empty), ``None`` if the
            result was structurally absent, or the remote error raised.

    Returns:
        UP for any list, DOWN otherwise.
    """
    if isinstance(outcome, list):
        return HealthStatus.UP
    if outcome is None:
        return HealthStatus.DOWN
    if isinstance(outcome, (RemoteUnavailableError, ClientClosedError)):
        return HealthStatus.DOWN
    raise TypeError(f"Unexpected remote check outcome: {type(outcome).__name__}")


async def check_remote(client: RemoteCatalogClient) -> HealthStatus:
    """Check the remote catalog by issuing a bulk query.

    Args:
        client: Connected remote catalog client.

    Returns:
        Health status derived from the query outcome.
    """
    outcome: RemoteCheckOutcome
    try:
        outcome = await client.get_all_products()
    except (RemoteUnavailableError, ClientClosedError) as e:
        outcome = e

    status = remote_health_status(outcome)
    if status is HealthStatus.DOWN:
        logger.warning("Remote catalog check reported DOWN", reason=str(outcome))
    return status


def check_local() -> HealthStatus:
    """Local catalog has no dependency to check."""
    return HealthStatus.UP
