"""Application layer - health checks."""

from catalog_facade.application.health import (
    HealthStatus,
    check_local,
    check_remote,
    remote_health_status,
)

__all__ = [
    "HealthStatus",
    "check_local",
    "check_remote",
    "remote_health_status",
]
