"""API layer module.

Contains FastAPI routers and response schemas.
"""

from catalog_facade.api.health import router as health_router
from catalog_facade.api.products import router as products_router
from catalog_facade.api.remote_products import router as remote_products_router

__all__ = [
    "health_router",
    "products_router",
    "remote_products_router",
]
