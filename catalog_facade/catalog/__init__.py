"""Local product catalog.

Provides the seeded in-memory store and its latency profiles.
"""

from catalog_facade.catalog.latency import DEGRADED_LATENCY, NORMAL_LATENCY, LatencyProfile
from catalog_facade.catalog.models import Product, ProductCategory
from catalog_facade.catalog.store import CatalogStore

__all__ = [
    # Models
    "Product",
    "ProductCategory",
    # Latency
    "LatencyProfile",
    "NORMAL_LATENCY",
    "DEGRADED_LATENCY",
    # Store
    "CatalogStore",
]
