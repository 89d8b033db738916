"""In-memory product catalog.

Generates and stores products with seeded pricing. Bulk reads are
delayed by an artificial, randomly sampled latency to emulate a slow
backend; point reads are served immediately.
"""

import asyncio
import itertools
import random
from decimal import ROUND_HALF_UP, Decimal
from typing import Awaitable, Callable

import structlog

from catalog_facade.catalog.latency import DEGRADED_LATENCY, NORMAL_LATENCY, LatencyProfile
from catalog_facade.catalog.models import Product, ProductCategory
from catalog_facade.domain.exceptions import (
    CatalogAlreadyInitializedError,
    CatalogNotInitializedError,
)

logger = structlog.get_logger()


# ============================================================================
# Constants
# ============================================================================

DEFAULT_CATALOG_SIZE = 200
MIN_PRICE = 10
MAX_PRICE = 100
PRICE_QUANTUM = Decimal("0.01")

SleepFunc = Callable[[float], Awaitable[None]]


# ============================================================================
# Catalog Store
# ============================================================================


class CatalogStore:
    """In-memory product store with injected latency.

    The product sequence is append-only and filled once by
    ``initialize()`` before concurrent traffic starts. Afterwards it is
    only read, so no locking is needed.
    """

    def __init__(
        self,
        seed: int | None = None,
        size: int = DEFAULT_CATALOG_SIZE,
        sleep: SleepFunc = asyncio.sleep,
        normal_latency: LatencyProfile = NORMAL_LATENCY,
        degraded_latency: LatencyProfile = DEGRADED_LATENCY,
    ) -> None:
        """Initialize an empty store.

        Args:
            seed: Random seed for prices and delay sampling.
            size: Number of products created by ``initialize()``.
            sleep: Coroutine used to wait out injected delays.
            normal_latency: Delay set for ``get_all()``.
            degraded_latency: Delay set for ``get_all_delayed()``.
        """
        self._rng = random.Random(seed)
        self._size = size
        self._sleep = sleep
        self._normal_latency = normal_latency
        self._degraded_latency = degraded_latency
        self._id_sequence = itertools.count(1)
        self._products: list[Product] = []
        self._snapshot: tuple[Product, ...] = ()
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Seed the catalog with ``size`` products.

        Raises:
            CatalogAlreadyInitializedError: If already seeded.
        """
        if self._initialized:
            raise CatalogAlreadyInitializedError(len(self._products))

        for i in range(1, self._size + 1):
            category = ProductCategory.CATEGORY_A if i % 2 == 0 else ProductCategory.CATEGORY_B
            self._append(name=f"Product {i}", category=category, price=self._random_price())

        self._snapshot = tuple(self._products)
        self._initialized = True

        logger.info("Catalog store initialized", product_count=len(self._products))

    def _append(self, name: str, category: ProductCategory, price: Decimal) -> Product:
        product = Product(
            id=next(self._id_sequence),
            name=name,
            category=category,
            price=price,
        )
        self._products.append(product)
        return product

    def _random_price(self) -> Decimal:
        raw = self._rng.uniform(MIN_PRICE, MAX_PRICE)
        return Decimal(str(raw)).quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise CatalogNotInitializedError()

    async def _delay(self, profile: LatencyProfile) -> None:
        delay = profile.sample(self._rng)
        logger.debug("Injecting catalog latency", profile=profile.name, delay_seconds=delay)
        await self._sleep(delay)

    # ------------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------------

    async def get_all(self) -> tuple[Product, ...]:
        """Get every product after a normal-jitter delay.

        Returns:
            Immutable snapshot of the catalog.
        """
        self._ensure_initialized()
        await self._delay(self._normal_latency)
        return self._snapshot

    async def get_all_delayed(self) -> tuple[Product, ...]:
        """Get every product after a degraded-mode delay.

        Returns:
            Immutable snapshot of the catalog.
        """
        self._ensure_initialized()
        await self._delay(self._degraded_latency)
        return self._snapshot

    def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product identifier.

        Returns:
            Product if found, None otherwise.
        """
        self._ensure_initialized()
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def count(self) -> int:
        return len(self._products)
