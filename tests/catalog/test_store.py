"""Tests for the in-memory catalog store."""

import asyncio
import dataclasses
import time
from decimal import Decimal

import pytest

from catalog_facade.catalog.latency import DEGRADED_LATENCY, NORMAL_LATENCY
from catalog_facade.catalog.models import ProductCategory
from catalog_facade.catalog.store import CatalogStore
from catalog_facade.domain.exceptions import (
    CatalogAlreadyInitializedError,
    CatalogNotInitializedError,
)


class TestCatalogSeeding:
    """Tests for initial catalog generation."""

    def test_initialize_creates_200_products(self, catalog_store: CatalogStore):
        """Test store holds exactly 200 products after seeding."""
        assert catalog_store.count() == 200

    def test_ids_are_sequential_from_one(self, catalog_store: CatalogStore):
        """Test ids run 1..200 in insertion order."""
        ids = [catalog_store.get_by_id(i).id for i in range(1, 201)]
        assert ids == list(range(1, 201))

    def test_names_follow_index(self, catalog_store: CatalogStore):
        """Test product names embed their index."""
        assert catalog_store.get_by_id(1).name == "Product 1"
        assert catalog_store.get_by_id(200).name == "Product 200"

    def test_category_alternates_by_parity(self, catalog_store: CatalogStore):
        """Test even ids are Category A and odd ids Category B."""
        for i in range(1, 201):
            product = catalog_store.get_by_id(i)
            expected = ProductCategory.CATEGORY_A if i % 2 == 0 else ProductCategory.CATEGORY_B
            assert product.category == expected

    def test_prices_in_range_with_two_decimals(self, catalog_store: CatalogStore):
        """Test every price lies in [10.00, 100.00] with cent precision."""
        for i in range(1, 201):
            price = catalog_store.get_by_id(i).price
            assert Decimal("10.00") <= price <= Decimal("100.00")
            assert price == price.quantize(Decimal("0.01"))

    def test_same_seed_same_prices(self):
        """Test seeding is deterministic."""
        store1 = CatalogStore(seed=7)
        store2 = CatalogStore(seed=7)
        store1.initialize()
        store2.initialize()

        prices1 = [store1.get_by_id(i).price for i in range(1, 201)]
        prices2 = [store2.get_by_id(i).price for i in range(1, 201)]
        assert prices1 == prices2

    def test_initialize_twice_raises(self, catalog_store: CatalogStore):
        """Test re-seeding is rejected."""
        with pytest.raises(CatalogAlreadyInitializedError):
            catalog_store.initialize()
        assert catalog_store.count() == 200

    def test_read_before_initialize_raises(self):
        """Test reads require a seeded store."""
        store = CatalogStore(seed=1)
        with pytest.raises(CatalogNotInitializedError):
            store.get_by_id(1)


class TestPointLookup:
    """Tests for get_by_id."""

    def test_get_by_id_is_stable(self, catalog_store: CatalogStore):
        """Test repeated lookups return the same product."""
        first = catalog_store.get_by_id(5)
        second = catalog_store.get_by_id(5)
        assert first is not None
        assert first == second
        assert first.id == 5

    def test_get_by_id_not_found(self, catalog_store: CatalogStore):
        """Test unknown id returns None."""
        assert catalog_store.get_by_id(99999) is None

    def test_get_by_id_does_not_sleep(self, catalog_store: CatalogStore, recording_sleep):
        """Test point lookups skip latency injection."""
        catalog_store.get_by_id(3)
        assert recording_sleep.delays == []

    def test_products_are_immutable(self, catalog_store: CatalogStore):
        """Test product records cannot be modified."""
        product = catalog_store.get_by_id(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            product.name = "Changed"


class TestBulkReads:
    """Tests for delayed bulk reads."""

    @pytest.mark.asyncio
    async def test_get_all_uses_normal_delays(self, catalog_store: CatalogStore, recording_sleep):
        """Test get_all sleeps for one of the normal delays."""
        for _ in range(20):
            products = await catalog_store.get_all()
            assert len(products) == 200

        allowed = {d / 1000 for d in NORMAL_LATENCY.delays_ms}
        assert len(recording_sleep.delays) == 20
        assert set(recording_sleep.delays) <= allowed

    @pytest.mark.asyncio
    async def test_get_all_delayed_uses_degraded_delays(
        self, catalog_store: CatalogStore, recording_sleep
    ):
        """Test get_all_delayed sleeps for one of the degraded delays."""
        for _ in range(10):
            products = await catalog_store.get_all_delayed()
            assert len(products) == 200

        allowed = {d / 1000 for d in DEGRADED_LATENCY.delays_ms}
        assert set(recording_sleep.delays) <= allowed

    @pytest.mark.asyncio
    async def test_get_all_returns_read_only_snapshot(self, catalog_store: CatalogStore):
        """Test callers cannot mutate the store through the result."""
        products = await catalog_store.get_all()
        assert isinstance(products, tuple)
        with pytest.raises(TypeError):
            products[0] = products[1]  # type: ignore[index]

    @pytest.mark.asyncio
    async def test_get_all_real_latency_is_bounded(self):
        """Test get_all completes within the normal latency bounds."""
        store = CatalogStore(seed=3)
        store.initialize()

        start = time.perf_counter()
        products = await store.get_all()
        elapsed = time.perf_counter() - start

        assert len(products) == 200
        assert NORMAL_LATENCY.min_seconds <= elapsed + 0.01
        assert elapsed < NORMAL_LATENCY.max_seconds + 0.25

    @pytest.mark.asyncio
    async def test_delayed_read_can_be_cancelled(self):
        """Test a timed-out degraded read leaves the store intact."""
        store = CatalogStore(seed=3)
        store.initialize()

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(store.get_all_delayed(), timeout=0.05)

        assert store.count() == 200
        assert store.get_by_id(200) is not None

    @pytest.mark.asyncio
    async def test_concurrent_reads_do_not_serialize(self):
        """Test delays are per call rather than global."""
        store = CatalogStore(seed=3)
        store.initialize()

        start = time.perf_counter()
        results = await asyncio.gather(*(store.get_all() for _ in range(5)))
        elapsed = time.perf_counter() - start

        assert all(len(r) == 200 for r in results)
        assert elapsed < NORMAL_LATENCY.max_seconds + 0.25
