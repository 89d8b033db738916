"""Shared fixtures: a recording sleep and an in-process remote catalog."""

import threading
from concurrent import futures

import grpc
import pytest

from catalog_facade.catalog.store import CatalogStore
from catalog_facade.protos import product_pb2, product_pb2_grpc


class RecordingSleep:
    """Async sleep replacement that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class FakeProductServicer(product_pb2_grpc.ProductServicer):
    """In-memory ``product.Product`` service."""

    def __init__(self) -> None:
        self.products = [
            product_pb2.ProductResponse(
                id=1, name="Product 1", price=50.0, description="First product"
            ),
            product_pb2.ProductResponse(
                id=2, name="Product 2", price=75.0, description="Second product"
            ),
        ]
        self.fail_with: grpc.StatusCode | None = None
        self.block_list_calls = False
        self.list_call_started = threading.Event()
        self.release = threading.Event()

    def GetProduct(self, request, context):
        if self.fail_with is not None:
            context.abort(self.fail_with, "injected failure")
        for product in self.products:
            if product.id == request.id:
                return product
        context.abort(grpc.StatusCode.NOT_FOUND, f"Product {request.id} not found")

    def GetProducts(self, request, context):
        if self.fail_with is not None:
            context.abort(self.fail_with, "injected failure")
        if self.block_list_calls:
            self.list_call_started.set()
            self.release.wait(timeout=5)
        return product_pb2.ProductListResponse(products=self.products)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def catalog_store(recording_sleep: RecordingSleep) -> CatalogStore:
    """Seeded store whose delays are recorded instead of awaited."""
    store = CatalogStore(seed=42, sleep=recording_sleep)
    store.initialize()
    return store


@pytest.fixture
def remote_servicer() -> FakeProductServicer:
    return FakeProductServicer()


@pytest.fixture
def remote_port(remote_servicer: FakeProductServicer):
    """Start a remote catalog server and yield its port."""
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=4))
    product_pb2_grpc.add_ProductServicer_to_server(remote_servicer, server)
    port = server.add_insecure_port("127.0.0.1:0")
    server.start()
    yield port
    remote_servicer.release.set()
    server.stop(grace=None).wait()
