"""Shared fixtures for API tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_facade.catalog.store import CatalogStore
from catalog_facade.infrastructure.config import Settings
from catalog_facade.main import create_app


@pytest.fixture
def app_settings(remote_port: int) -> Settings:
    """Settings pointing at the in-process remote catalog."""
    return Settings(
        grpc_host="127.0.0.1",
        grpc_port=remote_port,
        grpc_connect_timeout=2.0,
        grpc_call_timeout=5.0,
        grpc_shutdown_grace=0,
        catalog_seed=42,
        log_json=False,
    )


@pytest.fixture
def app(app_settings: Settings, recording_sleep) -> FastAPI:
    """Application with a store that records delays instead of sleeping."""
    store = CatalogStore(seed=42, sleep=recording_sleep)
    return create_app(settings=app_settings, catalog_store=store)


@pytest.fixture
def client(app: FastAPI):
    """Create test client with startup and shutdown run."""
    with TestClient(app) as client:
        yield client
