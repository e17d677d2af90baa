"""Fixtures for API tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_mcp.api.app import create_app
from catalog_mcp.catalog.store import CatalogStore


@pytest.fixture
def app(small_store: CatalogStore) -> FastAPI:
    """Full application serving the small test catalog."""
    return create_app(store=small_store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app)
