"""Shared test fixtures for the catalog-mcp test suite."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from catalog_mcp.catalog.store import CatalogStore
from catalog_mcp.config.models.catalog import DEFAULT_DATA_PATH
from tests.factories import CategoryFactory, ProductFactory


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            original = self.original_env[key]
            if original is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = original


@pytest.fixture
def env_override() -> Generator[Callable[[dict[str, str]], EnvOverrideContext], None, None]:
    """Context manager for temporarily setting environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"CATALOG_MCP_DEBUG": "true"}):
                ...
    """

    def _env_override(overrides: dict[str, str]) -> EnvOverrideContext:
        return EnvOverrideContext(overrides)

    yield _env_override


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from catalog_mcp.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def seed_store() -> CatalogStore:
    """The catalog shipped with the package."""
    return CatalogStore.from_file(DEFAULT_DATA_PATH)


@pytest.fixture
def small_store() -> CatalogStore:
    """Three electronics products, one kitchen product and a two-level tree.

    Electronics prices are {999, 1599, 50}.
    """
    products = [
        ProductFactory.create(
            id="phone",
            name="Phone",
            brand="Apple",
            price=999.0,
            category="electronics",
            subcategory="smartphones",
            rating=4.8,
            review_count=100,
        ),
        ProductFactory.create(
            id="laptop",
            name="Laptop",
            brand="Apple",
            price=1599.0,
            category="electronics",
            subcategory="laptops",
            rating=4.9,
            review_count=50,
        ),
        ProductFactory.create(
            id="cable",
            name="Cable",
            brand="Anker",
            price=50.0,
            category="electronics",
            rating=4.1,
            review_count=10,
            in_stock=False,
            stock_quantity=0,
        ),
        ProductFactory.create(
            id="pan",
            name="Pan",
            brand="Tefal",
            price=35.0,
            category="home",
            subcategory="kitchen",
            rating=3.5,
            review_count=400,
        ),
    ]
    categories = [
        CategoryFactory.create(
            id="electronics",
            subcategories=[
                CategoryFactory.create(id="smartphones", parent_id="electronics"),
                CategoryFactory.create(id="laptops", parent_id="electronics"),
            ],
        ),
        CategoryFactory.create(
            id="home",
            subcategories=[CategoryFactory.create(id="kitchen", parent_id="home")],
        ),
    ]
    return CatalogStore(products, categories)
