"""Test factories for creating test data."""

from tests.factories.catalog import CategoryFactory, ProductFactory

__all__ = [
    "CategoryFactory",
    "ProductFactory",
]
