"""Repository implementations."""

from catalog_mcp.catalog.repositories.inmemory import (
    InMemoryCategoryRepository,
    InMemoryProductRepository,
)

__all__ = ["InMemoryCategoryRepository", "InMemoryProductRepository"]
