"""Catalog domain: models, the in-memory store, the query engine and repositories."""

from catalog_mcp.catalog.models import Category, Product
from catalog_mcp.catalog.repository import CategoryRepository, ProductRepository
from catalog_mcp.catalog.store import CatalogLoadError, CatalogStore

__all__ = [
    "CatalogLoadError",
    "CatalogStore",
    "Category",
    "CategoryRepository",
    "Product",
    "ProductRepository",
]
