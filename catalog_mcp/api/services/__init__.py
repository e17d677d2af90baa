"""Service layer between routes and repositories."""

from catalog_mcp.api.services.categories import CategoryService
from catalog_mcp.api.services.products import ProductService

__all__ = ["CategoryService", "ProductService"]
