"""Async client for the catalog REST API."""

from catalog_mcp.client.client import (
    CatalogAPIError,
    CatalogClient,
    CatalogClientError,
    CatalogNotFoundError,
    CatalogTransportError,
)

__all__ = [
    "CatalogAPIError",
    "CatalogClient",
    "CatalogClientError",
    "CatalogNotFoundError",
    "CatalogTransportError",
]
