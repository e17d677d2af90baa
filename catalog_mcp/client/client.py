"""Catalog API client.

Provides an async Python client for the catalog REST API. Every method
returns the decoded JSON body.

Usage:
    from catalog_mcp.client import CatalogClient

    async with CatalogClient("http://localhost:3001") as client:
        result = await client.search_products(query="headphones", page_size=5)
        product = await client.get_product_details("iphone-15-pro")
"""

from typing import Any
from urllib.parse import quote

import httpx

from catalog_mcp.observability.logging import get_logger

logger = get_logger(__name__)

API_PREFIX = "/api/v1"

JSONDict = dict[str, Any]


class CatalogClientError(Exception):
    """Base exception for client errors."""

    def __init__(self, message: str, status_code: int | None = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class CatalogTransportError(CatalogClientError):
    """The API could not be reached (DNS, refused connection, timeout)."""


class CatalogAPIError(CatalogClientError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str, details: Any = None):
        super().__init__(f"API Error ({status_code}): {message}", status_code, details)
        self.reason = message


class CatalogNotFoundError(CatalogAPIError):
    """The API answered 404."""


def _segment(value: str) -> str:
    return quote(value, safe="")


class CatalogClient:
    """Async client for the catalog API.

    Attributes:
        base_url: Base URL of the catalog API
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the catalog API
            timeout: Request timeout in seconds
            transport: Custom httpx transport, used by tests
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def _request(self, path: str, params: dict[str, Any] | None = None) -> JSONDict:
        """GET a path and decode the JSON body.

        Parameters whose value is None are not sent. Booleans are sent as
        lowercase ``true``/``false``.

        Raises:
            CatalogTransportError: If the request never got a response
            CatalogNotFoundError: On 404
            CatalogAPIError: On any other non-2xx status
        """
        query = {
            key: (str(value).lower() if isinstance(value, bool) else value)
            for key, value in (params or {}).items()
            if value is not None
        }

        try:
            response = await self._client.get(path, params=query)
        except httpx.TransportError as e:
            logger.warning("catalog_api_unreachable", path=path, error=str(e))
            raise CatalogTransportError(
                f"Failed to fetch from {self.base_url}{path}: {e}"
            ) from e

        if response.status_code >= 400:
            details: Any = None
            try:
                details = response.json()
            except ValueError:
                pass

            if isinstance(details, dict) and details.get("error"):
                message = str(details["error"])
            else:
                message = response.text or response.reason_phrase

            logger.debug(
                "catalog_api_error",
                path=path,
                status_code=response.status_code,
                message=message,
            )

            error_cls = CatalogNotFoundError if response.status_code == 404 else CatalogAPIError
            raise error_cls(response.status_code, message, details)

        return response.json()  # type: ignore[no-any-return]

    # Products
    async def search_products(
        self,
        *,
        query: str | None = None,
        category: str | None = None,
        brand: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        in_stock_only: bool = False,
        page: int | None = None,
        page_size: int | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> JSONDict:
        """Search or list products.

        Uses the search endpoint when a query is given, otherwise the plain
        listing endpoint (which supports sorting).
        """
        params = {
            "q": query or None,
            "category": category,
            "brand": brand,
            "min_price": min_price,
            "max_price": max_price,
            "in_stock": True if in_stock_only else None,
            "page": page,
            "limit": page_size,
            "sort_by": sort_by,
            "sort_order": sort_order,
        }
        path = f"{API_PREFIX}/products/search" if query else f"{API_PREFIX}/products"
        return await self._request(path, params)

    async def get_product_details(self, product_id: str) -> JSONDict:
        return await self._request(f"{API_PREFIX}/products/{_segment(product_id)}")

    async def get_product_recommendations(self, product_id: str, limit: int = 5) -> JSONDict:
        return await self._request(
            f"{API_PREFIX}/products/{_segment(product_id)}/recommendations",
            {"limit": limit},
        )

    async def check_product_availability(self, product_id: str) -> JSONDict:
        return await self._request(f"{API_PREFIX}/products/{_segment(product_id)}/availability")

    async def get_popular_products(
        self,
        category: str | None = None,
        limit: int = 10,
        min_rating: float = 4.0,
    ) -> JSONDict:
        return await self._request(
            f"{API_PREFIX}/products/popular",
            {"category": category, "limit": limit, "min_rating": min_rating},
        )

    async def get_general_recommendations(
        self, category: str | None = None, limit: int = 5
    ) -> JSONDict:
        """Top rated products of a category, or popular products without one."""
        if category:
            return await self._request(
                f"{API_PREFIX}/products",
                {"category": category, "limit": limit, "sort_by": "rating", "sort_order": "desc"},
            )
        return await self._request(f"{API_PREFIX}/products/popular", {"limit": limit})

    # Categories
    async def get_categories(
        self, parent_id: str | None = None, include_product_count: bool = True
    ) -> JSONDict:
        # The API counts by default; only send the flag to turn counting off
        return await self._request(
            f"{API_PREFIX}/categories",
            {
                "parent_id": parent_id or None,
                "include_product_count": None if include_product_count else False,
            },
        )

    async def get_category_details(self, category_id: str) -> JSONDict:
        return await self._request(f"{API_PREFIX}/categories/{_segment(category_id)}")

    async def get_category_products(
        self, category_id: str, page: int = 1, limit: int = 10
    ) -> JSONDict:
        return await self._request(
            f"{API_PREFIX}/categories/{_segment(category_id)}/products",
            {"page": page, "limit": limit},
        )

    async def get_category_price_range(self, category_id: str) -> JSONDict:
        return await self._request(f"{API_PREFIX}/categories/{_segment(category_id)}/price-range")

    # Service
    async def get_api_info(self) -> JSONDict:
        return await self._request(API_PREFIX)

    async def health_check(self) -> bool:
        """True when GET /health answers 2xx; never raises."""
        try:
            response = await self._client.get("/health")
        except httpx.HTTPError as e:
            logger.debug("health_check_failed", error=str(e))
            return False
        return response.is_success
