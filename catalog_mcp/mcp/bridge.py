"""Dispatch MCP tool calls to the catalog API.

``CatalogToolBridge`` owns the whole tools/call contract: argument
validation, the API call, response reshaping and error mapping. The SDK
wiring in ``catalog_mcp.mcp.server`` only forwards to it.

Error mapping:
- unknown tool name: METHOD_NOT_FOUND
- arguments failing their model: INVALID_PARAMS
- API 404 for the entity named in the arguments: INVALID_REQUEST
- anything else (unreachable API, 5xx, bad payload): INTERNAL_ERROR
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    ErrorData,
    TextContent,
    Tool,
)
from pydantic import ValidationError

from catalog_mcp.client import CatalogClient, CatalogNotFoundError
from catalog_mcp.mcp.tools import (
    TOOL_INPUTS,
    GetCategoriesInput,
    PopularProductsInput,
    PriceRangeInput,
    ProductAvailabilityInput,
    ProductDetailsInput,
    ProductRecommendationsInput,
    SearchProductsInput,
    build_tools,
)
from catalog_mcp.observability.logging import get_logger

logger = get_logger(__name__)


def _mcp_error(code: int, message: str) -> McpError:
    return McpError(ErrorData(code=code, message=message))


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


def _search_result(response: dict[str, Any]) -> dict[str, Any]:
    """Reshape an API listing/search body into the search tool's result."""
    pagination = response.get("pagination") or {}
    facets = response.get("facets") or {}

    def named(entries: list[dict[str, Any]] | None) -> list[dict[str, Any]]:
        return [{"name": f["value"], "count": f["count"]} for f in entries or []]

    return {
        "products": response.get("data", []),
        "totalCount": pagination.get("total", 0),
        "page": pagination.get("page", 1),
        "pageSize": pagination.get("limit", 10),
        "totalPages": pagination.get("totalPages", 0),
        "facets": {
            "categories": named(facets.get("categories")),
            "brands": named(facets.get("brands")),
            "priceRanges": [],
        },
    }


class CatalogToolBridge:
    """Serves the catalog tools on top of a CatalogClient."""

    def __init__(self, client: CatalogClient) -> None:
        self._client = client
        self._tools = build_tools()
        self._handlers: dict[str, Callable[[Any], Awaitable[Any]]] = {
            "search_products": self._search_products,
            "get_product_details": self._get_product_details,
            "get_categories": self._get_categories,
            "get_product_recommendations": self._get_product_recommendations,
            "check_product_availability": self._check_product_availability,
            "get_popular_products": self._get_popular_products,
            "get_price_range": self._get_price_range,
        }

    def list_tools(self) -> list[Tool]:
        return list(self._tools)

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """Run one tool and return its output as a single JSON text block.

        Args:
            name: Tool name from the menu
            arguments: Raw tool arguments as sent by the MCP client

        Returns:
            One TextContent holding the result as indented JSON

        Raises:
            McpError: With METHOD_NOT_FOUND, INVALID_PARAMS, INVALID_REQUEST
                or INTERNAL_ERROR, see module docstring
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise _mcp_error(METHOD_NOT_FOUND, f"Unknown tool: {name}")

        try:
            params = TOOL_INPUTS[name].model_validate(arguments or {})
        except ValidationError as e:
            logger.info("tool_arguments_invalid", tool=name, errors=e.error_count())
            raise _mcp_error(
                INVALID_PARAMS,
                f"Invalid arguments for tool {name}: {_format_validation_error(e)}",
            ) from e

        logger.debug("tool_call", tool=name, arguments=params.model_dump(exclude_none=True))

        try:
            payload = await handler(params)
        except McpError:
            raise
        except Exception as e:
            logger.warning(
                "tool_call_failed",
                tool=name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise _mcp_error(INTERNAL_ERROR, f"Error executing tool {name}: {e}") from e

        return [TextContent(type="text", text=json.dumps(payload, indent=2))]

    async def _search_products(self, params: SearchProductsInput) -> Any:
        response = await self._client.search_products(
            query=params.query,
            category=params.category,
            brand=params.brand,
            min_price=params.min_price,
            max_price=params.max_price,
            in_stock_only=params.in_stock_only,
            page=params.page,
            page_size=params.page_size,
            sort_by=params.sort_by,
            sort_order=params.sort_order,
        )
        return _search_result(response)

    async def _get_product_details(self, params: ProductDetailsInput) -> Any:
        try:
            response = await self._client.get_product_details(params.product_id)
        except CatalogNotFoundError as e:
            raise _product_not_found(params.product_id) from e
        return response["data"]

    async def _get_categories(self, params: GetCategoriesInput) -> Any:
        try:
            response = await self._client.get_categories(
                params.parent_id, params.include_product_count
            )
        except CatalogNotFoundError as e:
            raise _mcp_error(
                INVALID_REQUEST, f"Category with ID {params.parent_id} not found"
            ) from e
        return response["data"]

    async def _get_product_recommendations(
        self, params: ProductRecommendationsInput
    ) -> Any:
        if params.product_id:
            try:
                response = await self._client.get_product_recommendations(
                    params.product_id, params.limit
                )
            except CatalogNotFoundError as e:
                raise _product_not_found(params.product_id) from e
        else:
            response = await self._client.get_general_recommendations(
                params.category, params.limit
            )
        return response["data"]

    async def _check_product_availability(self, params: ProductAvailabilityInput) -> Any:
        try:
            response = await self._client.check_product_availability(params.product_id)
        except CatalogNotFoundError as e:
            raise _product_not_found(params.product_id) from e
        return response["data"]

    async def _get_popular_products(self, params: PopularProductsInput) -> Any:
        response = await self._client.get_popular_products(
            params.category, params.limit, params.min_rating
        )
        return response["data"]

    async def _get_price_range(self, params: PriceRangeInput) -> Any:
        try:
            response = await self._client.get_category_price_range(params.category)
        except CatalogNotFoundError as e:
            raise _mcp_error(
                INVALID_REQUEST, f"No products found in category {params.category}"
            ) from e
        return response["data"]


def _product_not_found(product_id: str) -> McpError:
    return _mcp_error(INVALID_REQUEST, f"Product with ID {product_id} not found")

