"""The MCP tool menu.

Each tool's arguments are a pydantic model. MCP clients see camelCase
argument names; the JSON schema advertised in ``tools/list`` is generated
from the same model that validates ``tools/call``, so the two cannot drift.
Unknown arguments are ignored.
"""

from typing import Literal

from mcp.types import Tool
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ToolInput(BaseModel):
    """Base for tool argument models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SearchProductsInput(ToolInput):
    query: str | None = Field(default=None, description="Search query string")
    category: str | None = Field(default=None, description="Filter by category ID")
    brand: str | None = Field(default=None, description="Filter by brand name")
    min_price: float | None = Field(default=None, ge=0, description="Minimum price filter")
    max_price: float | None = Field(default=None, ge=0, description="Maximum price filter")
    in_stock_only: bool = Field(default=False, description="Show only products in stock")
    page: int = Field(default=1, ge=1, description="Page number for pagination")
    page_size: int = Field(default=10, ge=1, le=100, description="Number of products per page")
    sort_by: Literal["name", "price", "rating", "createdAt"] = Field(
        default="name", description="Sort products by field"
    )
    sort_order: Literal["asc", "desc"] = Field(default="asc", description="Sort order")


class ProductDetailsInput(ToolInput):
    product_id: str = Field(min_length=1, description="Product ID to retrieve details for")


class GetCategoriesInput(ToolInput):
    parent_id: str | None = Field(
        default=None, description="Get subcategories of a specific parent category"
    )
    include_product_count: bool = Field(
        default=True, description="Include product count for each category"
    )


class ProductRecommendationsInput(ToolInput):
    """Either a product to recommend around or a category to pick from."""

    product_id: str | None = Field(
        default=None, description="Get recommendations based on this product"
    )
    category: str | None = Field(
        default=None, description="Get recommendations from this category"
    )
    limit: int = Field(default=5, ge=1, le=100, description="Number of recommendations to return")

    @model_validator(mode="after")
    def _require_product_or_category(self) -> "ProductRecommendationsInput":
        if not self.product_id and not self.category:
            raise ValueError("Either productId or category is required")
        return self


class ProductAvailabilityInput(ToolInput):
    product_id: str = Field(min_length=1, description="Product ID to check availability")


class PopularProductsInput(ToolInput):
    category: str | None = Field(default=None, description="Filter by category")
    limit: int = Field(default=10, ge=1, le=100, description="Number of products to return")
    min_rating: float = Field(default=4.0, ge=0, le=5, description="Minimum rating threshold")


class PriceRangeInput(ToolInput):
    category: str = Field(min_length=1, description="Category to get price range for")


TOOL_INPUTS: dict[str, type[ToolInput]] = {
    "search_products": SearchProductsInput,
    "get_product_details": ProductDetailsInput,
    "get_categories": GetCategoriesInput,
    "get_product_recommendations": ProductRecommendationsInput,
    "check_product_availability": ProductAvailabilityInput,
    "get_popular_products": PopularProductsInput,
    "get_price_range": PriceRangeInput,
}

TOOL_DESCRIPTIONS: dict[str, str] = {
    "search_products": "Search for products in the catalog with filters and pagination",
    "get_product_details": "Get detailed information about a specific product",
    "get_categories": "Get all product categories with hierarchy",
    "get_product_recommendations": (
        "Get product recommendations based on a product or search criteria"
    ),
    "check_product_availability": "Check product availability and stock information",
    "get_popular_products": "Get popular products based on ratings and reviews",
    "get_price_range": "Get price range information for products in a category",
}


def build_tools() -> list[Tool]:
    """The tool list returned for ``tools/list``, in a fixed order."""
    return [
        Tool(
            name=name,
            description=TOOL_DESCRIPTIONS[name],
            inputSchema=model.model_json_schema(by_alias=True),
        )
        for name, model in TOOL_INPUTS.items()
    ]
