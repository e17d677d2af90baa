"""Catalog domain models.

Python attributes are snake_case; the JSON wire format is camelCase, as the
catalog API has always spoken it. Every model accepts either spelling on
input (``populate_by_name``) and FastAPI serializes by alias.
"""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel

SortField = Literal["name", "price", "rating", "createdAt"]
SortOrder = Literal["asc", "desc"]

AttributeValue = str | int | float | bool


class CatalogModel(BaseModel):
    """Base for all catalog models: camelCase aliases on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Product(CatalogModel):
    """A sellable catalog item. Immutable once loaded."""

    model_config = ConfigDict(frozen=True)

    id: str
    sku: str
    name: str
    description: str = ""
    brand: str
    tags: list[str] = Field(default_factory=list)
    price: float = Field(ge=0)
    currency: str = "USD"
    category: str
    subcategory: str | None = None
    in_stock: bool
    stock_quantity: int = Field(ge=0)
    rating: float = Field(ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    images: list[str] = Field(default_factory=list)
    attributes: dict[str, AttributeValue] = Field(default_factory=dict)
    created_at: AwareDatetime
    updated_at: AwareDatetime

    def in_category(self, category_id: str) -> bool:
        """True when the product is filed under category_id as category or subcategory."""
        return self.category == category_id or self.subcategory == category_id


class Category(CatalogModel):
    """A node in the category forest.

    ``product_count`` is never stored: it is filled in on read and left as
    None when the caller did not ask for counts.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    parent_id: str | None = None
    subcategories: list["Category"] = Field(default_factory=list)
    product_count: int | None = None

    @model_serializer(mode="wrap")
    def _omit_missing_count(self, handler: SerializerFunctionWrapHandler):
        data = handler(self)
        if self.product_count is None and isinstance(data, dict):
            data.pop("productCount", None)
            data.pop("product_count", None)
        return data


class AvailabilityStatus(str, Enum):
    """Stock classification reported by the availability endpoint."""

    IN_STOCK = "in_stock"
    LIMITED_STOCK = "limited_stock"
    OUT_OF_STOCK = "out_of_stock"


class ProductAvailability(CatalogModel):
    """Stock information for one product."""

    product_id: str
    in_stock: bool
    stock_quantity: int
    availability: AvailabilityStatus
    last_updated: datetime


class PriceRange(CatalogModel):
    """Price statistics over the products of one category."""

    category_id: str
    min_price: float
    max_price: float
    average_price: float
    product_count: int


class PaginationParams(CatalogModel):
    """Requested page. Both bounds are also enforced at the HTTP boundary."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)


class PaginationMeta(CatalogModel):
    """Where a page sits within the full result set."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class ProductFilters(CatalogModel):
    """Filter and sort options for product listings.

    ``in_stock`` only narrows the result when True.
    """

    category: str | None = None
    brand: str | None = None
    in_stock: bool = False
    min_price: float | None = None
    max_price: float | None = None
    sort_by: SortField = "name"
    sort_order: SortOrder = "asc"


class SearchFilters(CatalogModel):
    """Free-text query plus the listing filters it can be combined with."""

    query: str = ""
    category: str | None = None
    brand: str | None = None
    in_stock: bool = False
    min_price: float | None = None
    max_price: float | None = None


class Facet(CatalogModel):
    """One distinct value of a field and how many results carry it."""

    value: str
    count: int


class SearchFacets(CatalogModel):
    """Category and brand facets over a search result."""

    categories: list[Facet] = Field(default_factory=list)
    brands: list[Facet] = Field(default_factory=list)


class ProductPage(CatalogModel):
    """A page of products with its pagination metadata."""

    products: list[Product]
    meta: PaginationMeta


class SearchPage(ProductPage):
    """A page of search results with facets over all matches."""

    facets: SearchFacets
