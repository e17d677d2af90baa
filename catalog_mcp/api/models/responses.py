"""Response envelopes for the catalog API.

Every body is camelCase on the wire, like the catalog models it wraps.
"""

from datetime import datetime
from typing import Generic, Literal, TypeVar

from pydantic import Field

from catalog_mcp.catalog.models import (
    CatalogModel,
    PaginationMeta,
    Product,
    SearchFacets,
    SortField,
    SortOrder,
)

T = TypeVar("T")


class DataResponse(CatalogModel, Generic[T]):
    """Single payload wrapped as ``{"data": ...}``."""

    data: T


class AppliedFilters(CatalogModel):
    """Echo of the filters a product listing was computed with."""

    category: str | None = None
    brand: str | None = None
    in_stock: bool = False
    min_price: float | None = None
    max_price: float | None = None
    sort_by: SortField = "name"
    sort_order: SortOrder = "asc"


class ProductListResponse(CatalogModel):
    """Paginated, filtered and sorted product listing."""

    data: list[Product]
    pagination: PaginationMeta
    filters: AppliedFilters


class SearchResponse(CatalogModel):
    """Search results with facets computed over every match."""

    query: str
    data: list[Product]
    pagination: PaginationMeta
    facets: SearchFacets


class CategoryProductsResponse(CatalogModel):
    """Paginated products of one category."""

    data: list[Product]
    pagination: PaginationMeta


class HealthResponse(CatalogModel):
    """Liveness payload for GET /health."""

    status: Literal["ok"] = "ok"
    timestamp: datetime
    version: str
    product_count: int
    category_count: int


class ApiInfo(CatalogModel):
    """Description of the v1 API for GET /api/v1."""

    name: str = "Catalog API"
    version: str
    description: str = "REST API for product catalog management"
    endpoints: dict[str, str] = Field(default_factory=dict)
