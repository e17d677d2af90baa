"""Product endpoints."""

from typing import Literal

from fastapi import APIRouter, Query

from catalog_mcp.api.dependencies import PaginationDep, ProductServiceDep, SettingsDep
from catalog_mcp.api.models.responses import (
    AppliedFilters,
    DataResponse,
    ProductListResponse,
    SearchResponse,
)
from catalog_mcp.catalog.models import (
    Product,
    ProductAvailability,
    ProductFilters,
    SearchFilters,
    SortField,
)
from catalog_mcp.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/products")

# Older clients send snake_case sort field names
_SORT_ALIASES: dict[str, SortField] = {"created_at": "createdAt"}


@router.get("", response_model=ProductListResponse)
async def list_products(
    service: ProductServiceDep,
    pagination: PaginationDep,
    category: str | None = Query(default=None, description="Category or subcategory id"),
    brand: str | None = Query(default=None, description="Brand, case-insensitive"),
    in_stock: bool = Query(default=False, description="Only products in stock"),
    min_price: float | None = Query(default=None, ge=0),
    max_price: float | None = Query(default=None, ge=0),
    sort_by: Literal["name", "price", "rating", "createdAt", "created_at"] = Query(default="name"),
    sort_order: Literal["asc", "desc"] = Query(default="asc"),
) -> ProductListResponse:
    """List products.

    Filters are combined with AND; sorting happens before pagination.

    Args:
        service: Product service
        pagination: Requested page and page size
        category: Match on category or subcategory
        brand: Case-insensitive exact brand match
        in_stock: When true, only products in stock
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound
        sort_by: Field to sort by
        sort_order: Sort direction

    Returns:
        One page of products, its pagination metadata and the applied filters
    """
    filters = ProductFilters(
        category=category,
        brand=brand,
        in_stock=in_stock,
        min_price=min_price,
        max_price=max_price,
        sort_by=_SORT_ALIASES.get(sort_by, sort_by),
        sort_order=sort_order,
    )

    logger.debug(
        "list_products_request",
        filters=filters.model_dump(exclude_none=True),
        page=pagination.page,
        limit=pagination.limit,
    )

    result = await service.list_products(filters, pagination)

    return ProductListResponse(
        data=result.products,
        pagination=result.meta,
        filters=AppliedFilters(**filters.model_dump()),
    )


@router.get("/search", response_model=SearchResponse)
async def search_products(
    service: ProductServiceDep,
    pagination: PaginationDep,
    q: str = Query(default="", description="Free-text query"),
    category: str | None = Query(default=None),
    brand: str | None = Query(default=None),
    in_stock: bool = Query(default=False),
    min_price: float | None = Query(default=None, ge=0),
    max_price: float | None = Query(default=None, ge=0),
) -> SearchResponse:
    """Search products by name, description and tags.

    Results are ordered by relevance when a query is given. Facets cover
    every match, not just the returned page.
    """
    logger.debug("search_products_request", query=q, category=category, page=pagination.page)

    filters = SearchFilters(
        query=q,
        category=category,
        brand=brand,
        in_stock=in_stock,
        min_price=min_price,
        max_price=max_price,
    )
    result = await service.search_products(filters, pagination)

    return SearchResponse(
        query=q,
        data=result.products,
        pagination=result.meta,
        facets=result.facets,
    )


@router.get("/popular", response_model=DataResponse[list[Product]])
async def get_popular_products(
    service: ProductServiceDep,
    settings: SettingsDep,
    category: str | None = Query(default=None),
    limit: int = Query(default=10, ge=1, le=100),
    min_rating: float | None = Query(default=None, ge=0, le=5),
) -> DataResponse[list[Product]]:
    """Well-rated products ordered by rating x review count."""
    if min_rating is None:
        min_rating = settings.catalog.popular_min_rating

    products = await service.get_popular(category=category, limit=limit, min_rating=min_rating)
    return DataResponse[list[Product]](data=products)


@router.get("/{product_id}", response_model=DataResponse[Product])
async def get_product(product_id: str, service: ProductServiceDep) -> DataResponse[Product]:
    """Get a single product.

    Raises:
        ProductNotFoundError: If the product doesn't exist
    """
    product = await service.get_product(product_id)
    return DataResponse[Product](data=product)


@router.get("/{product_id}/recommendations", response_model=DataResponse[list[Product]])
async def get_product_recommendations(
    product_id: str,
    service: ProductServiceDep,
    limit: int = Query(default=5, ge=1, le=100),
) -> DataResponse[list[Product]]:
    """Products sharing the category or brand of product_id, best rated first."""
    products = await service.get_recommendations(product_id, limit)
    return DataResponse[list[Product]](data=products)


@router.get("/{product_id}/availability", response_model=DataResponse[ProductAvailability])
async def get_product_availability(
    product_id: str, service: ProductServiceDep
) -> DataResponse[ProductAvailability]:
    availability = await service.get_availability(product_id)
    return DataResponse[ProductAvailability](data=availability)
