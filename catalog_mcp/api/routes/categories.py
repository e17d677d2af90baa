"""Category endpoints."""

from fastapi import APIRouter, Query

from catalog_mcp.api.dependencies import CategoryServiceDep, PaginationDep
from catalog_mcp.api.models.responses import CategoryProductsResponse, DataResponse
from catalog_mcp.catalog.models import Category, PriceRange
from catalog_mcp.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/categories")


@router.get("", response_model=DataResponse[list[Category]])
async def list_categories(
    service: CategoryServiceDep,
    parent_id: str | None = Query(default=None, description="List the children of this category"),
    include_product_count: bool = Query(default=True),
) -> DataResponse[list[Category]]:
    """List root categories, or the subcategories of parent_id.

    Args:
        service: Category service
        parent_id: Parent category id at any depth
        include_product_count: Compute productCount for every returned node

    Returns:
        The categories with their subtrees

    Raises:
        CategoryNotFoundError: If parent_id doesn't resolve
    """
    logger.debug(
        "list_categories_request",
        parent_id=parent_id,
        include_product_count=include_product_count,
    )

    categories = await service.list_categories(parent_id, include_product_count)
    return DataResponse[list[Category]](data=categories)


@router.get("/{category_id}", response_model=DataResponse[Category])
async def get_category(category_id: str, service: CategoryServiceDep) -> DataResponse[Category]:
    category = await service.get_category(category_id)
    return DataResponse[Category](data=category)


@router.get("/{category_id}/products", response_model=CategoryProductsResponse)
async def get_category_products(
    category_id: str,
    service: CategoryServiceDep,
    pagination: PaginationDep,
) -> CategoryProductsResponse:
    """Products filed under a category or subcategory, in catalog order."""
    result = await service.get_category_products(category_id, pagination)
    return CategoryProductsResponse(data=result.products, pagination=result.meta)


@router.get("/{category_id}/price-range", response_model=DataResponse[PriceRange])
async def get_category_price_range(
    category_id: str, service: CategoryServiceDep
) -> DataResponse[PriceRange]:
    """Min, max, average and count of prices in a category.

    Raises:
        NoProductsInCategoryError: If the category has no products
    """
    price_range = await service.get_price_range(category_id)
    return DataResponse[PriceRange](data=price_range)
