"""Category use cases for the catalog API."""

from catalog_mcp.api.exceptions import CategoryNotFoundError, NoProductsInCategoryError
from catalog_mcp.catalog.models import Category, PaginationParams, PriceRange, ProductPage
from catalog_mcp.catalog.repository import CategoryRepository


class CategoryService:
    """Category lookups with absence raised as typed 404 errors."""

    def __init__(self, repository: CategoryRepository) -> None:
        self._repository = repository

    async def list_categories(
        self,
        parent_id: str | None = None,
        include_product_count: bool = True,
    ) -> list[Category]:
        """Root categories, or the direct children of parent_id.

        Raises:
            CategoryNotFoundError: If parent_id is given and does not resolve
        """
        categories = await self._repository.get_categories(parent_id, include_product_count)
        if categories is None:
            raise CategoryNotFoundError(parent_id or "")
        return categories

    async def get_category(self, category_id: str) -> Category:
        category = await self._repository.get_category_by_id(category_id, include_product_count=True)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def get_category_products(
        self, category_id: str, pagination: PaginationParams
    ) -> ProductPage:
        # An unknown category is an empty page, not an error
        return await self._repository.get_category_products(category_id, pagination)

    async def get_price_range(self, category_id: str) -> PriceRange:
        """Price statistics for a category.

        Raises:
            NoProductsInCategoryError: If no product is filed under category_id
        """
        price_range = await self._repository.get_category_price_range(category_id)
        if price_range is None:
            raise NoProductsInCategoryError(category_id)
        return price_range
