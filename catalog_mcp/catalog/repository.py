"""Repository abstract interfaces.

Repositories report "not found" as ``None`` and never raise for it; turning
absence into an error is the service layer's job.
"""

from abc import ABC, abstractmethod

from catalog_mcp.catalog.models import (
    Category,
    PaginationParams,
    PriceRange,
    Product,
    ProductAvailability,
    ProductFilters,
    ProductPage,
    SearchFilters,
    SearchPage,
)


class ProductRepository(ABC):
    """Abstract interface for product queries."""

    @abstractmethod
    async def get_products(
        self, filters: ProductFilters, pagination: PaginationParams
    ) -> ProductPage:
        """Filter, sort and paginate products."""
        pass

    @abstractmethod
    async def search_products(
        self, filters: SearchFilters, pagination: PaginationParams
    ) -> SearchPage:
        """Free-text search with facets over all matches."""
        pass

    @abstractmethod
    async def get_product_by_id(self, product_id: str) -> Product | None:
        """Get a product by ID."""
        pass

    @abstractmethod
    async def get_product_recommendations(
        self, product_id: str, limit: int
    ) -> list[Product] | None:
        """Products related to product_id; None if product_id is unknown."""
        pass

    @abstractmethod
    async def get_product_availability(self, product_id: str) -> ProductAvailability | None:
        """Stock classification; None if product_id is unknown."""
        pass

    @abstractmethod
    async def get_popular_products(
        self,
        *,
        category: str | None = None,
        limit: int = 10,
        min_rating: float = 4.0,
    ) -> list[Product]:
        """Best products by rating x review count."""
        pass


class CategoryRepository(ABC):
    """Abstract interface for category queries."""

    @abstractmethod
    async def get_categories(
        self,
        parent_id: str | None = None,
        include_product_count: bool = True,
    ) -> list[Category] | None:
        """Root categories, or the children of parent_id; None if the parent is unknown."""
        pass

    @abstractmethod
    async def get_category_by_id(
        self, category_id: str, include_product_count: bool = True
    ) -> Category | None:
        """Get a category by ID at any depth."""
        pass

    @abstractmethod
    async def get_category_products(
        self, category_id: str, pagination: PaginationParams
    ) -> ProductPage:
        """Paginated products filed under a category."""
        pass

    @abstractmethod
    async def get_category_price_range(self, category_id: str) -> PriceRange | None:
        """Price statistics; None when the category has no products."""
        pass
