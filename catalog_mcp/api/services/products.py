"""Product use cases for the catalog API."""

from catalog_mcp.api.exceptions import ProductNotFoundError
from catalog_mcp.catalog.models import (
    PaginationParams,
    Product,
    ProductAvailability,
    ProductFilters,
    ProductPage,
    SearchFilters,
    SearchPage,
)
from catalog_mcp.catalog.repository import ProductRepository
from catalog_mcp.observability.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """Turns repository lookups into API results.

    The repository reports absence as None; this layer raises
    ProductNotFoundError instead so the exception handlers produce a 404.
    """

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def list_products(
        self, filters: ProductFilters, pagination: PaginationParams
    ) -> ProductPage:
        return await self._repository.get_products(filters, pagination)

    async def search_products(
        self, filters: SearchFilters, pagination: PaginationParams
    ) -> SearchPage:
        return await self._repository.search_products(filters, pagination)

    async def get_product(self, product_id: str) -> Product:
        """Get one product.

        Raises:
            ProductNotFoundError: If product_id is unknown
        """
        product = await self._repository.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def get_recommendations(self, product_id: str, limit: int) -> list[Product]:
        """Related products for product_id, best rated first.

        Raises:
            ProductNotFoundError: If product_id is unknown
        """
        recommendations = await self._repository.get_product_recommendations(product_id, limit)
        if recommendations is None:
            raise ProductNotFoundError(product_id)

        logger.debug(
            "recommendations_computed",
            product_id=product_id,
            count=len(recommendations),
        )
        return recommendations

    async def get_availability(self, product_id: str) -> ProductAvailability:
        availability = await self._repository.get_product_availability(product_id)
        if availability is None:
            raise ProductNotFoundError(product_id)
        return availability

    async def get_popular(
        self,
        *,
        category: str | None,
        limit: int,
        min_rating: float,
    ) -> list[Product]:
        return await self._repository.get_popular_products(
            category=category,
            limit=limit,
            min_rating=min_rating,
        )
