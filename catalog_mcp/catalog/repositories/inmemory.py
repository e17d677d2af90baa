"""In-memory repository implementations backed by a CatalogStore."""

from catalog_mcp.catalog import query
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
from catalog_mcp.catalog.repository import CategoryRepository, ProductRepository
from catalog_mcp.catalog.store import CatalogStore


class InMemoryProductRepository(ProductRepository):
    """Product queries evaluated against the in-memory catalog."""

    def __init__(
        self,
        store: CatalogStore,
        limited_stock_threshold: int = query.DEFAULT_LIMITED_STOCK_THRESHOLD,
    ) -> None:
        self._store = store
        self._limited_stock_threshold = limited_stock_threshold

    async def get_products(
        self, filters: ProductFilters, pagination: PaginationParams
    ) -> ProductPage:
        matched = query.filter_products(
            self._store.products,
            category=filters.category,
            brand=filters.brand,
            in_stock=filters.in_stock,
            min_price=filters.min_price,
            max_price=filters.max_price,
        )
        ordered = query.sort_products(matched, filters.sort_by, filters.sort_order)
        page, meta = query.paginate(ordered, pagination.page, pagination.limit)
        return ProductPage(products=page, meta=meta)

    async def search_products(
        self, filters: SearchFilters, pagination: PaginationParams
    ) -> SearchPage:
        # Filter first so facets describe exactly what the caller can page through
        candidates = query.filter_products(
            self._store.products,
            category=filters.category,
            brand=filters.brand,
            in_stock=filters.in_stock,
            min_price=filters.min_price,
            max_price=filters.max_price,
        )
        matched = query.search_products(candidates, filters.query)
        page, meta = query.paginate(matched, pagination.page, pagination.limit)
        return SearchPage(products=page, meta=meta, facets=query.build_facets(matched))

    async def get_product_by_id(self, product_id: str) -> Product | None:
        return query.find_product(self._store.products, product_id)

    async def get_product_recommendations(
        self, product_id: str, limit: int
    ) -> list[Product] | None:
        product = query.find_product(self._store.products, product_id)
        if product is None:
            return None
        return query.recommend(self._store.products, product, limit)

    async def get_product_availability(self, product_id: str) -> ProductAvailability | None:
        product = query.find_product(self._store.products, product_id)
        if product is None:
            return None
        return query.classify_availability(product, self._limited_stock_threshold)

    async def get_popular_products(
        self,
        *,
        category: str | None = None,
        limit: int = 10,
        min_rating: float = query.DEFAULT_POPULAR_MIN_RATING,
    ) -> list[Product]:
        return query.popular(
            self._store.products,
            category=category,
            min_rating=min_rating,
            limit=limit,
        )


class InMemoryCategoryRepository(CategoryRepository):
    """Category queries evaluated against the in-memory catalog."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def _count(self, categories: list[Category], include_product_count: bool) -> list[Category]:
        if not include_product_count:
            return categories
        return [query.with_product_counts(c, self._store.products) for c in categories]

    async def get_categories(
        self,
        parent_id: str | None = None,
        include_product_count: bool = True,
    ) -> list[Category] | None:
        if parent_id:
            parent = query.find_category(self._store.categories, parent_id)
            if parent is None:
                return None
            categories = list(parent.subcategories)
        else:
            categories = list(self._store.categories)

        return self._count(categories, include_product_count)

    async def get_category_by_id(
        self, category_id: str, include_product_count: bool = True
    ) -> Category | None:
        category = query.find_category(self._store.categories, category_id)
        if category is None:
            return None
        return self._count([category], include_product_count)[0]

    async def get_category_products(
        self, category_id: str, pagination: PaginationParams
    ) -> ProductPage:
        products = query.products_in_category(self._store.products, category_id)
        page, meta = query.paginate(products, pagination.page, pagination.limit)
        return ProductPage(products=page, meta=meta)

    async def get_category_price_range(self, category_id: str) -> PriceRange | None:
        return query.price_range(self._store.products, category_id)
