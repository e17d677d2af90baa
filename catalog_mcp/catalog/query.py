"""Catalog query engine.

Pure functions over sequences of products and categories. Nothing here
mutates its input or touches I/O; every function returns new lists or
models, so the read-only catalog can be shared by any number of concurrent
requests.

Ordering rules:
- Sorting uses Python's stable ``sorted``. Descending order negates the
  comparison instead of reversing the result, so equal keys keep catalog
  order in both directions.
- Relevance, recommendation and popularity rankings break ties on product
  id so their output is reproducible.
"""

import math
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal
from functools import cmp_to_key

from catalog_mcp.catalog.models import (
    AvailabilityStatus,
    Category,
    Facet,
    PaginationMeta,
    PriceRange,
    Product,
    ProductAvailability,
    SearchFacets,
    SortField,
    SortOrder,
)

DEFAULT_LIMITED_STOCK_THRESHOLD = 10
DEFAULT_POPULAR_MIN_RATING = 4.0


def _compare(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


_SORT_KEYS: dict[str, Callable[[Product], object]] = {
    "name": lambda p: p.name.casefold(),
    "price": lambda p: p.price,
    "rating": lambda p: p.rating,
    "createdAt": lambda p: p.created_at,
}


def filter_products(
    products: Iterable[Product],
    *,
    category: str | None = None,
    brand: str | None = None,
    in_stock: bool = False,
    min_price: float | None = None,
    max_price: float | None = None,
) -> list[Product]:
    """Return the products matching every given predicate.

    Args:
        products: Products to filter
        category: Match on category or subcategory id
        brand: Case-insensitive exact brand match
        in_stock: When True, only products in stock
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound

    Returns:
        New list, in input order. No predicates means every product.
    """
    brand_key = brand.casefold() if brand else None

    def matches(product: Product) -> bool:
        if category and not product.in_category(category):
            return False
        if brand_key and product.brand.casefold() != brand_key:
            return False
        if in_stock and not product.in_stock:
            return False
        if min_price is not None and product.price < min_price:
            return False
        if max_price is not None and product.price > max_price:
            return False
        return True

    return [p for p in products if matches(p)]


def sort_products(
    products: Iterable[Product],
    sort_by: SortField = "name",
    sort_order: SortOrder = "asc",
) -> list[Product]:
    """Stable sort on one field, ascending or descending.

    Raises:
        ValueError: If sort_by is not a known field
    """
    try:
        key = _SORT_KEYS[sort_by]
    except KeyError:
        raise ValueError(f"Unknown sort field: {sort_by}") from None

    sign = -1 if sort_order == "desc" else 1

    def compare(a: Product, b: Product) -> int:
        return sign * _compare(key(a), key(b))

    return sorted(products, key=cmp_to_key(compare))


def relevance_score(product: Product, query: str) -> int:
    """2 points when the query is in the name, 1 when it is in the description."""
    needle = query.casefold()
    score = 0
    if needle in product.name.casefold():
        score += 2
    if needle in product.description.casefold():
        score += 1
    return score


def matches_query(product: Product, query: str) -> bool:
    """Case-insensitive substring match on name, description or any tag."""
    if not query:
        return True
    needle = query.casefold()
    return (
        needle in product.name.casefold()
        or needle in product.description.casefold()
        or any(needle in tag.casefold() for tag in product.tags)
    )


def search_products(products: Iterable[Product], query: str) -> list[Product]:
    """Products matching a free-text query, most relevant first.

    An empty query matches everything and keeps input order.
    """
    matched = [p for p in products if matches_query(p, query)]
    if not query:
        return matched
    return sorted(matched, key=lambda p: (-relevance_score(p, query), p.id))


def build_facets(products: Sequence[Product]) -> SearchFacets:
    """Count distinct categories and brands, in first-seen order."""
    categories = Counter(p.category for p in products)
    brands = Counter(p.brand for p in products)
    return SearchFacets(
        categories=[Facet(value=v, count=c) for v, c in categories.items()],
        brands=[Facet(value=v, count=c) for v, c in brands.items()],
    )


def paginate(
    products: Sequence[Product], page: int, limit: int
) -> tuple[list[Product], PaginationMeta]:
    """Slice one page out of an ordered result.

    Args:
        products: Fully filtered and ordered result
        page: 1-based page number
        limit: Page size

    Returns:
        The page and its metadata; total counts the whole result.

    Raises:
        ValueError: If page < 1 or limit < 1
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    total = len(products)
    total_pages = math.ceil(total / limit)
    offset = (page - 1) * limit

    meta = PaginationMeta(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )
    return list(products[offset : offset + limit]), meta


def find_product(products: Iterable[Product], product_id: str) -> Product | None:
    return next((p for p in products if p.id == product_id), None)


def recommend(products: Iterable[Product], product: Product, limit: int) -> list[Product]:
    """Other products sharing category or brand, best rated first."""
    candidates = [
        p
        for p in products
        if p.id != product.id and (p.category == product.category or p.brand == product.brand)
    ]
    candidates.sort(key=lambda p: (-p.rating, p.id))
    return candidates[:limit]


def popular(
    products: Iterable[Product],
    *,
    category: str | None = None,
    min_rating: float = DEFAULT_POPULAR_MIN_RATING,
    limit: int = 10,
) -> list[Product]:
    """Well-rated products ordered by rating x review count."""
    candidates = [
        p
        for p in products
        if p.rating >= min_rating and (not category or p.in_category(category))
    ]
    candidates.sort(key=lambda p: (-(p.rating * p.review_count), p.id))
    return candidates[:limit]


def classify_availability(
    product: Product,
    limited_stock_threshold: int = DEFAULT_LIMITED_STOCK_THRESHOLD,
    now: datetime | None = None,
) -> ProductAvailability:
    """Report stock as in_stock, limited_stock or out_of_stock."""
    if not product.in_stock:
        status = AvailabilityStatus.OUT_OF_STOCK
    elif product.stock_quantity > limited_stock_threshold:
        status = AvailabilityStatus.IN_STOCK
    else:
        status = AvailabilityStatus.LIMITED_STOCK

    return ProductAvailability(
        product_id=product.id,
        in_stock=product.in_stock,
        stock_quantity=product.stock_quantity,
        availability=status,
        last_updated=now or datetime.now(UTC),
    )


def products_in_category(products: Iterable[Product], category_id: str) -> list[Product]:
    return [p for p in products if p.in_category(category_id)]


def price_range(products: Iterable[Product], category_id: str) -> PriceRange | None:
    """Min, max, mean (2 dp) and count of prices in a category; None if empty."""
    prices = [p.price for p in products_in_category(products, category_id)]
    if not prices:
        return None

    mean = Decimal(str(sum(prices) / len(prices)))
    average = float(mean.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

    return PriceRange(
        category_id=category_id,
        min_price=min(prices),
        max_price=max(prices),
        average_price=average,
        product_count=len(prices),
    )


def find_category(categories: Iterable[Category], category_id: str) -> Category | None:
    """Depth-first lookup anywhere in the category forest."""
    for category in categories:
        if category.id == category_id:
            return category
        found = find_category(category.subcategories, category_id)
        if found is not None:
            return found
    return None


def with_product_counts(category: Category, products: Sequence[Product]) -> Category:
    """Copy of a category subtree with product_count computed at every node."""
    return category.model_copy(
        update={
            "product_count": len(products_in_category(products, category.id)),
            "subcategories": [with_product_counts(c, products) for c in category.subcategories],
        }
    )
