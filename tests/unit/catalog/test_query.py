"""Unit tests for the catalog query engine."""

import math
from datetime import UTC, datetime

import pytest

from catalog_mcp.catalog import query
from catalog_mcp.catalog.models import AvailabilityStatus, Product
from catalog_mcp.catalog.store import CatalogStore
from tests.factories import CategoryFactory, ProductFactory


def _ids(products: list[Product]) -> list[str]:
    return [p.id for p in products]


class TestFilterProducts:
    """Tests for filter_products."""

    def test_no_predicates_is_identity(self, small_store: CatalogStore) -> None:
        result = query.filter_products(small_store.products)
        assert result == list(small_store.products)

    def test_returns_new_list(self, small_store: CatalogStore) -> None:
        products = list(small_store.products)
        result = query.filter_products(products, brand="apple")
        result.clear()
        assert len(products) == 4

    def test_category_matches_subcategory(self, small_store: CatalogStore) -> None:
        assert _ids(query.filter_products(small_store.products, category="laptops")) == ["laptop"]
        assert _ids(query.filter_products(small_store.products, category="electronics")) == [
            "phone",
            "laptop",
            "cable",
        ]

    def test_brand_is_case_insensitive_exact(self, small_store: CatalogStore) -> None:
        assert _ids(query.filter_products(small_store.products, brand="APPLE")) == [
            "phone",
            "laptop",
        ]
        assert query.filter_products(small_store.products, brand="App") == []

    def test_in_stock_only_applies_when_true(self, small_store: CatalogStore) -> None:
        assert "cable" not in _ids(query.filter_products(small_store.products, in_stock=True))
        assert "cable" in _ids(query.filter_products(small_store.products, in_stock=False))

    def test_price_bounds_are_inclusive(self, small_store: CatalogStore) -> None:
        result = query.filter_products(small_store.products, min_price=50, max_price=999)
        assert _ids(result) == ["phone", "cable"]

    def test_filter_order_does_not_matter(self, seed_store: CatalogStore) -> None:
        products = seed_store.products
        by_brand_then_price = query.filter_products(
            query.filter_products(products, brand="Apple"), max_price=1000
        )
        by_price_then_brand = query.filter_products(
            query.filter_products(products, max_price=1000), brand="Apple"
        )
        combined = query.filter_products(products, brand="Apple", max_price=1000)

        assert by_brand_then_price == by_price_then_brand == combined


class TestSortProducts:
    """Tests for sort_products."""

    def test_default_is_name_ascending_casefolded(self) -> None:
        products = [
            ProductFactory.create(id="b", name="banana"),
            ProductFactory.create(id="a", name="Apple"),
            ProductFactory.create(id="c", name="cherry"),
        ]
        assert _ids(query.sort_products(products)) == ["a", "b", "c"]

    def test_descending_is_exact_reverse_without_ties(self, seed_store: CatalogStore) -> None:
        asc = query.sort_products(seed_store.products, "price", "asc")
        desc = query.sort_products(seed_store.products, "price", "desc")
        assert desc == list(reversed(asc))

    def test_ties_keep_insertion_order_in_both_directions(self) -> None:
        products = [
            ProductFactory.create(id="first", price=5.0),
            ProductFactory.create(id="cheap", price=1.0),
            ProductFactory.create(id="second", price=5.0),
        ]
        assert _ids(query.sort_products(products, "price", "asc")) == ["cheap", "first", "second"]
        assert _ids(query.sort_products(products, "price", "desc")) == ["first", "second", "cheap"]

    def test_sorts_by_created_at_instant(self) -> None:
        products = [
            ProductFactory.create(id="new", created_at=datetime(2024, 6, 1, tzinfo=UTC)),
            ProductFactory.create(id="old", created_at=datetime(2022, 1, 1, tzinfo=UTC)),
        ]
        assert _ids(query.sort_products(products, "createdAt")) == ["old", "new"]

    def test_unknown_field_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown sort field"):
            query.sort_products([], "colour")  # type: ignore[arg-type]


class TestSearch:
    """Tests for search_products, relevance_score and build_facets."""

    def test_empty_query_returns_everything_in_catalog_order(
        self, seed_store: CatalogStore
    ) -> None:
        assert query.search_products(seed_store.products, "") == list(seed_store.products)

    def test_matches_name_description_and_tags(self) -> None:
        products = [
            ProductFactory.create(id="by-name", name="Wireless Mouse"),
            ProductFactory.create(id="by-desc", description="Comes with wireless charging"),
            ProductFactory.create(id="by-tag", tags=["Wireless"]),
            ProductFactory.create(id="none"),
        ]
        result = query.search_products(products, "WIRELESS")
        assert set(_ids(result)) == {"by-name", "by-desc", "by-tag"}

    def test_orders_by_relevance_then_id(self) -> None:
        products = [
            ProductFactory.create(id="tag-only", tags=["usb"]),
            ProductFactory.create(id="desc-only", description="usb hub"),
            ProductFactory.create(id="z-name", name="USB cable"),
            ProductFactory.create(id="both", name="USB charger", description="usb-c"),
            ProductFactory.create(id="a-name", name="USB stick"),
        ]
        result = query.search_products(products, "usb")
        assert _ids(result) == ["both", "a-name", "z-name", "desc-only", "tag-only"]

    def test_relevance_score(self) -> None:
        product = ProductFactory.create(name="Red Kettle", description="A red kettle")
        assert query.relevance_score(product, "kettle") == 3
        assert query.relevance_score(product, "a red") == 1
        assert query.relevance_score(product, "teapot") == 0

    def test_facets_count_in_first_seen_order(self) -> None:
        products = [
            ProductFactory.create(category="audio", brand="Sony"),
            ProductFactory.create(category="phones", brand="Apple"),
            ProductFactory.create(category="audio", brand="Apple"),
        ]
        facets = query.build_facets(products)

        assert [(f.value, f.count) for f in facets.categories] == [("audio", 2), ("phones", 1)]
        assert [(f.value, f.count) for f in facets.brands] == [("Sony", 1), ("Apple", 2)]


class TestPaginate:
    """Tests for paginate."""

    def test_pages_reconstruct_the_input(self, seed_store: CatalogStore) -> None:
        products = list(seed_store.products)
        limit = 4
        _, meta = query.paginate(products, 1, limit)

        collected: list[Product] = []
        for page in range(1, meta.total_pages + 1):
            chunk, _ = query.paginate(products, page, limit)
            assert len(chunk) <= limit
            collected.extend(chunk)

        assert collected == products
        assert meta.total_pages == math.ceil(len(products) / limit)

    def test_meta_flags(self) -> None:
        products = [ProductFactory.create() for _ in range(5)]

        _, first = query.paginate(products, 1, 2)
        _, last = query.paginate(products, 3, 2)

        assert (first.has_prev, first.has_next) == (False, True)
        assert (last.has_prev, last.has_next) == (True, False)
        assert first.total == 5
        assert first.total_pages == 3

    def test_page_past_the_end_is_empty(self) -> None:
        products = [ProductFactory.create() for _ in range(3)]
        page, meta = query.paginate(products, 5, 2)
        assert page == []
        assert meta.has_next is False

    def test_empty_result(self) -> None:
        page, meta = query.paginate([], 1, 10)
        assert page == []
        assert meta.total == 0
        assert meta.total_pages == 0
        assert meta.has_next is False

    @pytest.mark.parametrize(("page", "limit"), [(0, 10), (1, 0), (1, -3)])
    def test_rejects_invalid_bounds(self, page: int, limit: int) -> None:
        with pytest.raises(ValueError):
            query.paginate([], page, limit)


class TestRecommendAndPopular:
    """Tests for recommend and popular."""

    def test_recommendations_for_iphone(self, seed_store: CatalogStore) -> None:
        iphone = query.find_product(seed_store.products, "iphone-15-pro")
        assert iphone is not None

        result = query.recommend(seed_store.products, iphone, 2)

        assert len(result) == 2
        assert all(p.id != "iphone-15-pro" for p in result)
        assert all(p.category == iphone.category or p.brand == iphone.brand for p in result)
        assert result[0].rating >= result[1].rating

    def test_recommendation_ties_break_on_id(self) -> None:
        base = ProductFactory.create(id="base", brand="Acme", rating=3.0)
        products = [
            base,
            ProductFactory.create(id="zeta", brand="Acme", rating=4.5),
            ProductFactory.create(id="alpha", brand="Acme", rating=4.5),
            ProductFactory.create(id="other", brand="Other", category="garden"),
        ]
        assert _ids(query.recommend(products, base, 10)) == ["alpha", "zeta"]

    def test_popular_orders_by_rating_times_reviews(self, small_store: CatalogStore) -> None:
        result = query.popular(small_store.products)
        # phone 480, laptop 245, cable 41; pan is below the rating floor
        assert _ids(result) == ["phone", "laptop", "cable"]

    def test_popular_respects_category_and_limit(self, small_store: CatalogStore) -> None:
        result = query.popular(small_store.products, category="laptops", limit=5)
        assert _ids(result) == ["laptop"]
        assert len(query.popular(small_store.products, limit=1)) == 1

    def test_popular_min_rating(self, small_store: CatalogStore) -> None:
        result = query.popular(small_store.products, min_rating=3.0)
        assert _ids(result) == ["pan", "phone", "laptop", "cable"]


class TestAvailability:
    """Tests for classify_availability."""

    @pytest.mark.parametrize(
        ("in_stock", "quantity", "expected"),
        [
            (False, 0, AvailabilityStatus.OUT_OF_STOCK),
            (False, 50, AvailabilityStatus.OUT_OF_STOCK),
            (True, 11, AvailabilityStatus.IN_STOCK),
            (True, 10, AvailabilityStatus.LIMITED_STOCK),
            (True, 0, AvailabilityStatus.LIMITED_STOCK),
        ],
    )
    def test_classification(
        self, in_stock: bool, quantity: int, expected: AvailabilityStatus
    ) -> None:
        product = ProductFactory.create(in_stock=in_stock, stock_quantity=quantity)
        assert query.classify_availability(product).availability == expected

    def test_threshold_is_configurable(self) -> None:
        product = ProductFactory.create(stock_quantity=8)
        result = query.classify_availability(product, limited_stock_threshold=5)
        assert result.availability == AvailabilityStatus.IN_STOCK

    def test_reports_stock_fields(self) -> None:
        now = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)
        product = ProductFactory.create(id="kettle", stock_quantity=3)

        result = query.classify_availability(product, now=now)

        assert result.product_id == "kettle"
        assert result.stock_quantity == 3
        assert result.in_stock is True
        assert result.last_updated == now


class TestPriceRange:
    """Tests for price_range."""

    def test_statistics(self) -> None:
        products = [
            ProductFactory.create(price=10.0, category="c"),
            ProductFactory.create(price=20.0, category="c"),
            ProductFactory.create(price=30.0, category="c"),
            ProductFactory.create(price=999.0, category="other"),
        ]
        result = query.price_range(products, "c")

        assert result is not None
        assert (result.min_price, result.max_price, result.average_price) == (10.0, 30.0, 20.0)
        assert result.product_count == 3

    def test_average_rounds_to_two_places(self) -> None:
        products = [
            ProductFactory.create(price=10.0, category="c"),
            ProductFactory.create(price=10.0, category="c"),
            ProductFactory.create(price=10.01, category="c"),
        ]
        result = query.price_range(products, "c")
        assert result is not None
        assert result.average_price == 10.0

    def test_includes_subcategory_matches(self, small_store: CatalogStore) -> None:
        result = query.price_range(small_store.products, "laptops")
        assert result is not None
        assert result.product_count == 1

    def test_empty_category_is_none(self, small_store: CatalogStore) -> None:
        assert query.price_range(small_store.products, "garden") is None


class TestCategories:
    """Tests for find_category and with_product_counts."""

    def test_find_category_at_any_depth(self) -> None:
        tree = [
            CategoryFactory.create(
                id="root",
                subcategories=[
                    CategoryFactory.create(
                        id="child",
                        parent_id="root",
                        subcategories=[CategoryFactory.create(id="leaf", parent_id="child")],
                    )
                ],
            )
        ]
        found = query.find_category(tree, "leaf")
        assert found is not None
        assert found.parent_id == "child"
        assert query.find_category(tree, "missing") is None

    def test_product_counts_are_recursive(self, small_store: CatalogStore) -> None:
        electronics = query.find_category(small_store.categories, "electronics")
        assert electronics is not None

        counted = query.with_product_counts(electronics, small_store.products)

        assert counted.product_count == 3
        assert {c.id: c.product_count for c in counted.subcategories} == {
            "smartphones": 1,
            "laptops": 1,
        }
        # The stored tree is untouched
        assert electronics.product_count is None
