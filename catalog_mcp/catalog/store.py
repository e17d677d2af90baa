"""The in-memory catalog store.

A ``CatalogStore`` is built once at startup and handed to the repositories.
Its contents never change for the lifetime of the process.
"""

from collections.abc import Iterator, Sequence
from pathlib import Path

from pydantic import BaseModel, ValidationError

from catalog_mcp.catalog.models import Category, Product
from catalog_mcp.observability.logging import get_logger

logger = get_logger(__name__)


class CatalogLoadError(Exception):
    """Raised when catalog data cannot be read or is inconsistent."""


class CatalogData(BaseModel):
    """On-disk layout of a catalog file."""

    products: list[Product]
    categories: list[Category]


def _walk(categories: Sequence[Category]) -> Iterator[Category]:
    for category in categories:
        yield category
        yield from _walk(category.subcategories)


class CatalogStore:
    """Read-only holder of the product list and the category forest.

    Products keep the order they were loaded in; that order is the
    tie-breaker for every stable sort in the query engine.
    """

    def __init__(self, products: Sequence[Product], categories: Sequence[Category]) -> None:
        self._products: tuple[Product, ...] = tuple(products)
        self._categories: tuple[Category, ...] = tuple(categories)
        self._check_unique_ids()

    @classmethod
    def from_file(cls, path: Path) -> "CatalogStore":
        """Load a catalog from a JSON file.

        Raises:
            CatalogLoadError: If the file is missing, malformed or has duplicate ids
        """
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogLoadError(f"Cannot read catalog file {path}: {e}") from e

        try:
            data = CatalogData.model_validate_json(raw)
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid catalog file {path}: {e}") from e

        store = cls(data.products, data.categories)
        logger.info(
            "catalog_loaded",
            path=str(path),
            product_count=len(store.products),
            category_count=store.category_count,
        )
        return store

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def categories(self) -> tuple[Category, ...]:
        """Root categories; children hang off ``subcategories``."""
        return self._categories

    @property
    def category_count(self) -> int:
        """Number of categories at every depth."""
        return sum(1 for _ in _walk(self._categories))

    def _check_unique_ids(self) -> None:
        seen: set[str] = set()
        for product in self._products:
            if product.id in seen:
                raise CatalogLoadError(f"Duplicate product id: {product.id}")
            seen.add(product.id)

        seen.clear()
        for category in _walk(self._categories):
            if category.id in seen:
                raise CatalogLoadError(f"Duplicate category id: {category.id}")
            seen.add(category.id)
