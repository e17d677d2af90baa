"""Dependency injection for API routes.

Provides FastAPI dependencies for settings, the catalog store, repositories
and services. The store lives on ``app.state`` and is created by
``create_app``; every dependency can be overridden for testing through
``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Query, Request

from catalog_mcp.api.exceptions import InvalidRequestError
from catalog_mcp.api.services import CategoryService, ProductService
from catalog_mcp.catalog.models import PaginationParams
from catalog_mcp.catalog.repositories import (
    InMemoryCategoryRepository,
    InMemoryProductRepository,
)
from catalog_mcp.catalog.repository import CategoryRepository, ProductRepository
from catalog_mcp.catalog.store import CatalogStore
from catalog_mcp.config import get_settings
from catalog_mcp.config.settings import Settings


def get_catalog_store(request: Request) -> CatalogStore:
    """Get the catalog store attached to the running application."""
    return request.app.state.catalog_store  # type: ignore[no-any-return]


SettingsDep = Annotated[Settings, Depends(get_settings)]
CatalogStoreDep = Annotated[CatalogStore, Depends(get_catalog_store)]


def get_product_repository(
    store: CatalogStoreDep, settings: SettingsDep
) -> ProductRepository:
    return InMemoryProductRepository(
        store,
        limited_stock_threshold=settings.catalog.limited_stock_threshold,
    )


def get_category_repository(store: CatalogStoreDep) -> CategoryRepository:
    return InMemoryCategoryRepository(store)


def get_product_service(
    repository: Annotated[ProductRepository, Depends(get_product_repository)],
) -> ProductService:
    return ProductService(repository)


def get_category_service(
    repository: Annotated[CategoryRepository, Depends(get_category_repository)],
) -> CategoryService:
    return CategoryService(repository)


ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]


def get_pagination(
    settings: SettingsDep,
    page: int = Query(default=1, ge=1, description="1-based page number"),
    limit: int | None = Query(default=None, ge=1, description="Page size"),
) -> PaginationParams:
    """Resolve page/limit query parameters against the configured page sizes.

    Raises:
        InvalidRequestError: If limit exceeds api.max_page_size
    """
    if limit is None:
        limit = settings.api.default_page_size
    if limit > settings.api.max_page_size:
        raise InvalidRequestError(f"limit must be at most {settings.api.max_page_size}")
    return PaginationParams(page=page, limit=limit)


PaginationDep = Annotated[PaginationParams, Depends(get_pagination)]
