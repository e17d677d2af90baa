"""Health and API info endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter

from catalog_mcp import __version__
from catalog_mcp.api.dependencies import CatalogStoreDep
from catalog_mcp.api.models.responses import ApiInfo, HealthResponse
from catalog_mcp.api.routes import API_PREFIX

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(store: CatalogStoreDep) -> HealthResponse:
    """Report that the service is up and how much catalog it serves."""
    return HealthResponse(
        timestamp=datetime.now(UTC),
        version=__version__,
        product_count=len(store.products),
        category_count=store.category_count,
    )


info_router = APIRouter(prefix=API_PREFIX)


@info_router.get("", response_model=ApiInfo)
async def api_info() -> ApiInfo:
    """Describe the v1 API and its main endpoints."""
    return ApiInfo(
        version=__version__,
        endpoints={
            "products": "/api/v1/products",
            "categories": "/api/v1/categories",
            "search": "/api/v1/products/search",
            "popular": "/api/v1/products/popular",
        },
    )
