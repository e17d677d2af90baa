"""API route registration.

This module provides helper functions for registering API routers
with the FastAPI application.
"""

from fastapi import APIRouter, FastAPI

from catalog_mcp.observability.logging import get_logger

logger = get_logger(__name__)

API_PREFIX = "/api/v1"


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all routes.

    Returns:
        APIRouter with all v1 routes registered
    """
    router = APIRouter(prefix=API_PREFIX)

    from catalog_mcp.api.routes.categories import router as categories_router
    from catalog_mcp.api.routes.products import router as products_router

    router.include_router(products_router, tags=["Products"])
    router.include_router(categories_router, tags=["Categories"])

    logger.debug("v1_router_created", routes=["products", "categories"])

    return router


def register_routes(app: FastAPI) -> None:
    """Register all routes with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.include_router(create_v1_router())

    # Registered outside the v1 router: /health sits at the root
    from catalog_mcp.api.routes.health import info_router
    from catalog_mcp.api.routes.health import router as health_router

    app.include_router(info_router, tags=["Info"])
    app.include_router(health_router, tags=["Health"])

    logger.info("routes_registered")
