"""FastAPI application factory.

Creates and configures the FastAPI application with middleware,
exception handlers, and route registration.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_mcp import __version__
from catalog_mcp.api.exceptions import CatalogServiceError
from catalog_mcp.api.middleware.context import RequestContextMiddleware
from catalog_mcp.api.models.errors import ErrorCode, ErrorDetail, ErrorResponse
from catalog_mcp.api.routes import register_routes
from catalog_mcp.catalog.store import CatalogStore
from catalog_mcp.config import get_settings
from catalog_mcp.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(store: CatalogStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a fully configured FastAPI app with:
    - CORS middleware
    - Request context middleware
    - Global exception handlers
    - All API routes registered

    Args:
        store: Catalog to serve. Loaded from catalog.data_path when omitted.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    if store is None:
        store = CatalogStore.from_file(settings.catalog.data_path)

    app = FastAPI(
        title="Catalog API",
        description="REST API for product catalog management",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.catalog_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    _register_exception_handlers(app)

    register_routes(app)

    logger.info(
        "app_created",
        debug=settings.debug,
        product_count=len(store.products),
        cors_origins=settings.api.cors_origins,
    )

    return app


def _error_response(
    status_code: int,
    code: ErrorCode,
    message: str,
    details: list[ErrorDetail] | None = None,
) -> JSONResponse:
    body = ErrorResponse(error=message, code=code, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(CatalogServiceError)
    async def catalog_service_error_handler(
        request: Request, exc: CatalogServiceError
    ) -> JSONResponse:
        """Handle CatalogServiceError and its subclasses."""
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )
        return _error_response(exc.status_code, exc.error_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle FastAPI request validation errors as 400."""
        logger.warning(
            "validation_error",
            errors=exc.errors(),
            path=request.url.path,
        )

        details = []
        for error in exc.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            details.append(ErrorDetail(field=field, message=error["msg"]))

        return _error_response(400, ErrorCode.INVALID_REQUEST, "Request validation failed", details)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors (unknown path, wrong method)."""
        if exc.status_code == 404:
            logger.debug("endpoint_not_found", path=request.url.path)
            return _error_response(404, ErrorCode.NOT_FOUND, "Endpoint not found")

        return _error_response(exc.status_code, ErrorCode.INVALID_REQUEST, str(exc.detail))

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return _error_response(500, ErrorCode.INTERNAL_ERROR, "An unexpected error occurred")


def main() -> None:
    """Run the catalog API with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(
        level=settings.observability.logging.level,
        format=settings.observability.logging.format,
    )

    app = create_app()

    logger.info("api_server_starting", host=settings.api.host, port=settings.api.port)
    uvicorn.run(
        app,
        host=settings.api.host,
        port=settings.api.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
