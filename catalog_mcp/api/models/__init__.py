"""API request and response models."""

from catalog_mcp.api.models.errors import ErrorCode, ErrorDetail, ErrorResponse
from catalog_mcp.api.models.responses import (
    ApiInfo,
    AppliedFilters,
    CategoryProductsResponse,
    DataResponse,
    HealthResponse,
    ProductListResponse,
    SearchResponse,
)

__all__ = [
    "ApiInfo",
    "AppliedFilters",
    "CategoryProductsResponse",
    "DataResponse",
    "ErrorCode",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "ProductListResponse",
    "SearchResponse",
]
