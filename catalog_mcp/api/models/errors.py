"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in every error body."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Query parameters failed validation."""

    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    """The requested product id does not exist."""

    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    """The requested category id does not exist anywhere in the tree."""

    NO_PRODUCTS_IN_CATEGORY = "NO_PRODUCTS_IN_CATEGORY"
    """Price statistics were requested for a category with no products."""

    NOT_FOUND = "NOT_FOUND"
    """No route matches the request path."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level information for validation failures."""

    field: str | None = None
    """The parameter that caused the error, if applicable."""

    message: str
    """Human-readable error description."""


class ErrorResponse(BaseModel):
    """Standard error response format for all API errors.

    Example:
        {
            "error": "Product with ID xyz not found",
            "code": "PRODUCT_NOT_FOUND"
        }
    """

    error: str
    """Human-readable error message."""

    code: ErrorCode
    """Machine-readable error code."""

    details: list[ErrorDetail] | None = None
    """Per-field details, only for validation failures."""
