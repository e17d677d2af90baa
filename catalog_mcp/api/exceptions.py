"""API exception hierarchy for consistent error handling.

All API exceptions inherit from CatalogServiceError, which provides
status_code and error_code attributes used by the global exception
handler to generate consistent error responses.
"""

from catalog_mcp.api.models.errors import ErrorCode


class CatalogServiceError(Exception):
    """Base exception for all API errors.

    Subclasses set status_code and error_code to define the HTTP response.
    """

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(CatalogServiceError):
    """Raised when request parameters are out of range."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST


class NotFoundError(CatalogServiceError):
    """Base for every "does not exist" condition."""

    status_code = 404
    error_code = ErrorCode.NOT_FOUND


class ProductNotFoundError(NotFoundError):
    """Raised when a product id doesn't exist."""

    error_code = ErrorCode.PRODUCT_NOT_FOUND

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class CategoryNotFoundError(NotFoundError):
    """Raised when a category id doesn't resolve anywhere in the tree."""

    error_code = ErrorCode.CATEGORY_NOT_FOUND

    def __init__(self, category_id: str) -> None:
        super().__init__(f"Category with ID {category_id} not found")
        self.category_id = category_id


class NoProductsInCategoryError(NotFoundError):
    """Raised when price statistics are requested for an empty category."""

    error_code = ErrorCode.NO_PRODUCTS_IN_CATEGORY

    def __init__(self, category_id: str) -> None:
        super().__init__(f"No products found in category {category_id}")
        self.category_id = category_id
