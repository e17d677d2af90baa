"""API middleware."""

from catalog_mcp.api.middleware.context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
