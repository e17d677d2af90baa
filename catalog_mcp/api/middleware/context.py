"""Request context middleware for observability."""

import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_mcp.observability.logging import bind_context, clear_context, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds request_id, method and path to every log line of a request.

    Reuses the caller's X-Request-ID when present, otherwise generates one,
    and echoes it on the response.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        clear_context()
        bind_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        logger.debug("request_started")

        response = await call_next(request)

        logger.debug("request_completed", status_code=response.status_code)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
