"""Request tracing for the proposal review API.

Every request runs under one correlation ID. A caller-supplied
``X-Correlation-ID`` is reused when it is usable; otherwise a fresh ID is
generated. The ID is echoed on the response so a client can match its own
logs against the preview and pricing lines logged on the server.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from proposals.utils.logging import (
    clear_correlation_id,
    get_logger,
    set_correlation_id,
)

CORRELATION_ID_HEADER = "X-Correlation-ID"
MAX_CORRELATION_ID_LENGTH = 128

logger = get_logger(__name__)


def incoming_correlation_id(request: Request) -> str | None:
    """Return the caller's correlation ID, or None when absent or unusable.

    Blank values and values longer than MAX_CORRELATION_ID_LENGTH are ignored.
    """
    value = request.headers.get(CORRELATION_ID_HEADER, "").strip()
    if not value or len(value) > MAX_CORRELATION_ID_LENGTH:
        return None
    return value


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID to each API request and echo it back."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = set_correlation_id(incoming_correlation_id(request))
        try:
            response = await call_next(request)
            logger.debug(
                "%s %s -> %d", request.method, request.url.path, response.status_code
            )
        finally:
            clear_correlation_id()

        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
