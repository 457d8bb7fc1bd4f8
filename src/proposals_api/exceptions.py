"""FastAPI exception handlers for converting ProposalError to HTTP responses.

The ErrorCode-to-HTTP status mapping follows REST conventions:
- 400 Bad Request: incomplete drafts and out-of-range week counts
- 404 Not Found: unknown reservation spans
- 409 Conflict: actions not legal in the current session state
- 502 Bad Gateway: collaborator failures

Usage:
    from proposals_api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_502_BAD_GATEWAY,
)

from proposals.models.errors import ErrorCode, ProposalError
from proposals.utils.logging import get_logger

logger = get_logger(__name__)

ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INCOMPLETE_DRAFT: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_WEEKS: HTTP_400_BAD_REQUEST,
    ErrorCode.UNKNOWN_RESERVATION_SPAN: HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_TRANSITION: HTTP_409_CONFLICT,
    ErrorCode.SUBMISSION_FAILED: HTTP_502_BAD_GATEWAY,
    ErrorCode.REJECTION_FAILED: HTTP_502_BAD_GATEWAY,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode, defaulting to 400."""
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def proposal_error_handler(request: Request, exc: ProposalError) -> JSONResponse:
    """Convert a ProposalError into an ErrorResponse JSON body.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The ProposalError exception

    Returns:
        JSONResponse with error details and appropriate status code.
    """
    status_code = get_http_status_for_error(exc.code)
    logger.info("Proposal error %s on %s", exc.code.value, request.url.path)

    return JSONResponse(
        status_code=status_code,
        content=exc.to_response().model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(ProposalError, proposal_error_handler)  # type: ignore[arg-type]
