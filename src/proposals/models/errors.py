"""Standard error codes for proposal review.

Rejected night toggles are not errors: they are silent no-ops. Everything
that must refuse to produce a result raises ProposalError with one of
these codes, and the API layer turns it into an ErrorResponse.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Error codes for draft, session and submission failures."""

    INCOMPLETE_DRAFT = "ERR_001"
    INVALID_WEEKS = "ERR_002"
    UNKNOWN_RESERVATION_SPAN = "ERR_003"
    INVALID_TRANSITION = "ERR_004"
    SUBMISSION_FAILED = "ERR_005"
    REJECTION_FAILED = "ERR_006"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INCOMPLETE_DRAFT: "The draft is incomplete: select at least one night and a week count",
    ErrorCode.INVALID_WEEKS: "The number of weeks is out of range",
    ErrorCode.UNKNOWN_RESERVATION_SPAN: "Unknown reservation span",
    ErrorCode.INVALID_TRANSITION: "This action is not available right now",
    ErrorCode.SUBMISSION_FAILED: "Failed to process your request. Please try again.",
    ErrorCode.REJECTION_FAILED: "Failed to reject proposal. Please try again.",
}

# Recovery suggestions for the presentation layer
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.INCOMPLETE_DRAFT: "Select nights and enter the number of weeks for an 'Other' span",
    ErrorCode.INVALID_WEEKS: "Enter a week count between 1 and the allowed maximum",
    ErrorCode.UNKNOWN_RESERVATION_SPAN: "Choose one of the listed reservation spans",
    ErrorCode.INVALID_TRANSITION: "Finish or cancel the current step first",
    ErrorCode.SUBMISSION_FAILED: "Try submitting again",
    ErrorCode.REJECTION_FAILED: "Try rejecting again",
}


class ErrorResponse(BaseModel):
    """Serialized form of a ProposalError."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ErrorResponse":
        """Create an ErrorResponse from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            An ErrorResponse with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class ProposalError(Exception):
    """Exception raised by proposal review operations."""

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> ErrorResponse:
        """Convert this exception to an ErrorResponse."""
        return ErrorResponse.from_code(self.code, self.details)
