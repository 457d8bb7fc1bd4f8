"""Structured logging utilities with correlation ID support.

Provides:
- Correlation ID context management for tracing one editing session
  or one API request
- Structured logging formatter for consistent log output
- Helper for logging proposal session actions

Usage:
    from proposals.utils.logging import get_logger, set_correlation_id

    set_correlation_id(request.headers.get("X-Correlation-ID"))

    logger = get_logger(__name__)
    log_proposal_action(logger, "submit", proposal_id="prop-001", any_changed=True)
    # -> "proposal prop-001 submit: any_changed=True"
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any

NO_CORRELATION_ID = "no-correlation-id"

# Record fields that are printed elsewhere or are part of the message head
_MESSAGE_SKIPPED_FIELDS = frozenset({"action", "proposal_id", "session_id"})

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    """Generate a new correlation ID.

    Returns:
        UUID-based correlation ID string
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: Optional existing correlation ID. If None, generates new one.

    Returns:
        The correlation ID that was set
    """
    cid = correlation_id or generate_correlation_id()
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the current correlation ID, or None if not set."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return True


class StructuredFormatter(logging.Formatter):
    """Prefix each line with the correlation ID and, for session records, the session ID.

    Output looks like ``[req-42] ...`` for API requests and
    ``[req-42 session=session-7] ...`` for records logged by an editing session.
    """

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or NO_CORRELATION_ID

        prefix = record.correlation_id
        session_id = getattr(record, "session_id", None)
        if session_id and session_id != record.correlation_id:
            prefix = f"{prefix} session={session_id}"

        return f"[{prefix}] {super().format(record)}"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with correlation ID support.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())

    return logger


def configure_logging(level: str = "INFO") -> None:
    """Install the structured formatter on the root logger.

    Args:
        level: Root log level name (e.g. "INFO", "DEBUG")
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if not any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            StructuredFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        root.addHandler(handler)


def log_proposal_action(
    logger: logging.Logger,
    action: str,
    *,
    proposal_id: str | None = None,
    state: str | None = None,
    any_changed: bool | None = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Log one step of a proposal review.

    The message reads ``proposal <id> <action>: key=value ...`` and every field
    is also attached to the record so handlers can filter on it.
    ``session_id`` is attached but left out of the message text since the
    formatter already prints it.

    Args:
        logger: Logger instance
        action: Action name (e.g., "open", "preview", "submit", "reject")
        proposal_id: Proposal ID if available
        state: Session state after the action
        any_changed: Whether the draft differs from the proposal
        error: Error message if the action failed
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"action": action, "proposal_id": proposal_id}
    if state:
        context["state"] = state
    if any_changed is not None:
        context["any_changed"] = any_changed
    if error:
        context["error"] = error
    context.update(extra)

    details = " ".join(
        f"{key}={value}"
        for key, value in context.items()
        if key not in _MESSAGE_SKIPPED_FIELDS
    )
    message = f"proposal {proposal_id or '-'} {action}"
    if details:
        message = f"{message}: {details}"

    logger.log(logging.ERROR if error else logging.INFO, message, extra=context)
