"""Correlation ID context for tracing one recommendation request.

The API middleware and CLI commands set an ID at their boundary; the logging
processor reads it so every log line of a request can be grouped.

Usage:
    from papertime.observability.context import correlation_id_context

    with correlation_id_context(request.headers.get("x-request-id")):
        service.recommend(body)
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generator, Optional

_correlation_id_var: ContextVar[Optional[str]] = ContextVar(
    "correlation_id", default=None
)


def set_correlation_id(corr_id: Optional[str] = None) -> str:
    """Set the correlation ID for the current context.

    Args:
        corr_id: ID to use; a UUID4 is generated if None.

    Returns:
        The ID that was set.
    """
    if corr_id is None:
        corr_id = str(uuid.uuid4())
    _correlation_id_var.set(corr_id)
    return corr_id


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID.

    Returns:
        Current correlation ID, or None if not set
    """
    return _correlation_id_var.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id_var.set(None)


@contextmanager
def correlation_id_context(
    corr_id: Optional[str] = None,
) -> Generator[str, None, None]:
    """Context manager scoping a correlation ID.

    Sets the ID for the duration of the block and restores the previous
    value on exit, even if the block raises.

    Args:
        corr_id: ID to use; a UUID4 is generated if None.

    Yields:
        The active correlation ID

    Example:
        with correlation_id_context() as corr_id:
            logger.info("recommendations_generated")  # includes corr_id
    """
    if corr_id is None:
        corr_id = str(uuid.uuid4())
    token = _correlation_id_var.set(corr_id)
    try:
        yield corr_id
    finally:
        _correlation_id_var.reset(token)
