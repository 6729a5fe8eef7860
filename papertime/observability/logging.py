"""Structured logging setup.

Configures structlog once per process (CLI entry or server start) with:
- Correlation ID injection into every entry
- JSON output for the server, colored console output for interactive use
- Level filtering

Usage:
    from papertime.observability.logging import configure_logging, get_logger

    configure_logging(level="INFO", json_output=False)
    logger = get_logger("ranking")
    logger.info("ranking_complete", pool=200, returned=10)
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import EventDict, WrappedLogger

from papertime.observability.context import get_correlation_id


def add_correlation_id_processor(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Structlog processor that adds correlation_id to log entries.

    Reads the current correlation ID from context and injects it into every
    entry. Outside a request the value is "none".

    Args:
        logger: The wrapped logger instance
        method_name: The name of the logging method called
        event_dict: The event dictionary being logged

    Returns:
        Event dictionary with correlation_id added
    """
    corr_id = get_correlation_id()
    event_dict["correlation_id"] = corr_id if corr_id else "none"
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    add_timestamp: bool = True,
) -> None:
    """Configure structlog for the application.

    Call once at startup (CLI import or server start). Logs always go to
    stderr so command output on stdout stays machine-readable.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: JSON lines if True, console renderer otherwise
        add_timestamp: Add an ISO timestamp to each entry

    Example:
        configure_logging(level="DEBUG", json_output=False)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_correlation_id_processor,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(
    component: Optional[str] = None,
    **initial_context: Any,
) -> Any:
    """Get a structured logger with optional component context.

    The returned logger stays lazy: it picks up whatever configuration is
    active when it first logs, so module-level loggers created before
    ``configure_logging`` still honour the configured level and renderer.

    Args:
        component: Component name for log filtering (e.g. "ranking")
        **initial_context: Additional context to bind to every entry

    Returns:
        Structlog logger bound to the given context

    Example:
        logger = get_logger("filter")
        logger.info("filtering_complete", papers_output=12)

        logger = get_logger("api", route="/api/recommend")
        logger.info("request_received")
    """
    context = dict(initial_context)
    if component:
        context["component"] = component
    return structlog.get_logger(**context)


def bind_context(**context: Any) -> None:
    """Bind context variables to all subsequent log entries.

    Values stay bound in the current context (request or thread) until
    ``clear_context`` is called.

    Args:
        **context: Key-value pairs to bind

    Example:
        bind_context(method="POST", path="/api/recommend")
        logger.info("request_received")  # includes method and path
    """
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    """Clear all bound context variables.

    Should be called at request boundaries so values from one request do
    not leak into the next.

    Example:
        try:
            bind_context(path="/api/filter")
            handle()
        finally:
            clear_context()
    """
    structlog.contextvars.clear_contextvars()
