"""Observability: correlation IDs, structured logging and Prometheus metrics."""

from papertime.observability.context import (
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
    correlation_id_context,
)
from papertime.observability.logging import (
    get_logger,
    configure_logging,
    add_correlation_id_processor,
    bind_context,
    clear_context,
)
from papertime.observability.metrics import (
    RECOMMENDATIONS_SERVED,
    PAPERS_FILTERED,
    RANKING_DURATION,
    get_metrics_text,
    get_metrics_content_type,
)

__all__ = [
    # Context
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    "correlation_id_context",
    # Logging
    "get_logger",
    "configure_logging",
    "add_correlation_id_processor",
    "bind_context",
    "clear_context",
    # Metrics
    "RECOMMENDATIONS_SERVED",
    "PAPERS_FILTERED",
    "RANKING_DURATION",
    "get_metrics_text",
    "get_metrics_content_type",
]
