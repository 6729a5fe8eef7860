"""Prometheus metrics for the recommendation service.

Exposed on GET /metrics by the API server.

Usage:
    from papertime.observability.metrics import RANKING_DURATION

    with RANKING_DURATION.time():
        ranking.recommend(pool, liked, top_n)
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Private registry so tests and multiple app instances do not collide
REGISTRY = CollectorRegistry(auto_describe=True)

RECOMMENDATIONS_SERVED = Counter(
    name="papertime_recommendations_total",
    documentation="Recommendation requests served",
    labelnames=["outcome"],  # ranked, empty, failed
    registry=REGISTRY,
)

PAPERS_FILTERED = Counter(
    name="papertime_papers_filtered_total",
    documentation="Papers evaluated by the filter service",
    labelnames=["result"],  # kept, rejected
    registry=REGISTRY,
)

RANKING_DURATION = Histogram(
    name="papertime_ranking_duration_seconds",
    documentation="Time spent vectorizing, scoring and sorting a pool",
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    registry=REGISTRY,
)


def get_metrics_text() -> bytes:
    """Metrics in Prometheus exposition format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
