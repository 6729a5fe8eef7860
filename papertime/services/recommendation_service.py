"""
Recommendation service.

Implements the recommend request/response contract on top of a paper source:
fetch pool -> apply filters -> rank -> response. An empty filtered pool is a
normal outcome and yields an empty response with a message, whatever the
reason the pool was empty.
"""

from datetime import datetime
from typing import List, Optional

from papertime.models.config import RankingConfig, ServiceSettings
from papertime.models.filters import FilterCriteria
from papertime.models.paper import Paper
from papertime.models.recommendation import RecommendRequest, RecommendResponse
from papertime.observability.logging import get_logger
from papertime.observability.metrics import (
    PAPERS_FILTERED,
    RANKING_DURATION,
    RECOMMENDATIONS_SERVED,
)
from papertime.services.filter_service import FilterService
from papertime.services.ranking_service import RankingService
from papertime.services.sources.base import PaperSource
from papertime.utils.exceptions import PaperSourceError

logger = get_logger("recommendation")

NO_MATCH_MESSAGE = "No papers match the current filters"


class RecommendationService:
    """Orchestrates filtering and ranking for one request at a time."""

    def __init__(
        self,
        source: PaperSource,
        ranking_config: Optional[RankingConfig] = None,
        settings: Optional[ServiceSettings] = None,
        now: Optional[datetime] = None,
    ):
        self.source = source
        self.ranking_config = ranking_config or RankingConfig()
        self.settings = settings or ServiceSettings()
        self.now = now

        logger.info(
            "recommendation_service_initialized",
            source=source.name,
            default_max_results=self.settings.default_max_results,
        )

    def filter(self, criteria: FilterCriteria) -> List[Paper]:
        """Filtered pool, in source order."""
        pool = self.source.fetch_papers()
        return self._apply_filters(pool, criteria)

    def recommend(self, request: RecommendRequest) -> RecommendResponse:
        """
        Rank the filtered pool against the request's liked papers.

        Args:
            request: Liked ids, filters and result limit

        Returns:
            Ranked papers, or an empty list with a message

        Raises:
            PaperSourceError: If the source cannot deliver a pool
        """
        try:
            pool = self.source.fetch_papers()
        except PaperSourceError as e:
            RECOMMENDATIONS_SERVED.labels(outcome="failed").inc()
            logger.error("paper_source_failed", source=self.source.name, error=str(e))
            raise

        filtered = self._apply_filters(pool, request.filters)

        if not filtered:
            RECOMMENDATIONS_SERVED.labels(outcome="empty").inc()
            return RecommendResponse(papers=[], message=NO_MATCH_MESSAGE)

        max_results = request.max_results or self.settings.default_max_results
        top_n = min(max_results, len(filtered))

        ranking = RankingService(self.ranking_config, now=self.now)
        with RANKING_DURATION.time():
            ranked = ranking.recommend(filtered, request.liked_paper_ids, top_n)

        RECOMMENDATIONS_SERVED.labels(outcome="ranked").inc()
        logger.info(
            "recommendations_generated",
            pool=len(pool),
            filtered=len(filtered),
            returned=len(ranked),
            liked_in_pool=ranking.stats.liked_in_pool,
        )
        return RecommendResponse(papers=ranked)

    def _apply_filters(self, pool: List[Paper], criteria: FilterCriteria) -> List[Paper]:
        filtered = FilterService().apply_filters(pool, criteria)
        PAPERS_FILTERED.labels(result="kept").inc(len(filtered))
        PAPERS_FILTERED.labels(result="rejected").inc(len(pool) - len(filtered))
        return filtered
