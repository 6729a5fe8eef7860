"""
Paper ranking service.

Ranks a paper pool by relevance to a liked-paper history:
1. Vectorize the whole pool with a fresh TF-IDF index
2. Score every paper (similarity, recency, foundational)
3. Stable sort by relevance, highest first
4. Truncate to top N
"""

from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from pydantic import BaseModel

from papertime.models.config import RankingConfig
from papertime.models.paper import Paper, ScoredPaper
from papertime.observability.logging import get_logger
from papertime.services.scoring import ScoringModel
from papertime.services.vectorizer import compute_vectors

logger = get_logger("ranking")

DEFAULT_TOP_N = 10


class RankingStats(BaseModel):
    """Statistics for the most recent ranking call"""

    pool_size: int = 0
    liked_in_pool: int = 0
    papers_returned: int = 0
    avg_relevance_score: float = 0.0


class RankingService:
    """Rank papers against a liked-paper history.

    Every call builds its own index and vector table; nothing is shared
    between calls.
    """

    def __init__(
        self,
        config: Optional[RankingConfig] = None,
        now: Optional[datetime] = None,
    ):
        """
        Args:
            config: Ranking constants
            now: Fixed evaluation time (current time per call if None)
        """
        self.config = config or RankingConfig()
        self.now = now
        self.stats = RankingStats()

    def recommend(
        self,
        papers: Sequence[Paper],
        liked_ids: Iterable[str] = (),
        top_n: int = DEFAULT_TOP_N,
    ) -> List[ScoredPaper]:
        """
        Rank papers and return the top N.

        Args:
            papers: Pool to rank (already filtered)
            liked_ids: Ids of papers the user liked
            top_n: Maximum number of results

        Returns:
            Scored papers, highest relevance first. Papers with equal
            relevance keep their pool order.
        """
        self.stats = RankingStats(pool_size=len(papers))

        if not papers:
            return []

        liked = list(dict.fromkeys(liked_ids))
        vectors = compute_vectors(papers)
        scorer = ScoringModel(self.config, now=self.now)

        scored = [
            ScoredPaper(paper=paper, scores=scorer.score(paper, vectors, liked))
            for paper in papers
        ]

        # sorted() is stable, including with reverse=True
        ranked = sorted(scored, key=lambda s: s.scores.relevance, reverse=True)
        results = ranked[: max(0, min(top_n, len(ranked)))]

        self.stats.liked_in_pool = sum(1 for paper_id in liked if paper_id in vectors)
        self.stats.papers_returned = len(results)
        if results:
            self.stats.avg_relevance_score = sum(
                s.scores.relevance for s in results
            ) / len(results)

        logger.info(
            "ranking_complete",
            pool=len(papers),
            liked=len(liked),
            liked_in_pool=self.stats.liked_in_pool,
            returned=len(results),
        )

        return results

    def get_stats(self) -> RankingStats:
        return self.stats


def recommend(
    papers: Sequence[Paper],
    liked_ids: Iterable[str] = (),
    top_n: int = DEFAULT_TOP_N,
    config: Optional[RankingConfig] = None,
    now: Optional[datetime] = None,
) -> List[ScoredPaper]:
    """Rank ``papers`` with a throwaway RankingService."""
    return RankingService(config, now=now).recommend(papers, liked_ids, top_n)
