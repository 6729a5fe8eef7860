"""
Relevance scoring for ranked papers.

Each paper gets three component scores in [0, 1]:
- Similarity to the user's liked papers (TF-IDF cosine)
- Recency (step function of age in days)
- Foundational status (pre-cutoff papers with seminal-work keywords)

Relevance is their weighted sum; weights come from RankingConfig.
"""

from datetime import datetime, time, timezone
from typing import Iterable, Mapping, Optional, Sequence

import structlog

from papertime.models.config import RankingConfig
from papertime.models.paper import Paper, PaperScores
from papertime.services.similarity import cosine_similarity, vector_norm

logger = structlog.get_logger()

SECONDS_PER_DAY = 60 * 60 * 24


def _as_utc(value: datetime) -> datetime:
    # Feed timestamps without an offset are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class ScoringModel:
    """Compute score breakdowns against one vector table.

    Args:
        config: Ranking constants (defaults if None)
        now: Evaluation time for recency (current UTC time if None)
    """

    def __init__(
        self,
        config: Optional[RankingConfig] = None,
        now: Optional[datetime] = None,
    ):
        self.config = config or RankingConfig()
        self.now = _as_utc(now) if now else datetime.now(timezone.utc)
        self._cutoff = datetime.combine(
            self.config.foundational_cutoff, time.min, tzinfo=timezone.utc
        )

    def similarity_score(
        self,
        paper_id: str,
        vectors: Mapping[str, Sequence[float]],
        liked_ids: Sequence[str],
    ) -> float:
        """Average cosine similarity to the liked papers present in the table.

        With no history, falls back to the paper's own vector norm scaled by
        ``norm_scale`` and capped at 1. With history but no liked paper in the
        table, returns the neutral similarity.
        """
        vector = vectors.get(paper_id) or []

        if not liked_ids:
            return _clamp(vector_norm(vector) / self.config.norm_scale)

        total = 0.0
        found = 0
        for liked_id in liked_ids:
            liked_vector = vectors.get(liked_id)
            if liked_vector is None or not vector:
                continue
            total += cosine_similarity(vector, liked_vector)
            found += 1

        if found == 0:
            return self.config.neutral_similarity
        return _clamp(total / found)

    def recency_score(self, published: datetime) -> float:
        """Step score by days since publication."""
        age_days = (self.now - _as_utc(published)).total_seconds() / SECONDS_PER_DAY

        for tier in self.config.recency_tiers:
            if age_days <= tier.max_days:
                return tier.score
        return self.config.stale_recency_score

    def foundational_score(self, paper: Paper) -> float:
        """Score classic pre-cutoff papers; 0.0 for anything newer."""
        if _as_utc(paper.published) >= self._cutoff:
            return 0.0

        text = f"{paper.title} {paper.summary}".lower()
        if any(keyword in text for keyword in self.config.foundational_keywords):
            return self.config.foundational_keyword_score
        return self.config.foundational_default_score

    def relevance_score(
        self, similarity: float, recency: float, foundational: float
    ) -> float:
        return _clamp(
            self.config.similarity_weight * similarity
            + self.config.recency_weight * recency
            + self.config.foundational_weight * foundational
        )

    def score(
        self,
        paper: Paper,
        vectors: Mapping[str, Sequence[float]],
        liked_ids: Iterable[str] = (),
    ) -> PaperScores:
        """Full score breakdown for one paper."""
        liked = list(dict.fromkeys(liked_ids))

        similarity = self.similarity_score(paper.paper_id, vectors, liked)
        recency = self.recency_score(paper.published)
        foundational = self.foundational_score(paper)

        return PaperScores(
            similarity=similarity,
            recency=recency,
            foundational=foundational,
            relevance=self.relevance_score(similarity, recency, foundational),
        )
