"""Unit tests for the scoring model"""

from datetime import datetime, timedelta, timezone

import pytest

from papertime.models.config import RankingConfig
from papertime.services.scoring import ScoringModel


@pytest.fixture
def scorer(now):
    return ScoringModel(RankingConfig(), now=now)


class TestRecencyScore:
    @pytest.mark.parametrize(
        "days_old,expected",
        [
            (0, 1.0),
            (10, 1.0),
            (30, 1.0),
            (31, 0.7),
            (90, 0.7),
            (91, 0.4),
            (365, 0.4),
            (366, 0.1),
            (400, 0.1),
        ],
    )
    def test_step_function(self, scorer, now, days_old, expected):
        assert scorer.recency_score(now - timedelta(days=days_old)) == expected

    def test_future_date_counts_as_recent(self, scorer, now):
        assert scorer.recency_score(now + timedelta(days=3)) == 1.0

    def test_naive_timestamp_treated_as_utc(self, scorer, now):
        naive = (now - timedelta(days=40)).replace(tzinfo=None)
        assert scorer.recency_score(naive) == 0.7

    def test_custom_tiers(self, now):
        config = RankingConfig(
            recency_tiers=[{"max_days": 7, "score": 1.0}],
            stale_recency_score=0.0,
        )
        scorer = ScoringModel(config, now=now)

        assert scorer.recency_score(now - timedelta(days=5)) == 1.0
        assert scorer.recency_score(now - timedelta(days=8)) == 0.0


class TestFoundationalScore:
    def test_old_paper_with_keyword(self, scorer, make_paper):
        paper = make_paper(
            title="The Transformer Architecture",
            published=datetime(2018, 5, 1, tzinfo=timezone.utc),
        )
        assert scorer.foundational_score(paper) == 1.0

    def test_keyword_match_is_case_insensitive_substring(self, scorer, make_paper):
        paper = make_paper(
            title="Image synthesis",
            summary="We train GANs on faces",
            published=datetime(2017, 1, 1, tzinfo=timezone.utc),
        )
        assert scorer.foundational_score(paper) == 1.0

    def test_old_paper_without_keyword(self, scorer, make_paper):
        paper = make_paper(
            title="Sorting networks",
            summary="Comparator circuits",
            published=datetime(2015, 3, 1, tzinfo=timezone.utc),
        )
        assert scorer.foundational_score(paper) == 0.5

    def test_recent_paper_scores_zero(self, scorer, make_paper):
        paper = make_paper(
            title="The Transformer Architecture",
            published=datetime(2021, 5, 1, tzinfo=timezone.utc),
        )
        assert scorer.foundational_score(paper) == 0.0

    def test_cutoff_day_is_not_foundational(self, scorer, make_paper):
        paper = make_paper(
            title="Transformer",
            published=datetime(2020, 1, 1, tzinfo=timezone.utc),
        )
        assert scorer.foundational_score(paper) == 0.0


class TestSimilarityScore:
    def test_no_history_uses_scaled_norm(self, scorer):
        vectors = {"a": [3.0, 4.0]}
        assert scorer.similarity_score("a", vectors, []) == pytest.approx(0.5)

    def test_no_history_norm_is_capped(self, scorer):
        vectors = {"a": [30.0, 40.0]}
        assert scorer.similarity_score("a", vectors, []) == 1.0

    def test_average_over_liked_papers(self, scorer):
        vectors = {
            "a": [1.0, 0.0],
            "liked1": [1.0, 0.0],  # cos 1
            "liked2": [0.0, 1.0],  # cos 0
        }
        assert scorer.similarity_score("a", vectors, ["liked1", "liked2"]) == pytest.approx(0.5)

    def test_missing_liked_ids_are_skipped(self, scorer):
        vectors = {"a": [1.0, 0.0], "liked": [1.0, 0.0]}
        assert scorer.similarity_score("a", vectors, ["gone", "liked"]) == pytest.approx(1.0)

    def test_no_liked_in_pool_is_neutral(self, scorer):
        vectors = {"a": [1.0, 0.0]}
        assert scorer.similarity_score("a", vectors, ["gone"]) == 0.5

    def test_empty_paper_vector_is_neutral(self, scorer):
        vectors = {"a": [], "liked": []}
        assert scorer.similarity_score("a", vectors, ["liked"]) == 0.5


class TestRelevance:
    def test_weighted_sum(self, scorer):
        assert scorer.relevance_score(1.0, 0.4, 0.5) == pytest.approx(
            0.5 * 1.0 + 0.3 * 0.4 + 0.2 * 0.5
        )

    def test_bounds(self, scorer):
        assert scorer.relevance_score(0.0, 0.0, 0.0) == 0.0
        assert scorer.relevance_score(1.0, 1.0, 1.0) == pytest.approx(1.0)
        assert scorer.relevance_score(1.0, 1.0, 1.0) <= 1.0

    def test_score_breakdown(self, scorer, make_paper):
        paper = make_paper("a", "Graph Networks", days_old=10)
        scores = scorer.score(paper, {"a": [0.0]}, [])

        assert scores.similarity == 0.0
        assert scores.recency == 1.0
        assert scores.foundational == 0.0
        assert scores.relevance == pytest.approx(0.3)


class TestRankingConfig:
    def test_defaults(self):
        config = RankingConfig()

        assert (config.similarity_weight, config.recency_weight, config.foundational_weight) == (
            0.5,
            0.3,
            0.2,
        )
        assert [t.max_days for t in config.recency_tiers] == [30, 90, 365]
        assert "transformer" in config.foundational_keywords

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ValueError, match="sum to 1.0"):
            RankingConfig(similarity_weight=0.9, recency_weight=0.3, foundational_weight=0.2)

    def test_tiers_are_sorted(self):
        config = RankingConfig(
            recency_tiers=[
                {"max_days": 365, "score": 0.4},
                {"max_days": 30, "score": 1.0},
            ]
        )
        assert [t.max_days for t in config.recency_tiers] == [30, 365]
