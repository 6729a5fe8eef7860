"""Shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from papertime.models.paper import Paper

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed evaluation time used by ranking tests"""
    return NOW


@pytest.fixture
def make_paper():
    """Factory for Paper records with sensible defaults"""

    def _make(
        paper_id="2401.00001",
        title="A Study of Things",
        summary="",
        authors=None,
        published=None,
        days_old=None,
        categories=None,
        comment=None,
    ):
        if published is None:
            published = NOW - timedelta(days=days_old if days_old is not None else 10)
        return Paper(
            id=paper_id,
            title=title,
            summary=summary,
            authors=authors or [],
            published=published,
            categories=categories or [],
            comment=comment,
        )

    return _make
