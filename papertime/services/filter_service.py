"""
Paper filtering service.

Filters papers by:
- Subject (arXiv category codes mapped from subject names)
- Paper type (venue evidence in the comment field)
- Boolean query over title, summary and authors

All three predicates must hold. Filtering never reorders the pool.
"""

from typing import Iterable, List, Sequence, Set, Union

from papertime.models.filters import (
    PAPER_TYPE_KEYWORDS,
    SUBJECT_CATEGORIES,
    FilterCriteria,
    FilterStats,
    PaperType,
)
from papertime.models.paper import Paper
from papertime.observability.logging import get_logger
from papertime.services.boolean_query import BooleanQuery, parse_query

logger = get_logger("filter")


def subject_categories(subjects: Iterable[str]) -> Set[str]:
    """Union of category codes for the given subject names (unknown names add none)."""
    codes: Set[str] = set()
    for subject in subjects:
        codes.update(SUBJECT_CATEGORIES.get(subject, ()))
    return codes


def searchable_text(paper: Paper) -> str:
    """Lowercased title, summary and author names."""
    return f"{paper.title} {paper.summary} {' '.join(paper.authors)}".lower()


def matches_subject_filter(paper: Paper, subjects: Sequence[str]) -> bool:
    if not subjects:
        return True

    codes = subject_categories(subjects)
    return any(code in category for category in paper.categories for code in codes)


def matches_paper_type_filter(paper: Paper, paper_types: Sequence[str]) -> bool:
    """Check comment-field evidence for at least one selected type.

    PREPRINT always matches, since every feed paper is a candidate preprint;
    selecting it therefore disables the type filter. Unrecognised labels also
    match.
    """
    if not paper_types:
        return True

    comment = (paper.comment or "").lower()

    for label in paper_types:
        paper_type = PaperType.from_label(label)
        if paper_type is None or paper_type == PaperType.PREPRINT:
            return True
        if any(keyword in comment for keyword in PAPER_TYPE_KEYWORDS[paper_type]):
            return True
    return False


def matches_boolean_query(paper: Paper, query: Union[str, BooleanQuery]) -> bool:
    if isinstance(query, str):
        query = parse_query(query)
    if query.is_empty:
        return True
    return query.matches(searchable_text(paper))


class FilterService:
    """Apply user filter criteria to a paper pool."""

    def __init__(self) -> None:
        self.stats = FilterStats()

    def apply_filters(
        self, papers: Sequence[Paper], criteria: FilterCriteria
    ) -> List[Paper]:
        """
        Keep the papers matching every predicate.

        Args:
            papers: Paper pool
            criteria: Selected subjects, types and query

        Returns:
            Matching papers in input order
        """
        self.stats = FilterStats(total_papers_input=len(papers))

        if criteria.is_empty:
            self.stats.papers_output = len(papers)
            return list(papers)

        query = parse_query(criteria.boolean_query)
        filtered = []

        for paper in papers:
            if not matches_subject_filter(paper, criteria.subjects):
                self.stats.rejected_by_subject += 1
                continue
            if not matches_paper_type_filter(paper, criteria.paper_types):
                self.stats.rejected_by_type += 1
                continue
            if not matches_boolean_query(paper, query):
                self.stats.rejected_by_query += 1
                continue
            filtered.append(paper)

        self.stats.papers_output = len(filtered)

        if not filtered:
            logger.warning("no_papers_after_filtering", original_count=len(papers))
        else:
            logger.info(
                "filters_applied",
                input=len(papers),
                output=len(filtered),
                subjects=len(criteria.subjects),
                paper_types=len(criteria.paper_types),
                has_query=bool(criteria.boolean_query.strip()),
            )

        return filtered

    def get_stats(self) -> FilterStats:
        return self.stats


def apply_filters(papers: Sequence[Paper], criteria: FilterCriteria) -> List[Paper]:
    """Filter ``papers`` with a throwaway FilterService."""
    return FilterService().apply_filters(papers, criteria)
