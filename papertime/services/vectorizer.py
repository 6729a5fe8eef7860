"""Turn a paper pool into aligned TF-IDF vectors."""

from typing import Dict, List, Sequence

import structlog

from papertime.models.paper import Paper
from papertime.services.tfidf import TfidfIndex

logger = structlog.get_logger()

# Paper id -> dense vector; all vectors share one vocabulary order.
VectorTable = Dict[str, List[float]]


def paper_text(paper: Paper) -> str:
    """Text indexed for a paper: title followed by summary."""
    return f"{paper.title} {paper.summary}"


def compute_vectors(papers: Sequence[Paper]) -> VectorTable:
    """Build one index over the pool and vectorize every paper against it.

    Args:
        papers: Paper pool (order defines document indices)

    Returns:
        Mapping from paper id to vector. If ids repeat, the later paper wins.
    """
    index = TfidfIndex.build(paper_text(paper) for paper in papers)

    vectors: VectorTable = {}
    for position, paper in enumerate(papers):
        vectors[paper.paper_id] = index.get_vector(position)

    logger.debug(
        "vectors_computed",
        papers=len(papers),
        vocabulary=index.vocabulary_size,
    )
    return vectors
