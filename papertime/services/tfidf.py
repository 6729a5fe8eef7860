"""
TF-IDF index over a small in-memory corpus.

An index is built in one step from the full document sequence and is
immutable afterwards; only a built index exposes query methods. Vocabulary
order is the order in which terms were first seen while scanning the
documents, so it is identical for identical inputs.

    idf(t)    = ln(N / df(t))
    tf(t, d)  = count(t, d) / len(d)
    w(t, d)   = tf(t, d) * idf(t)
"""

import math
import re
from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import structlog

from papertime.utils.exceptions import IndexStateError

logger = structlog.get_logger()

MIN_TOKEN_LENGTH = 3

_NON_WORD = re.compile(r"[^\w\s]")


def tokenize(text: str) -> List[str]:
    """Lowercase, strip punctuation and drop tokens shorter than 3 characters.

    Args:
        text: Raw text

    Returns:
        Token list (empty for empty or whitespace-only text)
    """
    cleaned = _NON_WORD.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]


class TfidfIndex:
    """Immutable TF-IDF weights for one corpus snapshot.

    Vectors produced by different indexes are not comparable: each index has
    its own vocabulary and ordering.
    """

    __slots__ = ("_idf", "_weights", "_terms")

    def __init__(self, idf: Mapping[str, float], weights: Sequence[Mapping[str, float]]):
        self._idf: Mapping[str, float] = MappingProxyType(dict(idf))
        self._weights: Tuple[Mapping[str, float], ...] = tuple(
            MappingProxyType(dict(w)) for w in weights
        )
        self._terms: Tuple[str, ...] = tuple(self._idf)

    @classmethod
    def build(cls, documents: Iterable[str]) -> "TfidfIndex":
        """Build an index from a document sequence.

        Args:
            documents: Raw document texts, in corpus order

        Returns:
            Built index
        """
        tokenized = [tokenize(doc) for doc in documents]
        n_docs = len(tokenized)

        # Document frequency, keyed in first-discovery order
        doc_freq: Dict[str, int] = {}
        for tokens in tokenized:
            for term in dict.fromkeys(tokens):
                doc_freq[term] = doc_freq.get(term, 0) + 1

        idf = {term: math.log(n_docs / df) for term, df in doc_freq.items()}

        weights: List[Dict[str, float]] = []
        for tokens in tokenized:
            length = len(tokens)
            counts = Counter(tokens)
            weights.append(
                {term: (count / length) * idf[term] for term, count in counts.items()}
            )

        logger.debug("tfidf_index_built", documents=n_docs, vocabulary=len(idf))
        return cls(idf, weights)

    @property
    def document_count(self) -> int:
        return len(self._weights)

    @property
    def vocabulary_size(self) -> int:
        return len(self._terms)

    def idf(self, term: str) -> float:
        """Inverse document frequency of a term, 0.0 if unknown."""
        return self._idf.get(term, 0.0)

    def tfidf(self, term: str, document_index: int) -> float:
        """Weight of a term in a document.

        Returns 0.0 for unknown terms and out-of-range indices.
        """
        if document_index < 0 or document_index >= len(self._weights):
            return 0.0
        return self._weights[document_index].get(term, 0.0)

    def get_all_terms(self) -> List[str]:
        """Vocabulary in its fixed order."""
        return list(self._terms)

    def get_vector(self, document_index: int) -> List[float]:
        """Dense vector for a document, one entry per vocabulary term.

        Returns an empty list for out-of-range indices.
        """
        if document_index < 0 or document_index >= len(self._weights):
            return []
        weights = self._weights[document_index]
        return [weights.get(term, 0.0) for term in self._terms]


class CorpusBuilder:
    """Incremental front-end to TfidfIndex.build.

    Documents are lowercased and stored verbatim; tokenization happens at
    build time. Once built, the builder is frozen and further additions raise
    IndexStateError.
    """

    def __init__(self) -> None:
        self._documents: List[str] = []
        self._index: Optional[TfidfIndex] = None

    def add_document(self, text: str) -> None:
        if self._index is not None:
            raise IndexStateError("Cannot add documents after the index is built")
        self._documents.append(text.lower())

    @property
    def documents(self) -> Tuple[str, ...]:
        return tuple(self._documents)

    @property
    def is_built(self) -> bool:
        return self._index is not None

    def build(self) -> TfidfIndex:
        """Build (once) and return the index."""
        if self._index is None:
            self._index = TfidfIndex.build(self._documents)
        return self._index
