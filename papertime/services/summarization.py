"""Key-point extraction for paper cards."""

import re
from typing import List

MIN_SENTENCE_CHARS = 20
DEFAULT_MAX_POINTS = 5

ML_KEYWORDS = [
    "model", "learning", "neural", "network", "algorithm", "method", "approach",
    "deep", "training", "data", "performance", "accuracy", "evaluation",
    "experiment", "propose", "present", "introduce", "novel", "framework",
    "architecture",
]

_SENTENCE_END = re.compile(r"[.!?]+")


def _length_score(word_count: int) -> float:
    # Medium-length sentences carry the most information
    if 15 <= word_count <= 30:
        return 1.5
    if word_count < 10 or word_count > 40:
        return 0.5
    return 1.0


def _keyword_score(words: List[str]) -> float:
    matched = sum(1 for kw in ML_KEYWORDS if any(kw in word for word in words))
    return 1 + (matched / len(ML_KEYWORDS)) * 2


def extract_key_points(abstract: str, max_points: int = DEFAULT_MAX_POINTS) -> List[str]:
    """Pick the most informative sentences of an abstract.

    Sentences are scored by length, ML keyword coverage and position (earlier
    is better); the best ``max_points`` are returned in their original order.
    """
    if not abstract or not abstract.strip():
        return []

    sentences = [
        s.strip() for s in _SENTENCE_END.split(abstract) if len(s.strip()) > MIN_SENTENCE_CHARS
    ]
    if not sentences:
        return []

    scored = []
    for index, sentence in enumerate(sentences):
        words = sentence.lower().split()
        position = 1 + (1 - index / len(sentences)) * 0.5
        score = _length_score(len(words)) * _keyword_score(words) * position
        scored.append((score, index, sentence))

    top = sorted(scored, key=lambda item: item[0], reverse=True)[: max(0, max_points)]
    return [sentence for _, _, sentence in sorted(top, key=lambda item: item[1])]
