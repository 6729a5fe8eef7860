"""Vector similarity helpers."""

import math
from typing import Sequence


def vector_norm(vector: Sequence[float]) -> float:
    """Euclidean norm."""
    return math.sqrt(sum(value * value for value in vector))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity of two vectors from the same index.

    Returns 0.0 when the lengths differ or either vector has zero norm.
    """
    if len(a) != len(b):
        return 0.0

    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for x, y in zip(a, b):
        dot += x * y
        norm_a += x * x
        norm_b += y * y

    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    similarity = dot / (math.sqrt(norm_a) * math.sqrt(norm_b))
    # Rounding can push identical vectors a hair past 1
    return max(-1.0, min(1.0, similarity))
