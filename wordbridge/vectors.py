"""Vector arithmetic for word embeddings."""

from __future__ import annotations

import math
from collections.abc import Sequence

EMBEDDING_DIM = 300
_NORM_EPSILON = 1e-6


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the similarity of two unit-length vectors, which is their dot product."""
    if len(a) != len(b):
        raise ValueError(f"vector lengths differ ({len(a)} vs {len(b)})")
    return sum(x * y for x, y in zip(a, b))


def normalize_vector(vec: Sequence[float]) -> tuple[float, ...]:
    """Scale a vector to unit length.

    A vector whose length is below 1e-6 is replaced by the uniform unit vector.
    """
    if not vec:
        raise ValueError("cannot normalize an empty vector")
    norm = math.sqrt(sum(x * x for x in vec))
    if norm < _NORM_EPSILON:
        component = 1.0 / math.sqrt(len(vec))
        return (component,) * len(vec)
    return tuple(x / norm for x in vec)