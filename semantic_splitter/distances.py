"""
Cosine distances between sequentially adjacent embeddings.

distance = 1 - cosine_similarity, so values fall in [0, 2]: 0 for vectors
pointing the same way, 1 for orthogonal vectors, 2 for opposite ones.
Arithmetic is plain Python floats (double precision).
"""

import math
from typing import Optional, Sequence

from .exceptions import DegenerateEmbeddingError, EmbeddingDimensionError

Embedding = Sequence[float]


def cosine_similarity(vec_a: Embedding, vec_b: Embedding) -> float:
    """
    Cosine similarity of two vectors of equal length.

    Raises:
        EmbeddingDimensionError: If the vectors differ in length.
        DegenerateEmbeddingError: If either vector has zero norm.
    """
    if len(vec_a) != len(vec_b):
        raise EmbeddingDimensionError(expected=len(vec_a), actual=len(vec_b), index=1)

    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for a, b in zip(vec_a, vec_b):
        dot += float(a) * float(b)
        norm_a += float(a) * float(a)
        norm_b += float(b) * float(b)
    # Single sqrt keeps identical vectors at a similarity of exactly 1.0
    denom = math.sqrt(norm_a * norm_b)
    if denom == 0.0:
        raise DegenerateEmbeddingError()
    return dot / denom


def cosine_distance(vec_a: Embedding, vec_b: Embedding) -> float:
    return 1 - cosine_similarity(vec_a, vec_b)


def calculate_sequential_distances(embeddings: Sequence[Embedding]) -> list[float]:
    """
    Distance between each embedding and the next one.

    Index ``i`` of the result is the gap between window ``i`` and ``i + 1``,
    so the result is one shorter than the input (empty for 0 or 1 inputs).
    """
    distances = []
    for i in range(len(embeddings) - 1):
        try:
            distances.append(cosine_distance(embeddings[i], embeddings[i + 1]))
        except DegenerateEmbeddingError as e:
            raise DegenerateEmbeddingError(index=_zero_norm_index(embeddings, i)) from e
    return distances


def _zero_norm_index(embeddings: Sequence[Embedding], i: int) -> Optional[int]:
    for idx in (i, i + 1):
        if not any(float(x) for x in embeddings[idx]):
            return idx
    return None
