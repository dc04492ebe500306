"""Similarity metrics between embeddings."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Sequence


def _check_lengths(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError("Vectors must be of the same length.")


class SimilarityMetric(ABC):
    """A score where larger means more alike."""

    @abstractmethod
    def compute(self, a: Sequence[float], b: Sequence[float]) -> float:
        """Return the similarity of two vectors of equal length."""


class DotProductSimilarity(SimilarityMetric):
    """Plain dot product."""

    def compute(self, a: Sequence[float], b: Sequence[float]) -> float:
        _check_lengths(a, b)
        return sum(x * y for x, y in zip(a, b))


class CosineSimilarity(SimilarityMetric):
    """Cosine of the angle between the vectors; 0 if either is a zero vector."""

    def compute(self, a: Sequence[float], b: Sequence[float]) -> float:
        _check_lengths(a, b)
        dot = sum(x * y for x, y in zip(a, b))
        norm_a = sum(x * x for x in a)
        norm_b = sum(y * y for y in b)
        if norm_a == 0.0 or norm_b == 0.0:
            return 0.0
        return dot / (math.sqrt(norm_a) * math.sqrt(norm_b))


class EuclideanSimilarity(SimilarityMetric):
    """exp(-distance), so identical vectors score 1."""

    def compute(self, a: Sequence[float], b: Sequence[float]) -> float:
        _check_lengths(a, b)
        return math.exp(-math.dist(a, b))