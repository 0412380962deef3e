"""Graded rank-quality metrics at a cutoff.

- DCG@k with exponential gain (2^rel - 1) and log2 discount
- nDCG@k against a precomputed ideal DCG
- ERR@k (Chapelle et al., CIKM 2009) on a global grade scale

Gains are relevance grades in rank order. Cutoff truncation happens here,
callers pass the full sequence.
"""

import math
from collections.abc import Sequence

from grdeval.config import MAX_GRADE


class GradeError(ValueError):
    """Raised when a grade is outside 0..MAX_GRADE."""


def exp_gain(grade: int) -> int:
    """Exponential gain 2^grade - 1 for a grade in 0..MAX_GRADE."""
    if grade < 0 or grade > MAX_GRADE:
        raise GradeError(f"grade {grade} outside 0..{MAX_GRADE}")
    return 2**grade - 1


def dcg(k: int, gains: Sequence[int]) -> float:
    """Discounted Cumulative Gain over the first k positions."""
    score = 0.0
    for i, grade in enumerate(gains[:k]):
        score += exp_gain(grade) / math.log2(i + 2)
    return score


def ndcg(k: int, gains: Sequence[int], ideal: float) -> float:
    """DCG / ideal DCG. A topic without relevant judgments scores 0."""
    if ideal <= 0:
        return 0.0
    return dcg(k, gains) / ideal


def err(k: int, gains: Sequence[int], max_judgment: int) -> float:
    """Expected Reciprocal Rank over the first k positions.

    Relevance probability is exp_gain(grade) / 2^max_judgment, with
    max_judgment taken over the whole qrels so every topic shares one scale.
    """
    scale = 2 ** max(0, max_judgment)
    score = 0.0
    decay = 1.0
    for i, grade in enumerate(gains[:k]):
        r = exp_gain(grade) / scale
        score += r * decay / (i + 1)
        decay *= 1 - r
    return score
