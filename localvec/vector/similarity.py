"""
Cosine similarity between two vectors, compared over their common prefix.
"""

from typing import Sequence, Union
import numpy as np

# Floor applied to each squared norm so zero and empty vectors score 0.0 instead of NaN
EPSILON = 1e-9

VectorLike = Union[np.ndarray, Sequence[float]]


def cosine(a: VectorLike, b: VectorLike) -> float:
    """Compute cosine similarity of `a` and `b`.

    Only the first min(len(a), len(b)) components of each vector are used;
    the tail of the longer vector is ignored. Each squared norm is floored
    at EPSILON, so a zero or empty operand yields a score near 0.0. Scores
    near zero are not meaningful when either operand may be all-zero.
    """
    a = np.asarray(a, dtype=np.float64).reshape(-1)
    b = np.asarray(b, dtype=np.float64).reshape(-1)
    n = min(a.shape[0], b.shape[0])
    a = a[:n]
    b = b[:n]

    dot = float(np.dot(a, b))
    norm_a = float(np.dot(a, a))
    norm_b = float(np.dot(b, b))
    denom = np.sqrt(max(norm_a, EPSILON)) * np.sqrt(max(norm_b, EPSILON))
    return dot / float(denom)
