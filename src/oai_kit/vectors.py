# src/oai_kit/vectors.py

"""Vector math for embedding outputs."""

import numpy as np

Vector = list[float]


def _as_array(v: Vector) -> np.ndarray:
    return np.asarray(v, dtype=np.float64)


def length(v: Vector) -> float:
    """Euclidean norm of `v`."""
    return float(np.sqrt(np.sum(np.square(_as_array(v)))))


def dot(a: Vector, b: Vector) -> float:
    """Dot product of `a` and `b`.

    Raises:
        ValueError: If the vectors differ in length.
    """
    if len(a) != len(b):
        raise ValueError(f"vector length mismatch: {len(a)} != {len(b)}")
    return float(np.dot(_as_array(a), _as_array(b)))


def cosine(a: Vector, b: Vector) -> float:
    """Cosine similarity of `a` and `b`.

    Returns nan when either vector is all-zero.
    """
    numerator = np.float64(dot(a, b))
    denominator = np.float64(length(a)) * np.float64(length(b))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(numerator / denominator)
