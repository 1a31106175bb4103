"""Random candidate degree sequences (not necessarily graphical)."""

import numpy as np


def generate_degree_sequence(n: int, rng: np.random.Generator) -> np.ndarray:
    """Draw n degrees uniformly from [0, n-1] and sort them non-increasing.

    No attempt is made to keep the sequence graphical; the realizer decides
    that.

    Args:
        n: Number of vertices.
        rng: numpy random Generator for reproducibility.

    Returns:
        int64 array of shape (n,), sorted non-increasing.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if n == 0:
        return np.zeros(0, dtype=np.int64)
    degrees = rng.integers(0, n, size=n, dtype=np.int64)
    return np.sort(degrees)[::-1].copy()


def is_non_increasing(degrees) -> bool:
    """True if every entry is >= the one after it."""
    arr = np.asarray(degrees)
    return bool(np.all(arr[:-1] >= arr[1:])) if arr.size > 1 else True
