"""Centralized seed management for reproducible runs.

Every random draw in the toolkit goes through a numpy Generator built from a
single master seed. The master seed is either supplied by the caller or
derived from the wall clock, and is always reported back so a run can be
replayed exactly.
"""

import logging
import random
import time

import numpy as np

log = logging.getLogger(__name__)

# Keep derived seeds inside the range numpy's legacy seeding accepts.
_SEED_MODULUS = 2**32


def resolve_seed(seed: int | None = None) -> int:
    """Return seed unchanged, or a wall-clock seed when seed is None."""
    if seed is not None:
        return int(seed)
    resolved = time.time_ns() % _SEED_MODULUS
    log.debug("No seed supplied, using wall-clock seed %d", resolved)
    return resolved


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Build a numpy Generator from a master seed (None = wall clock)."""
    return np.random.default_rng(resolve_seed(seed))


def set_seed(seed: int) -> None:
    """Seed the process-wide RNGs (Python random, NumPy legacy global).

    Pipeline runs never call this; they draw only from injected Generators.
    Callers mixing the toolkit with code that reads the global state seed
    it here.

    Args:
        seed: Master seed value.
    """
    random.seed(seed)
    np.random.seed(seed % _SEED_MODULUS)


def verify_seed_determinism(seed: int) -> bool:
    """Check that re-seeding reproduces identical draws.

    Draws 10 values from Python random, the NumPy global RNG and a
    make_rng Generator, re-seeds, draws again, and compares.

    Args:
        seed: Seed value to test.

    Returns:
        True if every source produced identical sequences.
    """
    set_seed(seed)
    r1 = [random.random() for _ in range(10)]
    n1 = np.random.rand(10).tolist()
    g1 = make_rng(seed).integers(0, 1000, size=10).tolist()

    set_seed(seed)
    r2 = [random.random() for _ in range(10)]
    n2 = np.random.rand(10).tolist()
    g2 = make_rng(seed).integers(0, 1000, size=10).tolist()

    return r1 == r2 and n1 == n2 and g1 == g2
