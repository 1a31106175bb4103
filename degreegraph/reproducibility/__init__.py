"""Reproducibility infrastructure: seed resolution and RNG construction."""

from degreegraph.reproducibility.seed import (
    make_rng,
    resolve_seed,
    set_seed,
    verify_seed_determinism,
)

__all__ = [
    "make_rng",
    "resolve_seed",
    "set_seed",
    "verify_seed_determinism",
]
