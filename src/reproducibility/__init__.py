"""Reproducibility infrastructure: seeded random sources and determinism checks."""

from src.reproducibility.seed import make_rng, set_seed, verify_walk_determinism

__all__ = [
    "make_rng",
    "set_seed",
    "verify_walk_determinism",
]
