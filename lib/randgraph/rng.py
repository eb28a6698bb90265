"""
rng.py — Seeded random source for graph generation.

Provides:
  - make_rng(seed)        → np.random.Generator
  - RandomSource          → uniform / normal / Bernoulli / degree-weighted draws

Every generator and sampler takes a RandomSource explicitly; nothing here
touches numpy's global random state.
"""

from __future__ import annotations
from typing import Sequence
import numpy as np

from .errors import DegenerateDistribution, InvalidParameter

def make_rng(seed: int | None) -> np.random.Generator:
    """Construct a PCG64-based Generator. If seed is None, uses entropy."""
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(np.random.PCG64(seed))


class RandomSource:
    """Stateful draws over one Generator; results depend on draw order."""

    def __init__(self, generator: np.random.Generator | None = None):
        self.generator = generator if generator is not None else make_rng(None)

    @classmethod
    def from_seed(cls, seed: int | None) -> "RandomSource":
        return cls(make_rng(seed))

    def uniform(self, lo: float, hi: float) -> float:
        return float(self.generator.uniform(lo, hi))

    def uniform_int(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi], both ends inclusive."""
        if hi < lo:
            raise InvalidParameter(f"empty integer range [{lo}, {hi}]")
        return int(self.generator.integers(lo, hi, endpoint=True))

    def normal(self, mean: float, std: float) -> float:
        return float(self.generator.normal(mean, std))

    def bernoulli(self, p: float) -> bool:
        return bool(self.generator.random() < p)

    def weighted_index(self, weights: Sequence[float]) -> int:
        """
        Index i with probability weights[i] / sum(weights).

        Raises DegenerateDistribution when no weight is positive.
        """
        w = np.asarray(weights, dtype=np.float64)
        if w.size and np.any(w < 0):
            raise InvalidParameter("weights must be non-negative")
        total = float(w.sum()) if w.size else 0.0
        if total <= 0.0:
            raise DegenerateDistribution(
                f"weighted draw over {w.size} entries with zero total weight"
            )
        return int(self.generator.choice(w.size, p=w / total))
