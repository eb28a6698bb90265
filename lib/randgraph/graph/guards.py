# lib/randgraph/graph/guards.py
from __future__ import annotations

import random

import numpy as np

from ..errors import InvalidParameter


def check_probability(name: str, p: float) -> None:
    if not (0.0 <= p <= 1.0):
        raise InvalidParameter(f"{name} must be in [0, 1], got {p}")


def check_fanout(name: str, k: int, num_nodes: int) -> None:
    """Per-node edge counts (m, k) must be positive and below the node count."""
    if k < 1:
        raise InvalidParameter(f"{name} must be >= 1, got {k}")
    if k >= num_nodes:
        raise InvalidParameter(f"{name} ({k}) must be smaller than num_nodes ({num_nodes})")


def assert_edge_indices(heads: np.ndarray, tails: np.ndarray, num_nodes: int) -> None:
    """Every edge endpoint must index into the node sequence."""
    if heads.size == 0:
        return
    lo = min(int(heads.min()), int(tails.min()))
    hi = max(int(heads.max()), int(tails.max()))
    if lo < 0 or hi >= num_nodes:
        raise AssertionError(
            f"Edge endpoint out of range: saw [{lo}, {hi}] with {num_nodes} nodes"
        )


def assert_rest_lengths(graph, sample_k: int = 500, tol: float = 1e-9) -> None:
    """
    Verify stored rest lengths match the Euclidean distances between the
    current node positions, for a random subset of edges. Only meaningful
    before the first physics tick.
    """
    edges = list(graph.edges)
    if not edges:
        return
    rng = random.Random(0x5EED)
    sample = rng.sample(edges, k=min(sample_k, len(edges)))
    pos = graph.positions
    for e in sample:
        dist = float(np.linalg.norm(pos[e.head] - pos[e.tail]))
        if abs(e.rest_length - dist) > tol * max(1.0, dist):
            raise AssertionError(
                f"Edge ({e.head},{e.tail}) rest length mismatch: "
                f"stored={e.rest_length:.6f}, euclid={dist:.6f}"
            )
