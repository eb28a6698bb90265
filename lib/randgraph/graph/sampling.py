# lib/randgraph/graph/sampling.py
from __future__ import annotations

import math

from ..rng import RandomSource
from . import Node


def sample_node(
    rng: RandomSource,
    radius_mean: float,
    radius_std: float,
    uniform_sphere: bool = False,
) -> Node:
    """
    One node at rest on a noisy spherical shell.

    radius ~ N(radius_mean, radius_std), phi ~ U(-pi, pi). By default theta is
    also U(-pi, pi), which piles nodes up near the poles; with uniform_sphere
    theta = arccos(U(-1, 1)) gives uniform directions instead. Draw order is
    radius, theta, phi in both cases.
    """
    radius = rng.normal(radius_mean, radius_std)
    if uniform_sphere:
        theta = math.acos(rng.uniform(-1.0, 1.0))
    else:
        theta = rng.uniform(-math.pi, math.pi)
    phi = rng.uniform(-math.pi, math.pi)

    return Node.at_rest((
        radius * math.sin(theta) * math.cos(phi),
        radius * math.sin(theta) * math.sin(phi),
        radius * math.cos(theta),
    ))
