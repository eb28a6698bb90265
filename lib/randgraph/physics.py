# lib/randgraph/physics.py
"""
Mass-spring relaxation with an ambient noise force.

One tick:
  1. acceleration  = noise_norm * ambient_field(position)   (overwrites)
  2. per edge      stretch = d - rest_length * d/|d|,  d = tail - head
                   head += weight * stretch, tail -= weight * stretch
  3. velocity     += acceleration * dt
     position     += velocity * dt + 0.5 * acceleration * dt^2

Step 3 uses the already-updated velocity. Nothing is clamped.
"""
from __future__ import annotations

import numpy as np

from .config import SimConfig
from .graph import Graph
from .noise import PerlinNoise, ambient_field


def spring_stretch(graph: Graph) -> np.ndarray:
    """(E, 3) stretch vectors; a zero-length edge has zero stretch."""
    d = graph.positions[graph.tails] - graph.positions[graph.heads]
    length = np.linalg.norm(d, axis=1, keepdims=True)
    unit = np.divide(d, length, out=np.zeros_like(d), where=length > 0)
    return d - graph.rest_lengths[:, None] * unit


def accumulate_forces(graph: Graph, noise: PerlinNoise, noise_norm: float) -> None:
    """Overwrite graph.accelerations with ambient plus spring forces."""
    if graph.num_nodes == 0:
        return
    if noise_norm == 0:
        graph.accelerations[:] = 0.0
    else:
        graph.accelerations[:] = ambient_field(noise, graph.positions) * noise_norm

    if graph.num_edges:
        force = graph.weights[:, None] * spring_stretch(graph)
        np.add.at(graph.accelerations, graph.heads, force)
        np.subtract.at(graph.accelerations, graph.tails, force)


def integrate(graph: Graph, dt: float) -> None:
    graph.velocities += graph.accelerations * dt
    graph.positions += graph.velocities * dt + 0.5 * graph.accelerations * dt * dt


_DEFAULTS = SimConfig()
_default_noise: PerlinNoise | None = None


def _shared_noise() -> PerlinNoise:
    global _default_noise
    if _default_noise is None:
        _default_noise = PerlinNoise(_DEFAULTS.noise_seed)
    return _default_noise


def step(graph: Graph, dt: float, noise: PerlinNoise | None = None,
         noise_norm: float = _DEFAULTS.noise_norm) -> None:
    """
    Advance every node of `graph` by one tick of length `dt`, in place.

    Without `noise` the field seeded by the default `noise_seed` is used.
    """
    if noise is None:
        noise = _shared_noise()
    accumulate_forces(graph, noise, noise_norm)
    integrate(graph, dt)
