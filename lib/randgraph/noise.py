"""
noise.py — Smooth coherent noise for the ambient force field.

PerlinNoise is improved gradient noise (quintic fade, 12 edge gradients)
evaluated on whole numpy arrays at once. Output is signed, roughly [-1, 1],
and zero on integer lattice points. The permutation table comes from its own
seeded Generator so the field is the same from run to run regardless of how
graphs are drawn.
"""

from __future__ import annotations
import numpy as np

from .rng import make_rng

def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)

def _lerp(t: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a + t * (b - a)

def _grad(h: np.ndarray, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
    h = h & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
    return np.where(h & 1 == 0, u, -u) + np.where(h & 2 == 0, v, -v)


class PerlinNoise:
    def __init__(self, seed: int = 0):
        perm = make_rng(seed).permutation(256)
        self.seed = seed
        self._perm = np.concatenate([perm, perm]).astype(np.int64)

    def __call__(self, x, y, z) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        z = np.asarray(z, dtype=np.float64)

        fx, fy, fz = np.floor(x), np.floor(y), np.floor(z)
        X = fx.astype(np.int64) & 255
        Y = fy.astype(np.int64) & 255
        Z = fz.astype(np.int64) & 255
        x, y, z = x - fx, y - fy, z - fz
        u, v, w = _fade(x), _fade(y), _fade(z)

        p = self._perm
        A = p[X] + Y
        AA, AB = p[A] + Z, p[A + 1] + Z
        B = p[X + 1] + Y
        BA, BB = p[B] + Z, p[B + 1] + Z

        return _lerp(
            w,
            _lerp(
                v,
                _lerp(u, _grad(p[AA], x, y, z), _grad(p[BA], x - 1, y, z)),
                _lerp(u, _grad(p[AB], x, y - 1, z), _grad(p[BB], x - 1, y - 1, z)),
            ),
            _lerp(
                v,
                _lerp(u, _grad(p[AA + 1], x, y, z - 1), _grad(p[BA + 1], x - 1, y, z - 1)),
                _lerp(u, _grad(p[AB + 1], x, y - 1, z - 1), _grad(p[BB + 1], x - 1, y - 1, z - 1)),
            ),
        )


def ambient_field(noise: PerlinNoise, positions: np.ndarray) -> np.ndarray:
    """
    (N, 3) noise vectors at (N, 3) positions. Each axis samples the same
    field with the coordinates rotated: (x,y,z), (y,z,x), (z,x,y).
    """
    x, y, z = positions[:, 0], positions[:, 1], positions[:, 2]
    return np.stack([noise(x, y, z), noise(y, z, x), noise(z, x, y)], axis=1)
