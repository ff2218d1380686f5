"""
Seeded 2D gradient (Perlin) noise.

Lattice gradients are unit vectors whose angles come from a coordinate hash
of the noise seed, so any region can be sampled in one vectorised call and
the same seed always gives the same field.
"""

import math

import numpy as np

from ..utils.random import cell_hash, seed_to_int


def smootherstep(t: np.ndarray) -> np.ndarray:
    """Quintic fade curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


class PerlinNoise:
    """2D Perlin noise field for one seed."""

    def __init__(self, seed: str):
        self.seed = seed
        self._seed_int = seed_to_int(seed)

    def _gradient_dot(self, x: np.ndarray, y: np.ndarray, vx: np.ndarray, vy: np.ndarray) -> np.ndarray:
        # Lattice coordinates may be negative; the offset keeps them in uint range
        angle = cell_hash(vx + 0x40000000, vy + 0x40000000, self._seed_int).astype(np.float64)
        angle *= 2.0 * math.pi / 4294967296.0
        return (x - vx) * np.cos(angle) + (y - vy) * np.sin(angle)

    def sample(self, x, y) -> np.ndarray:
        """Raw noise in roughly [-0.71, 0.71] at the given coordinates."""
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        xf = np.floor(x).astype(np.int64)
        yf = np.floor(y).astype(np.int64)

        tl = self._gradient_dot(x, y, xf, yf)
        tr = self._gradient_dot(x, y, xf + 1, yf)
        bl = self._gradient_dot(x, y, xf, yf + 1)
        br = self._gradient_dot(x, y, xf + 1, yf + 1)

        sx = smootherstep(x - xf)
        sy = smootherstep(y - yf)
        top = tl + sx * (tr - tl)
        bottom = bl + sx * (br - bl)
        return top + sy * (bottom - top)

    def grid(self, size: int, scale: float) -> np.ndarray:
        """Noise in [0, 1] for every cell of a size x size grid."""
        coords = np.arange(size, dtype=np.float64) * scale
        xs, ys = np.meshgrid(coords, coords)
        values = (self.sample(xs, ys) * math.sqrt(2.0) + 1.0) / 2.0
        return np.clip(values, 0.0, 1.0)
