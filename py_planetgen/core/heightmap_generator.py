"""
Heightmap generation module for planetary surfaces.

This module implements:
- Diamond-square midpoint displacement on a toroidal (2^n + 1) grid
- Normalisation to discrete integer height levels
- Impact crater overlay with cosine depression and rim profiles

All steps are vectorised with NumPy; randomness comes from AleaPRNG.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np
import structlog

from ..config.generation_settings import CraterSettings
from ..exceptions import InvalidGeneratedGeometryError
from .alea_prng import AleaPRNG

logger = structlog.get_logger()


@dataclass
class HeightmapConfig:
    """Configuration for heightmap generation."""

    target_size: int = 256
    roughness: float = 0.7
    height_levels: int = 256
    initial_range: float = 128.0


class HeightmapGenerator:
    """
    Generates square heightmaps with the diamond-square algorithm.

    The working grid has side 2^n + 1, the smallest such size covering the
    target, and is cropped to the target before normalisation.
    """

    def __init__(self, config: HeightmapConfig, seed: str):
        """
        Initialize the heightmap generator.

        Args:
            config: Heightmap configuration
            seed: Heightmap sub-seed of the body
        """
        if config.target_size <= 0:
            raise ValueError(f"Heightmap target size must be positive, got {config.target_size}")
        if config.height_levels < 2:
            raise ValueError(f"At least two height levels are required, got {config.height_levels}")

        self.config = config
        self.roughness = min(1.0, max(0.0, config.roughness))

        power = 0
        while (1 << power) + 1 < config.target_size:
            power += 1
        self.size = max(3, (1 << power) + 1)
        self.max = self.size - 1

        self.heights = np.zeros((self.size, self.size), dtype=np.float64)
        self._prng = AleaPRNG(seed)

    def _rand(self, min_val: float, max_val: float) -> float:
        return self._prng.random_range(min_val, max_val)

    def _offsets(self, count: int, value_range: float) -> np.ndarray:
        return self._prng.random_array(count, -value_range, value_range)

    def _diamond_step(self, step: int, half: int, value_range: float) -> None:
        """Set each square centre to the mean of its corners plus an offset."""
        centres = np.arange(half, self.max, step)
        ys, xs = np.meshgrid(centres, centres, indexing="ij")
        ys = ys.ravel()
        xs = xs.ravel()

        h = self.heights
        avg = (
            h[ys - half, xs - half]
            + h[ys - half, xs + half]
            + h[ys + half, xs - half]
            + h[ys + half, xs + half]
        ) / 4.0
        h[ys, xs] = avg + self._offsets(len(ys), value_range)

    def _square_step(self, step: int, half: int, value_range: float) -> None:
        """Set each edge midpoint to the mean of its four neighbours plus an offset."""
        coords = np.arange(0, self.size, half)
        ys, xs = np.meshgrid(coords, coords, indexing="ij")
        # Exactly one of the two coordinates is an odd multiple of half
        mask = ((ys // half + xs // half) % 2) == 1
        ys = ys[mask]
        xs = xs[mask]

        wrap = self.max
        h = self.heights
        avg = (
            h[(ys - half) % wrap, xs]
            + h[ys, (xs + half) % wrap]
            + h[(ys + half) % wrap, xs]
            + h[ys, (xs - half) % wrap]
        ) / 4.0
        h[ys, xs] = avg + self._offsets(len(ys), value_range)

    def _normalize(self, grid: np.ndarray) -> np.ndarray:
        """Map raw heights onto integer levels [0, height_levels - 1]."""
        top = self.config.height_levels - 1
        low = float(grid.min())
        high = float(grid.max())
        if not math.isfinite(low) or not math.isfinite(high) or high - low <= 0:
            logger.warning("Flat heightmap, using midpoint level", levels=self.config.height_levels)
            return np.full(grid.shape, top // 2, dtype=np.int32)
        scaled = np.round((grid - low) / (high - low) * top)
        return np.clip(scaled, 0, top).astype(np.int32)

    def generate(self) -> np.ndarray:
        """
        Run diamond-square and return the normalised heightmap.

        Returns:
            Square int32 array of side ``target_size``
        """
        logger.info(
            "Generating heightmap",
            working_size=self.size,
            target_size=self.config.target_size,
            roughness=self.roughness,
        )
        initial = self.config.initial_range
        self.heights[0, 0] = self._rand(1, initial)
        self.heights[0, self.max] = self._rand(1, initial)
        self.heights[self.max, 0] = self._rand(1, initial)
        self.heights[self.max, self.max] = self._rand(1, initial)

        step = self.max
        value_range = initial
        while step // 2 >= 1:
            half = step // 2
            self._diamond_step(step, half, value_range)
            self._square_step(step, half, value_range)
            value_range = max(1.0, value_range * self.roughness)
            step = half

        target = self.config.target_size
        return self._normalize(self.heights[:target, :target])


def crater_count_range(size: int, options: CraterSettings):
    low = size // options.count_min_divisor
    high = max(low, size // options.count_max_divisor)
    return low, high


def add_craters(
    heights: np.ndarray,
    prng: AleaPRNG,
    height_levels: int,
    options: Optional[CraterSettings] = None,
) -> np.ndarray:
    """
    Overlay impact craters on a heightmap.

    Craters accumulate onto the current heights, may overlap, and every
    affected cell is clamped back into the valid level range.

    Args:
        heights: Square heightmap of integer levels
        prng: PRNG for the craters sub-seed
        height_levels: Number of discrete levels
        options: Crater shape parameters

    Returns:
        New int32 heightmap with craters applied
    """
    options = options or CraterSettings()
    result = np.array(heights, dtype=np.float64)
    size = result.shape[0]
    top = height_levels - 1

    low, high = crater_count_range(size, options)
    count = prng.randint(low, high)
    logger.info("Adding craters", count=count, size=size)

    max_radius = max(5, size // options.max_radius_divisor)
    for _ in range(count):
        radius = prng.randint(options.min_radius, max_radius)
        cx = prng.randint(0, size - 1)
        cy = prng.randint(0, size - 1)
        depth_factor = prng.random_range(options.min_depth_factor, options.max_depth_factor)
        rim_factor = prng.random_range(options.min_rim_factor, options.max_rim_factor)
        _apply_crater(result, cx, cy, radius, depth_factor, rim_factor, top, options)

    return result.astype(np.int32)


def _apply_crater(
    grid: np.ndarray,
    cx: int,
    cy: int,
    radius: int,
    depth_factor: float,
    rim_factor: float,
    top: int,
    options: CraterSettings,
) -> None:
    max_depth = radius * depth_factor
    rim_height = max_depth * rim_factor
    rim_peak = radius * options.rim_peak
    rim_width = radius * options.rim_width

    size = grid.shape[0]
    reach = radius + 2
    y0, y1 = max(0, cy - reach), min(size, cy + reach + 1)
    x0, x1 = max(0, cx - reach), min(size, cx + reach + 1)
    if y0 >= y1 or x0 >= x1:
        return

    ys, xs = np.mgrid[y0:y1, x0:x1]
    dist = np.sqrt((xs - cx) ** 2 + (ys - cy) ** 2)

    delta = np.zeros_like(dist)
    inside = dist < radius
    delta[inside] -= max_depth * (np.cos(dist[inside] / radius * math.pi) + 1.0) / 2.0

    on_rim = np.abs(dist - rim_peak) < rim_width
    delta[on_rim] += rim_height * (np.cos((dist[on_rim] - rim_peak) / rim_width * math.pi) + 1.0) / 2.0

    affected = dist <= radius + 1
    region = grid[y0:y1, x0:x1]
    region[affected] = np.clip(np.round(region[affected] + delta[affected]), 0, top)


def validate_heightmap(heights: Union[np.ndarray, None], height_levels: int) -> np.ndarray:
    """
    Check that a heightmap is a non-empty square grid of valid levels.

    Raises:
        InvalidGeneratedGeometryError: If the grid is empty, not square or out of range
    """
    if heights is None:
        raise InvalidGeneratedGeometryError("Heightmap generator returned no data")
    heights = np.asarray(heights)
    if heights.ndim != 2 or heights.size == 0:
        raise InvalidGeneratedGeometryError(f"Heightmap has invalid shape {heights.shape}")
    if heights.shape[0] != heights.shape[1]:
        raise InvalidGeneratedGeometryError(f"Heightmap is not square: {heights.shape}")
    if heights.min() < 0 or heights.max() > height_levels - 1:
        raise InvalidGeneratedGeometryError(
            f"Heightmap values outside [0, {height_levels - 1}]: "
            f"[{heights.min()}, {heights.max()}]"
        )
    return heights
