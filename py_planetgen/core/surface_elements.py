"""
Surface element (deposit) map generation.

Each terrain cell is either empty or holds the key of the single dominant
element found there. Most cells are empty: a richness noise field sets a
low per-cell deposit chance, and a cluster noise field per element makes
rare elements gather in localized patches.
"""

from typing import Optional

import numpy as np
import structlog

from ..config.generation_settings import ElementMapSettings
from ..config.reference_data import ElementInfo, ReferenceData
from ..utils.random import cell_random, seed_to_int
from .noise import PerlinNoise
from .resources import ResourceProfile

logger = structlog.get_logger()

EMPTY_CELL = ""
NON_LITHOPHILE_GROUPS = frozenset({"Gas", "Noble", "Ice"})


def cluster_affinity(element: ElementInfo, noise: np.ndarray) -> np.ndarray:
    """Weight multiplier from the element's cluster noise in [0, 1]."""
    if element.clustering == "peaked":
        return noise ** 3
    if element.clustering == "broad":
        return 0.8 + 0.4 * noise
    return np.ones_like(noise)


def altitude_factor(element: ElementInfo, height: np.ndarray) -> np.ndarray:
    """Weight multiplier from normalised height in [0, 1]."""
    if element.atomic_weight > 100:
        # Heavy elements settle in lowlands
        return 1.0 - 0.5 * height
    if element.group == "Ice":
        return height * height * 2.0
    if element.atomic_weight < 30 and element.group not in NON_LITHOPHILE_GROUPS:
        return 0.7 + 0.6 * height
    return np.ones_like(height)


def generate_surface_element_map(
    heights: np.ndarray,
    profile: ResourceProfile,
    seed: str,
    height_levels: int,
    reference: ReferenceData,
    options: Optional[ElementMapSettings] = None,
) -> np.ndarray:
    """
    Place element deposits on a heightmap.

    Args:
        heights: Square heightmap of integer levels
        profile: Resource profile of the body
        seed: Elements sub-seed of the body
        height_levels: Number of discrete height levels
        reference: Reference tables
        options: Noise scales and sparsity

    Returns:
        Unicode array of element keys, ``""`` for empty cells
    """
    options = options or ElementMapSettings()
    size = heights.shape[0]

    candidates = [
        (key, abundance, reference.elements[key])
        for key, abundance in profile.element_abundance.items()
        if abundance > 0 and key in reference.elements
    ]
    # Sized to the longest key so no key is truncated
    key_dtype = f"<U{max([1] + [len(key) for key, _, _ in candidates])}"
    element_map = np.full(heights.shape, EMPTY_CELL, dtype=key_dtype)
    if not candidates:
        logger.info("No elements to place on surface", size=size)
        return element_map

    ys, xs = np.indices(heights.shape)
    normalised = heights.astype(np.float64) / max(1, height_levels - 1)

    richness = PerlinNoise(f"{seed}_richness").grid(size, options.richness_noise_scale)
    threshold = options.base_sparsity + richness * options.richness_influence
    sparsity_roll = cell_random(xs, ys, seed_to_int(f"{seed}_sparsity"))
    active = sparsity_roll <= threshold

    weights = np.zeros((len(candidates),) + heights.shape, dtype=np.float64)
    for i, (key, abundance, element) in enumerate(candidates):
        cluster = PerlinNoise(f"{seed}_cluster_{key}").grid(size, options.cluster_noise_scale)
        weight = abundance * cluster_affinity(element, cluster) * altitude_factor(element, normalised)
        if element.melting_point < options.lowland_volatile_melting_point:
            weight = np.where(
                normalised < options.lowland_volatile_height,
                weight * options.lowland_volatile_penalty,
                weight,
            )
        weights[i] = weight

    cumulative = np.cumsum(weights, axis=0)
    total = cumulative[-1]
    pick_roll = cell_random(xs, ys, seed_to_int(f"{seed}_pick")) * total
    chosen = np.minimum((cumulative <= pick_roll[np.newaxis]).sum(axis=0), len(candidates) - 1)

    keys = np.array([key for key, _, _ in candidates], dtype=key_dtype)
    placed = active & (total > 0)
    element_map[placed] = keys[chosen[placed]]

    logger.info(
        "Generated surface element map",
        size=size,
        deposits=int(placed.sum()),
        element_types=len(np.unique(element_map[placed])),
    )
    return element_map
