"""
Height-level colour lookup tables.
"""

import math
from typing import List, Sequence, Tuple

import numpy as np


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Parse ``#rrggbb`` into an RGB tuple."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Invalid hex colour: {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def rgb_to_hex(rgb: Sequence[float]) -> str:
    r, g, b = (int(min(255, max(0, round(c)))) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def palette_to_rgb(palette: Sequence[str]) -> np.ndarray:
    return np.array([hex_to_rgb(color) for color in palette], dtype=np.float64)


def interpolate_colour(start: Sequence[float], end: Sequence[float], fraction: float) -> Tuple[float, ...]:
    return tuple(s + (e - s) * fraction for s, e in zip(start, end))


def generate_height_level_colours(palette: Sequence[str], height_levels: int) -> List[str]:
    """
    Spread a palette linearly across all height levels.

    Args:
        palette: Base colours from lowest to highest terrain
        height_levels: Number of discrete levels

    Returns:
        One hex colour per height level
    """
    if not palette:
        raise ValueError("Palette must contain at least one colour")
    rgb = palette_to_rgb(palette)
    if len(rgb) == 1 or height_levels <= 1:
        return [rgb_to_hex(rgb[0])] * max(1, height_levels)

    last = len(rgb) - 1
    colours = []
    for level in range(height_levels):
        position = level / (height_levels - 1) * last
        index = min(last - 1, int(math.floor(position)))
        fraction = position - index
        colours.append(rgb_to_hex(interpolate_colour(rgb[index], rgb[index + 1], fraction)))
    return colours
