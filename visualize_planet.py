#!/usr/bin/env python3
"""
Visualize a generated planet surface.
Renders the coloured heightmap next to the surface element deposits.
"""

import argparse

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from py_planetgen import Planet
from py_planetgen.config import GenerationOptions, PlanetType


def visualize_planet(planet_type="Lunar", seed="123456", distance=1.0, star="G", size=256, output=None):
    """
    Generate and visualize a planet surface.

    Args:
        planet_type: Planet type name
        seed: Random seed
        distance: Orbital distance in AU
        star: Host star spectral class
        size: Terrain side length
        output: Image path, shows a window when omitted
    """
    print(f"Generating {planet_type} planet (seed {seed})...")
    planet = Planet(
        name=f"{planet_type} {seed}",
        planet_type=planet_type,
        orbit_distance=distance,
        star_type=star,
        seed=seed,
        options=GenerationOptions(map_size=size),
    )
    surface = planet.ensure_surface_ready()
    if not surface.has_terrain:
        print("This body has no solid surface to draw")
        return

    heights = surface.heightmap
    element_map = surface.element_map
    print(f"Height range: {heights.min()}-{heights.max()}")

    terrain_cmap = ListedColormap(surface.height_level_colours)

    keys = sorted(set(element_map[element_map != ""].tolist()))
    element_index = np.zeros(element_map.shape, dtype=np.int32)
    for i, key in enumerate(keys, start=1):
        element_index[element_map == key] = i
    deposits = np.ma.masked_where(element_index == 0, element_index)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 7))

    ax1.imshow(heights, cmap=terrain_cmap, vmin=0, vmax=len(surface.height_level_colours) - 1)
    ax1.set_title(f"{planet.name}: terrain")
    ax1.axis("off")

    ax2.imshow(heights, cmap="gray", alpha=0.4)
    im = ax2.imshow(deposits, cmap="tab20", interpolation="nearest")
    ax2.set_title(f"Deposits ({len(keys)} elements)")
    ax2.axis("off")
    if keys:
        cbar = fig.colorbar(im, ax=ax2, ticks=range(1, len(keys) + 1), fraction=0.046)
        cbar.ax.set_yticklabels(keys)

    plt.tight_layout()
    if output:
        plt.savefig(output, dpi=150, bbox_inches="tight")
        print(f"Saved {output}")
    else:
        plt.show()


def main():
    parser = argparse.ArgumentParser(description="Visualize a generated planet surface")
    parser.add_argument("--type", default=PlanetType.LUNAR.value, choices=[t.value for t in PlanetType])
    parser.add_argument("--seed", default="123456")
    parser.add_argument("--distance", type=float, default=1.0)
    parser.add_argument("--star", default="G")
    parser.add_argument("--size", type=int, default=256)
    parser.add_argument("--output", help="Save to this image file instead of showing")

    args = parser.parse_args()

    visualize_planet(args.type, args.seed, args.distance, args.star, args.size, args.output)


if __name__ == "__main__":
    main()
