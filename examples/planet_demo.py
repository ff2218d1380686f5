#!/usr/bin/env python3
"""
Demo script generating one planet of each type around a G-class star.
"""

import numpy as np
from py_planetgen import Planet
from py_planetgen.config import GenerationOptions, PlanetType


def main():
    """Demonstrate planet generation."""
    print("Py-PlanetGen Planet Generation Demo")
    print("=" * 40)

    options = GenerationOptions(map_size=64)
    distances = {
        PlanetType.MOLTEN: 0.3,
        PlanetType.ROCK: 1.0,
        PlanetType.OCEANIC: 1.1,
        PlanetType.LUNAR: 1.5,
        PlanetType.GAS_GIANT: 5.2,
        PlanetType.ICE_GIANT: 19.0,
        PlanetType.FROZEN: 30.0,
    }

    for planet_type, distance in distances.items():
        planet = Planet(
            name=f"Demo {planet_type.value}",
            planet_type=planet_type,
            orbit_distance=distance,
            star_type="G",
            seed=f"{planet_type.value}_demo",
            options=options,
        )
        planet.scan()

        print()
        for line in planet.get_scan_info():
            print(f"  {line}")

        surface = planet.ensure_surface_ready()
        if not surface.has_terrain:
            print("  Surface: none")
            continue

        heights = surface.heightmap
        deposits = np.count_nonzero(surface.element_map != "")
        print(f"  Height range: {heights.min()}-{heights.max()}")
        print(f"  Average height: {heights.mean():.1f}")
        print(f"  Deposit cells: {deposits} ({deposits / heights.size * 100:.1f}%)")


if __name__ == "__main__":
    main()
