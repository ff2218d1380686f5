"""
Command line interface.

    py-planetgen planet --seed abc --type Rock --distance 1.0 --star G --surface
    py-planetgen system --seed abc
"""

import argparse
import sys
from typing import List, Optional

import numpy as np

from .config.config import settings
from .config.generation_settings import GenerationOptions
from .config.reference_data import PlanetType
from .core.planet import Planet
from .core.star_system import StarSystem
from .exceptions import SurfaceGenerationError
from .persistence import planet_to_json
from .utils.logging import configure_logging


def _surface_summary(planet: Planet) -> List[str]:
    surface = planet.ensure_surface_ready()
    if not surface.has_terrain:
        return ["Surface: none (gaseous body)"]

    heights = surface.heightmap
    element_map = surface.element_map
    deposits = element_map[element_map != ""]
    lines = [
        f"Surface: {heights.shape[0]}x{heights.shape[1]} cells, "
        f"heights {int(heights.min())}-{int(heights.max())} (mean {heights.mean():.1f})",
        f"Deposits: {deposits.size} cells ({deposits.size / element_map.size:.1%})",
    ]
    if deposits.size:
        keys, counts = np.unique(deposits, return_counts=True)
        top = sorted(zip(keys, counts), key=lambda item: item[1], reverse=True)[:5]
        lines.append("Top deposits: " + ", ".join(f"{key} x{count}" for key, count in top))
    return lines


def run_planet(args: argparse.Namespace, options: GenerationOptions) -> int:
    planet = Planet(
        name=args.name or f"Planet {args.seed}",
        planet_type=args.type,
        orbit_distance=args.distance,
        star_type=args.star,
        seed=args.seed,
        options=options,
    )
    if args.scan:
        planet.scan()

    if args.json:
        print(planet_to_json(planet, indent=2))
        return 0

    for line in planet.get_scan_info():
        print(line)

    if args.surface:
        try:
            for line in _surface_summary(planet):
                print(line)
        except SurfaceGenerationError as exc:
            print(str(exc), file=sys.stderr)
            return 1
    return 0


def run_system(args: argparse.Namespace, options: GenerationOptions) -> int:
    system = StarSystem(args.seed, options=options)
    system.generate_all(max_workers=args.workers)

    print(f"=== {system.name} (class {system.star_type}) ===")
    for slot, planet in enumerate(system.planets, start=1):
        if planet is None:
            print(f"{slot:>2}. --")
            continue
        c = planet.characteristics
        print(
            f"{slot:>2}. {planet.name:<22} {planet.planet_type:<9} {planet.orbit_distance:6.2f} AU "
            f"{c.surface_temperature:>5} K  {c.atmosphere.density_name:<10} {c.resources.richness_name}"
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate procedural planets and star systems")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument("--log-format", default="plain", help="Logging format (plain or json)")
    parser.add_argument("--map-size", type=int, default=settings.planet_map_base_size, help="Terrain side length")
    subparsers = parser.add_subparsers(dest="command", required=True)

    planet = subparsers.add_parser("planet", help="Generate a single planet")
    planet.add_argument("--seed", default=settings.default_seed, help="Root seed")
    planet.add_argument("--name", help="Planet name")
    planet.add_argument(
        "--type", default=PlanetType.ROCK.value, choices=[t.value for t in PlanetType], help="Planet type"
    )
    planet.add_argument("--distance", type=float, default=1.0, help="Orbital distance in AU")
    planet.add_argument("--star", default="G", help="Host star spectral class")
    planet.add_argument("--scan", action="store_true", help="Scan for the primary resource")
    planet.add_argument("--surface", action="store_true", help="Generate and summarise the surface")
    planet.add_argument("--json", action="store_true", help="Print the planet snapshot as JSON")

    system = subparsers.add_parser("system", help="Generate a star system")
    system.add_argument("--seed", default=settings.default_seed, help="System seed")
    system.add_argument("--workers", type=int, default=None, help="Worker threads")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_format)

    options = GenerationOptions.from_settings().model_copy(update={"map_size": args.map_size})
    if args.command == "planet":
        return run_planet(args, options)
    return run_system(args, options)


if __name__ == "__main__":
    sys.exit(main())
