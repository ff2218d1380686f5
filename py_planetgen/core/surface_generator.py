"""
Surface generation: terrain, craters, element deposits and colours.
"""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import structlog

from ..config.generation_settings import GenerationOptions
from ..config.reference_data import PlanetType, ReferenceData
from ..utils.random import SeedBundle
from .atmosphere import DensityClass
from .characteristics import PlanetCharacteristics
from .heightmap_generator import HeightmapConfig, HeightmapGenerator, add_craters, validate_heightmap
from .surface_colours import generate_height_level_colours, palette_to_rgb
from .surface_descriptors import has_solid_surface
from .surface_elements import generate_surface_element_map

logger = structlog.get_logger()


@dataclass(frozen=True)
class SurfaceData:
    """Generated surface of a body; arrays are read-only."""

    heightmap: Optional[np.ndarray]
    element_map: Optional[np.ndarray]
    height_level_colours: List[str]
    palette_rgb: np.ndarray

    @property
    def has_terrain(self) -> bool:
        return self.heightmap is not None


def needs_craters(planet_type: str, characteristics: PlanetCharacteristics) -> bool:
    """Lunar bodies and airless rocky bodies are cratered."""
    if planet_type == PlanetType.LUNAR.value:
        return True
    return planet_type == PlanetType.ROCK.value and characteristics.atmosphere.density == DensityClass.NONE


def _freeze(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def generate_surface_data(
    planet_type: str,
    characteristics: PlanetCharacteristics,
    seeds: SeedBundle,
    reference: ReferenceData,
    options: Optional[GenerationOptions] = None,
) -> SurfaceData:
    """
    Generate terrain, element map and colour table for a body.

    Gas and ice giants get only the colour table.

    Raises:
        InvalidGeneratedGeometryError: If the terrain grid is empty or not square
    """
    options = options or GenerationOptions()
    palette = reference.palette(planet_type)
    colours = generate_height_level_colours(palette, options.height_levels)
    palette_rgb = _freeze(palette_to_rgb(palette))

    if not has_solid_surface(planet_type):
        logger.info("No solid surface, skipping terrain", planet_type=planet_type)
        return SurfaceData(heightmap=None, element_map=None, height_level_colours=colours, palette_rgb=palette_rgb)

    config = HeightmapConfig(
        target_size=options.map_size,
        roughness=options.roughness,
        height_levels=options.height_levels,
        initial_range=options.initial_range,
    )
    heights = HeightmapGenerator(config, seeds.heightmap).generate()
    validate_heightmap(heights, options.height_levels)

    if needs_craters(planet_type, characteristics):
        heights = add_craters(heights, seeds.prng("craters"), options.height_levels, options.craters)
        validate_heightmap(heights, options.height_levels)

    element_map = generate_surface_element_map(
        heights,
        characteristics.resources,
        seeds.elements,
        options.height_levels,
        reference,
        options.elements,
    )

    return SurfaceData(
        heightmap=_freeze(heights),
        element_map=_freeze(element_map),
        height_level_colours=colours,
        palette_rgb=palette_rgb,
    )
