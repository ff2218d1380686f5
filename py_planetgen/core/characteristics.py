"""
Planet characteristics pipeline.

Runs the physical, atmosphere, temperature, surface descriptor and resource
stages in order, each on its own sub-seed.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from ..config.generation_settings import GenerationOptions
from ..config.reference_data import ReferenceData
from ..utils.random import SeedBundle
from .atmosphere import Atmosphere, generate_atmosphere
from .physical import PhysicalProperties, generate_physical_base
from .resources import ResourceProfile, generate_resources
from .surface_descriptors import SurfaceDescriptors, generate_surface_descriptors
from .temperature import calculate_surface_temperature

logger = structlog.get_logger()


@dataclass(frozen=True)
class PlanetCharacteristics:
    """Everything known about a body short of its terrain."""

    physical: PhysicalProperties
    atmosphere: Atmosphere
    surface_temperature: int
    surface: SurfaceDescriptors
    resources: ResourceProfile

    @property
    def diameter(self) -> int:
        return self.physical.diameter

    @property
    def gravity(self) -> float:
        return self.physical.gravity

    @property
    def hydrosphere(self) -> str:
        return self.surface.hydrosphere

    @property
    def lithosphere(self) -> str:
        return self.surface.lithosphere


def generate_planet_characteristics(
    planet_type: str,
    orbit_distance: float,
    star_type: str,
    seeds: SeedBundle,
    reference: ReferenceData,
    options: Optional[GenerationOptions] = None,
) -> PlanetCharacteristics:
    """
    Generate the characteristics bundle of one body.

    Args:
        planet_type: Body type name
        orbit_distance: Orbital distance in AU
        star_type: Host star spectral class
        seeds: Sub-seeds of the body
        reference: Reference tables
        options: Generation tunables

    Returns:
        PlanetCharacteristics
    """
    options = options or GenerationOptions()
    logger.info("Generating planet characteristics", planet_type=planet_type, seed=seeds.root)

    physical = generate_physical_base(seeds.prng("physical"), planet_type, reference)
    atmosphere = generate_atmosphere(
        seeds.prng("atmosphere"), planet_type, physical, star_type, reference, options.atmosphere
    )
    temperature = calculate_surface_temperature(
        planet_type, orbit_distance, star_type, atmosphere, reference, options.temperature
    )
    surface = generate_surface_descriptors(seeds.prng("surface"), planet_type, temperature, atmosphere.pressure)
    resources = generate_resources(
        seeds.prng("minerals"), planet_type, temperature, surface.lithosphere, physical.gravity, reference
    )

    logger.info(
        "Planet characteristics complete",
        planet_type=planet_type,
        diameter=physical.diameter,
        atmosphere=atmosphere.density_name,
        surface_temperature=temperature,
        richness=resources.richness_name,
    )
    return PlanetCharacteristics(
        physical=physical,
        atmosphere=atmosphere,
        surface_temperature=temperature,
        surface=surface,
        resources=resources,
    )
