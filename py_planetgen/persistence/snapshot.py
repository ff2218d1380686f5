"""
Convert planets to and from persisted records.

Terrain and element maps are not stored. A restored planet regenerates
them lazily from the stored sub-seeds and terrain settings, which
reproduces them exactly.
"""

from typing import Optional

import structlog

from ..config.generation_settings import GenerationOptions
from ..config.reference_data import ReferenceData
from ..core.atmosphere import Atmosphere, DensityClass
from ..core.characteristics import PlanetCharacteristics
from ..core.physical import PhysicalProperties
from ..core.planet import Planet
from ..core.resources import MineralRichness, ResourceProfile
from ..core.surface_descriptors import SurfaceDescriptors
from ..utils.random import SeedBundle
from .models import AtmosphereRecord, CharacteristicsRecord, PlanetRecord, SeedRecord, TerrainRecord

logger = structlog.get_logger()


def export_planet(planet: Planet) -> PlanetRecord:
    """Snapshot a planet, generating its characteristics if needed."""
    c = planet.characteristics
    characteristics = CharacteristicsRecord(
        diameter=c.physical.diameter,
        density=c.physical.density,
        atmosphere=AtmosphereRecord(
            density=int(c.atmosphere.density),
            pressure=c.atmosphere.pressure,
            composition=dict(c.atmosphere.composition),
        ),
        surface_temperature=c.surface_temperature,
        hydrosphere=c.surface.hydrosphere,
        lithosphere=c.surface.lithosphere,
        mineral_richness=int(c.resources.richness),
        base_minerals=c.resources.base_minerals,
        element_abundance=dict(c.resources.element_abundance),
    )
    return PlanetRecord(
        name=planet.name,
        planet_type=planet.planet_type,
        orbit_distance=planet.orbit_distance,
        star_type=planet.star_type,
        seeds=SeedRecord(**planet.seeds.as_dict()),
        terrain=TerrainRecord(
            map_size=planet.options.map_size,
            roughness=planet.options.roughness,
            height_levels=planet.options.height_levels,
            initial_range=planet.options.initial_range,
        ),
        characteristics=characteristics,
        scanned=planet.scanned,
        primary_resource=planet.primary_resource,
    )


def restore_planet(
    record: PlanetRecord,
    reference: Optional[ReferenceData] = None,
    options: Optional[GenerationOptions] = None,
) -> Planet:
    """
    Rebuild a planet from a record without regenerating its characteristics.

    Without explicit options the stored terrain settings are applied on top
    of the application settings, so the terrain regenerates as it was.
    """
    if options is None:
        options = GenerationOptions.from_settings().model_copy(update=record.terrain.model_dump())
    planet = Planet(
        name=record.name,
        planet_type=record.planet_type,
        orbit_distance=record.orbit_distance,
        star_type=record.star_type,
        seed=record.seeds.root,
        reference=reference,
        options=options,
        seeds=SeedBundle(**record.seeds.model_dump()),
    )

    rc = record.characteristics
    planet.attach_characteristics(PlanetCharacteristics(
        physical=PhysicalProperties(diameter=rc.diameter, density=rc.density),
        atmosphere=Atmosphere(
            density=DensityClass(rc.atmosphere.density),
            pressure=rc.atmosphere.pressure,
            composition=dict(rc.atmosphere.composition),
        ),
        surface_temperature=rc.surface_temperature,
        surface=SurfaceDescriptors(hydrosphere=rc.hydrosphere, lithosphere=rc.lithosphere),
        resources=ResourceProfile(
            richness=MineralRichness(rc.mineral_richness),
            base_minerals=rc.base_minerals,
            element_abundance=dict(rc.element_abundance),
        ),
    ))
    planet.scanned = record.scanned
    planet.primary_resource = record.primary_resource
    logger.debug("Restored planet", planet=record.name, seed=record.seeds.root)
    return planet


def planet_to_json(planet: Planet, indent: Optional[int] = None) -> str:
    return export_planet(planet).model_dump_json(indent=indent)


def planet_from_json(
    data: str,
    reference: Optional[ReferenceData] = None,
    options: Optional[GenerationOptions] = None,
) -> Planet:
    return restore_planet(PlanetRecord.model_validate_json(data), reference, options)
