"""Pydantic records for persisted planets."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class SeedRecord(BaseModel):
    """Root seed and every derived sub-seed."""

    model_config = ConfigDict(frozen=True)

    root: str
    physical: str
    atmosphere: str
    surface: str
    minerals: str
    heightmap: str
    craters: str
    elements: str


class TerrainRecord(BaseModel):
    """Settings that shape the regenerated terrain."""

    model_config = ConfigDict(frozen=True)

    map_size: int = Field(gt=0, description="Side length of terrain grids")
    roughness: float = Field(gt=0.0, le=1.0)
    height_levels: int = Field(ge=2)
    initial_range: float = Field(gt=0.0)


class AtmosphereRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    density: int = Field(ge=0, le=3, description="DensityClass value")
    pressure: float = Field(ge=0.0, description="Surface pressure in bar")
    composition: Dict[str, float] = Field(default_factory=dict, description="Gas to percent")


class CharacteristicsRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    diameter: int = Field(description="Diameter in km")
    density: float = Field(description="Mean density in g/cm3")
    atmosphere: AtmosphereRecord
    surface_temperature: int = Field(description="Surface temperature in K")
    hydrosphere: str
    lithosphere: str
    mineral_richness: int = Field(ge=0, le=5, description="MineralRichness value")
    base_minerals: int = Field(ge=0)
    element_abundance: Dict[str, float] = Field(default_factory=dict, description="Element key to percent")


class PlanetRecord(BaseModel):
    """Everything needed to restore a planet without regenerating it."""

    model_config = ConfigDict(frozen=True)

    name: str
    planet_type: str
    orbit_distance: float = Field(description="Orbital distance in AU")
    star_type: str
    seeds: SeedRecord
    terrain: TerrainRecord
    characteristics: CharacteristicsRecord
    scanned: bool = False
    primary_resource: Optional[str] = None
