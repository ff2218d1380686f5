"""
Tunable parameters for planet generation.

These values shape the procedural output but carry no physical meaning on
their own. Defaults come from the application settings so a deployment can
change map resolution without touching code.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import Settings, settings as default_settings


class AtmosphereSettings(BaseModel):
    """Thresholds used when generating atmospheres."""

    model_config = ConfigDict(frozen=True)

    escape_threshold_factor: float = Field(
        default=6.0, description="A gas escapes if thermal velocity times this factor exceeds escape velocity"
    )
    escape_penalty: float = Field(default=0.01, description="Weight multiplier for escaping primary candidates")
    earth_escape_velocity: float = Field(default=11200.0, description="Reference escape velocity in m/s")
    none_threshold: float = Field(default=0.2, description="Roll below this gives no atmosphere")
    thin_threshold: float = Field(default=0.5, description="Roll below this gives a thin atmosphere")
    earth_like_threshold: float = Field(default=0.85, description="Roll below this gives an Earth-like atmosphere")
    min_primary_percent: float = Field(default=50.0)
    max_primary_percent: float = Field(default=95.0)
    min_gases: int = Field(default=2, ge=1)
    max_gases: int = Field(default=6, ge=1)


class TemperatureSettings(BaseModel):
    """Limits for the greenhouse model."""

    model_config = ConfigDict(frozen=True)

    min_greenhouse_factor: float = Field(default=1.0)
    max_greenhouse_factor: float = Field(default=3.5)
    min_temperature: int = Field(default=2, description="Absolute floor for surface temperature in Kelvin")


class CraterSettings(BaseModel):
    """Impact crater overlay parameters."""

    model_config = ConfigDict(frozen=True)

    count_min_divisor: int = Field(default=15, gt=0)
    count_max_divisor: int = Field(default=5, gt=0)
    min_radius: int = Field(default=3, ge=1)
    max_radius_divisor: int = Field(default=10, gt=0)
    min_depth_factor: float = Field(default=0.5)
    max_depth_factor: float = Field(default=2.0)
    min_rim_factor: float = Field(default=0.1)
    max_rim_factor: float = Field(default=0.3)
    rim_peak: float = Field(default=0.85, description="Rim crest as a fraction of the radius")
    rim_width: float = Field(default=0.3, description="Rim half-width as a fraction of the radius")


class ElementMapSettings(BaseModel):
    """Surface deposit map parameters."""

    model_config = ConfigDict(frozen=True)

    cluster_noise_scale: float = Field(default=0.08, gt=0.0)
    richness_noise_scale: float = Field(default=0.15, gt=0.0)
    base_sparsity: float = Field(default=0.005, ge=0.0, le=1.0)
    richness_influence: float = Field(default=0.3, ge=0.0, le=1.0)
    lowland_volatile_height: float = Field(default=0.1, description="Normalised height below which volatiles thin out")
    lowland_volatile_melting_point: float = Field(default=300.0)
    lowland_volatile_penalty: float = Field(default=0.1)


class GenerationOptions(BaseModel):
    """All tunables for one generation run."""

    model_config = ConfigDict(frozen=True)

    map_size: int = Field(default=256, gt=0, description="Side length of terrain grids")
    roughness: float = Field(default=0.7, gt=0.0, le=1.0, description="Diamond-square roughness")
    height_levels: int = Field(default=256, ge=2, description="Number of discrete height levels")
    initial_range: float = Field(default=128.0, gt=0.0, description="Upper bound of corner seeds and first offset range")
    atmosphere: AtmosphereSettings = Field(default_factory=AtmosphereSettings)
    temperature: TemperatureSettings = Field(default_factory=TemperatureSettings)
    craters: CraterSettings = Field(default_factory=CraterSettings)
    elements: ElementMapSettings = Field(default_factory=ElementMapSettings)

    @classmethod
    def from_settings(cls, app_settings: Optional[Settings] = None) -> "GenerationOptions":
        app_settings = app_settings or default_settings
        return cls(
            map_size=app_settings.planet_map_base_size,
            roughness=app_settings.planet_surface_roughness,
            height_levels=app_settings.planet_height_levels,
        )
