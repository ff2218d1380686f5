"""
Planet entity.

A Planet is identified by its name, type, orbit, host star and root seed.
Its characteristics and surface are generated lazily on first access and
memoized, so revisiting a body always yields the same data.
"""

from typing import List, Optional

import numpy as np
import structlog

from ..config.generation_settings import GenerationOptions
from ..config.reference_data import GIANT_TYPES, ReferenceData, default_reference_data
from ..exceptions import InvalidGeneratedGeometryError, SurfaceGenerationError
from ..utils.random import SeedBundle
from .atmosphere import NO_ATMOSPHERE
from .characteristics import PlanetCharacteristics, generate_planet_characteristics
from .resources import determine_primary_resource
from .surface_generator import SurfaceData, generate_surface_data

logger = structlog.get_logger()


class Planet:
    """A generated planet or moon."""

    def __init__(
        self,
        name: str,
        planet_type: str,
        orbit_distance: float,
        star_type: str,
        seed: str,
        reference: Optional[ReferenceData] = None,
        options: Optional[GenerationOptions] = None,
        seeds: Optional[SeedBundle] = None,
    ):
        """
        Create a planet; nothing is generated until first use.

        Args:
            name: Display name
            planet_type: Body type name
            orbit_distance: Orbital distance in AU
            star_type: Host star spectral class
            seed: Root seed
            reference: Reference tables, defaults to the shipped ones
            options: Generation tunables, defaults to the application settings
            seeds: Pre-derived sub-seeds, e.g. when restoring a snapshot
        """
        self.name = name
        self.planet_type = str(getattr(planet_type, "value", planet_type))
        self.orbit_distance = orbit_distance
        self.star_type = star_type
        self.seed = str(seed)
        self.reference = reference or default_reference_data()
        self.options = options or GenerationOptions.from_settings()
        self.seeds = seeds or SeedBundle.from_root(self.seed)

        self.scanned = False
        self.primary_resource: Optional[str] = None

        self._characteristics: Optional[PlanetCharacteristics] = None
        self._surface: Optional[SurfaceData] = None

    def __repr__(self) -> str:
        return f"Planet(name={self.name!r}, type={self.planet_type!r}, seed={self.seed!r})"

    @property
    def is_giant(self) -> bool:
        return self.planet_type in GIANT_TYPES

    @property
    def characteristics(self) -> PlanetCharacteristics:
        """Characteristics bundle, generated once on first access."""
        if self._characteristics is None:
            self._characteristics = generate_planet_characteristics(
                self.planet_type,
                self.orbit_distance,
                self.star_type,
                self.seeds,
                self.reference,
                self.options,
            )
        return self._characteristics

    def attach_characteristics(self, characteristics: PlanetCharacteristics) -> None:
        """Use previously generated characteristics instead of generating them."""
        if self._characteristics is not None:
            raise ValueError(f"Characteristics of {self.name} are already set")
        self._characteristics = characteristics

    @property
    def surface_ready(self) -> bool:
        return self._surface is not None

    def ensure_surface_ready(self) -> SurfaceData:
        """
        Generate the surface if it has not been generated yet.

        Raises:
            SurfaceGenerationError: If the terrain could not be produced
        """
        if self._surface is None:
            try:
                self._surface = generate_surface_data(
                    self.planet_type, self.characteristics, self.seeds, self.reference, self.options
                )
            except InvalidGeneratedGeometryError as exc:
                logger.error("Surface generation failed", planet=self.name, error=str(exc))
                raise SurfaceGenerationError(f"Cannot generate surface for {self.name}") from exc
        return self._surface

    @property
    def heightmap(self) -> Optional[np.ndarray]:
        return self.ensure_surface_ready().heightmap

    @property
    def surface_element_map(self) -> Optional[np.ndarray]:
        return self.ensure_surface_ready().element_map

    @property
    def height_level_colours(self) -> List[str]:
        return self.ensure_surface_ready().height_level_colours

    def element_at(self, x: int, y: int) -> Optional[str]:
        """Element key deposited at a surface cell, or None."""
        element_map = self.surface_element_map
        if element_map is None:
            return None
        size = element_map.shape[0]
        if not (0 <= x < size and 0 <= y < size):
            return None
        key = str(element_map[y, x])
        return key or None

    def scan(self) -> str:
        """Mark the planet scanned and report its primary resource."""
        if not self.scanned:
            self.primary_resource = determine_primary_resource(self.characteristics.resources, self.reference)
            self.scanned = True
            logger.info("Planet scanned", planet=self.name, primary_resource=self.primary_resource)
        return self.primary_resource

    def _composition_text(self) -> str:
        composition = self.characteristics.atmosphere.composition
        if not composition or composition.get(NO_ATMOSPHERE) == 100.0:
            return "None"
        gases = sorted(
            ((gas, percent) for gas, percent in composition.items() if percent > 0),
            key=lambda item: item[1],
            reverse=True,
        )
        return ", ".join(f"{gas}:{percent}%" for gas, percent in gases) or "Trace Gases"

    def get_scan_info(self) -> List[str]:
        """Human-readable scan report, one line per entry."""
        c = self.characteristics
        atmosphere = c.atmosphere
        lines = [f"--- SCAN REPORT: {self.name} ---"]

        if self.is_giant:
            lines += [
                f"Type: {self.planet_type}",
                f"Diameter: {c.diameter} km | Gravity: {c.gravity:.2f} G (at 1 bar level)",
                f"Effective Temp: {c.surface_temperature} K (cloud tops)",
                f"Atmosphere: {atmosphere.density_name} ({atmosphere.pressure:.2f} bar at cloud tops)",
                f"Composition: {self._composition_text()}",
                f"Hydrosphere: {c.hydrosphere}",
                f"Lithosphere: {c.lithosphere}",
                f"Mineral Scan: {c.resources.richness_name}",
                "Refueling: Possible via atmospheric scoop.",
            ]
            return lines

        lines += [
            f"Type: {self.planet_type} Planet",
            f"Diameter: {c.diameter} km | Gravity: {c.gravity:.2f} G",
            f"Surface Temp (Avg): {c.surface_temperature} K",
            f"Atmosphere: {atmosphere.density_name} ({atmosphere.pressure:.2f} bar)",
            f"Composition: {self._composition_text()}",
            f"Hydrosphere: {c.hydrosphere}",
            f"Lithosphere: {c.lithosphere}",
        ]
        if self.scanned:
            lines.append(
                f"Mineral Scan: Richness {c.resources.richness_name}. "
                f"Primary Resource: {self.primary_resource or 'N/A'}."
            )
        else:
            lines.append(f"Mineral Scan: Requires planetary scan. Richness potential: {c.resources.richness_name}.")
        return lines
