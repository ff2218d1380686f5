"""
Physical base generation.

Diameter and density are rolled from per-type ranges; gravity, mass and
escape velocity are closed-form functions of those two values.
"""

import math
from dataclasses import dataclass

import structlog

from ..config.reference_data import ReferenceData
from .alea_prng import AleaPRNG

logger = structlog.get_logger()

GRAVITATIONAL_CONSTANT = 6.674e-11  # m^3 kg^-1 s^-2
EARTH_DENSITY = 5.51  # g/cm^3
EARTH_DIAMETER = 12742.0  # km
MIN_DIAMETER = 1000  # km
MIN_DENSITY = 0.1  # g/cm^3
MIN_GRAVITY = 0.01
MAX_GRAVITY = 10.0


def calculate_gravity(diameter: float, density: float) -> float:
    """Surface gravity relative to Earth, clamped to [0.01, 10]."""
    gravity = (density / EARTH_DENSITY) * (diameter / EARTH_DIAMETER)
    return min(MAX_GRAVITY, max(MIN_GRAVITY, gravity))


def calculate_mass(diameter: float, density: float) -> float:
    """Mass in kg of a uniform sphere with the given diameter (km) and density (g/cm3)."""
    radius_m = diameter * 1000.0 / 2.0
    volume = 4.0 / 3.0 * math.pi * radius_m ** 3
    return volume * density * 1000.0


def calculate_escape_velocity(diameter: float, density: float) -> float:
    """Escape velocity in m/s."""
    radius_m = diameter * 1000.0 / 2.0
    if radius_m <= 0:
        return 0.0
    mass = calculate_mass(diameter, density)
    return math.sqrt(2.0 * GRAVITATIONAL_CONSTANT * mass / radius_m)


@dataclass(frozen=True)
class PhysicalProperties:
    """Bulk properties of a body."""

    diameter: int  # km
    density: float  # g/cm^3

    @property
    def gravity(self) -> float:
        return calculate_gravity(self.diameter, self.density)

    @property
    def mass(self) -> float:
        return calculate_mass(self.diameter, self.density)

    @property
    def escape_velocity(self) -> float:
        return calculate_escape_velocity(self.diameter, self.density)


def generate_physical_base(prng: AleaPRNG, planet_type: str, reference: ReferenceData) -> PhysicalProperties:
    """
    Roll diameter and density for a body.

    Args:
        prng: PRNG for the physical sub-seed
        planet_type: Body type name
        reference: Reference tables

    Returns:
        PhysicalProperties with derived gravity and escape velocity
    """
    info = reference.planet_type(planet_type)

    min_diameter, max_diameter = info.diameter_range
    diameter = max(MIN_DIAMETER, prng.randint(min_diameter, max_diameter))

    min_density, max_density = info.density_range
    density = max(MIN_DENSITY, prng.random_range(min_density, max_density))

    physical = PhysicalProperties(diameter=diameter, density=density)
    logger.debug(
        "Generated physical base",
        planet_type=planet_type,
        diameter=diameter,
        density=round(density, 3),
        gravity=round(physical.gravity, 3),
        escape_velocity=round(physical.escape_velocity, 1),
    )
    return physical
