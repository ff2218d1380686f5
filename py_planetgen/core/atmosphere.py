"""
Atmosphere generation.

This module implements:
- Density class selection constrained by escape velocity
- Surface pressure scaled by density class and gravity
- Gas composition with thermal escape filtering (Jeans-style criterion)
- Normalisation of composition to 100 percent at one decimal place
"""

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional

import structlog

from ..config.generation_settings import AtmosphereSettings
from ..config.reference_data import GIANT_TYPES, PlanetType, ReferenceData
from .alea_prng import AleaPRNG
from .physical import PhysicalProperties

logger = structlog.get_logger()

BOLTZMANN_CONSTANT = 1.380649e-23  # J/K
NO_ATMOSPHERE = "None"

COLD_ATMOSPHERE_LIMIT = 150.0  # K
HOT_ATMOSPHERE_LIMIT = 500.0  # K


class DensityClass(IntEnum):
    """Atmospheric density classes, ordered thinnest first."""

    NONE = 0
    THIN = 1
    EARTH_LIKE = 2
    THICK = 3


DENSITY_NAMES = {
    DensityClass.NONE: "None",
    DensityClass.THIN: "Thin",
    DensityClass.EARTH_LIKE: "Earth-like",
    DensityClass.THICK: "Thick",
}

# Candidate primary gases by temperature band
GIANT_PRIMARY_WEIGHTS = {"Hydrogen": 75.0, "Helium": 25.0}
COLD_PRIMARY_WEIGHTS = {"Nitrogen": 50.0, "Methane": 20.0, "Carbon Dioxide": 15.0, "Argon": 15.0}
HOT_PRIMARY_WEIGHTS = {"Carbon Dioxide": 50.0, "Nitrogen": 20.0, "Sulfur Dioxide": 15.0, "Water Vapor": 15.0}
TEMPERATE_PRIMARY_WEIGHTS = {"Nitrogen": 60.0, "Carbon Dioxide": 15.0, "Argon": 10.0, "Water Vapor": 15.0}


@dataclass(frozen=True)
class Atmosphere:
    """Generated atmosphere of a body."""

    density: DensityClass
    pressure: float  # bar
    composition: Dict[str, float] = field(default_factory=dict)  # gas -> percent

    @property
    def density_name(self) -> str:
        return DENSITY_NAMES[self.density]

    def percent(self, gas: str) -> float:
        return self.composition.get(gas, 0.0)


def thermal_velocity(temperature: float, molecular_mass: float) -> float:
    """RMS thermal velocity sqrt(3kT/m) in m/s."""
    if temperature <= 0 or molecular_mass <= 0:
        return 0.0
    return math.sqrt(3.0 * BOLTZMANN_CONSTANT * temperature / molecular_mass)


def gas_escapes(
    gas: str,
    temperature: float,
    escape_velocity: float,
    reference: ReferenceData,
    threshold_factor: float = 6.0,
) -> bool:
    """True if the gas would be lost to space at this temperature."""
    mass = reference.gas_mass(gas)
    if mass is None:
        return False
    return thermal_velocity(temperature, mass) * threshold_factor > escape_velocity


def determine_density_class(
    prng: AleaPRNG,
    planet_type: str,
    escape_velocity: float,
    options: AtmosphereSettings,
) -> DensityClass:
    """Roll a density class and constrain it by body type and escape velocity."""
    roll = prng.random()
    if roll < options.none_threshold:
        density = DensityClass.NONE
    elif roll < options.thin_threshold:
        density = DensityClass.THIN
    elif roll < options.earth_like_threshold:
        density = DensityClass.EARTH_LIKE
    else:
        density = DensityClass.THICK

    if planet_type in GIANT_TYPES:
        return DensityClass.THICK

    if planet_type in (PlanetType.LUNAR.value, PlanetType.MOLTEN.value):
        return prng.choice([DensityClass.NONE, DensityClass.NONE, DensityClass.THIN])

    earth_v = options.earth_escape_velocity
    if escape_velocity < earth_v * 0.3 and density > DensityClass.THIN:
        density = prng.choice([DensityClass.NONE, DensityClass.THIN])
    elif escape_velocity < earth_v * 0.7 and density > DensityClass.EARTH_LIKE:
        density = prng.choice([DensityClass.THIN, DensityClass.EARTH_LIKE])

    return density


def calculate_pressure(prng: AleaPRNG, density: DensityClass, gravity: float) -> float:
    """Surface pressure in bar; exactly zero without an atmosphere."""
    if density == DensityClass.NONE:
        return 0.0
    pressure = prng.random_range(0.01, 5.0) * (int(density) + 1) * math.sqrt(max(gravity, 0.0))
    return max(0.001, pressure)


def approximate_temperature(planet_type: str, star_type: str, reference: ReferenceData) -> float:
    """Rough surface temperature used only to pick gases."""
    base_temp = reference.planet_type(planet_type).base_temp
    star_temp = reference.spectral_type(star_type).temperature
    g_temp = reference.spectral_type("G").temperature
    if star_temp <= 0 or g_temp <= 0:
        return base_temp
    return base_temp * math.sqrt(star_temp / g_temp)


def primary_gas_weights(
    planet_type: str,
    temperature: float,
    escape_velocity: float,
    reference: ReferenceData,
    options: AtmosphereSettings,
) -> Dict[str, float]:
    """
    Candidate primary gases and their weights.

    Gases that would escape keep a token weight so that a body with no
    retainable candidate still gets an atmosphere.
    """
    if planet_type in GIANT_TYPES:
        base = GIANT_PRIMARY_WEIGHTS
    elif temperature < COLD_ATMOSPHERE_LIMIT:
        base = COLD_PRIMARY_WEIGHTS
    elif temperature > HOT_ATMOSPHERE_LIMIT:
        base = HOT_PRIMARY_WEIGHTS
    else:
        base = TEMPERATE_PRIMARY_WEIGHTS

    weights = {}
    for gas, weight in base.items():
        if gas_escapes(gas, temperature, escape_velocity, reference, options.escape_threshold_factor):
            weight *= options.escape_penalty
        weights[gas] = weight
    return weights


def _weighted_pick(prng: AleaPRNG, weights: Dict[str, float]) -> Optional[str]:
    total = sum(weights.values())
    if total <= 0:
        return None
    roll = prng.random() * total
    for gas, weight in weights.items():
        roll -= weight
        if roll < 0:
            return gas
    return list(weights)[-1]


def normalize_composition(raw: Dict[str, float], primary: Optional[str]) -> Dict[str, float]:
    """
    Scale a raw composition to 100 percent at one decimal place.

    The rounding residual is folded into the primary gas, or into the most
    abundant gas when the primary rounded away.
    """
    total = sum(raw.values())
    if total <= 0:
        if primary is not None and primary in raw:
            return {primary: 100.0}
        return {NO_ATMOSPHERE: 100.0}

    composition = {}
    for gas, amount in raw.items():
        percent = round(amount / total * 100.0, 1)
        if percent > 0:
            composition[gas] = percent

    residual = round(100.0 - sum(composition.values()), 1)
    if residual != 0 and composition:
        target = primary if primary in composition else max(composition, key=composition.get)
        adjusted = round(composition[target] + residual, 1)
        if adjusted > 0:
            composition[target] = adjusted
        else:
            del composition[target]

    final_total = sum(composition.values())
    if abs(final_total - 100.0) > 0.1:
        logger.warning("Atmosphere composition drift after normalisation", total=round(final_total, 3))
    return composition


def generate_composition(
    prng: AleaPRNG,
    planet_type: str,
    physical: PhysicalProperties,
    star_type: str,
    reference: ReferenceData,
    options: AtmosphereSettings,
) -> Dict[str, float]:
    """Pick a primary gas and fill the remainder with retainable secondary gases."""
    escape_velocity = physical.escape_velocity
    temperature = approximate_temperature(planet_type, star_type, reference)

    weights = primary_gas_weights(planet_type, temperature, escape_velocity, reference, options)
    primary = _weighted_pick(prng, weights)
    if primary is None:
        logger.warning("No primary gas candidates, defaulting to Nitrogen", planet_type=planet_type)
        primary = "Nitrogen"

    primary_percent = prng.random_range(options.min_primary_percent, options.max_primary_percent)
    raw = {primary: primary_percent}
    remaining = 100.0 - primary_percent

    num_gases = prng.randint(options.min_gases, options.max_gases)
    pool: List[str] = [
        gas
        for gas in reference.gas_names
        if gas != primary
        and not gas_escapes(gas, temperature, escape_velocity, reference, options.escape_threshold_factor)
    ]
    num_secondary = min(num_gases - 1, len(pool))

    for i in range(num_secondary):
        if remaining <= 0.1:
            break
        gas = pool.pop(int(prng.random() * len(pool)))
        if i == num_secondary - 1:
            share = remaining
        else:
            share = prng.random_range(0.1, remaining / 1.5)
        if share > 0.05:
            raw[gas] = raw.get(gas, 0.0) + share
            remaining -= share

    return normalize_composition(raw, primary)


def generate_atmosphere(
    prng: AleaPRNG,
    planet_type: str,
    physical: PhysicalProperties,
    star_type: str,
    reference: ReferenceData,
    options: Optional[AtmosphereSettings] = None,
) -> Atmosphere:
    """
    Generate density class, pressure and composition.

    Args:
        prng: PRNG for the atmosphere sub-seed
        planet_type: Body type name
        physical: Physical base of the body
        star_type: Host star spectral class
        reference: Reference tables
        options: Atmosphere thresholds

    Returns:
        Atmosphere
    """
    options = options or AtmosphereSettings()

    density = determine_density_class(prng, planet_type, physical.escape_velocity, options)
    pressure = calculate_pressure(prng, density, physical.gravity)

    if density == DensityClass.NONE:
        composition = {NO_ATMOSPHERE: 100.0}
    else:
        composition = generate_composition(prng, planet_type, physical, star_type, reference, options)

    logger.debug(
        "Generated atmosphere",
        planet_type=planet_type,
        density=DENSITY_NAMES[density],
        pressure=round(pressure, 3),
        gases=len(composition),
    )
    return Atmosphere(density=density, pressure=pressure, composition=composition)
