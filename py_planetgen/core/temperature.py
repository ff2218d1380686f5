"""
Surface temperature from stellar flux, albedo and a greenhouse factor.
"""

import math
from typing import Optional

import structlog

from ..config.generation_settings import TemperatureSettings
from ..config.reference_data import ReferenceData
from .atmosphere import Atmosphere, DensityClass

logger = structlog.get_logger()

STEFAN_BOLTZMANN = 5.670374419e-8  # W m^-2 K^-4
SOLAR_RADIUS = 6.957e8  # m
AU_IN_METERS = 1.495978707e11


def greenhouse_factor(atmosphere: Atmosphere, options: Optional[TemperatureSettings] = None) -> float:
    """Multiplicative warming from atmosphere density, pressure and key gases."""
    options = options or TemperatureSettings()
    pressure = atmosphere.pressure

    if atmosphere.density == DensityClass.THIN:
        factor = 1.05 + (pressure / 0.5) * 0.05
    elif atmosphere.density == DensityClass.EARTH_LIKE:
        factor = 1.10 + pressure * 0.15
    elif atmosphere.density == DensityClass.THICK:
        factor = 1.25 + (pressure / 2.0) * 0.35
    else:
        factor = 1.0

    co2 = atmosphere.percent("Carbon Dioxide")
    methane = atmosphere.percent("Methane")
    water = atmosphere.percent("Water Vapor")
    if co2 > 20 or methane > 5 or water > 1:
        factor *= 1.15
    if co2 > 80 or methane > 20 or water > 5:
        factor *= 1.25

    return min(options.max_greenhouse_factor, max(options.min_greenhouse_factor, factor))


def calculate_surface_temperature(
    planet_type: str,
    orbit_distance: float,
    star_type: str,
    atmosphere: Atmosphere,
    reference: ReferenceData,
    options: Optional[TemperatureSettings] = None,
) -> int:
    """
    Equilibrium temperature with greenhouse warming.

    Args:
        planet_type: Body type name
        orbit_distance: Orbital distance in AU
        star_type: Host star spectral class
        atmosphere: Atmosphere of the body
        reference: Reference tables
        options: Greenhouse limits

    Returns:
        Surface temperature in whole Kelvin, never below the configured floor
    """
    options = options or TemperatureSettings()
    type_info = reference.planet_type(planet_type)
    fallback = max(options.min_temperature, int(round(type_info.base_temp)))

    star = reference.spectral_type(star_type)
    star_radius = star.radius * SOLAR_RADIUS
    distance = orbit_distance * AU_IN_METERS

    if star.temperature <= 0 or star_radius <= 0 or not math.isfinite(distance) or distance <= 0:
        logger.error(
            "Invalid inputs for temperature calculation, using fallback",
            planet_type=planet_type,
            star_type=star_type,
            orbit_distance=orbit_distance,
            fallback=fallback,
        )
        return fallback

    luminosity = 4.0 * math.pi * star_radius ** 2 * STEFAN_BOLTZMANN * star.temperature ** 4
    flux = luminosity / (4.0 * math.pi * distance ** 2)
    absorbed = flux * (1.0 - type_info.albedo)
    if not math.isfinite(luminosity) or not math.isfinite(absorbed) or absorbed < 0:
        logger.error("Non-finite stellar flux, using fallback", planet_type=planet_type, fallback=fallback)
        return fallback

    equilibrium = (absorbed / STEFAN_BOLTZMANN) ** 0.25
    temperature = equilibrium * greenhouse_factor(atmosphere, options)
    if not math.isfinite(temperature):
        logger.error("Non-finite surface temperature, using fallback", planet_type=planet_type, fallback=fallback)
        return fallback

    return max(options.min_temperature, int(round(temperature)))
