"""
Hydrosphere and lithosphere descriptors.

Both are short human-readable strings chosen from a fixed vocabulary by
body type, temperature and pressure.
"""

from dataclasses import dataclass

import structlog

from ..config.reference_data import GIANT_TYPES, PlanetType
from .alea_prng import AleaPRNG

logger = structlog.get_logger()

FREEZING_POINT = 273.15  # K
BOILING_POINT = 373.15  # K at 1 bar
BOILING_POINT_PER_BAR = 35.0  # K
TRIPLE_POINT_PRESSURE = 0.006  # bar
LIQUID_WATER_PRESSURE = 0.01  # bar
SUPERCRITICAL_PRESSURE = 5.0  # bar
SUPERCRITICAL_CHANCE = 0.3

UNKNOWN_COMPOSITION = "Unknown Composition"

FIXED_HYDROSPHERES = {
    PlanetType.OCEANIC.value: "Global Saline Ocean",
    PlanetType.FROZEN.value: "Global Ice Sheet, Subsurface Ocean Possible",
    PlanetType.MOLTEN.value: "None",
    PlanetType.LUNAR.value: "None",
    PlanetType.GAS_GIANT.value: "N/A (Gaseous/Fluid Interior)",
    PlanetType.ICE_GIANT.value: "N/A (Gaseous/Fluid Interior)",
}

COLD_HYDROSPHERES = ["Polar Ice Caps, Surface Ice Deposits", "Scattered Subsurface Ice Pockets"]
LIQUID_HYDROSPHERES = [
    "Arid, Trace Liquid Water Possible",
    "Lakes, Rivers, Small Seas",
    "Significant Oceans and Seas",
]

LITHOSPHERES = {
    PlanetType.MOLTEN.value: ["Silicate Lava Flows, Rapidly Cooling Crust"],
    PlanetType.ROCK.value: [
        "Silicate Rock (Granite/Basalt), Tectonically Active?",
        "Carbonaceous Rock, Sedimentary Layers, Fossil Potential?",
        "Iron-Rich Crust, Evidence of Metallic Core",
    ],
    PlanetType.OCEANIC.value: ["Submerged Silicate Crust, Probable Hydrothermal Vents"],
    PlanetType.LUNAR.value: ["Impact-Pulverized Regolith, Basaltic Maria, Scarce Volatiles"],
    PlanetType.GAS_GIANT.value: ["No Solid Surface Defined"],
    PlanetType.ICE_GIANT.value: ["No Solid Surface Defined, Deep Icy/Fluid Mantle"],
    PlanetType.FROZEN.value: [
        "Water Ice Dominant, Ammonia/Methane Ices Present",
        "Nitrogen/CO2 Ice Glaciers, Possible Cryovolcanism",
        "Mixed Ice/Rock Surface, Sublimation Features",
    ],
}


@dataclass(frozen=True)
class SurfaceDescriptors:
    """Textual surface description."""

    hydrosphere: str
    lithosphere: str


def boiling_point(pressure: float) -> float:
    """Approximate boiling point of water in K at the given pressure (bar)."""
    return BOILING_POINT + (pressure - 1.0) * BOILING_POINT_PER_BAR


def generate_hydrosphere(prng: AleaPRNG, planet_type: str, temperature: float, pressure: float) -> str:
    """Describe surface water for the body."""
    fixed = FIXED_HYDROSPHERES.get(planet_type)
    if fixed is not None:
        return fixed

    if temperature < FREEZING_POINT:
        if pressure > TRIPLE_POINT_PRESSURE:
            return prng.choice(COLD_HYDROSPHERES)
        return "Trace Ice Sublimating"

    if temperature < boiling_point(pressure):
        if pressure > LIQUID_WATER_PRESSURE:
            return prng.choice(LIQUID_HYDROSPHERES)
        return "Atmospheric Water Vapor (Low Pressure)"

    if pressure > LIQUID_WATER_PRESSURE:
        if pressure > SUPERCRITICAL_PRESSURE and prng.random() < SUPERCRITICAL_CHANCE:
            return "Atmospheric Water Vapor, Potential Supercritical Fluid"
        return "Trace Water Vapor"
    return "None (Too Hot, Low Pressure)"


def generate_lithosphere(prng: AleaPRNG, planet_type: str) -> str:
    """Describe crust composition for the body."""
    options = LITHOSPHERES.get(planet_type)
    if not options:
        logger.warning("Unknown planet type for lithosphere", planet_type=planet_type)
        return UNKNOWN_COMPOSITION
    if len(options) == 1:
        return options[0]
    return prng.choice(options)


def generate_surface_descriptors(
    prng: AleaPRNG, planet_type: str, temperature: float, pressure: float
) -> SurfaceDescriptors:
    hydrosphere = generate_hydrosphere(prng, planet_type, temperature, pressure)
    lithosphere = generate_lithosphere(prng, planet_type)
    return SurfaceDescriptors(hydrosphere=hydrosphere, lithosphere=lithosphere)


def has_solid_surface(planet_type: str) -> bool:
    return planet_type not in GIANT_TYPES
