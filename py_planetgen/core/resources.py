"""
Mineral richness and element abundance generation.

This module implements:
- Mineral richness rolls with per-type rich/poor chances
- Base mineral yield by richness
- Element abundance weighting by type, temperature, crust and gravity
- The primary resource label reported by planetary scans
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Tuple

import structlog

from ..config.reference_data import GIANT_TYPES, ElementInfo, PlanetType, ReferenceData
from .alea_prng import AleaPRNG

logger = structlog.get_logger()

MIN_ELEMENT_WEIGHT = 0.0001
NONE_DETECTED = "None Detected"


class MineralRichness(IntEnum):
    """Ordinal mineral richness scale."""

    NONE = 0
    ULTRA_POOR = 1
    POOR = 2
    AVERAGE = 3
    RICH = 4
    ULTRA_RICH = 5


RICHNESS_NAMES = {
    MineralRichness.NONE: "None",
    MineralRichness.ULTRA_POOR: "Ultra Poor",
    MineralRichness.POOR: "Poor",
    MineralRichness.AVERAGE: "Average",
    MineralRichness.RICH: "Rich",
    MineralRichness.ULTRA_RICH: "Ultra Rich",
}

# (rich chance, poor chance) per body type
RICHNESS_CHANCES: Dict[str, Tuple[float, float]] = {
    PlanetType.ROCK.value: (0.25, 0.15),
    PlanetType.MOLTEN.value: (0.25, 0.15),
    PlanetType.LUNAR.value: (0.25, 0.15),
    PlanetType.FROZEN.value: (0.05, 0.30),
    PlanetType.OCEANIC.value: (0.08, 0.25),
}
DEFAULT_RICHNESS_CHANCES = (0.10, 0.20)

BASE_MINERAL_RANGES: Dict[MineralRichness, Tuple[int, int]] = {
    MineralRichness.ULTRA_POOR: (5, 20),
    MineralRichness.POOR: (15, 40),
    MineralRichness.AVERAGE: (30, 70),
    MineralRichness.RICH: (60, 120),
    MineralRichness.ULTRA_RICH: (100, 200),
}

# (lithosphere keyword, element group, multiplier)
LITHOSPHERE_AFFINITIES = (
    ("Carbonaceous", "Carbon", 1.4),
    ("Iron-Rich", "Metal", 1.3),
    ("Silicate", "Silicate", 1.2),
)


@dataclass(frozen=True)
class ResourceProfile:
    """Mineral richness, base yield and element abundance of a body."""

    richness: MineralRichness
    base_minerals: int
    element_abundance: Dict[str, float] = field(default_factory=dict)  # element key -> percent

    @property
    def richness_name(self) -> str:
        return RICHNESS_NAMES[self.richness]


def determine_mineral_richness(prng: AleaPRNG, planet_type: str) -> MineralRichness:
    """Roll richness; gas and ice giants have no minerals."""
    if planet_type in GIANT_TYPES:
        return MineralRichness.NONE

    rich_chance, poor_chance = RICHNESS_CHANCES.get(planet_type, DEFAULT_RICHNESS_CHANCES)
    roll = prng.random()
    if roll < rich_chance / 2:
        return MineralRichness.ULTRA_RICH
    if roll < rich_chance:
        return MineralRichness.RICH
    if roll < 1 - poor_chance:
        return MineralRichness.AVERAGE
    if roll < 1 - poor_chance / 2:
        return MineralRichness.POOR
    return MineralRichness.ULTRA_POOR


def calculate_base_minerals(prng: AleaPRNG, richness: MineralRichness) -> int:
    """Base mineral yield units for a richness class."""
    bounds = BASE_MINERAL_RANGES.get(richness)
    if bounds is None:
        return 0
    return prng.randint(*bounds)


def _type_factor(element: ElementInfo, planet_type: str) -> float:
    factor = 1.0
    if planet_type in element.type_hints:
        factor *= 1.5
    if planet_type in GIANT_TYPES and not element.is_gas:
        factor *= 0.01
    return factor


def _temperature_factor(element: ElementInfo, planet_type: str, temperature: float) -> float:
    factor = 1.0
    melting_point = element.melting_point
    if planet_type == PlanetType.MOLTEN.value and melting_point < temperature:
        factor *= 1.3
    if planet_type == PlanetType.FROZEN.value and melting_point > temperature - 50:
        factor *= 0.5
    if melting_point < temperature - 200:
        factor *= 0.8
    if melting_point > temperature + 500:
        factor *= 1.1
    return factor


def _lithosphere_factor(element: ElementInfo, lithosphere: str) -> float:
    for keyword, group, multiplier in LITHOSPHERE_AFFINITIES:
        if keyword in lithosphere and element.group == group:
            return multiplier
    return 1.0


def _gravity_factor(element: ElementInfo, gravity: float) -> float:
    # Heavy elements concentrate on high gravity bodies
    return 1.0 + (element.atomic_weight / 100.0) * (gravity - 1.0) * 0.05


def calculate_element_abundance(
    prng: AleaPRNG,
    planet_type: str,
    temperature: float,
    lithosphere: str,
    gravity: float,
    reference: ReferenceData,
) -> Dict[str, float]:
    """
    Relative abundance of every catalogue element, in percent.

    Args:
        prng: PRNG for the minerals sub-seed
        planet_type: Body type name
        temperature: Surface temperature in K
        lithosphere: Lithosphere descriptor
        gravity: Surface gravity relative to Earth
        reference: Reference tables

    Returns:
        Element key to percent, summing to 100, or empty if no element has weight
    """
    weights: Dict[str, float] = {}
    for key, element in reference.elements.items():
        if element.base_frequency <= 0:
            continue
        weight = element.base_frequency * prng.random_range(0.5, 1.5)
        weight *= _type_factor(element, planet_type)
        weight *= _temperature_factor(element, planet_type, temperature)
        weight *= _lithosphere_factor(element, lithosphere)
        weight *= _gravity_factor(element, gravity)
        weights[key] = max(MIN_ELEMENT_WEIGHT, weight)

    total = sum(weights.values())
    if total <= 0:
        logger.warning("No element weights, abundance map is empty", planet_type=planet_type)
        return {}

    abundance = {key: weight / total * 100.0 for key, weight in weights.items()}
    drift = abs(sum(abundance.values()) - 100.0)
    if drift > 0.1:
        logger.warning("Element abundance drift after normalisation", drift=round(drift, 4))
    return abundance


def generate_resources(
    prng: AleaPRNG,
    planet_type: str,
    temperature: float,
    lithosphere: str,
    gravity: float,
    reference: ReferenceData,
) -> ResourceProfile:
    richness = determine_mineral_richness(prng, planet_type)
    base_minerals = calculate_base_minerals(prng, richness)
    abundance = calculate_element_abundance(prng, planet_type, temperature, lithosphere, gravity, reference)
    logger.debug(
        "Generated resources",
        planet_type=planet_type,
        richness=RICHNESS_NAMES[richness],
        base_minerals=base_minerals,
        elements=len(abundance),
    )
    return ResourceProfile(richness=richness, base_minerals=base_minerals, element_abundance=abundance)


def determine_primary_resource(profile: ResourceProfile, reference: ReferenceData) -> str:
    """Display name of the most abundant element, as reported by scans."""
    if profile.richness == MineralRichness.NONE or not profile.element_abundance:
        return NONE_DETECTED
    key = max(profile.element_abundance, key=profile.element_abundance.get)
    element = reference.elements.get(key)
    return element.name if element else key
