"""
Star system generation.

This module implements:
- Host star class selection from a red-dwarf weighted distribution
- Procedural system names
- Orbital slot layout with a geometric spacing progression
- Body type selection from the effective temperature zone of each orbit
- Parallel generation of planet characteristics
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import structlog

from ..config.generation_settings import GenerationOptions
from ..config.reference_data import PlanetType, ReferenceData, default_reference_data
from ..utils.random import derive_seed
from .alea_prng import AleaPRNG
from .planet import Planet

logger = structlog.get_logger()

MAX_PLANETS_PER_SYSTEM = 9
# Orbit layout works in system units; 50 000 units make one AU
SYSTEM_UNITS_PER_AU = 50000.0
MIN_ORBIT_SEPARATION = 5000.0
REFERENCE_TEMPERATURE = 280.0  # K at 1 AU around a G star

HOT_ZONE = 800.0
OUTER_HABITABLE = 390.0
INNER_HABITABLE = 260.0
FROST_LINE = 150.0

SYSTEM_NAME_PREFIXES = [
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta", "Iota", "Kappa",
    "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi", "Rho", "Sigma", "Tau", "Upsilon", "Phi",
    "Chi", "Psi", "Omega", "Proxima", "Cygnus", "Kepler", "Gliese", "HD", "Trappist",
    "Luyten", "Wolf", "Ross", "Barnard",
]

ROMAN_NUMERALS = [
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]

ZONE_TYPES = [
    (HOT_ZONE, [PlanetType.MOLTEN, PlanetType.MOLTEN, PlanetType.ROCK]),
    (OUTER_HABITABLE, [PlanetType.ROCK, PlanetType.ROCK, PlanetType.LUNAR, PlanetType.MOLTEN]),
    (INNER_HABITABLE, [PlanetType.ROCK, PlanetType.OCEANIC, PlanetType.OCEANIC, PlanetType.ROCK, PlanetType.LUNAR]),
    (FROST_LINE, [PlanetType.ROCK, PlanetType.FROZEN, PlanetType.GAS_GIANT, PlanetType.ICE_GIANT, PlanetType.LUNAR]),
]
OUTER_TYPES = [PlanetType.GAS_GIANT, PlanetType.ICE_GIANT, PlanetType.FROZEN, PlanetType.FROZEN, PlanetType.LUNAR]


def roman_numeral(number: int) -> str:
    if number < 1 or number > 20:
        return str(number)
    result = ""
    for value, symbol in ROMAN_NUMERALS:
        count, number = divmod(number, value)
        result += symbol * count
    return result


def effective_temperature(orbit_distance: float, star_type: str, reference: ReferenceData) -> float:
    """Blackbody-style temperature estimate at an orbit, in K."""
    star_temp = reference.spectral_type(star_type).temperature
    luminosity = (star_temp / reference.spectral_type("G").temperature) ** 4
    distance = max(orbit_distance, 1e-6)
    return (luminosity / distance ** 2) ** 0.25 * REFERENCE_TEMPERATURE


def determine_planet_type(prng: AleaPRNG, orbit_distance: float, star_type: str, reference: ReferenceData) -> str:
    """Pick a body type suited to the temperature zone of the orbit."""
    temperature = effective_temperature(orbit_distance, star_type, reference)
    for limit, types in ZONE_TYPES:
        if temperature > limit:
            return prng.choice(types).value
    return prng.choice(OUTER_TYPES).value


class StarSystem:
    """A star with up to nine orbital slots, some holding planets."""

    def __init__(
        self,
        seed: str,
        reference: Optional[ReferenceData] = None,
        options: Optional[GenerationOptions] = None,
        max_planets: int = MAX_PLANETS_PER_SYSTEM,
    ):
        """
        Lay out a star system.

        Args:
            seed: System seed
            reference: Reference tables, defaults to the shipped ones
            options: Generation tunables passed on to each planet
            max_planets: Number of orbital slots
        """
        self.seed = str(seed)
        self.reference = reference or default_reference_data()
        self.options = options or GenerationOptions.from_settings()
        self._prng = AleaPRNG(derive_seed(self.seed, "system"))

        self.star_type = self._prng.choice(list(self.reference.spectral_distribution))
        self.name = self._generate_name()
        self.planets: List[Optional[Planet]] = [None] * max_planets
        self._generate_planets()

        logger.info(
            "Generated star system",
            system=self.name,
            star_type=self.star_type,
            planets=len(self.bodies),
        )

    def _generate_name(self) -> str:
        number = self._prng.randint(1, 999)
        suffix = chr(65 + self._prng.randint(0, 25))
        return f"{self._prng.choice(SYSTEM_NAME_PREFIXES)}-{number}{suffix}"

    def _generate_planets(self) -> None:
        prng = self._prng
        last_orbit = prng.random_range(5000, 20000)
        orbit_factor = prng.random_range(1.4, 1.9)

        for i in range(len(self.planets)):
            orbit = last_orbit * (orbit_factor + prng.random_range(-0.1, 0.1)) + prng.random_range(1000, 5000) * (i + 1)
            orbit = max(last_orbit + MIN_ORBIT_SEPARATION, orbit)

            formation_chance = 0.9 - i * 0.03
            if prng.random() < formation_chance:
                distance_au = orbit / SYSTEM_UNITS_PER_AU
                type_prng = prng.seed_new("type", i)
                planet_type = determine_planet_type(type_prng, distance_au, self.star_type, self.reference)
                name = f"{self.name} {roman_numeral(i + 1)}"
                self.planets[i] = Planet(
                    name=name,
                    planet_type=planet_type,
                    orbit_distance=distance_au,
                    star_type=self.star_type,
                    seed=derive_seed(self.seed, name),
                    reference=self.reference,
                    options=self.options,
                )
            last_orbit = orbit

    @property
    def bodies(self) -> List[Planet]:
        """Formed planets, innermost first."""
        return [planet for planet in self.planets if planet is not None]

    def generate_all(self, max_workers: Optional[int] = None) -> List[Planet]:
        """Generate characteristics for every body, in parallel."""
        bodies = self.bodies
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            list(executor.map(lambda planet: planet.characteristics, bodies))
        return bodies
