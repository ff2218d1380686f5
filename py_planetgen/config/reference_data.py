"""
Static reference tables for planet generation.

This module defines:
- Spectral classes with surface temperature and radius
- Planet types with base temperature, albedo, size/density ranges and palettes
- Atmospheric gases with molecular masses
- The mineable element catalogue

All tables are immutable and are passed explicitly into every generation
stage as a ReferenceData instance.
"""

from enum import Enum
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger()


class PlanetType(str, Enum):
    """Body types known to the generator."""

    MOLTEN = "Molten"
    ROCK = "Rock"
    OCEANIC = "Oceanic"
    LUNAR = "Lunar"
    GAS_GIANT = "GasGiant"
    ICE_GIANT = "IceGiant"
    FROZEN = "Frozen"


GIANT_TYPES = frozenset({PlanetType.GAS_GIANT.value, PlanetType.ICE_GIANT.value})


class SpectralTypeInfo(BaseModel):
    """Host star class."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(description="Effective surface temperature in Kelvin")
    radius: float = Field(description="Radius in solar radii")
    color: str = Field(description="Display colour as hex")


class PlanetTypeInfo(BaseModel):
    """Per body-type constants."""

    model_config = ConfigDict(frozen=True)

    base_temp: float = Field(description="Fallback and approximation temperature in Kelvin")
    albedo: float = Field(ge=0.0, le=1.0, description="Bond albedo")
    diameter_range: Tuple[int, int] = Field(description="Diameter range in km")
    density_range: Tuple[float, float] = Field(description="Mean density range in g/cm3")
    colors: Tuple[str, ...] = Field(default=(), description="Height palette, low to high")


class GasInfo(BaseModel):
    """Atmospheric gas."""

    model_config = ConfigDict(frozen=True)

    molecular_mass: float = Field(gt=0.0, description="Mass of one molecule in kg")


class ElementInfo(BaseModel):
    """Mineable element or compound."""

    model_config = ConfigDict(frozen=True)

    name: str
    symbol: str
    base_frequency: float = Field(ge=0.0, description="Relative cosmic frequency weight")
    melting_point: float = Field(description="Melting point in Kelvin")
    atomic_weight: float
    group: str = Field(description="Metal, Silicate, Carbon, Nonmetal, Precious, Radioactive, Gas, Noble or Ice")
    is_gas: bool = False
    type_hints: Tuple[str, ...] = Field(default=(), description="Body types where this element is common")
    clustering: str = Field(
        default="none", description="'peaked' for localized deposits, 'broad' for near-uniform spread"
    )


FALLBACK_PALETTE: Tuple[str, ...] = (
    "#202020", "#383838", "#505050", "#686868", "#808080",
    "#989898", "#b0b0b0", "#c8c8c8", "#e0e0e0",
)

FALLBACK_PLANET_TYPE = PlanetTypeInfo(
    base_temp=300.0,
    albedo=0.3,
    diameter_range=(2000, 20000),
    density_range=(3.0, 5.5),
    colors=FALLBACK_PALETTE,
)

FALLBACK_SPECTRAL_CLASS = "G"


SPECTRAL_TYPES: Dict[str, SpectralTypeInfo] = {
    "O": SpectralTypeInfo(temperature=40000, radius=10.0, color="#6A8DFF"),
    "B": SpectralTypeInfo(temperature=20000, radius=5.0, color="#8FABFF"),
    "A": SpectralTypeInfo(temperature=8500, radius=1.7, color="#DDE5FF"),
    "F": SpectralTypeInfo(temperature=6500, radius=1.3, color="#FFFFFF"),
    "G": SpectralTypeInfo(temperature=5500, radius=1.0, color="#FFFACD"),
    "K": SpectralTypeInfo(temperature=4500, radius=0.8, color="#FFC864"),
    "M": SpectralTypeInfo(temperature=3000, radius=0.4, color="#FF9A5A"),
}

# Weighted towards dim red dwarfs
SPECTRAL_DISTRIBUTION: Tuple[str, ...] = (
    "M", "M", "M", "M", "M", "M", "M", "M", "K", "K", "K", "G", "G", "F", "A", "B", "O",
)

PLANET_TYPES: Dict[str, PlanetTypeInfo] = {
    PlanetType.MOLTEN.value: PlanetTypeInfo(
        base_temp=1500, albedo=0.08, diameter_range=(2000, 14000), density_range=(4.0, 7.0),
        colors=("#200000", "#401000", "#662000", "#993000", "#CC5000",
                "#FF8010", "#FFB030", "#FFE060", "#FFFF99"),
    ),
    PlanetType.ROCK.value: PlanetTypeInfo(
        base_temp=300, albedo=0.25, diameter_range=(3000, 16000), density_range=(3.0, 6.0),
        colors=("#2b2b2b", "#404040", "#555555", "#6f6f6f", "#8a8a8a",
                "#a5a5a5", "#c0c0c0", "#dbdbdb", "#f6f6f6"),
    ),
    PlanetType.OCEANIC.value: PlanetTypeInfo(
        base_temp=280, albedo=0.15, diameter_range=(6000, 18000), density_range=(2.8, 4.5),
        colors=("#000020", "#001040", "#002060", "#003399", "#0050B2",
                "#3380CC", "#66B0FF", "#99D0FF", "#CCF0FF"),
    ),
    PlanetType.LUNAR.value: PlanetTypeInfo(
        base_temp=250, albedo=0.12, diameter_range=(1000, 6000), density_range=(2.5, 4.0),
        colors=("#303030", "#404040", "#505050", "#656565", "#7f7f7f",
                "#9a9a9a", "#b5b5b5", "#d0d0d0", "#ebebeb"),
    ),
    PlanetType.GAS_GIANT.value: PlanetTypeInfo(
        base_temp=150, albedo=0.35, diameter_range=(45000, 145000), density_range=(0.5, 2.0),
        colors=("#6f3f1f", "#8B4513", "#A0522D", "#B86B42", "#CD853F",
                "#D2B48C", "#E8D8B8", "#F5EDE0", "#FFFFF0"),
    ),
    PlanetType.ICE_GIANT.value: PlanetTypeInfo(
        base_temp=100, albedo=0.30, diameter_range=(30000, 60000), density_range=(1.0, 2.5),
        colors=("#003060", "#004080", "#0050A0", "#0060C0", "#3377D0",
                "#6699E0", "#99BBF0", "#CCE6FF", "#E6F2FF"),
    ),
    PlanetType.FROZEN.value: PlanetTypeInfo(
        base_temp=50, albedo=0.70, diameter_range=(1500, 12000), density_range=(1.5, 3.5),
        colors=("#A0C0C0", "#C0D0D0", "#E0E8E8", "#F0F4F4", "#FFFFFF",
                "#F8F8F8", "#E8E8E8", "#D8D8D8", "#C8C8C8"),
    ),
}

GASES: Dict[str, GasInfo] = {
    "Hydrogen": GasInfo(molecular_mass=3.347e-27),
    "Helium": GasInfo(molecular_mass=6.646e-27),
    "Nitrogen": GasInfo(molecular_mass=4.652e-26),
    "Oxygen": GasInfo(molecular_mass=5.313e-26),
    "Carbon Dioxide": GasInfo(molecular_mass=7.308e-26),
    "Argon": GasInfo(molecular_mass=6.634e-26),
    "Water Vapor": GasInfo(molecular_mass=2.991e-26),
    "Methane": GasInfo(molecular_mass=2.663e-26),
    "Ammonia": GasInfo(molecular_mass=2.828e-26),
    "Neon": GasInfo(molecular_mass=3.351e-26),
    "Xenon": GasInfo(molecular_mass=2.180e-25),
    "Carbon Monoxide": GasInfo(molecular_mass=4.651e-26),
    "Ethane": GasInfo(molecular_mass=4.993e-26),
    "Chlorine": GasInfo(molecular_mass=1.177e-25),
    "Fluorine": GasInfo(molecular_mass=6.310e-26),
    "Sulfur Dioxide": GasInfo(molecular_mass=1.064e-25),
}


def _element(name, symbol, freq, mp, aw, group, hints=(), is_gas=False, clustering="none"):
    return ElementInfo(
        name=name, symbol=symbol, base_frequency=freq, melting_point=mp, atomic_weight=aw,
        group=group, is_gas=is_gas, type_hints=tuple(hints), clustering=clustering,
    )


ELEMENTS: Dict[str, ElementInfo] = {
    # Common rock-forming metals
    "IRON": _element("Iron", "Fe", 100, 1811, 55.85, "Metal", ("Rock", "Molten"), clustering="broad"),
    "NICKEL": _element("Nickel", "Ni", 25, 1728, 58.69, "Metal", ("Rock", "Molten")),
    "ALUMINIUM": _element("Aluminium", "Al", 60, 933, 26.98, "Metal", ("Rock", "Lunar")),
    "MAGNESIUM": _element("Magnesium", "Mg", 55, 923, 24.31, "Metal", ("Rock", "Molten")),
    "CALCIUM": _element("Calcium", "Ca", 40, 1115, 40.08, "Metal", ("Rock", "Oceanic")),
    "SODIUM": _element("Sodium", "Na", 30, 371, 22.99, "Metal", ("Oceanic",)),
    "POTASSIUM": _element("Potassium", "K", 25, 337, 39.10, "Metal", ("Oceanic",)),
    "LITHIUM": _element("Lithium", "Li", 3, 454, 6.94, "Metal", ("Oceanic",)),
    "TITANIUM": _element("Titanium", "Ti", 20, 1941, 47.87, "Metal", ("Lunar", "Rock")),
    "CHROMIUM": _element("Chromium", "Cr", 8, 2180, 52.00, "Metal", ("Molten", "Rock")),
    "COBALT": _element("Cobalt", "Co", 6, 1768, 58.93, "Metal", ("Molten",)),
    "COPPER": _element("Copper", "Cu", 12, 1358, 63.55, "Metal", ("Rock",)),
    "ZINC": _element("Zinc", "Zn", 10, 693, 65.38, "Metal", ("Rock",)),
    "TIN": _element("Tin", "Sn", 4, 505, 118.71, "Metal", ("Rock",)),
    "LEAD": _element("Lead", "Pb", 5, 600, 207.2, "Metal", ("Rock",)),
    "TUNGSTEN": _element("Tungsten", "W", 2, 3695, 183.84, "Metal", ("Molten",)),
    # Crust and volatiles
    "SILICON": _element("Silicon", "Si", 90, 1687, 28.09, "Silicate", ("Rock", "Lunar", "Molten"), clustering="broad"),
    "CARBON": _element("Carbon", "C", 30, 3823, 12.01, "Carbon", ("Rock", "Frozen"), clustering="broad"),
    "SULFUR": _element("Sulfur", "S", 15, 388, 32.06, "Nonmetal", ("Molten",)),
    "PHOSPHORUS": _element("Phosphorus", "P", 8, 317, 30.97, "Nonmetal", ("Oceanic", "Rock")),
    # Precious and radioactive
    "SILVER": _element("Silver", "Ag", 2, 1235, 107.87, "Precious", ("Rock",)),
    "GOLD": _element("Gold", "Au", 1.0, 1337, 196.97, "Precious", ("Rock", "Molten"), clustering="peaked"),
    "PLATINUM": _element("Platinum", "Pt", 0.5, 2041, 195.08, "Precious", ("Molten", "Lunar"), clustering="peaked"),
    "PALLADIUM": _element("Palladium", "Pd", 0.4, 1828, 106.42, "Precious", ("Molten",), clustering="peaked"),
    "RHODIUM": _element("Rhodium", "Rh", 0.2, 2237, 102.91, "Precious", ("Molten",), clustering="peaked"),
    "IRIDIUM": _element("Iridium", "Ir", 0.2, 2719, 192.22, "Precious", ("Lunar",), clustering="peaked"),
    "URANIUM": _element("Uranium", "U", 0.8, 1405, 238.03, "Radioactive", ("Rock", "Molten"), clustering="peaked"),
    "THORIUM": _element("Thorium", "Th", 1.0, 2023, 232.04, "Radioactive", ("Rock",), clustering="peaked"),
    # Gases
    "HYDROGEN": _element("Hydrogen", "H", 20, 14, 1.008, "Gas", ("GasGiant", "IceGiant"), is_gas=True),
    "HELIUM": _element("Helium", "He", 10, 1, 4.003, "Noble", ("GasGiant",), is_gas=True),
    "HELIUM3": _element("Helium-3", "He3", 0.3, 1, 3.016, "Noble", ("Lunar", "GasGiant"), is_gas=True,
                        clustering="peaked"),
    "NITROGEN": _element("Nitrogen", "N", 10, 63, 14.01, "Gas", ("Frozen",), is_gas=True),
    "NEON": _element("Neon", "Ne", 2, 25, 20.18, "Noble", ("IceGiant",), is_gas=True),
    "ARGON": _element("Argon", "Ar", 3, 84, 39.95, "Noble", ("Rock",), is_gas=True),
    "XENON": _element("Xenon", "Xe", 0.5, 161, 131.29, "Noble", (), is_gas=True),
    # Ices
    "WATER_ICE": _element("Water Ice", "H2O", 40, 273, 18.02, "Ice", ("Frozen", "IceGiant", "Oceanic"), clustering="broad"),
    "METHANE_ICE": _element("Methane Ice", "CH4", 15, 91, 16.04, "Ice", ("Frozen", "IceGiant")),
    "AMMONIA_ICE": _element("Ammonia Ice", "NH3", 10, 195, 17.03, "Ice", ("Frozen", "IceGiant")),
}


class ReferenceData(BaseModel):
    """Immutable bundle of every reference table a generation run needs."""

    model_config = ConfigDict(frozen=True)

    spectral_types: Dict[str, SpectralTypeInfo] = Field(default_factory=lambda: dict(SPECTRAL_TYPES))
    spectral_distribution: Tuple[str, ...] = Field(default=SPECTRAL_DISTRIBUTION)
    planet_types: Dict[str, PlanetTypeInfo] = Field(default_factory=lambda: dict(PLANET_TYPES))
    gases: Dict[str, GasInfo] = Field(default_factory=lambda: dict(GASES))
    elements: Dict[str, ElementInfo] = Field(default_factory=lambda: dict(ELEMENTS))

    def planet_type(self, planet_type: str) -> PlanetTypeInfo:
        """Look up a body type, falling back to generic rocky values."""
        info = self.planet_types.get(str(planet_type))
        if info is None:
            logger.warning("Unknown planet type, using defaults", planet_type=planet_type)
            return FALLBACK_PLANET_TYPE
        return info

    def spectral_type(self, spectral_class: str) -> SpectralTypeInfo:
        """Look up a star class, falling back to a G-class star."""
        info = self.spectral_types.get(str(spectral_class))
        if info is None:
            logger.warning("Unknown spectral class, using G-class values", spectral_class=spectral_class)
            return SPECTRAL_TYPES[FALLBACK_SPECTRAL_CLASS]
        return info

    def palette(self, planet_type: str) -> Tuple[str, ...]:
        """Height palette for a body type, falling back to grey."""
        colors = self.planet_type(planet_type).colors
        if not colors:
            logger.warning("Missing colour palette, using grey", planet_type=planet_type)
            return FALLBACK_PALETTE
        return colors

    def gas_mass(self, gas: str) -> Optional[float]:
        info = self.gases.get(gas)
        return info.molecular_mass if info else None

    @property
    def gas_names(self) -> List[str]:
        return list(self.gases.keys())


@lru_cache(maxsize=1)
def default_reference_data() -> ReferenceData:
    """The shipped reference tables."""
    return ReferenceData()
