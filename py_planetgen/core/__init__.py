"""
Core planet generation functionality.
"""

from .alea_prng import AleaPRNG
from .atmosphere import Atmosphere, DensityClass, generate_atmosphere
from .characteristics import PlanetCharacteristics, generate_planet_characteristics
from .heightmap_generator import HeightmapConfig, HeightmapGenerator, add_craters
from .physical import PhysicalProperties, generate_physical_base
from .planet import Planet
from .resources import MineralRichness, ResourceProfile, generate_resources
from .star_system import StarSystem
from .surface_descriptors import SurfaceDescriptors, generate_surface_descriptors
from .surface_generator import SurfaceData, generate_surface_data
from .temperature import calculate_surface_temperature

__all__ = ['AleaPRNG', 'Atmosphere', 'DensityClass', 'generate_atmosphere',
           'PlanetCharacteristics', 'generate_planet_characteristics',
           'HeightmapConfig', 'HeightmapGenerator', 'add_craters',
           'PhysicalProperties', 'generate_physical_base', 'Planet',
           'MineralRichness', 'ResourceProfile', 'generate_resources', 'StarSystem',
           'SurfaceDescriptors', 'generate_surface_descriptors',
           'SurfaceData', 'generate_surface_data', 'calculate_surface_temperature']
