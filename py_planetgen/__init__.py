"""
py-planetgen: seeded procedural planet and moon generation.
"""

from .core.planet import Planet
from .core.star_system import StarSystem
from .config.reference_data import ReferenceData, default_reference_data

__version__ = "0.1.0"

__all__ = ["Planet", "StarSystem", "ReferenceData", "default_reference_data"]
