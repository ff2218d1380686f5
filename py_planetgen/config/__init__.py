"""
Configuration modules for planet generation.
"""

from .config import Settings, settings
from .generation_settings import GenerationOptions
from .reference_data import PlanetType, ReferenceData, default_reference_data

__all__ = ["Settings", "settings", "GenerationOptions", "PlanetType", "ReferenceData",
           "default_reference_data"]
