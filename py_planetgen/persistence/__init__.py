"""
Snapshot export and restore of generated planets.
"""

from .models import PlanetRecord, TerrainRecord
from .snapshot import export_planet, restore_planet, planet_to_json, planet_from_json

__all__ = ["PlanetRecord", "TerrainRecord", "export_planet", "restore_planet", "planet_to_json", "planet_from_json"]
