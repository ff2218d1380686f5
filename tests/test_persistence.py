"""Tests for planet snapshots."""

import json

import pytest
import numpy as np
from py_planetgen.config.generation_settings import GenerationOptions
from py_planetgen.core.planet import Planet
from py_planetgen.persistence import export_planet, planet_from_json, planet_to_json, restore_planet


@pytest.fixture
def options():
    return GenerationOptions(map_size=32)


@pytest.fixture
def planet(options):
    return Planet(name="Kepler-22 III", planet_type="Lunar", orbit_distance=1.6, star_type="K",
                  seed="snapshot", options=options)


class TestSnapshot:
    """Test export and restore."""

    def test_export(self, planet):
        record = export_planet(planet)
        assert record.name == "Kepler-22 III"
        assert record.seeds.root == "snapshot"
        assert record.seeds.heightmap == planet.seeds.heightmap
        assert record.characteristics.diameter == planet.characteristics.diameter
        assert record.terrain.map_size == 32
        assert record.terrain.height_levels == planet.options.height_levels

    def test_json_round_trip(self, planet, options):
        """A restored planet exports the same snapshot."""
        planet.scan()
        data = planet_to_json(planet)
        restored = planet_from_json(data)
        assert export_planet(restored) == export_planet(planet)
        assert restored.scanned
        assert restored.primary_resource == planet.primary_resource
        assert restored.characteristics == planet.characteristics

    def test_json_is_readable(self, planet):
        payload = json.loads(planet_to_json(planet, indent=2))
        assert payload["planet_type"] == "Lunar"
        assert "heightmap" in payload["seeds"]

    def test_terrain_regenerated(self, planet, options):
        """Restored planets rebuild identical terrain from their seeds."""
        restored = restore_planet(export_planet(planet), options=options)
        assert not restored.surface_ready
        np.testing.assert_array_equal(restored.heightmap, planet.heightmap)
        np.testing.assert_array_equal(restored.surface_element_map, planet.surface_element_map)

    def test_terrain_settings_restored(self, planet):
        """Restoring without options keeps the stored terrain settings."""
        restored = restore_planet(export_planet(planet))
        assert restored.options.map_size == 32
        assert restored.heightmap.shape == (32, 32)
        np.testing.assert_array_equal(restored.heightmap, planet.heightmap)

    def test_explicit_options_win(self, planet):
        """Options passed at restore replace the stored terrain settings."""
        restored = restore_planet(export_planet(planet), options=GenerationOptions(map_size=16))
        assert restored.heightmap.shape == (16, 16)
