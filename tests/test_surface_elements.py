"""Tests for the surface element deposit map."""

import pytest
import numpy as np
from py_planetgen.config.reference_data import ElementInfo, ReferenceData, default_reference_data
from py_planetgen.core.heightmap_generator import HeightmapConfig, HeightmapGenerator
from py_planetgen.core.noise import PerlinNoise, smootherstep
from py_planetgen.core.resources import MineralRichness, ResourceProfile
from py_planetgen.core.surface_elements import (
    EMPTY_CELL,
    altitude_factor,
    cluster_affinity,
    generate_surface_element_map,
)


def _element(**overrides):
    values = dict(name="Test", symbol="T", base_frequency=1.0, melting_point=1000.0,
                  atomic_weight=50.0, group="Metal")
    values.update(overrides)
    return ElementInfo(**values)


class TestNoise:
    """Test the Perlin noise field."""

    def test_grid_range(self):
        """Grid values are normalised to [0, 1]."""
        grid = PerlinNoise("range").grid(32, 0.1)
        assert grid.shape == (32, 32)
        assert grid.min() >= 0.0
        assert grid.max() <= 1.0

    def test_deterministic(self):
        """Same seed gives the same field."""
        np.testing.assert_array_equal(PerlinNoise("n").grid(16, 0.2), PerlinNoise("n").grid(16, 0.2))

    def test_zero_on_lattice(self):
        """Gradient noise vanishes at lattice points."""
        values = PerlinNoise("lattice").sample(np.array([0.0, 1.0, 3.0]), np.array([0.0, 2.0, 5.0]))
        np.testing.assert_allclose(values, 0.0, atol=1e-12)

    def test_smootherstep_endpoints(self):
        """The fade curve maps 0 to 0 and 1 to 1."""
        np.testing.assert_allclose(smootherstep(np.array([0.0, 0.5, 1.0])), [0.0, 0.5, 1.0])


class TestWeightFactors:
    """Test cluster and altitude multipliers."""

    def test_cluster_affinity(self):
        """Peaked elements concentrate, broad ones spread, others ignore the noise."""
        noise = np.array([0.0, 0.5, 1.0])
        np.testing.assert_allclose(cluster_affinity(_element(clustering="peaked"), noise), [0.0, 0.125, 1.0])
        np.testing.assert_allclose(cluster_affinity(_element(clustering="broad"), noise), [0.8, 1.0, 1.2])
        np.testing.assert_allclose(cluster_affinity(_element(), noise), [1.0, 1.0, 1.0])

    def test_catalogue_default_is_uniform(self):
        """Unclustered catalogue elements keep full weight in noise valleys."""
        nickel = default_reference_data().elements["NICKEL"]
        assert nickel.clustering == "none"
        np.testing.assert_allclose(cluster_affinity(nickel, np.array([0.0, 0.5, 1.0])), [1.0, 1.0, 1.0])

    def test_heavy_elements_favour_lowlands(self):
        """Heavy elements lose weight with altitude."""
        height = np.array([0.0, 1.0])
        np.testing.assert_allclose(altitude_factor(_element(atomic_weight=200.0), height), [1.0, 0.5])

    def test_ices_favour_highlands(self):
        """Ices gather at altitude."""
        height = np.array([0.0, 0.5, 1.0])
        np.testing.assert_allclose(altitude_factor(_element(group="Ice", atomic_weight=18.0), height), [0.0, 0.5, 2.0])

    def test_light_lithophiles_favour_highlands(self):
        """Light rock-forming elements rise slightly with altitude."""
        height = np.array([0.0, 1.0])
        np.testing.assert_allclose(altitude_factor(_element(atomic_weight=24.0), height), [0.7, 1.3])
        np.testing.assert_allclose(altitude_factor(_element(atomic_weight=4.0, group="Noble"), height), [1.0, 1.0])


class TestElementMap:
    """Test deposit placement."""

    @pytest.fixture
    def heights(self):
        return HeightmapGenerator(HeightmapConfig(target_size=64), "terrain").generate()

    @pytest.fixture
    def profile(self):
        return ResourceProfile(
            richness=MineralRichness.AVERAGE,
            base_minerals=50,
            element_abundance={"IRON": 40.0, "SILICON": 35.0, "GOLD": 5.0, "WATER_ICE": 20.0},
        )

    @pytest.fixture
    def reference(self):
        return default_reference_data()

    def test_shape_and_keys(self, heights, profile, reference):
        """Cells hold a known element key or nothing."""
        element_map = generate_surface_element_map(heights, profile, "elements", 256, reference)
        assert element_map.shape == heights.shape
        assert set(np.unique(element_map)) <= set(profile.element_abundance) | {EMPTY_CELL}

    def test_sparse(self, heights, profile, reference):
        """Most cells are empty but some hold deposits."""
        element_map = generate_surface_element_map(heights, profile, "sparse", 256, reference)
        filled = np.mean(element_map != EMPTY_CELL)
        assert 0.0 < filled < 0.5

    def test_deterministic(self, heights, profile, reference):
        """Same seed places the same deposits."""
        a = generate_surface_element_map(heights, profile, "same", 256, reference)
        b = generate_surface_element_map(heights, profile, "same", 256, reference)
        np.testing.assert_array_equal(a, b)

    def test_empty_abundance(self, heights, reference):
        """Bodies without elements have an empty map."""
        profile = ResourceProfile(richness=MineralRichness.NONE, base_minerals=0)
        element_map = generate_surface_element_map(heights, profile, "none", 256, reference)
        assert np.all(element_map == EMPTY_CELL)

    def test_unknown_keys_ignored(self, heights, reference):
        """Keys missing from the catalogue are never placed."""
        profile = ResourceProfile(
            richness=MineralRichness.RICH, base_minerals=80, element_abundance={"UNOBTAINIUM": 50.0, "IRON": 50.0}
        )
        element_map = generate_surface_element_map(heights, profile, "unknown", 256, reference)
        assert "UNOBTAINIUM" not in set(np.unique(element_map))

    def test_long_keys_kept_whole(self, heights):
        """Keys longer than sixteen characters are placed untruncated."""
        key = "RARE_EARTH_ELEMENTS"
        reference = ReferenceData(elements={key: _element(name="Rare Earth Elements", symbol="REE")})
        profile = ResourceProfile(richness=MineralRichness.RICH, base_minerals=80, element_abundance={key: 100.0})
        element_map = generate_surface_element_map(heights, profile, "long", 256, reference)
        assert set(np.unique(element_map)) == {EMPTY_CELL, key}
