"""Tests for heightmap generation and the crater overlay."""

import pytest
import numpy as np
from py_planetgen.config.generation_settings import CraterSettings
from py_planetgen.core.alea_prng import AleaPRNG
from py_planetgen.core.heightmap_generator import (
    HeightmapConfig,
    HeightmapGenerator,
    add_craters,
    crater_count_range,
    validate_heightmap,
)
from py_planetgen.exceptions import InvalidGeneratedGeometryError


class TestHeightmapGenerator:
    """Test diamond-square generation."""

    @pytest.fixture
    def config(self):
        return HeightmapConfig(target_size=64, roughness=0.7, height_levels=256)

    def test_working_size(self, config):
        """The working grid is the smallest 2^n + 1 covering the target."""
        generator = HeightmapGenerator(config, "size")
        assert generator.size == 65
        assert HeightmapGenerator(HeightmapConfig(target_size=256), "size").size == 257
        assert HeightmapGenerator(HeightmapConfig(target_size=100), "size").size == 129

    @pytest.mark.parametrize("target", [1, 17, 64, 100, 256])
    def test_output_square_and_in_range(self, target):
        """Output is square, matches the target and uses valid levels."""
        heights = HeightmapGenerator(HeightmapConfig(target_size=target), "shape").generate()
        assert heights.shape == (target, target)
        assert heights.min() >= 0
        assert heights.max() <= 255
        assert np.issubdtype(heights.dtype, np.integer)

    def test_full_range_used(self, config):
        """Normalisation stretches heights across every level."""
        heights = HeightmapGenerator(config, "range").generate()
        assert heights.min() == 0
        assert heights.max() == 255

    def test_deterministic(self, config):
        """Same seed gives identical terrain."""
        a = HeightmapGenerator(config, "same").generate()
        b = HeightmapGenerator(config, "same").generate()
        np.testing.assert_array_equal(a, b)

    def test_seed_changes_terrain(self, config):
        """Different seeds give different terrain."""
        a = HeightmapGenerator(config, "seed-a").generate()
        b = HeightmapGenerator(config, "seed-b").generate()
        assert not np.array_equal(a, b)

    def test_custom_levels(self):
        """Height levels bound the output."""
        heights = HeightmapGenerator(HeightmapConfig(target_size=32, height_levels=16), "levels").generate()
        assert heights.max() == 15

    def test_invalid_size(self):
        """Non-positive sizes are rejected."""
        with pytest.raises(ValueError):
            HeightmapGenerator(HeightmapConfig(target_size=0), "bad")

    def test_invalid_levels(self):
        """At least two height levels are required."""
        with pytest.raises(ValueError):
            HeightmapGenerator(HeightmapConfig(target_size=8, height_levels=1), "bad")


class TestCraters:
    """Test the crater overlay."""

    def test_count_range(self):
        """Crater count scales with map size."""
        assert crater_count_range(256, CraterSettings()) == (17, 51)
        assert crater_count_range(10, CraterSettings()) == (0, 2)

    def test_preserves_shape_and_range(self):
        """Craters keep the grid square and in range."""
        heights = HeightmapGenerator(HeightmapConfig(target_size=64), "crater").generate()
        cratered = add_craters(heights, AleaPRNG("impacts"), 256)
        assert cratered.shape == heights.shape
        assert cratered.min() >= 0
        assert cratered.max() <= 255

    def test_depressions_on_flat_terrain(self):
        """Craters dig into flat terrain."""
        flat = np.full((64, 64), 128, dtype=np.int32)
        cratered = add_craters(flat, AleaPRNG("flat"), 256)
        assert cratered.min() < 128
        assert not np.array_equal(cratered, flat)

    def test_clamped_at_floor(self):
        """Depressions never go below level zero."""
        floor = np.zeros((64, 64), dtype=np.int32)
        cratered = add_craters(floor, AleaPRNG("floor"), 256)
        assert cratered.min() == 0
        assert cratered.dtype == np.int32

    def test_input_not_modified(self):
        """The input heightmap is left untouched."""
        flat = np.full((32, 32), 100, dtype=np.int32)
        add_craters(flat, AleaPRNG("copy"), 256)
        assert np.all(flat == 100)

    def test_deterministic(self):
        """Same seed places the same craters."""
        flat = np.full((64, 64), 128, dtype=np.int32)
        a = add_craters(flat, AleaPRNG("same"), 256)
        b = add_craters(flat, AleaPRNG("same"), 256)
        np.testing.assert_array_equal(a, b)


class TestValidateHeightmap:
    """Test geometry validation."""

    def test_valid(self):
        """A square grid of valid levels passes."""
        heights = np.zeros((4, 4), dtype=np.int32)
        assert validate_heightmap(heights, 256) is not None

    @pytest.mark.parametrize(
        "heights",
        [None, np.zeros((0, 0)), np.zeros((3, 4)), np.zeros(9), np.full((3, 3), 300)],
    )
    def test_invalid(self, heights):
        """Empty, non-square and out-of-range grids are rejected."""
        with pytest.raises(InvalidGeneratedGeometryError):
            validate_heightmap(heights, 256)
