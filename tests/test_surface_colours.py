"""Tests for height-level colour tables."""

import pytest
from py_planetgen.config.reference_data import FALLBACK_PALETTE, PlanetType, ReferenceData, default_reference_data
from py_planetgen.core.surface_colours import generate_height_level_colours, hex_to_rgb, rgb_to_hex


class TestHexConversion:
    """Test hex colour parsing."""

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#FF8000") == (255, 128, 0)
        assert hex_to_rgb("0a0b0c") == (10, 11, 12)

    def test_rgb_to_hex(self):
        """Output is lowercase and clamped."""
        assert rgb_to_hex((255, 128, 0)) == "#ff8000"
        assert rgb_to_hex((300, -5, 15.6)) == "#ff0010"

    def test_invalid(self):
        with pytest.raises(ValueError):
            hex_to_rgb("#fff")


class TestHeightLevelColours:
    """Test palette interpolation."""

    def test_length(self):
        """One colour per height level."""
        palette = default_reference_data().palette(PlanetType.ROCK.value)
        assert len(generate_height_level_colours(palette, 256)) == 256

    def test_endpoints_match_palette(self):
        """Lowest and highest levels take the first and last palette colours."""
        palette = default_reference_data().palette(PlanetType.LUNAR.value)
        colours = generate_height_level_colours(palette, 256)
        assert colours[0] == palette[0].lower()
        assert colours[-1] == palette[-1].lower()

    def test_midpoint(self):
        """Two-colour palettes blend linearly."""
        assert generate_height_level_colours(["#000000", "#ffffff"], 3) == ["#000000", "#808080", "#ffffff"]

    def test_single_colour(self):
        assert generate_height_level_colours(["#123456"], 4) == ["#123456"] * 4

    def test_empty_palette(self):
        with pytest.raises(ValueError):
            generate_height_level_colours([], 16)

    def test_missing_palette_falls_back_to_grey(self):
        """Unknown body types use the grey palette."""
        assert default_reference_data().palette("Asteroid") == FALLBACK_PALETTE

    def test_empty_palette_falls_back_to_grey(self):
        """Types with an empty palette use the grey palette."""
        reference = default_reference_data()
        rock = reference.planet_types[PlanetType.ROCK.value].model_copy(update={"colors": ()})
        custom = ReferenceData(planet_types={PlanetType.ROCK.value: rock})
        assert custom.palette(PlanetType.ROCK.value) == FALLBACK_PALETTE
