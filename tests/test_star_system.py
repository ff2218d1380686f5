"""Tests for star system layout."""

import pytest
from py_planetgen.config.generation_settings import GenerationOptions
from py_planetgen.config.reference_data import PlanetType, default_reference_data
from py_planetgen.core.alea_prng import AleaPRNG
from py_planetgen.core.star_system import StarSystem, determine_planet_type, effective_temperature, roman_numeral


@pytest.fixture
def options():
    return GenerationOptions(map_size=16)


class TestHelpers:
    """Test naming and zone helpers."""

    @pytest.mark.parametrize("number, expected", [(1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (0, "0")])
    def test_roman_numeral(self, number, expected):
        assert roman_numeral(number) == expected

    def test_effective_temperature(self):
        """Earth's orbit around a G star is the reference point."""
        reference = default_reference_data()
        assert effective_temperature(1.0, "G", reference) == pytest.approx(280.0)
        assert effective_temperature(4.0, "G", reference) == pytest.approx(140.0)

    def test_zone_types(self):
        """Hot orbits give hot bodies and distant orbits give cold ones."""
        reference = default_reference_data()
        hot = {determine_planet_type(AleaPRNG(f"h{i}"), 0.05, "G", reference) for i in range(30)}
        cold = {determine_planet_type(AleaPRNG(f"c{i}"), 40.0, "G", reference) for i in range(30)}
        assert hot <= {PlanetType.MOLTEN.value, PlanetType.ROCK.value}
        assert cold <= {PlanetType.GAS_GIANT.value, PlanetType.ICE_GIANT.value,
                        PlanetType.FROZEN.value, PlanetType.LUNAR.value}


class TestStarSystem:
    """Test system generation."""

    def test_deterministic(self, options):
        a = StarSystem("sol", options=options)
        b = StarSystem("sol", options=options)
        assert a.name == b.name
        assert a.star_type == b.star_type
        assert [(p.name, p.planet_type, p.seed) for p in a.bodies] == [(p.name, p.planet_type, p.seed) for p in b.bodies]

    def test_layout(self, options):
        """Slots are fixed and formed orbits move outward."""
        system = StarSystem("layout", options=options)
        assert len(system.planets) == 9
        distances = [planet.orbit_distance for planet in system.bodies]
        assert distances == sorted(distances)
        assert len(set(distances)) == len(distances)
        for planet in system.bodies:
            assert planet.name.startswith(system.name)
            assert planet.star_type == system.star_type

    def test_star_class_known(self, options):
        reference = default_reference_data()
        for i in range(10):
            assert StarSystem(f"star{i}", options=options).star_type in reference.spectral_types

    def test_generate_all(self, options):
        """Parallel generation fills every body."""
        system = StarSystem("parallel", options=options)
        bodies = system.generate_all(max_workers=4)
        assert bodies == system.bodies
        serial = StarSystem("parallel", options=options)
        for body, other in zip(bodies, serial.bodies):
            assert body.characteristics == other.characteristics
